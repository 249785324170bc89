import itertools

from domain.modulation import Connection, ModulationSource, ModulationTarget, Region, TargetKind
from routing.graph import (
    create_default_graph,
    create_modulation_dot_graph,
    default_region_lines,
    render_routing_graph,
    routing_lines,
)


def test_modulation_graph_sorts_lines():
    assert create_modulation_dot_graph(["b->c", "a->b"]) == create_modulation_dot_graph(["a->b", "b->c"])
    assert create_modulation_dot_graph(["b->c", "a->b"]) == "digraph {\n\ta->b\n\tb->c\n}\n"


def test_modulation_graph_is_permutation_invariant():
    lines = ['"LFO {0, N=1}" -> "Pitch {0}"', '"Controller 1 {curve=0, smooth=0, step=0}" -> "Pitch {0}"', "x", "x"]
    rendered = {create_modulation_dot_graph(list(order)) for order in itertools.permutations(lines)}

    assert len(rendered) == 1


def test_empty_graphs():
    assert create_modulation_dot_graph([]) == "digraph {\n}\n"
    assert create_default_graph([], num_regions=0) == "digraph {\n}\n"


def test_default_graph_layout():
    expected = (
        "digraph {\n"
        '\t"Controller 7 {curve=4, smooth=10, step=0}" -> "Amplitude {0}"\n'
        '\t"Controller 10 {curve=1, smooth=10, step=0}" -> "Pan {0}"\n'
        '\t"Controller 11 {curve=4, smooth=10, step=0}" -> "Amplitude {0}"\n'
        '\t"AmplitudeEG {0}" -> "MasterAmplitude {0}"\n'
        "\tz -> a\n"
        "\ta -> z\n"
        "}\n"
    )

    assert create_default_graph(["z -> a", "a -> z"]) == expected


def test_default_graph_varies_only_by_region_blocks():
    body = ["second", "first"]
    one = create_default_graph(body, num_regions=1)
    three = create_default_graph(body, num_regions=3)

    assert one.endswith("\tsecond\n\tfirst\n}\n")
    assert three.endswith("\tsecond\n\tfirst\n}\n")
    assert three.count("MasterAmplitude") == 3
    for region in range(3):
        for line in default_region_lines(region):
            assert f"\t{line}\n" in three


def test_rendered_regions_match_default_baseline():
    regions = [Region.with_default_routing(0), Region.with_default_routing(1)]
    baseline_lines = default_region_lines(0) + default_region_lines(1)

    assert render_routing_graph(regions) == create_modulation_dot_graph(baseline_lines)
    assert render_routing_graph(reversed(regions)) == render_routing_graph(regions)


def test_routing_lines_follow_declaration_order():
    target = ModulationTarget(kind=TargetKind.PITCH, region=0)
    region = Region(
        id=0,
        connections=[
            Connection(source=ModulationSource.controller(2), target=target),
            Connection(source=ModulationSource.controller(1), target=target),
        ],
    )

    assert routing_lines([region]) == [
        '"Controller 2 {curve=0, smooth=0, step=0}" -> "Pitch {0}"',
        '"Controller 1 {curve=0, smooth=0, step=0}" -> "Pitch {0}"',
    ]
    rendered = render_routing_graph([region])
    assert rendered.index("Controller 1 ") < rendered.index("Controller 2 ")
