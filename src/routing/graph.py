"""DOT rendering of modulation routing for topology assertions.

Edge lines take the form ``"Controller 7 {curve=4, smooth=10, step=0}" ->
"Amplitude {0}"`` and are wrapped in a ``digraph`` block, one tab-indented
edge per row. :func:`create_modulation_dot_graph` sorts its edges so the text
does not depend on the order the engine enumerates connections in, while
:func:`create_default_graph` keeps the caller's order for hand-built
baselines.
"""
from __future__ import annotations

from typing import Iterable, List, Sequence

from domain.modulation import Region

GRAPH_HEADER = "digraph {\n"
GRAPH_FOOTER = "}\n"

_DEFAULT_REGION_BLOCK = (
    '"Controller 7 {{curve=4, smooth=10, step=0}}" -> "Amplitude {{{region}}}"',
    '"Controller 10 {{curve=1, smooth=10, step=0}}" -> "Pan {{{region}}}"',
    '"Controller 11 {{curve=4, smooth=10, step=0}}" -> "Amplitude {{{region}}}"',
    '"AmplitudeEG {{{region}}}" -> "MasterAmplitude {{{region}}}"',
)


def _render(lines: Iterable[str]) -> str:
    body = "".join(f"\t{line}\n" for line in lines)
    return f"{GRAPH_HEADER}{body}{GRAPH_FOOTER}"


def default_region_lines(region: int) -> List[str]:
    """Return the edges of the routing every region carries by default."""

    return [template.format(region=region) for template in _DEFAULT_REGION_BLOCK]


def create_modulation_dot_graph(lines: Sequence[str]) -> str:
    """Return a DOT graph holding *lines* sorted lexicographically."""

    return _render(sorted(lines))


def create_default_graph(lines: Sequence[str], num_regions: int = 1) -> str:
    """Return a DOT graph of the default routing for *num_regions* regions.

    The per-region default blocks come first, followed by *lines* in the
    order given.
    """

    preamble: List[str] = []
    for region in range(num_regions):
        preamble.extend(default_region_lines(region))
    return _render([*preamble, *lines])


def routing_lines(regions: Iterable[Region]) -> List[str]:
    """Return one edge line per connection of *regions*, in declaration order."""

    return [connection.to_dot_line() for region in regions for connection in region.connections]


def render_routing_graph(regions: Iterable[Region]) -> str:
    """Return the canonical (sorted) DOT graph of the routing of *regions*."""

    return create_modulation_dot_graph(routing_lines(regions))


__all__ = [
    "GRAPH_FOOTER",
    "GRAPH_HEADER",
    "create_default_graph",
    "create_modulation_dot_graph",
    "default_region_lines",
    "render_routing_graph",
    "routing_lines",
]
