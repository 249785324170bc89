import math

import pytest

from verification.messages import MessageCollector, format_message
from verification.ranges import ValueRange, almost_equal_ranges
from verification.settings import VerificationSettings


def test_ranges_compare_both_ends():
    assert almost_equal_ranges(ValueRange(0.0, 127.0), ValueRange(0.0, 127.000001))
    assert not almost_equal_ranges(ValueRange(0.0, 127.0), ValueRange(0.0, 126.5))
    assert not almost_equal_ranges(ValueRange(1.0, 127.0), ValueRange(1.1, 127.0))
    assert almost_equal_ranges(ValueRange(0.0, 1.0), ValueRange(0.0005, 1.0), abs_tol=1e-3)
    assert ValueRange(20.0, 40.0).contains(30.0)


def test_message_collector_formats_arguments():
    collector = MessageCollector()
    collector(0, "/hello", "")
    collector(12, "/region0/pitch_keycenter", "i", [60])
    collector(3, "/cc7/value", "f", [0.5])
    collector(0, "/sample_quality", "sd", ["voice", 2.25])
    collector(1, "/key/slots", "b", [b"\x00\x01\x02"])

    assert collector.messages == [
        "0 /hello, : { }",
        "12 /region0/pitch_keycenter,i : { 60 }",
        "3 /cc7/value,f : { 0.5 }",
        "0 /sample_quality,sd : { voice, 2.25 }",
        "1 /key/slots,b : { <blob 3 bytes> }",
    ]

    collector.clear()
    assert collector.messages == []


def test_message_collector_rejects_bad_signatures():
    with pytest.raises(ValueError):
        format_message(0, "/x", "ii", [1])
    with pytest.raises(ValueError):
        format_message(0, "/x", "q", [1])


def test_settings_validation_and_environment():
    with pytest.raises(ValueError):
        VerificationSettings(default_epsilon=-1.0)
    with pytest.raises(ValueError):
        VerificationSettings(preview_threshold=10, preview_edge=8)

    settings = VerificationSettings.from_environment(
        {"MODVERIFY_ENABLE_RELEASE_ASSERT": "yes", "MODVERIFY_ENABLE_RELEASE_DBG": "0"}
    )
    assert settings.release_assert
    assert not settings.release_dbg
    assert settings.default_epsilon == pytest.approx(1e-3)


def test_range_tolerance_scales_with_the_reference():
    assert almost_equal_ranges(ValueRange(0.0, 0.9), ValueRange(0.0, 1.0), rel_tol=0.1)
    assert not almost_equal_ranges(ValueRange(0.0, 1.0), ValueRange(0.0, 0.9), rel_tol=0.1)


def test_infinite_reference_only_matches_itself():
    assert almost_equal_ranges(ValueRange(0.0, math.inf), ValueRange(0.0, math.inf))
    assert not almost_equal_ranges(ValueRange(0.0, 1e300), ValueRange(0.0, math.inf), rel_tol=1.0)
