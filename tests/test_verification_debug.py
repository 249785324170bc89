import pytest

from verification import debug
from verification.settings import VerificationSettings


@pytest.fixture()
def aborts():
    calls = []
    previous = debug.set_abort_handler(lambda: calls.append("abort"))
    yield calls
    debug.set_abort_handler(previous)
    debug.configure()


def test_check_traps_with_location(aborts, capsys):
    debug.check(1 + 1 == 2)
    assert aborts == []

    debug.check(False)
    assert aborts == ["abort"]
    err = capsys.readouterr().err
    assert err.startswith("Assert failed at ")
    assert "test_verification_debug.py:" in err


def test_assert_false_always_traps(aborts):
    debug.assert_false()
    assert aborts == ["abort"]


def test_release_override_keeps_assertions_enabled(aborts):
    debug.configure(VerificationSettings(release_assert=True, release_dbg=True))

    assert debug.assertions_enabled()
    assert debug.messages_enabled()
    debug.check(False)
    assert aborts == ["abort"]


@pytest.mark.skipif(not __debug__, reason="interpreter runs with -O")
def test_debug_interpreter_enables_facility():
    debug.configure(VerificationSettings())
    assert debug.assertions_enabled()
    assert debug.messages_enabled()
    debug.configure()


def test_dbg_formats_floats(capsys):
    debug.configure(VerificationSettings(release_dbg=True))
    debug.dbg("cutoff=", 1234.5678, " cc=", 74)
    assert capsys.readouterr().err == "cutoff=1234.57 cc=74\n"
    debug.configure()
