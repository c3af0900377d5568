import logging

from pyparcore.Prim import any, lit

from conftest import assert_err, assert_ok


def test_trace_logs_match(caplog):
    caplog.set_level(logging.DEBUG, logger="pyparcore.Parser")
    assert_ok(lit("ab").trace("pair").parse("abc"), "ab", 3)
    messages = [r.getMessage() for r in caplog.records]
    assert "pair: enter at cursor 1" in messages
    assert "pair: matched 'ab', next cursor 3" in messages


def test_trace_logs_failure(caplog):
    caplog.set_level(logging.DEBUG, logger="pyparcore.Parser")
    assert_err(any().trace("anything").parse(""), "End of Input")
    messages = [r.getMessage() for r in caplog.records]
    assert "anything: failed at cursor 1: End of Input" in messages
    assert "Parse failed: End of Input" in messages


def test_trace_is_silent_above_debug(caplog):
    caplog.set_level(logging.INFO, logger="pyparcore.Parser")
    any().trace("quiet").parse("x")
    assert not [r for r in caplog.records if r.name == "pyparcore.Parser"]
