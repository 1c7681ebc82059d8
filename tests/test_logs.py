import json
import logging

import pytest

from chainbench import logs


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    log = logging.getLogger("chainbench")
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()
    log.addHandler(logging.NullHandler())


def _records(capsys):
    return [json.loads(line) for line in capsys.readouterr().out.splitlines()]


def test_json_console_output(capsys):
    logs.init_logger("info", logs.JSON_FORMAT, "", True)
    logs.info("hello %s", "world")
    [record] = _records(capsys)
    assert record["message"] == "hello world"
    assert record["level"] == "info"
    assert "time" in record


def test_debug_is_suppressed_at_info_level(capsys):
    logs.init_logger(logs.LogLevel.INFO, logs.JSON_FORMAT, "", True)
    logs.debug("hidden")
    assert capsys.readouterr().out == ""


def test_debug_is_emitted_at_debug_level(capsys):
    logs.init_logger(logs.LogLevel.DEBUG, logs.JSON_FORMAT, "", True)
    logs.debug("shown")
    [record] = _records(capsys)
    assert record["level"] == "debug"
    assert record["message"] == "shown"


def test_unknown_level_is_rejected():
    with pytest.raises(ValueError, match="does not exist"):
        logs.set_log_level("verbose")


def test_short_warn_name_is_not_a_level():
    with pytest.raises(ValueError, match="'warn' does not exist"):
        logs.set_log_level("warn")


def test_warning_level_filters_info(capsys):
    logs.init_logger("WARNING", logs.JSON_FORMAT, "", True)
    logs.info("quiet")
    logs.warn("loud")
    [record] = _records(capsys)
    assert record["message"] == "loud"
    assert record["level"] == "warn"


def test_unsupported_format_is_rejected():
    with pytest.raises(ValueError, match="not supported"):
        logs.init_logger("info", "xml", "", True)


def test_normal_format_writes_to_file_and_appends(tmp_path, capsys):
    path = tmp_path / "chain.log"
    logs.init_logger("info", logs.NORMAL_FORMAT, str(path), True)
    logs.info("first entry")
    logs.init_logger("info", logs.NORMAL_FORMAT, str(path), True)
    logs.info("second entry")
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert "first entry" in lines[0]
    assert "INF" in lines[1]
    assert "\x1b" not in lines[1]
    assert "second entry" in capsys.readouterr().out


def test_missing_log_directory_raises(tmp_path):
    with pytest.raises(OSError):
        logs.init_logger("info", logs.JSON_FORMAT, str(tmp_path / "missing" / "x.log"), True)


def test_normal_format_colours_follow_flag(capsys):
    logs.init_logger("info", logs.NORMAL_FORMAT, "", True)
    logs.info("plain")
    assert "\x1b" not in capsys.readouterr().out
    logs.init_logger("info", logs.NORMAL_FORMAT, "", False)
    logs.info("coloured")
    out = capsys.readouterr().out
    assert "\x1b[" in out
    assert "coloured" in out


def test_error_returns_error_and_logs_details(capsys):
    logs.init_logger("debug", logs.JSON_FORMAT, "", True)
    err = ValueError("boom")
    assert logs.error(err, "failed %d", 3) is err
    first, second = _records(capsys)
    assert first["level"] == "error"
    assert first["message"] == "failed 3"
    assert "error" not in first
    assert second["level"] == "debug"
    assert second["error"] == "boom"


def test_error_without_exception_logs_once(capsys):
    logs.init_logger("debug", logs.JSON_FORMAT, "", True)
    assert logs.error(None, "plain failure") is None
    records = _records(capsys)
    assert [r["message"] for r in records] == ["plain failure"]


def test_warn_error_returns_error(capsys):
    logs.init_logger("debug", logs.JSON_FORMAT, "", True)
    err = KeyError("k")
    assert logs.warn_error(err, "careful") is err
    records = _records(capsys)
    assert [r["level"] for r in records] == ["warn", "debug"]


def test_panic_logs_and_raises(capsys):
    logs.init_logger("info", logs.JSON_FORMAT, "", True)
    with pytest.raises(RuntimeError, match="fatal stop"):
        logs.panic("fatal %s", "stop")
    [record] = _records(capsys)
    assert record["level"] == "panic"


def test_fetching_finished_message(capsys):
    logs.init_logger("info", logs.JSON_FORMAT, "", True)
    logs.fetching_finished("Repository", "*")
    [record] = _records(capsys)
    assert record["message"] == "*\tFetching Repository Finished"


def test_context_logger_adds_context(capsys):
    logs.init_logger("info", logs.JSON_FORMAT, "", True)
    scanner = logs.ContextLogger("scanner")
    scanner.info("n=%d", 2)
    [record] = _records(capsys)
    assert record["context"] == "scanner"
    assert record["message"] == "n=2"


def test_context_logger_error_carries_error_field(capsys):
    logs.init_logger("info", logs.JSON_FORMAT, "", True)
    err = RuntimeError("bad")
    assert logs.ContextLogger("fetch").error(err, "oops") is err
    [record] = _records(capsys)
    assert record["error"] == "bad"
    assert record["context"] == "fetch"


def test_context_logger_panic_raises():
    logs.init_logger("info", logs.JSON_FORMAT, "", True)
    with pytest.raises(RuntimeError, match="halt"):
        logs.ContextLogger("ctx").panic("halt")