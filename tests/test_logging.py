"""Tests for the logging utilities."""

import io
import logging

import pytest

from html_json_converter.utils.logging import (
    LOGGER_NAME,
    LogFormatter,
    PerformanceLogger,
    get_default_log_file,
    log_exception,
    setup_logging,
)


@pytest.fixture
def child_logger():
    return logging.getLogger(f"{LOGGER_NAME}.test")


def test_setup_logging_console_only():
    stream = io.StringIO()
    logger = setup_logging(stream=stream)
    logger.info("converted page")
    logger.debug("hidden")

    assert logger.name == LOGGER_NAME
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
    assert "INFO html_json_converter: converted page" in stream.getvalue()
    assert "hidden" not in stream.getvalue()
    assert "\033[" not in stream.getvalue()


def test_setup_logging_debug():
    logger = setup_logging(debug=True, stream=io.StringIO())
    assert logger.level == logging.DEBUG


def test_setup_logging_is_idempotent():
    first = setup_logging(stream=io.StringIO())
    second = setup_logging(debug=True)
    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.INFO


def test_setup_logging_with_file(tmp_path):
    log_file = tmp_path / "logs" / "converter.log"
    logger = setup_logging(log_file=str(log_file), stream=io.StringIO())
    logger.debug("written to file only")
    for handler in logger.handlers:
        handler.flush()

    assert logger.level == logging.DEBUG
    assert "written to file only" in log_file.read_text(encoding="utf-8")


def test_default_log_file_lives_in_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    path = get_default_log_file()
    assert path.startswith(str(tmp_path / ".html_json_converter" / "logs"))
    assert path.endswith(".log")


def test_colored_formatter_marks_level():
    formatter = LogFormatter(fmt="[%(levelname)s] %(message)s", colored=True)
    record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)
    assert formatter.format(record) == "[\033[31mERROR\033[0m] boom"


def test_plain_formatter():
    formatter = LogFormatter(fmt="[%(levelname)s] %(message)s")
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)
    assert formatter.format(record) == "[WARNING] careful"


def test_log_exception_without_debug(child_logger, caplog):
    with caplog.at_level(logging.INFO, logger=child_logger.name):
        log_exception(child_logger, ValueError("bad tree"), "Failed to convert a.html")
    assert caplog.records[-1].getMessage() == "Failed to convert a.html: bad tree"
    assert caplog.records[-1].exc_info is None


def test_log_exception_with_debug_keeps_traceback(child_logger, caplog):
    try:
        raise ValueError("bad tree")
    except ValueError as e:
        error = e
    with caplog.at_level(logging.DEBUG, logger=child_logger.name):
        log_exception(child_logger, error)
    assert caplog.records[-1].exc_info is not None
    assert "Traceback" in caplog.text


def test_performance_logger(child_logger, caplog):
    perf = PerformanceLogger(child_logger, "batch")
    with caplog.at_level(logging.DEBUG, logger=child_logger.name):
        perf.start("page.html")
        duration = perf.end("page.html")
    assert duration >= 0
    assert perf.durations == {"page.html": duration}
    assert "batch page.html took" in caplog.text


def test_performance_logger_without_start(child_logger, caplog):
    perf = PerformanceLogger(child_logger, "batch")
    assert perf.end("never-started") == 0.0
    assert "batch: never-started was never started" in caplog.text


def test_measure_records_failed_operations(child_logger):
    perf = PerformanceLogger(child_logger, "batch")
    with pytest.raises(RuntimeError):
        with perf.measure("bad.html"):
            raise RuntimeError("boom")
    with perf.measure("good.html"):
        pass

    assert sorted(perf.durations) == ["bad.html", "good.html"]
    assert perf.start_times == {}
    assert perf.total == pytest.approx(sum(perf.durations.values()))
