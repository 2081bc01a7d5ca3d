import io
import json
import logging

import pytest

from padder.logging import configure_logging, get_logger, step
from padder.reporting import (
    JsonLinesReporter,
    PlainReporter,
    job,
    set_reporter,
)


def test_plain_reporter_lines():
    stream = io.StringIO()
    rep = PlainReporter(stream=stream, use_color=False)
    rep.status("hello")
    rep.warning("careful")
    rep.error("broken")
    rep.message(logging.DEBUG, "detail")
    rep.section("Things")
    assert stream.getvalue() == (
        "INFO: hello\nWARN: careful\nERROR: broken\nDEBUG: detail\n\n[Things]\n"
    )


def test_job_reports_counters_on_completion():
    stream = io.StringIO()
    set_reporter(PlainReporter(stream=stream, use_color=False))
    with job("padding", total=2) as current:
        current.advance(records=1)
        current.advance(records=2, bytes=16)
    line = stream.getvalue().strip()
    assert line.startswith("padding 2/2 done in ")
    assert line.endswith("[records=2 bytes=16]")


def test_job_marks_failure():
    stream = io.StringIO()
    set_reporter(JsonLinesReporter(stream=stream))
    with pytest.raises(RuntimeError):
        with job("padding", total=1):
            raise RuntimeError("boom")
    events = [json.loads(line) for line in stream.getvalue().splitlines()]
    assert [e["event"] for e in events] == ["job_start", "job_end"]
    assert events[-1]["status"] == "failed"
    assert events[-1]["done"] == 0


def test_jsonl_summary_event():
    stream = io.StringIO()
    rep = JsonLinesReporter(stream=stream)
    rep.status("records summary: records=2 bytes=40")
    rep.warning("layout summary: not a summary at warning level")
    events = [json.loads(line) for line in stream.getvalue().splitlines()]
    assert [e["event"] for e in events] == ["summary", "message", "message"]
    assert events[0]["summary_type"] == "records"
    assert events[0]["bytes"] == "40"
    assert events[1] == {
        "event": "message",
        "level": "info",
        "message": "records summary: records=2 bytes=40",
    }
    assert events[2]["level"] == "warning"


def test_logging_routes_to_reporter():
    stream = io.StringIO()
    set_reporter(PlainReporter(stream=stream, use_color=False))
    configure_logging(0)
    logger = get_logger()
    logger.info("not shown")
    logger.warning("shown %d", 1)
    step("a step")
    assert stream.getvalue() == "WARN: shown 1\nINFO: -> a step\n"
    assert logger.level == logging.WARNING


def test_debug_logging_with_two_verbose_flags():
    stream = io.StringIO()
    set_reporter(PlainReporter(stream=stream, use_color=False))
    configure_logging(2)
    configure_logging(5)
    get_logger().debug("fill computed")
    # reconfiguring replaces the handler instead of stacking another one
    assert stream.getvalue() == "DEBUG: fill computed\n"
    configure_logging(0)
