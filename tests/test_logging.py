from __future__ import annotations

import json
import logging

from fitcycle.logging import JSONFormatter, TextFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="fitcycle.volume",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Program computed: %d sets",
        args=(42,),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_emits_single_line_json() -> None:
    line = JSONFormatter().format(_record(fitcycle_total_sets=42, other="ignored"))

    assert "\n" not in line
    entry = json.loads(line)
    assert entry["level"] == "INFO"
    assert entry["logger"] == "fitcycle.volume"
    assert entry["message"] == "Program computed: 42 sets"
    assert entry["fitcycle_total_sets"] == 42
    assert "other" not in entry


def test_json_formatter_includes_exception() -> None:
    try:
        raise ValueError("boom")
    except ValueError:
        import sys

        record = _record()
        record.exc_info = sys.exc_info()

    entry = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in entry["exception"]


def test_setup_logging_replaces_root_handlers() -> None:
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    try:
        setup_logging("json", logging.DEBUG)
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
        assert root.level == logging.DEBUG

        setup_logging("text", "WARNING")
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, TextFormatter)
        assert root.level == logging.WARNING
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)


def test_text_formatter_appends_extras() -> None:
    line = TextFormatter().format(_record(fitcycle_goal="strength", fitcycle_total_sets=27))

    assert "INFO fitcycle.volume: Program computed: 42 sets" in line
    assert line.endswith("[goal=strength total_sets=27]")


def test_text_formatter_without_extras() -> None:
    line = TextFormatter().format(_record())
    assert line.endswith("Program computed: 42 sets")
