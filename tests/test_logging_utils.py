from __future__ import annotations

import logging
from pathlib import Path

from tldr_offline.logging_utils import StructuredTextFormatter, log_event, setup_logging


def test_structured_formatter_expands_json_events() -> None:
    record = logging.LogRecord(
        name="root",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg='{"event":"index_built","entries":3}',
        args=(),
        exc_info=None,
    )

    result = StructuredTextFormatter().format(record)

    assert result.startswith("=== index_built ===\n")
    assert "entries: 3" in result
    assert "level: INFO" in result


def test_structured_formatter_extracts_httpx_request_fields() -> None:
    record = logging.LogRecord(
        name="httpx",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg='HTTP Request: %s %s "%s %d %s"',
        args=("GET", "https://example.test/tldr.zip", "HTTP/1.1", 200, "OK"),
        exc_info=None,
    )

    result = StructuredTextFormatter().format(record)

    assert "=== httpx_request ===" in result
    assert "http_status: 200" in result
    assert "http_url: https://example.test/tldr.zip" in result


def test_setup_logging_writes_events_to_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "tldr.log"

    setup_logging(log_file)
    log_event("page_resolved", page="tar", entry=Path("common/tar.md"))
    for handler in logging.getLogger().handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "=== page_resolved ===" in text
    assert "entry: common/tar.md" in text


def test_setup_logging_without_file_silences_events(tmp_path: Path) -> None:
    setup_logging(None)

    assert logging.getLogger().isEnabledFor(logging.CRITICAL) is False
