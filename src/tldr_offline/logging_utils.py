"""Logging setup and structured event emission."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

_HTTPX_REQUEST_MSG = 'HTTP Request: %s %s "%s %d %s"'


class StructuredTextFormatter(logging.Formatter):
    """Format log records as human-readable `key: value` blocks."""

    @staticmethod
    def _format_value(value: Any) -> str:
        return str(value).replace("\n", "\\n")

    def format(self, record: logging.LogRecord) -> str:
        base: dict[str, Any] = {
            "ts_utc": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
        }

        message = record.getMessage()
        parsed = None
        if message.startswith("{") and message.endswith("}"):
            try:
                parsed = json.loads(message)
            except ValueError:
                parsed = None

        if isinstance(parsed, dict):
            base.update(parsed)
        elif (
            record.name == "httpx"
            and isinstance(record.args, tuple)
            and len(record.args) == 5
            and str(record.msg) == _HTTPX_REQUEST_MSG
        ):
            method, url, version, status, reason = record.args
            base["event"] = "httpx_request"
            base["http_method"] = str(method)
            base["http_url"] = str(url)
            base["http_version"] = str(version)
            base["http_status"] = status
            base["http_reason"] = str(reason)
        else:
            base["event"] = record.name
            base["message"] = message

        event_name = str(base.pop("event", record.name))
        lines = [f"=== {event_name} ==="]
        for key in sorted(k for k, v in base.items() if v is not None):
            lines.append(f"{key}: {self._format_value(base[key])}")

        if record.exc_info:
            lines.append("traceback:")
            lines.append(self.formatException(record.exc_info))

        return "\n".join(lines) + "\n"


def _to_log_safe(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, (list, tuple, set)):
        return [_to_log_safe(v) for v in value]
    return str(value)


def log_event(event: str, *, level: int = logging.INFO, **fields: Any) -> None:
    """Emit one structured event as a JSON payload on the root logger."""
    payload: dict[str, Any] = {"event": event}
    for key, value in fields.items():
        payload[key] = _to_log_safe(value)
    logging.log(level, json.dumps(payload, ensure_ascii=False, separators=(",", ":")))


def setup_logging(log_file: Path | None = None) -> None:
    """Log to a file when one is configured, otherwise stay silent."""
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(str(log_file), encoding="utf-8")
        handler.setFormatter(StructuredTextFormatter())
        logging.disable(logging.NOTSET)
        logging.basicConfig(level=logging.INFO, handlers=[handler], force=True)
    else:
        logging.disable(logging.CRITICAL)
