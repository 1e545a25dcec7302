"""CLI entry and mode dispatch."""

from __future__ import annotations

import logging
import os
import sys

from .config import load_config
from .errors import TldrError
from .index_gateway import list_pages
from .logging_utils import log_event, setup_logging
from .models import AppConfig
from .presenters import render_error, render_usage
from .renderer import DEFAULT_STYLES, render_page
from .resolver import resolve_page
from .update_service import run_update


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print(render_usage())
        return 1

    mode = args[0]
    if mode == "-h":
        print(render_usage())
        return 0

    try:
        config = load_config(os.environ)
    except TldrError as exc:
        print(render_error(exc.message, exc.details), file=sys.stderr)
        return 1

    try:
        setup_logging(config.log_file_abs)
    except OSError as exc:
        print(render_error("Failed to open log file", str(exc)), file=sys.stderr)
        return 1

    try:
        _dispatch(mode, config)
    except TldrError as exc:
        log_event(
            "app_error",
            level=logging.ERROR,
            error_type=type(exc).__name__,
            error=exc.message,
            details=exc.details,
        )
        print(render_error(exc.message, exc.details), file=sys.stderr)
        return 1
    return 0


def _dispatch(mode: str, config: AppConfig) -> None:
    if mode == "-u":
        run_update(config, on_stage=print)
    elif mode == "-l":
        for command_name in list_pages(config.index_path_abs):
            print(command_name)
    else:
        entry = resolve_page(mode, index_path_abs=config.index_path_abs)
        render_page(
            config.language_root_abs / entry,
            sys.stdout,
            DEFAULT_STYLES if config.use_color else None,
        )
