"""Update workflow orchestration: fetch, extract, index."""

from __future__ import annotations

import logging
from collections.abc import Callable

import httpx

from . import constants
from .archive_store import fetch_archive
from .fs_gateway import remove_file_if_exists
from .index_gateway import build_index
from .logging_utils import log_event
from .models import AppConfig, UpdateResult
from .zip_gateway import extract_pages


def run_update(
    config: AppConfig,
    *,
    on_stage: Callable[[str], None] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> UpdateResult:
    _enter_stage(constants.STAGE_FETCH, on_stage)
    fetched = fetch_archive(
        url=config.archive_url,
        staging_path_abs=config.staging_path_abs,
        timeout_sec=config.fetch_timeout_sec,
        transport=transport,
    )

    _enter_stage(constants.STAGE_EXTRACT, on_stage)
    extracted = extract_pages(
        zip_path_abs=fetched.path,
        archive_root_name=config.archive_root_name,
        language_root_name=config.language_root_name,
        dest_root_abs=config.language_root_abs,
    )
    try:
        remove_file_if_exists(fetched.path)
    except OSError as exc:
        log_event(
            "staging_cleanup_failed",
            level=logging.WARNING,
            staging_file=fetched.path,
            error=str(exc),
        )

    _enter_stage(constants.STAGE_INDEX, on_stage)
    indexed_count = build_index(
        language_root_abs=extracted.language_root_abs,
        index_path_abs=config.index_path_abs,
        platform_priority=config.platform_priority,
    )

    return UpdateResult(
        archive_bytes=fetched.byte_count,
        extracted_page_count=extracted.extracted_page_count,
        indexed_page_count=indexed_count,
    )


def _enter_stage(label: str, on_stage: Callable[[str], None] | None) -> None:
    log_event("update_stage", stage=label)
    if on_stage is not None:
        on_stage(label)
