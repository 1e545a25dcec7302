"""Environment-driven runtime configuration."""

from __future__ import annotations

import sys
import tempfile
from collections.abc import Mapping
from pathlib import Path, PurePosixPath

from . import constants
from .errors import ConfigError
from .models import AppConfig


def load_config(
    environ: Mapping[str, str],
    *,
    sys_platform: str = sys.platform,
) -> AppConfig:
    home_raw = environ.get(constants.ENV_HOME, "").strip()
    if not home_raw:
        raise ConfigError("HOME is not set", "all page paths are rooted at HOME")
    home_abs = Path(home_raw)
    if not home_abs.is_absolute():
        raise ConfigError("HOME must be an absolute path", home_raw)

    language = _parse_language(environ.get(constants.ENV_LANGUAGE, ""))
    pages_root_abs = home_abs / constants.PAGES_DIR_NAME

    log_file_raw = environ.get(constants.ENV_LOG_FILE, "").strip()
    log_file_abs = Path(log_file_raw).expanduser() if log_file_raw else None

    return AppConfig(
        pages_root_abs=pages_root_abs,
        index_path_abs=pages_root_abs / constants.INDEX_FILE_NAME,
        language=language,
        language_root_name=language_root_name(language),
        archive_url=environ.get(constants.ENV_ARCHIVE_URL, "").strip()
        or constants.ARCHIVE_URL,
        archive_root_name=constants.ARCHIVE_ROOT_NAME,
        staging_path_abs=Path(tempfile.gettempdir()) / constants.STAGING_FILE_NAME,
        fetch_timeout_sec=constants.FETCH_TIMEOUT_SEC,
        platform_priority=platform_priority(
            environ.get(constants.ENV_PLATFORM, "").strip()
            or current_platform(sys_platform)
        ),
        use_color=not environ.get(constants.ENV_NO_COLOR, ""),
        log_file_abs=log_file_abs,
    )


def language_root_name(language: str) -> str:
    """`pages` for the default language, `pages.<lang>` otherwise."""
    if not language:
        return constants.LANGUAGE_ROOT_BASE
    return f"{constants.LANGUAGE_ROOT_BASE}.{language}"


def current_platform(sys_platform: str) -> str:
    for prefix, platform_name in constants.SYS_PLATFORM_PREFIXES:
        if sys_platform.startswith(prefix):
            return platform_name
    return constants.COMMON_PLATFORM


def platform_priority(preferred: str) -> tuple[str, ...]:
    """Preferred platform first, then common, then the rest alphabetically.

    The index is written in this order and bare-name lookups take the first
    match, so this tuple is the tie-break contract for duplicate commands.
    """
    ordered = [preferred]
    if constants.COMMON_PLATFORM not in ordered:
        ordered.append(constants.COMMON_PLATFORM)
    ordered.extend(
        name for name in sorted(constants.KNOWN_PLATFORMS) if name not in ordered
    )
    return tuple(ordered)


def _parse_language(raw: str) -> str:
    language = raw.strip()
    if not language:
        return ""
    if "\\" in language or len(PurePosixPath(language).parts) != 1 or language in (".", ".."):
        raise ConfigError("Invalid language code", language)
    return language
