"""Literal constants used by tldr_offline."""

APP_NAME = "tldr"

ARCHIVE_URL = "https://github.com/tldr-pages/tldr/archive/refs/heads/main.zip"
# Synthetic top-level directory GitHub puts inside branch archives.
ARCHIVE_ROOT_NAME = "tldr-main"

PAGES_DIR_NAME = ".tldr"
INDEX_FILE_NAME = "index"
STAGING_FILE_NAME = "tldr-pages.zip"
PAGE_SUFFIX = ".md"
LANGUAGE_ROOT_BASE = "pages"

FETCH_TIMEOUT_SEC = 60.0
FETCH_CHUNK_SIZE = 64 * 1024
USER_AGENT = "tldr-offline/0.1"

COMMON_PLATFORM = "common"
KNOWN_PLATFORMS = (
    "android",
    "common",
    "linux",
    "osx",
    "sunos",
    "windows",
)
SYS_PLATFORM_PREFIXES = (
    ("linux", "linux"),
    ("darwin", "osx"),
    ("win32", "windows"),
    ("cygwin", "windows"),
    ("sunos", "sunos"),
)

HEADING_STYLE = "\033[1m"
DESCRIPTION_STYLE = "\033[3m"
BULLET_STYLE = "\033[32m"
EXAMPLE_STYLE = "\033[31m"
RESET_STYLE = "\033[0m"

ENV_HOME = "HOME"
ENV_LANGUAGE = "TLDR_LANGUAGE"
ENV_ARCHIVE_URL = "TLDR_ARCHIVE_URL"
ENV_PLATFORM = "TLDR_PLATFORM"
ENV_LOG_FILE = "TLDR_LOG_FILE"
ENV_NO_COLOR = "NO_COLOR"

STAGE_FETCH = "Fetching pages..."
STAGE_EXTRACT = "Extracting pages..."
STAGE_INDEX = "Indexing pages..."

ERROR_PREFIX = "ERROR:"
