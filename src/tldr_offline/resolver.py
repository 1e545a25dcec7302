"""Page-name resolution against the index."""

from __future__ import annotations

from pathlib import Path

from .constants import PAGE_SUFFIX
from .errors import NotFoundError
from .index_gateway import read_index_entries
from .logging_utils import log_event


def resolve_page(page_name: str, *, index_path_abs: Path) -> str:
    """Return the index entry (`platform/command.md`) for `page_name`.

    `platform/command` must match an entry exactly. A bare `command` matches
    on the file-name part and the first entry in index order wins.
    """
    page_file_name = f"{page_name}{PAGE_SUFFIX}"
    qualified = "/" in page_name

    for entry in read_index_entries(index_path_abs):
        if qualified:
            matched = entry == page_file_name
        else:
            matched = entry.partition("/")[2] == page_file_name
        if matched:
            log_event("page_resolved", page=page_name, entry=entry)
            return entry

    raise NotFoundError(page_name)
