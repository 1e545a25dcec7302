"""Index file access, rebuild and listing."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from .constants import PAGE_SUFFIX
from .errors import IndexMissingError, IndexReadError, IndexWriteError
from .fs_gateway import collect_page_files
from .logging_utils import log_event


@contextmanager
def open_index(index_path_abs: Path, mode: str) -> Iterator[TextIO]:
    """Open the index for one operation and always close it.

    Reading an absent index raises IndexMissingError and any other read
    failure IndexReadError; failures opening it for writing raise
    IndexWriteError.
    """
    if mode not in ("r", "w"):
        raise ValueError(f"Unsupported index mode: {mode!r}")

    try:
        if mode == "w":
            index_path_abs.parent.mkdir(parents=True, exist_ok=True)
        handle = index_path_abs.open(mode, encoding="utf-8", newline="\n")
    except FileNotFoundError as exc:
        if mode == "r":
            raise IndexMissingError(str(index_path_abs)) from exc
        raise IndexWriteError("Failed to open index for writing", str(exc)) from exc
    except OSError as exc:
        if mode == "r":
            raise IndexReadError("Failed to read index", str(exc)) from exc
        raise IndexWriteError("Failed to open index for writing", str(exc)) from exc

    with handle:
        yield handle


def build_index(
    *,
    language_root_abs: Path,
    index_path_abs: Path,
    platform_priority: Sequence[str],
) -> int:
    """Rewrite the index from the page store and return the line count."""
    entries = index_entries(
        language_root_abs=language_root_abs,
        platform_priority=platform_priority,
    )
    with open_index(index_path_abs, "w") as index_file:
        try:
            for entry in entries:
                index_file.write(f"{entry}\n")
        except OSError as exc:
            raise IndexWriteError("Failed to write index", str(exc)) from exc

    log_event(
        "index_built",
        index_file=index_path_abs,
        pages_root=language_root_abs,
        entries=len(entries),
    )
    return len(entries)


def index_entries(
    *,
    language_root_abs: Path,
    platform_priority: Sequence[str],
) -> list[str]:
    """`<platform>/<file>` for every page, grouped by platform priority."""
    rank = {name: position for position, name in enumerate(platform_priority)}
    fallback_rank = len(rank)

    pairs = [
        (rel.parent.name, rel.name)
        for rel in collect_page_files(language_root_abs)
        if rel.parent.name
    ]
    pairs.sort(key=lambda pair: (rank.get(pair[0], fallback_rank), pair[0], pair[1]))
    return [f"{platform}/{file_name}" for platform, file_name in pairs]


def read_index_entries(index_path_abs: Path) -> Iterator[str]:
    with open_index(index_path_abs, "r") as index_file:
        for line in index_file:
            entry = line.rstrip("\n")
            if entry:
                yield entry


def list_pages(index_path_abs: Path) -> Iterator[str]:
    """Command names in index order, platform prefix and suffix stripped."""
    for entry in read_index_entries(index_path_abs):
        _, _, file_name = entry.partition("/")
        yield file_name.removesuffix(PAGE_SUFFIX)
