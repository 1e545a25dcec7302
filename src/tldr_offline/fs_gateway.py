"""Page-store directory helpers."""

from __future__ import annotations

from collections.abc import Callable
import os
import shutil
import stat
from pathlib import Path

from .errors import ExtractError, IndexWriteError


def _force_remove_readonly(
    func: Callable[..., object],
    path: str,
    _exc_info: object,
) -> None:
    """onerror handler for shutil.rmtree: clear read-only bit and retry on Windows."""
    if os.name == "nt":
        os.chmod(path, stat.S_IWRITE)
        func(path)
    else:
        raise


def clear_and_recreate_directory(directory_abs: Path) -> None:
    if directory_abs.exists() and not directory_abs.is_dir():
        raise ExtractError("Page store path is not a directory", str(directory_abs))

    if directory_abs.exists():
        try:
            shutil.rmtree(directory_abs, onerror=_force_remove_readonly)
        except OSError as exc:
            raise ExtractError("Failed to clear page store", str(exc)) from exc

    try:
        directory_abs.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ExtractError("Failed to create page store", str(exc)) from exc


def collect_page_files(root_dir_abs: Path) -> list[Path]:
    """Every regular file below `root_dir_abs`, relative to it, sorted."""
    page_files_rel: list[Path] = []

    def walk_dir(current_dir_abs: Path, current_rel: Path | None) -> None:
        try:
            children = sorted(current_dir_abs.iterdir(), key=lambda p: p.name)
        except OSError as exc:
            raise IndexWriteError("Failed to read directory", str(exc)) from exc

        for child_abs in children:
            child_rel = (
                Path(child_abs.name)
                if current_rel is None
                else current_rel / child_abs.name
            )
            if child_abs.is_symlink():
                continue
            if child_abs.is_file():
                page_files_rel.append(child_rel)
            elif child_abs.is_dir():
                walk_dir(child_abs, child_rel)

    if not root_dir_abs.is_dir():
        raise IndexWriteError("Page store does not exist", str(root_dir_abs))
    walk_dir(root_dir_abs, current_rel=None)
    page_files_rel.sort(key=lambda p: p.as_posix())
    return page_files_rel


def remove_file_if_exists(path_abs: Path) -> None:
    try:
        path_abs.unlink()
    except FileNotFoundError:
        return
