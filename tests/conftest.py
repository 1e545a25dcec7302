"""Pytest configuration and fixtures for tldr_offline tests."""

from __future__ import annotations

import logging
import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest

ArchiveFactory = Callable[[list[tuple[str, str | None]]], Path]


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    logging.disable(logging.NOTSET)


@pytest.fixture
def make_archive(tmp_path: Path) -> ArchiveFactory:
    """Build a zip in entry order; names ending in '/' become directory entries."""
    counter = 0

    def _make(entries: list[tuple[str, str | None]]) -> Path:
        nonlocal counter
        counter += 1
        zip_path = tmp_path / f"archive-{counter}.zip"
        with zipfile.ZipFile(zip_path, mode="w") as zf:
            for name, content in entries:
                zf.writestr(name, b"" if content is None else content.encode("utf-8"))
        return zip_path

    return _make


@pytest.fixture
def sample_entries() -> list[tuple[str, str | None]]:
    return [
        ("tldr-main/", None),
        ("tldr-main/README.md", "# tldr\n"),
        ("tldr-main/pages/", None),
        ("tldr-main/pages/common/", None),
        ("tldr-main/pages/common/df.md", "# df\n\n> Common df.\n"),
        ("tldr-main/pages/common/tar.md", "# tar\n\n> Archiving utility.\n"),
        ("tldr-main/pages/linux/", None),
        ("tldr-main/pages/linux/df.md", "# df\n\n> Linux df.\n"),
        ("tldr-main/pages/osx/", None),
        ("tldr-main/pages/osx/df.md", "# df\n\n> macOS df.\n"),
        ("tldr-main/pages.fr/", None),
        ("tldr-main/pages.fr/common/", None),
        ("tldr-main/pages.fr/common/tar.md", "# tar\n\n> Utilitaire.\n"),
    ]
