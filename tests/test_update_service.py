from __future__ import annotations

import tempfile
from pathlib import Path

import httpx
import pytest

from tldr_offline.config import load_config
from tldr_offline.errors import FetchError, LanguageNotFoundError
from tldr_offline.update_service import run_update


@pytest.fixture
def config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(tempfile, "tempdir", str(tmp_path / "tmp"))
    return load_config({"HOME": str(tmp_path / "home")}, sys_platform="linux")


def _serving(archive: Path) -> httpx.MockTransport:
    payload = archive.read_bytes()
    return httpx.MockTransport(lambda request: httpx.Response(200, content=payload))


def test_run_update_fetches_extracts_and_indexes(
    config, make_archive, sample_entries
) -> None:
    stages: list[str] = []

    result = run_update(
        config,
        on_stage=stages.append,
        transport=_serving(make_archive(sample_entries)),
    )

    assert stages == ["Fetching pages...", "Extracting pages...", "Indexing pages..."]
    assert result.extracted_page_count == 4
    assert result.indexed_page_count == 4
    assert result.archive_bytes > 0
    assert config.index_path_abs.read_text(encoding="utf-8").splitlines() == [
        "linux/df.md",
        "common/df.md",
        "common/tar.md",
        "osx/df.md",
    ]
    assert not config.staging_path_abs.exists()


def test_run_update_stops_after_failed_fetch(config) -> None:
    stages: list[str] = []
    transport = httpx.MockTransport(lambda request: httpx.Response(500))

    with pytest.raises(FetchError):
        run_update(config, on_stage=stages.append, transport=transport)

    assert stages == ["Fetching pages..."]
    assert not config.index_path_abs.exists()


def test_run_update_leaves_index_alone_when_language_is_missing(
    config, make_archive
) -> None:
    archive = make_archive([("tldr-main/pages.fr/common/tar.md", "# tar\n")])
    config.index_path_abs.parent.mkdir(parents=True)
    config.index_path_abs.write_text("common/ls.md\n", encoding="utf-8")

    with pytest.raises(LanguageNotFoundError):
        run_update(config, transport=_serving(archive))

    assert config.index_path_abs.read_text(encoding="utf-8") == "common/ls.md\n"
