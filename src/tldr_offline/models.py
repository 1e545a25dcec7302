"""Dataclasses and enums shared across tldr_offline layers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class AppConfig:
    pages_root_abs: Path
    index_path_abs: Path
    language: str
    language_root_name: str
    archive_url: str
    archive_root_name: str
    staging_path_abs: Path
    fetch_timeout_sec: float
    platform_priority: tuple[str, ...]
    use_color: bool
    log_file_abs: Path | None

    @property
    def language_root_abs(self) -> Path:
        return self.pages_root_abs / self.language_root_name


@dataclass(frozen=True)
class FetchedArchive:
    path: Path
    byte_count: int


@dataclass(frozen=True)
class ExtractResult:
    language_root_abs: Path
    extracted_page_count: int


@dataclass(frozen=True)
class UpdateResult:
    archive_bytes: int
    extracted_page_count: int
    indexed_page_count: int


class LineKind(Enum):
    HEADING = "heading"
    DESCRIPTION = "description"
    BULLET = "bullet"
    EXAMPLE = "example"
    PLAIN = "plain"
    BLANK = "blank"


@dataclass(frozen=True)
class LineStyles:
    heading: str
    description: str
    bullet: str
    example: str
    reset: str

    def start_for(self, kind: LineKind) -> str | None:
        if kind is LineKind.HEADING:
            return self.heading
        if kind is LineKind.DESCRIPTION:
            return self.description
        if kind is LineKind.BULLET:
            return self.bullet
        if kind is LineKind.EXAMPLE:
            return self.example
        return None
