"""Filtered extraction of the page archive into the local page store."""

from __future__ import annotations

import shutil
import zipfile
import zlib
from pathlib import Path, PurePosixPath

from .errors import ExtractError, LanguageNotFoundError
from .fs_gateway import clear_and_recreate_directory
from .logging_utils import log_event
from .models import ExtractResult


def extract_pages(
    *,
    zip_path_abs: Path,
    archive_root_name: str,
    language_root_name: str,
    dest_root_abs: Path,
) -> ExtractResult:
    """Copy every entry under `<root>/<language root>/` into `dest_root_abs`.

    `<root>/<lang>/linux/ls.md` lands at `dest_root_abs/linux/ls.md`. The whole
    archive is scanned, so matching entries need not be contiguous.
    """
    language_prefix = f"{archive_root_name}/{language_root_name}/"

    try:
        with zipfile.ZipFile(zip_path_abs, mode="r") as zf:
            members = [
                (member, _relative_to_prefix(member.filename, language_prefix))
                for member in zf.infolist()
            ]
            selected = [(member, rel) for member, rel in members if rel is not None]
            if not selected:
                raise LanguageNotFoundError(language_prefix)

            clear_and_recreate_directory(dest_root_abs)
            extracted_count = 0
            for member, rel in selected:
                if rel == "":
                    continue
                parts = _safe_parts(member.filename, rel)
                target_abs = dest_root_abs.joinpath(*parts)
                if member.is_dir():
                    target_abs.mkdir(parents=True, exist_ok=True)
                    continue
                # Pages live in platform directories; loose files are not pages.
                if len(parts) < 2:
                    continue
                target_abs.parent.mkdir(parents=True, exist_ok=True)
                with zf.open(member, mode="r") as source, target_abs.open("wb") as target:
                    shutil.copyfileobj(source, target)
                extracted_count += 1
    except zipfile.BadZipFile as exc:
        raise ExtractError("Invalid zip archive", str(exc)) from exc
    except (OSError, EOFError, zlib.error) as exc:
        raise ExtractError("Failed to extract pages", str(exc)) from exc
    except (NotImplementedError, RuntimeError) as exc:
        # Unsupported compression method or encrypted member.
        raise ExtractError("Unsupported zip entry", str(exc)) from exc

    log_event(
        "pages_extracted",
        archive=zip_path_abs,
        language_prefix=language_prefix,
        dest=dest_root_abs,
        pages=extracted_count,
    )
    return ExtractResult(
        language_root_abs=dest_root_abs,
        extracted_page_count=extracted_count,
    )


def _relative_to_prefix(entry_name: str, language_prefix: str) -> str | None:
    normalised = entry_name.replace("\\", "/")
    if normalised == language_prefix.rstrip("/"):
        return ""
    if not normalised.startswith(language_prefix):
        return None
    return normalised[len(language_prefix):]


def _safe_parts(entry_name: str, rel: str) -> tuple[str, ...]:
    parts = PurePosixPath(rel).parts
    if not parts or rel.startswith("/") or ".." in parts:
        raise ExtractError("Unsafe zip entry path", entry_name)
    return parts
