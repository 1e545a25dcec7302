"""Line-classifying page renderer."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

from . import constants
from .errors import RenderError
from .models import LineKind, LineStyles

DEFAULT_STYLES = LineStyles(
    heading=constants.HEADING_STYLE,
    description=constants.DESCRIPTION_STYLE,
    bullet=constants.BULLET_STYLE,
    example=constants.EXAMPLE_STYLE,
    reset=constants.RESET_STYLE,
)

_KIND_BY_LEAD = {
    "#": LineKind.HEADING,
    ">": LineKind.DESCRIPTION,
    "-": LineKind.BULLET,
    "`": LineKind.EXAMPLE,
}


def classify_line(line: str) -> LineKind:
    if line in ("\n", "\r\n"):
        return LineKind.BLANK
    if not line:
        return LineKind.PLAIN
    return _KIND_BY_LEAD.get(line[0], LineKind.PLAIN)


def render_lines(lines: Iterable[str], styles: LineStyles | None) -> Iterator[str]:
    for line in lines:
        kind = classify_line(line)
        if kind is LineKind.BLANK:
            continue
        start = styles.start_for(kind) if styles is not None else None
        if start is None:
            yield line
        else:
            yield f"{start}{line}{styles.reset}"


def render_page(
    page_path_abs: Path,
    out: TextIO,
    styles: LineStyles | None = DEFAULT_STYLES,
) -> None:
    try:
        with page_path_abs.open(
            "r", encoding="utf-8", errors="replace", newline=""
        ) as page_file:
            for rendered in render_lines(page_file, styles):
                out.write(rendered)
    except OSError as exc:
        raise RenderError("Failed to read page", str(exc)) from exc
