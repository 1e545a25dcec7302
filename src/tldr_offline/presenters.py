"""User-facing text rendering."""

from __future__ import annotations

from .constants import ERROR_PREFIX, KNOWN_PLATFORMS

_USAGE_TEXT = "\n".join(
    (
        "USAGE: tldr [options] <[platform/]command>",
        "",
        "[options]",
        "\t-h:\tthis help overview",
        "\t-l:\tshow all available pages",
        "\t-u:\tfetch latest copies of cached pages",
        "",
        "[platform]",
        *(f"\t{name}" for name in KNOWN_PLATFORMS),
        "",
        "<command>",
        "\tShow examples for this command",
    )
)


def render_usage() -> str:
    return _USAGE_TEXT


def render_error(message: str, details: str | None = None) -> str:
    return f"{ERROR_PREFIX} {message}; details: {details or 'none'}."
