"""Typed exceptions for tldr_offline."""

from __future__ import annotations


class TldrError(Exception):
    """Base exception for tldr failures."""

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class ConfigError(TldrError):
    """Raised when the environment cannot provide a required setting."""


class FetchError(TldrError):
    """Raised when the page archive cannot be downloaded."""


class ExtractError(TldrError):
    """Raised for malformed archives or failures writing extracted pages."""


class LanguageNotFoundError(ExtractError):
    """Raised when the archive holds no pages for the configured language."""

    def __init__(self, language_prefix: str) -> None:
        super().__init__("Language directory not found in archive", language_prefix)


class IndexMissingError(TldrError):
    """Raised when the index is read before any update has run."""

    def __init__(self, index_path: str) -> None:
        super().__init__(
            "Failed to open index, probably you should run 'tldr -u'", index_path
        )


class IndexReadError(TldrError):
    """Raised when an existing index cannot be opened."""


class IndexWriteError(TldrError):
    """Raised when the index cannot be rebuilt."""


class NotFoundError(TldrError):
    """Raised when no index entry matches the requested page name."""

    def __init__(self, page_name: str) -> None:
        super().__init__("The page has not been found", page_name)


class RenderError(TldrError):
    """Raised when an indexed page file cannot be read."""
