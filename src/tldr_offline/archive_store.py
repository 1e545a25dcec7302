"""Page archive download into the staging file."""

from __future__ import annotations

from pathlib import Path

import httpx

from .constants import FETCH_CHUNK_SIZE, USER_AGENT
from .errors import FetchError
from .logging_utils import log_event
from .models import FetchedArchive


def fetch_archive(
    *,
    url: str,
    staging_path_abs: Path,
    timeout_sec: float,
    transport: httpx.BaseTransport | None = None,
) -> FetchedArchive:
    """Stream the archive at `url` into `staging_path_abs`, replacing it.

    `transport` lets callers swap the network layer (tests use
    `httpx.MockTransport`).
    """
    try:
        staging_path_abs.parent.mkdir(parents=True, exist_ok=True)
        staging_file = staging_path_abs.open("wb")
    except OSError as exc:
        raise FetchError("Failed to create a temporary file", str(exc)) from exc

    byte_count = 0
    with staging_file:
        try:
            with httpx.Client(
                timeout=httpx.Timeout(timeout_sec),
                follow_redirects=True,
                headers={"User-Agent": USER_AGENT},
                transport=transport,
            ) as client:
                with client.stream("GET", url) as response:
                    if not response.is_success:
                        raise FetchError(
                            "Failed to fetch pages",
                            f"HTTP {response.status_code} {response.reason_phrase}",
                        )
                    for chunk in response.iter_bytes(chunk_size=FETCH_CHUNK_SIZE):
                        staging_file.write(chunk)
                        byte_count += len(chunk)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchError("Failed to fetch pages", str(exc) or type(exc).__name__) from exc
        except OSError as exc:
            raise FetchError("Failed to write the downloaded archive", str(exc)) from exc

    log_event(
        "archive_fetched",
        url=url,
        staging_file=staging_path_abs,
        bytes=byte_count,
    )
    return FetchedArchive(path=staging_path_abs, byte_count=byte_count)
