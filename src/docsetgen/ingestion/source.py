"""Retrieval and trimming of the source Markdown document."""

from __future__ import annotations

import logging

import requests

from docsetgen.errors import FetchError
from docsetgen.ingestion.http import log_rate_limit

LOGGER = logging.getLogger(__name__)


def fetch_markdown(session: requests.Session, url: str, *, timeout: float | None = None) -> str:
    """Download the raw Markdown reference.

    Raises:
        FetchError: on transport errors, error statuses or an empty body.
    """
    try:
        response = session.get(url, timeout=timeout)
    except requests.RequestException as exc:
        raise FetchError(f"Unable to fetch {url}: {exc}") from exc

    log_rate_limit(response)
    try:
        response.raise_for_status()
    except requests.HTTPError as exc:
        raise FetchError(f"Unable to fetch {url}: {exc}") from exc

    if not response.text:
        raise FetchError(f"Empty document returned by {url}")

    LOGGER.info("Raw markdown fetched!")
    return response.text


def remove_header(markdown: str, marker: str, title: str) -> str:
    """Replace everything up to and including ``marker`` with ``title``."""
    head, found, body = markdown.partition(marker)
    if not found:
        LOGGER.warning("Header marker not found, keeping the whole document")
        return title + "\n" + markdown
    return title + body
