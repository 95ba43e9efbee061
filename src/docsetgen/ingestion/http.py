"""Shared HTTP helpers for talking to GitHub."""

from __future__ import annotations

import logging

import requests

LOGGER = logging.getLogger(__name__)


def create_session(user_agent: str) -> requests.Session:
    session = requests.Session()
    session.headers.update({"User-Agent": user_agent})
    return session


def log_rate_limit(response: requests.Response) -> None:
    """Log the remaining GitHub API calls when the header is present."""
    remaining = response.headers.get("x-ratelimit-remaining")
    if remaining:
        LOGGER.info("Remaining github calls: %s", remaining)
