"""Markdown to HTML conversion through the GitHub Markdown API."""

from __future__ import annotations

import logging

import requests
from pydantic import BaseModel

from docsetgen.config import RENDERER_URL
from docsetgen.errors import RenderError
from docsetgen.ingestion.http import log_rate_limit

LOGGER = logging.getLogger(__name__)


class MarkdownPayload(BaseModel):
    text: str
    mode: str = "markdown"
    context: str = ""


class GitHubMarkdownRenderer:
    """Posts Markdown to GitHub and returns the rendered HTML."""

    def __init__(
        self,
        session: requests.Session,
        *,
        url: str = RENDERER_URL,
        timeout: float | None = None,
    ) -> None:
        self.session = session
        self.url = url
        self.timeout = timeout

    def render(self, markdown: str) -> str:
        payload = MarkdownPayload(text=markdown)
        try:
            response = self.session.post(self.url, json=payload.model_dump(), timeout=self.timeout)
        except requests.RequestException as exc:
            raise RenderError(f"Markdown rendering failed: {exc}") from exc

        log_rate_limit(response)
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            raise RenderError(f"Markdown rendering failed: {exc}") from exc

        if not response.text:
            raise RenderError("Markdown renderer returned an empty document")

        LOGGER.info("HTML generated from Markdown")
        return response.text
