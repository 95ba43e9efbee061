"""Exceptions raised by the generation pipeline."""

from __future__ import annotations


class DocsetError(Exception):
    """Base class for failures that abort a generation run."""


class FetchError(DocsetError):
    """The source document could not be retrieved."""


class RenderError(DocsetError):
    """The Markdown renderer failed or returned nothing."""


class WriteError(DocsetError):
    """The generated document could not be written."""
