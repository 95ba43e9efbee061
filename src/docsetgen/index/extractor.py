"""Reference extraction from the Markdown table of contents."""

from __future__ import annotations

import itertools
import re
from typing import Iterator

from docsetgen.models import RawMatch

# Top-level "- [Label](#anchor)" items, label optionally in backticks.
GUIDES_PATTERN = re.compile(r"^- *\[`?([^`}\]]*)`?\]\((#[A-Za-z\-]*)\)", re.MULTILINE)
# Possibly indented "- [`label`](#anchor)" items.
METHODS_PATTERN = re.compile(r"^\s*-\s*\[`([A-Za-z.]*.*)`\]\((#[A-Za-z\-]*)\)", re.MULTILINE)


def _scan(pattern: re.Pattern[str], text: str) -> Iterator[RawMatch]:
    for match in pattern.finditer(text):
        yield RawMatch(label=match.group(1), anchor=match.group(2))


def extract_references(text: str) -> Iterator[RawMatch]:
    """Yield guide links first, then method links, each in document order."""
    return itertools.chain(_scan(GUIDES_PATTERN, text), _scan(METHODS_PATTERN, text))
