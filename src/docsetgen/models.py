"""Core docsetgen data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

EntryType = Literal["Guide", "Property", "Constructor", "Method"]

GUIDE: EntryType = "Guide"
PROPERTY: EntryType = "Property"
CONSTRUCTOR: EntryType = "Constructor"
METHOD: EntryType = "Method"


@dataclass(frozen=True, slots=True)
class RawMatch:
    """Label and anchor captured from a Markdown list item."""

    label: str
    anchor: str


@dataclass(frozen=True, slots=True)
class ClassifiedEntry:
    """Display name and category derived from a raw label."""

    method: str
    anchor: str
    type: EntryType


@dataclass(frozen=True, slots=True)
class IndexRecord:
    """Row of the docset search index."""

    name: str
    type: EntryType
    path: str

    @property
    def fragment(self) -> str:
        return self.path.partition("#")[2]
