"""Symbol classification rules for index entries."""

from __future__ import annotations

import re

from docsetgen.config import DEFAULT_NAMESPACE
from docsetgen.models import CONSTRUCTOR, GUIDE, METHOD, PROPERTY, ClassifiedEntry, EntryType

_LOWERCASE_LABEL = re.compile(r"[a-z]+")


def classify(label: str, anchor: str, *, namespace: str = DEFAULT_NAMESPACE) -> ClassifiedEntry:
    """Derive the display name and entry type for a raw label.

    The type rules are checked first (namespaced lowercase member is a
    property, namespaced capitalized member is a constructor, anything else a
    guide). Labels with a parenthesis then become methods, bare lowercase
    words become constructor calls, and a ``new `` prefix always wins.
    """
    prefix = re.escape(namespace)
    entry_type: EntryType = GUIDE
    if re.match(rf"^(?:{prefix}|plugin)\.[a-z]", label):
        entry_type = PROPERTY
    elif re.match(rf"^{prefix}\.[A-Z]", label):
        entry_type = CONSTRUCTOR

    method = label
    if "(" in label:
        entry_type = METHOD
        head, dot, rest = label.partition(".")
        if dot:
            method = f"{namespace}.{head}(){dot}{rest}"
        else:
            method = f"{namespace}.{label}"
    elif _LOWERCASE_LABEL.fullmatch(label):
        method = f"{namespace}.{label}()"
        entry_type = CONSTRUCTOR

    if label.startswith("new ") or method.startswith("new "):
        entry_type = CONSTRUCTOR

    return ClassifiedEntry(method=method, anchor=anchor, type=entry_type)
