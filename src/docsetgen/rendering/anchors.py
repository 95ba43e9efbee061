"""Dash anchor injection into rendered HTML."""

from __future__ import annotations

from typing import Iterable
from urllib.parse import quote

from docsetgen.models import IndexRecord

# Characters left unescaped by JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def build_dash_anchor(record: IndexRecord) -> str:
    name = quote(record.name, safe=_URI_COMPONENT_SAFE)
    return f'<a name="//apple_ref/cpp/{record.type}/{name}" class="dashAnchor"></a>'


def inject_dash_anchors(html: str, records: Iterable[IndexRecord]) -> str:
    """Insert a dash anchor before every ``<a name="...">`` tag matching a record."""
    for record in records:
        search_term = f'<a name="{record.fragment}"'
        html = html.replace(search_term, build_dash_anchor(record) + search_term)
    return html
