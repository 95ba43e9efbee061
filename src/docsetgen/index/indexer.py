"""Search index construction."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable

from docsetgen.config import DEFAULT_NAMESPACE
from docsetgen.index.classifier import classify
from docsetgen.index.storage import SearchIndexStore
from docsetgen.models import IndexRecord, RawMatch

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class IndexStats:
    matched: int = 0
    inserted: int = 0
    ignored: int = 0
    by_type: Dict[str, int] = field(default_factory=dict)

    def increment(self, record: IndexRecord, inserted: bool) -> None:
        self.matched += 1
        if inserted:
            self.inserted += 1
            self.by_type[record.type] = self.by_type.get(record.type, 0) + 1
        else:
            self.ignored += 1


class Indexer:
    """Classifies extracted references and persists them."""

    def __init__(
        self,
        store: SearchIndexStore,
        *,
        namespace: str = DEFAULT_NAMESPACE,
        document_name: str = "reference.html",
    ) -> None:
        self.store = store
        self.namespace = namespace
        self.document_name = document_name

    def to_record(self, match: RawMatch) -> IndexRecord:
        entry = classify(match.label, match.anchor, namespace=self.namespace)
        return IndexRecord(name=entry.method, type=entry.type, path=self.document_name + entry.anchor)

    def build(self, matches: Iterable[RawMatch]) -> IndexStats:
        """Insert one record per match, ignoring exact duplicates."""
        stats = IndexStats()
        with self.store.transaction():
            for match in matches:
                record = self.to_record(match)
                inserted = self.store.insert(record)
                if not inserted:
                    LOGGER.debug("Duplicate entry ignored: %s (%s)", record.name, record.type)
                stats.increment(record, inserted)

        LOGGER.info(
            "Search index created! %d entries (%d duplicates ignored)",
            stats.inserted,
            stats.ignored,
        )
        return stats
