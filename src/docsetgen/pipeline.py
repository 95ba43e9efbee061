"""End-to-end docset generation."""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass
from pathlib import Path

import requests

from docsetgen.config import AppConfig
from docsetgen.errors import WriteError
from docsetgen.index.extractor import extract_references
from docsetgen.index.indexer import Indexer, IndexStats
from docsetgen.index.storage import SearchIndexStore
from docsetgen.ingestion.http import create_session
from docsetgen.ingestion.source import fetch_markdown, remove_header
from docsetgen.rendering.anchors import inject_dash_anchors
from docsetgen.rendering.document import strip_user_content, wrap_in_document
from docsetgen.rendering.github import GitHubMarkdownRenderer
from docsetgen.utils.files import prepare_bundle, write_document

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class GenerationResult:
    document_path: Path
    index_path: Path
    stats: IndexStats
    entries: int = 0


def generate_docset(
    config: AppConfig,
    *,
    base_dir: Path | None = None,
    session: requests.Session | None = None,
) -> GenerationResult:
    """Run every stage in order; the first failure aborts the run.

    The index store is opened once and closed on every exit path.
    """
    documents_path = config.documents_path(base_dir)
    index_path = config.index_path(base_dir)
    document_path = config.document_path(base_dir)
    prepare_bundle(documents_path, stale=(index_path, document_path))

    try:
        store = SearchIndexStore(index_path)
    except sqlite3.Error as exc:
        raise WriteError(f"Unable to open index {index_path}: {exc}") from exc

    owns_session = session is None
    if session is None:
        session = create_session(config.user_agent)
    renderer = GitHubMarkdownRenderer(session, url=config.renderer_url, timeout=config.timeout)

    try:
        store.reset()
        markdown = fetch_markdown(session, config.reference_url, timeout=config.timeout)
        markdown = remove_header(markdown, config.header_marker, config.title)

        indexer = Indexer(store, namespace=config.namespace, document_name=config.document_name)
        stats = indexer.build(extract_references(markdown))

        html = strip_user_content(renderer.render(markdown))
        html = inject_dash_anchors(html, store.records())
        entries = store.count()
        write_document(document_path, wrap_in_document(html, config.template_dir))
    except sqlite3.Error as exc:
        raise WriteError(f"Index store failure: {exc}") from exc
    finally:
        store.close()
        if owns_session:
            session.close()

    LOGGER.info("Generation completed!")
    return GenerationResult(
        document_path=document_path, index_path=index_path, stats=stats, entries=entries
    )
