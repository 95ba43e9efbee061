"""Utility helpers for the docset bundle on disk."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable

from docsetgen.errors import WriteError

LOGGER = logging.getLogger(__name__)


def prepare_bundle(documents_path: Path, stale: Iterable[Path] = ()) -> None:
    """Create the bundle directories and delete outputs of a previous run.

    Raises:
        WriteError: when the bundle cannot be prepared.
    """
    try:
        documents_path.mkdir(parents=True, exist_ok=True)
        for path in stale:
            if path.exists():
                path.unlink()
                LOGGER.info("Previous %s deleted!", path.name)
    except OSError as exc:
        raise WriteError(f"Unable to prepare {documents_path}: {exc}") from exc


def write_document(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` through a temporary file and a rename.

    Raises:
        WriteError: when the file cannot be written.
    """
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=path.parent, suffix=".tmp", delete=False
        ) as handle:
            tmp_name = handle.name
            handle.write(text)
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise WriteError(f"Unable to write {path}: {exc}") from exc
    LOGGER.info("%s written", path.name)
