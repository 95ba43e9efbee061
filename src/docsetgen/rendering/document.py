"""Final HTML document assembly."""

from __future__ import annotations

import logging
from importlib.resources import files
from pathlib import Path

from docsetgen.errors import WriteError

LOGGER = logging.getLogger(__name__)

USER_CONTENT_PREFIX = "user-content-"


def strip_user_content(html: str) -> str:
    """Drop GitHub's ``user-content-`` prefix from ids and anchor names."""
    cleaned = html.replace(USER_CONTENT_PREFIX, "")
    LOGGER.info("HTML cleanup completed!")
    return cleaned


def _load_template(name: str, template_dir: Path | None = None) -> str:
    """Read a template from ``template_dir`` or from the packaged templates.

    Raises:
        WriteError: when the template cannot be read.
    """
    if template_dir is not None:
        template = Path(template_dir) / name
    else:
        template = files("docsetgen") / "templates" / name
    try:
        return template.read_text(encoding="utf-8")
    except OSError as exc:
        raise WriteError(f"Unable to read template {name}: {exc}") from exc


def wrap_in_document(body: str, template_dir: Path | None = None) -> str:
    header = _load_template("header.html", template_dir)
    footer = _load_template("footer.html", template_dir)
    LOGGER.info("Body wrapped with header and footer!")
    return header + body + footer
