"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_VERSION = "17.13.3"
DEFAULT_NAMESPACE = "Joi"
REFERENCE_URL_TEMPLATE = "https://raw.githubusercontent.com/hapijs/joi/v{version}/API.md"
RENDERER_URL = "https://api.github.com/markdown"
HEADER_MARKER = (
    '<img src="https://raw.github.com/hapijs/joi/master/images/validation.png" align="right" />'
)
INDEX_FILENAME = "docSet.dsidx"


@dataclass(slots=True)
class AppConfig:
    output_dir: Path = Path("build")
    docset_name: str = "joi.docset"
    version: str = DEFAULT_VERSION
    namespace: str = DEFAULT_NAMESPACE
    reference_url: str | None = None
    renderer_url: str = RENDERER_URL
    user_agent: str = "hapi docset generator"
    document_name: str = "reference.html"
    header_marker: str = HEADER_MARKER
    title: str = "# Joi Reference"
    template_dir: Path | None = None
    timeout: float | None = None

    def __post_init__(self) -> None:
        if self.reference_url is None:
            self.reference_url = REFERENCE_URL_TEMPLATE.format(version=self.version)

    def resolve_output_dir(self, base_dir: Path | None = None) -> Path:
        if Path(self.output_dir).is_absolute() or base_dir is None:
            return Path(self.output_dir)
        return base_dir / self.output_dir

    def resources_path(self, base_dir: Path | None = None) -> Path:
        """Directory holding the index file inside the docset bundle."""
        return self.resolve_output_dir(base_dir) / self.docset_name / "Contents" / "Resources"

    def documents_path(self, base_dir: Path | None = None) -> Path:
        return self.resources_path(base_dir) / "Documents"

    def index_path(self, base_dir: Path | None = None) -> Path:
        return self.resources_path(base_dir) / INDEX_FILENAME

    def document_path(self, base_dir: Path | None = None) -> Path:
        return self.documents_path(base_dir) / self.document_name
