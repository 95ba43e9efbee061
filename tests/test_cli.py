"""Tests for CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from docsetgen.cli import _setup_logging, app
from docsetgen.config import AppConfig
from docsetgen.errors import FetchError
from docsetgen.index.indexer import IndexStats
from docsetgen.index.storage import SearchIndexStore
from docsetgen.models import IndexRecord
from docsetgen.pipeline import GenerationResult

runner = CliRunner()


class TestSetupLogging:
    """Tests for _setup_logging helper."""

    def test_setup_logging_verbose(self) -> None:
        """Verbose mode sets DEBUG level."""
        with patch("docsetgen.cli.logging.basicConfig") as mock_config:
            _setup_logging(verbose=True)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.DEBUG

    def test_setup_logging_normal(self) -> None:
        """Normal mode sets INFO level."""
        with patch("docsetgen.cli.logging.basicConfig") as mock_config:
            _setup_logging(verbose=False)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.INFO


class TestGenerateCommand:
    """Tests for the generate command."""

    @patch("docsetgen.cli.generate_docset")
    def test_generate_success(self, mock_generate: MagicMock, tmp_path: Path) -> None:
        stats = IndexStats(matched=3, inserted=2, ignored=1, by_type={"Method": 1, "Guide": 1})
        mock_generate.return_value = GenerationResult(
            document_path=tmp_path / "reference.html",
            index_path=tmp_path / "docSet.dsidx",
            stats=stats,
            entries=2,
        )

        result = runner.invoke(app, ["generate", "--output", str(tmp_path)])

        assert result.exit_code == 0
        assert "Indexed: 2, duplicates ignored: 1" in result.stdout
        assert "Entries in index: 2" in result.stdout
        assert "Method" in result.stdout

    @patch("docsetgen.cli.generate_docset")
    def test_generate_options_reach_config(self, mock_generate: MagicMock, tmp_path: Path) -> None:
        mock_generate.return_value = GenerationResult(
            document_path=tmp_path / "reference.html",
            index_path=tmp_path / "docSet.dsidx",
            stats=IndexStats(),
        )

        result = runner.invoke(
            app,
            [
                "generate",
                "--output", str(tmp_path),
                "--version", "16.1.8",
                "--namespace", "Hapi",
                "-v",
            ],
        )

        assert result.exit_code == 0
        config: AppConfig = mock_generate.call_args[0][0]
        assert config.output_dir == tmp_path
        assert config.namespace == "Hapi"
        assert config.reference_url.endswith("/v16.1.8/API.md")

    @patch("docsetgen.cli.generate_docset")
    def test_generate_url_override(self, mock_generate: MagicMock, tmp_path: Path) -> None:
        mock_generate.return_value = GenerationResult(
            document_path=tmp_path / "reference.html",
            index_path=tmp_path / "docSet.dsidx",
            stats=IndexStats(),
        )

        runner.invoke(app, ["generate", "--url", "http://localhost/API.md"])

        assert mock_generate.call_args[0][0].reference_url == "http://localhost/API.md"

    @patch("docsetgen.cli.generate_docset")
    def test_generate_failure_exits_nonzero(self, mock_generate: MagicMock, tmp_path: Path) -> None:
        mock_generate.side_effect = FetchError("Unable to fetch http://x: offline")

        result = runner.invoke(app, ["generate", "--output", str(tmp_path)])

        assert result.exit_code == 1
        assert "Generation failed" in result.stdout


    @patch("docsetgen.pipeline.create_session")
    def test_generate_missing_template(self, mock_session: MagicMock, tmp_path: Path) -> None:
        """An incomplete template directory fails the run cleanly."""
        session = MagicMock()
        session.get.return_value.text = "- [Intro](#intro)\n"
        session.get.return_value.headers = {}
        session.post.return_value.text = '<a name="intro"></a>'
        session.post.return_value.headers = {}
        mock_session.return_value = session
        templates = tmp_path / "templates"
        templates.mkdir()

        with patch("docsetgen.cli.LOGGER") as mock_logger:
            result = runner.invoke(
                app,
                ["generate", "--output", str(tmp_path / "out"), "--templates", str(templates)],
            )

        assert result.exit_code == 1
        assert "Generation failed" in result.stdout
        assert "header.html" in result.stdout
        mock_logger.error.assert_called_once()
        session.close.assert_called_once()

    @patch("docsetgen.pipeline.create_session")
    def test_generate_unusable_output(self, mock_session: MagicMock, tmp_path: Path) -> None:
        """An output path blocked by a file fails the run cleanly."""
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")

        with patch("docsetgen.cli.LOGGER") as mock_logger:
            result = runner.invoke(app, ["generate", "--output", str(blocker)])

        assert result.exit_code == 1
        assert "Generation failed" in result.stdout
        mock_logger.error.assert_called_once()
        mock_session.assert_not_called()


class TestSearchCommand:
    """Tests for the search command."""

    def _build_index(self, output: Path) -> None:
        index_path = AppConfig(output_dir=output).index_path()
        index_path.parent.mkdir(parents=True)
        store = SearchIndexStore(index_path)
        with store.transaction():
            store.insert(IndexRecord("Joi.any()", "Constructor", "reference.html#any"))
            store.insert(IndexRecord("Joi.string()", "Method", "reference.html#string"))
        store.close()

    def test_search_missing_index(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["search", "any", "--output", str(tmp_path)])
        assert result.exit_code != 0

    def test_search_finds_entries(self, tmp_path: Path) -> None:
        self._build_index(tmp_path)

        result = runner.invoke(app, ["search", "string", "--output", str(tmp_path)])

        assert result.exit_code == 0
        assert "Joi.string()" in result.stdout
        assert "Joi.any()" not in result.stdout

    def test_search_no_matches(self, tmp_path: Path) -> None:
        self._build_index(tmp_path)

        result = runner.invoke(app, ["search", "number", "--output", str(tmp_path)])

        assert result.exit_code == 0
        assert "No matches found" in result.stdout
