"""
Tests for the export pipeline and command line.
"""

import pytest
from pydantic import ValidationError

from styled_export.errors import EditorRootNotFound, StylesheetFetchError
from styled_export.export_html import ExportedDocument, export_document, main
from styled_export.scraper import load_document


class TestExportDocument:
    """Test the full export of an editor page."""

    @pytest.mark.asyncio
    async def test_exports_markup_and_used_css(self, document, fetcher):
        exported = await export_document(document, "dark", fetch=fetcher)

        assert exported.theme_name == "dark"
        assert "ag-remove" not in exported.body_html
        assert "ag-active" not in exported.body_html
        assert "first<span>\xa0</span>" in exported.body_html

        assert "h1" in exported.style
        assert ".ag-paragraph" in exported.style
        assert "body" in exported.style
        assert ".sidebar" not in exported.style
        assert ".ghost" not in exported.style

    @pytest.mark.asyncio
    async def test_html_wraps_parts(self, document, fetcher):
        exported = await export_document(document, "light", fetch=fetcher)
        page = exported.html

        assert '<body class="editor-wrapper fillscreen light">' in page
        assert exported.body_html in page
        assert exported.style in page

    @pytest.mark.asyncio
    async def test_missing_editor_root(self):
        with pytest.raises(EditorRootNotFound):
            await export_document(load_document("<p>no editor</p>"), "light")

    @pytest.mark.asyncio
    async def test_stylesheet_failure_aborts(self, document):
        async def fetch(url):
            raise StylesheetFetchError(url, "connection refused")

        with pytest.raises(StylesheetFetchError):
            await export_document(document, "light", fetch=fetch)

    def test_exported_document_is_frozen(self):
        exported = ExportedDocument(theme_name="light", style="", body_html="")
        with pytest.raises(ValidationError):
            exported.style = "p { color: red }"


class TestMain:
    """Test the styled-export command."""

    PAGE = (
        "<html><head><style>p { margin: 0 } .ghost { color: red }</style></head>"
        '<body><div id="ag-editor-id"><p>hello</p></div></body></html>'
    )

    def test_writes_output_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("STYLED_EXPORT_THEME", raising=False)
        source = tmp_path / "page.html"
        source.write_text(self.PAGE, encoding="utf-8")
        output = tmp_path / "export.html"

        assert main([str(source), "-o", str(output), "--theme", "dark"]) == 0

        page = output.read_text(encoding="utf-8")
        assert '<body class="editor-wrapper fillscreen dark">' in page
        assert "<p>hello</p>" in page
        assert ".ghost" not in page

    def test_theme_defaults_from_environment(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("STYLED_EXPORT_THEME", "one-dark")
        source = tmp_path / "page.html"
        source.write_text(self.PAGE, encoding="utf-8")

        assert main([str(source)]) == 0
        assert "fillscreen one-dark" in capsys.readouterr().out

    def test_failure_exit_status(self, tmp_path):
        source = tmp_path / "page.html"
        source.write_text("<p>no editor here</p>", encoding="utf-8")
        assert main([str(source)]) == 1

    def test_missing_source_file(self, tmp_path):
        assert main([str(tmp_path / "nope.html")]) == 1
