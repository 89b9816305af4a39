"""
Tests for the final document shell.
"""

from styled_export.inline_css import BASE_CSS, build_document


class TestBuildDocument:
    """Test wrapping CSS and markup into one page."""

    def test_theme_on_body(self):
        page = build_document("dark", "p { color: red }", "<div>hi</div>")
        assert '<body class="editor-wrapper fillscreen dark">' in page

    def test_page_css_before_base_css(self):
        page = build_document("light", "p { color: red }", "")
        assert page.startswith("<!DOCTYPE html>")
        assert '<meta charset="UTF-8">' in page
        assert page.index("p { color: red }") < page.index(".dark hr")
        assert BASE_CSS in page

    def test_base_css_neutralizes_math_render(self):
        assert ".ag-hide.ag-math > .ag-math-render" in BASE_CSS

    def test_body_markup_inside_body(self):
        page = build_document("light", "", '<div id="ag-editor-id">x</div>')
        body = page[page.index("<body"):page.index("</body>")]
        assert '<div id="ag-editor-id">x</div>' in body
