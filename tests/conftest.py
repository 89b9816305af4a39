"""
Pytest configuration and fixtures.
"""

import pytest

from styled_export.scraper import load_document


EDITOR_PAGE = """
<!DOCTYPE html>
<html>
<head>
  <link rel="stylesheet" href="https://cdn.example.com/theme.css">
  <link rel="stylesheet" href="print.css" media="print">
  <link rel="icon" href="favicon.ico">
  <style>
    body { color: #333 }
    .ag-paragraph { margin: 0 }
    .ghost { color: blue }
  </style>
</head>
<body>
  <div id="ag-editor-id">
    <h1 class="ag-active">Title</h1>
    <p class="ag-paragraph">
      <span class="ag-line">first</span><span class="ag-line">second</span>
    </p>
    <span class="ag-remove">caret</span>
  </div>
</body>
</html>
"""


class FakeFetcher:
    """Serves stylesheet text from a dict and records what was asked for."""

    def __init__(self, sheets):
        self.sheets = sheets
        self.requested = []

    async def __call__(self, url):
        self.requested.append(url)
        return self.sheets[url]


@pytest.fixture
def editor_page():
    return EDITOR_PAGE


@pytest.fixture
def document(editor_page):
    return load_document(editor_page)


@pytest.fixture
def fetcher():
    return FakeFetcher({
        "https://cdn.example.com/theme.css": "h1 { font-size: 2em } .sidebar { width: 10em }",
    })
