# styled_export/__init__.py

__version__ = "0.1.0"

from .errors import EditorRootNotFound, ExportError, StylesheetFetchError
from .export_html import ExportedDocument, export_document
from .filter_css import SelectorChecker, clean_stylesheet, filter_css
from .inline_css import build_document
from .sanitize_html import sanitize_editor_html
from .scraper import StylesheetCollector, load_document

__all__ = [
    "EditorRootNotFound",
    "ExportError",
    "ExportedDocument",
    "SelectorChecker",
    "StylesheetCollector",
    "StylesheetFetchError",
    "build_document",
    "clean_stylesheet",
    "export_document",
    "filter_css",
    "load_document",
    "sanitize_editor_html",
]
