# styled_export/errors.py

from typing import Optional


class ExportError(Exception):
    """Base class for failures that abort an export."""


class StylesheetFetchError(ExportError):
    def __init__(self, url: str, reason: Optional[str] = None):
        self.url = url
        message = f"Failed to fetch stylesheet {url}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class EditorRootNotFound(ExportError):
    def __init__(self, selector: str):
        self.selector = selector
        super().__init__(f"No editor root matching '{selector}' in document")
