# styled_export/config.py

from enum import Enum
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClassOrId(str, Enum):
    """Class and id names the editor puts on its DOM.

    The selector checker and the HTML sanitizer both read from here, so a
    rename in the editor only has to happen once.
    """

    AG_EDITOR_ID = "ag-editor-id"
    AG_REMOVE = "ag-remove"
    AG_OUTPUT_REMOVE = "ag-output-remove"
    AG_EMOJI_MARKER = "ag-emoji-marker"
    AG_EMOJI_MARKED_TEXT = "ag-emoji-marked-text"
    AG_TABLE_TOOL_BAR = "ag-table-tool-bar"
    AG_MATH = "ag-math"
    AG_MATH_MARKER = "ag-math-marker"
    AG_MATH_TEXT = "ag-math-text"
    AG_MATH_RENDER = "ag-math-render"
    AG_ACTIVE = "ag-active"
    AG_GRAY = "ag-gray"
    AG_HIDE = "ag-hide"
    AG_WARN = "ag-warn"
    AG_TASK_LIST_ITEM_CHECKBOX = "ag-task-list-item-checkbox"
    AG_PARAGRAPH = "ag-paragraph"
    AG_LINE = "ag-line"
    AG_HARD_LINE_BREAK = "ag-hard-line-break"
    AG_HTML_TAG = "ag-html-tag"
    AG_IMAGE_MARKED_TEXT = "ag-image-marked-text"
    AG_IMAGE_FAIL = "ag-image-fail"
    CODEMIRROR_CURSORS = "CodeMirror-cursors"

    def __str__(self) -> str:
        return self.value


# Selectors that only style editing affordances; never exported.
DEAD_REMOVE_SELECTORS = frozenset([
    f".{ClassOrId.AG_IMAGE_MARKED_TEXT}::before",
    f".{ClassOrId.AG_IMAGE_MARKED_TEXT}.{ClassOrId.AG_IMAGE_FAIL}::before",
    f".{ClassOrId.AG_HIDE}",
    f".{ClassOrId.AG_GRAY}",
    f".{ClassOrId.AG_WARN}",
])

# Selectors that always apply to an exported page.
DEAD_OBVIOUS_SELECTORS = frozenset(["*", "body", "html"])

# Editor-only elements stripped from the exported markup.
EDITOR_ONLY_CLASSES = (
    ClassOrId.AG_REMOVE,
    ClassOrId.AG_OUTPUT_REMOVE,
    ClassOrId.AG_EMOJI_MARKER,
    ClassOrId.AG_TABLE_TOOL_BAR,
    ClassOrId.AG_MATH_MARKER,
    ClassOrId.AG_MATH_TEXT,
    ClassOrId.CODEMIRROR_CURSORS,
)


class Settings(BaseSettings):
    """Read from STYLED_EXPORT_* environment variables, or a .env file."""

    model_config = SettingsConfigDict(env_prefix="STYLED_EXPORT_", env_file=".env", extra="ignore")

    theme: str = "light"
    fetch_timeout: Optional[float] = Field(default=None, gt=0)
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)
