# styled_export/sanitize_html.py

import html
import re

from bs4 import BeautifulSoup, Tag

from .config import EDITOR_ONLY_CLASSES, ClassOrId

# The editor keeps user-typed HTML escaped inside these spans
RAW_HTML_SPAN = re.compile(rf'<span class="{ClassOrId.AG_HTML_TAG}">([\s\S]+?)</span>')
ENCODED_TAGS = re.compile(r"script|style|title")


def remove_class(tag: Tag, name: str) -> None:
    classes = [cls for cls in tag.get("class", []) if cls != name]
    if classes:
        tag["class"] = classes
    else:
        tag.attrs.pop("class", None)


def add_class(tag: Tag, name: str) -> None:
    classes = tag.get("class", [])
    if name not in classes:
        tag["class"] = classes + [str(name)]


def break_lines(soup: BeautifulSoup, paragraph: Tag) -> None:
    """Soft line breaks export as a space, hard ones as <br/>."""
    lines = paragraph.find_all(True, recursive=False)
    for index, line in enumerate(lines):
        remove_class(line, ClassOrId.AG_LINE)
        if index == len(lines) - 1:
            continue
        hard_breaks = line.select(f".{ClassOrId.AG_HARD_LINE_BREAK}")
        if hard_breaks:
            for hard_break in hard_breaks:
                remove_class(hard_break, ClassOrId.AG_HARD_LINE_BREAK)
                hard_break.append(soup.new_tag("br"))
        else:
            space = soup.new_tag("span")
            space.string = "\xa0"
            line.append(space)


def restore_raw_html(markup: str) -> str:
    def unescape(match):
        content = match.group(1)
        return content if ENCODED_TAGS.search(content) else html.unescape(content)

    return RAW_HTML_SPAN.sub(unescape, markup)


def sanitize_editor_html(root: Tag) -> str:
    """Exportable markup for the editor root.

    Works on a copy; the document ``root`` belongs to is left alone.
    """
    soup = BeautifulSoup(str(root), "html.parser")

    for element in soup.select(", ".join(f".{name}" for name in EDITOR_ONLY_CLASSES)):
        element.decompose()

    for element in soup.select(f".{ClassOrId.AG_ACTIVE}"):
        remove_class(element, ClassOrId.AG_ACTIVE)

    for element in soup.select("[data-role=hr]"):
        element.replace_with(soup.new_tag("hr"))

    for emoji in soup.select(f"span.{ClassOrId.AG_EMOJI_MARKED_TEXT}[data-emoji]"):
        emoji.string = emoji["data-emoji"]

    # the export is read-only
    for checkbox in soup.select(f"input.{ClassOrId.AG_TASK_LIST_ITEM_CHECKBOX}"):
        checkbox["disabled"] = "disabled"

    # hide the math preview bubble
    for math in soup.select(f"span.{ClassOrId.AG_MATH}.{ClassOrId.AG_GRAY}"):
        remove_class(math, ClassOrId.AG_GRAY)
        add_class(math, ClassOrId.AG_HIDE)

    for paragraph in soup.select(f"p.{ClassOrId.AG_PARAGRAPH}"):
        break_lines(soup, paragraph)

    return restore_raw_html(soup.decode())
