# styled_export/export_html.py

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import aiohttp
from bs4 import BeautifulSoup
from pydantic import BaseModel, ConfigDict

from .config import ClassOrId, Settings
from .errors import EditorRootNotFound, ExportError
from .filter_css import SelectorChecker, filter_css
from .inline_css import build_document
from .sanitize_html import sanitize_editor_html
from .scraper import Fetcher, StylesheetCollector, fetch_document, load_document

logger = logging.getLogger(__name__)


class ExportedDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    theme_name: str
    style: str
    body_html: str

    @property
    def html(self) -> str:
        return build_document(self.theme_name, self.style, self.body_html)


async def export_document(document: BeautifulSoup, theme_name: str,
                          base_url: Optional[str] = None,
                          fetch: Optional[Fetcher] = None,
                          timeout: Optional[float] = None) -> ExportedDocument:
    """Snapshot the editor in ``document`` as a standalone styled page.

    Raises EditorRootNotFound if the page has no editor, and
    StylesheetFetchError if any linked stylesheet can't be downloaded.
    """
    root_selector = f"#{ClassOrId.AG_EDITOR_ID}"
    root = document.select_one(root_selector)
    if root is None:
        raise EditorRootNotFound(root_selector)

    body_html = sanitize_editor_html(root)

    collector = StylesheetCollector(document, base_url=base_url, fetch=fetch, timeout=timeout)
    css_texts = await collector.collect()
    style = filter_css(css_texts, SelectorChecker.for_document(document))

    logger.info("Exported editor content: %d bytes of markup, %d bytes of CSS",
                len(body_html), len(style))
    return ExportedDocument(theme_name=theme_name, style=style, body_html=body_html)


async def load_source(source: str, timeout: Optional[float] = None) -> str:
    if source.startswith(("http://", "https://")):
        return await fetch_document(source, timeout=timeout)
    return Path(source).read_text(encoding="utf-8")


def parse_args(argv=None, settings: Optional[Settings] = None) -> argparse.Namespace:
    settings = settings or Settings()
    parser = argparse.ArgumentParser(
        prog="styled-export",
        description="Export an editor page as a single self-contained HTML file",
    )
    parser.add_argument("source", help="path or http(s) URL of the editor page")
    parser.add_argument("-o", "--output", help="write the document here instead of stdout")
    parser.add_argument("--theme", default=settings.theme, help="theme class put on <body>")
    parser.add_argument("--base-url", help="resolve relative stylesheet links against this URL")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace, settings: Settings) -> str:
    html = await load_source(args.source, timeout=settings.fetch_timeout)
    base_url = args.base_url
    if base_url is None and args.source.startswith(("http://", "https://")):
        base_url = args.source

    exported = await export_document(load_document(html), args.theme,
                                     base_url=base_url, timeout=settings.fetch_timeout)
    return exported.html


def main(argv=None) -> int:
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    args = parse_args(argv, settings)

    try:
        output = asyncio.run(run(args, settings))
    except (ExportError, aiohttp.ClientError, OSError) as e:
        logger.error("Export failed: %s", e)
        return 1

    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        logger.info("Saved %s", args.output)
    else:
        sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
