# styled_export/filter_css.py

import logging
import re
from typing import Callable, Dict, Iterable, List

import tinycss2
from bs4 import BeautifulSoup

from .config import DEAD_OBVIOUS_SELECTORS, DEAD_REMOVE_SELECTORS

logger = logging.getLogger(__name__)

VENDOR_PSEUDO_CLASS = re.compile(r":-(ms|moz)-")
BEFORE_AFTER_PSEUDO_ELEMENT = re.compile(r":{1,2}(before|after)")
CSS_COMMENT = re.compile(r"/\*[^*]*\*+(?:[^/*][^*]*\*+)*/")

RULE_TYPES = ("qualified-rule", "at-rule")


class SelectorChecker:
    """Keep/drop decision for a single selector against the live document.

    ``query`` answers "does anything in the document match this selector?".
    It may raise for selectors it can't evaluate; those are dropped with a
    warning instead of failing the export.
    """

    def __init__(self, query: Callable[[str], bool]):
        self.query = query

    @classmethod
    def for_document(cls, soup: BeautifulSoup) -> "SelectorChecker":
        return cls(lambda selector: soup.select_one(selector) is not None)

    def __call__(self, selector: str) -> bool:
        if selector in DEAD_REMOVE_SELECTORS:
            return False
        if selector in DEAD_OBVIOUS_SELECTORS:
            return True
        # Neither can be tested by querying, so keep them
        if VENDOR_PSEUDO_CLASS.search(selector):
            return True
        if BEFORE_AFTER_PSEUDO_ELEMENT.search(selector):
            return True
        try:
            return bool(self.query(selector))
        except Exception as e:
            logger.warning("Unable to query selector '%s' [%s]", selector, e)
            return False


def parse_stylesheet(css: str) -> list:
    return tinycss2.parse_stylesheet(css, skip_comments=False, skip_whitespace=False)


def split_selectors(prelude) -> List[str]:
    """Split a rule prelude on top-level commas.

    Commas inside functional pseudo-classes like ``:is(a, b)`` belong to a
    nested block token, so they never split.
    """
    groups: List[list] = [[]]
    for token in prelude:
        if token.type == "literal" and token.value == ",":
            groups.append([])
        else:
            groups[-1].append(token)
    return [tinycss2.serialize(group).strip() for group in groups]


def clean_stylesheet(rules: list, check: Callable[[str], bool]) -> list:
    """Return ``rules`` without the selectors ``check`` rejects.

    Rules left without selectors and @media blocks left without rules are
    removed. Every other node (@font-face, @supports, comments, ...) is kept
    as parsed. Each distinct selector is checked at most once per call.
    """
    decisions: Dict[str, bool] = {}

    def keep(selector: str) -> bool:
        if selector not in decisions:
            decisions[selector] = check(selector)
        return decisions[selector]

    def keep_rule(rule) -> bool:
        selectors = split_selectors(rule.prelude)
        kept_selectors = [sel for sel in selectors if keep(sel)]
        if not kept_selectors:
            return False
        if kept_selectors != selectors:
            prelude = tinycss2.serialize(rule.prelude)
            trailing = prelude[len(prelude.rstrip()):]
            rule.prelude = tinycss2.parse_component_value_list(", ".join(kept_selectors) + trailing)
        return True

    def clean(nodes: list) -> list:
        cleaned = []
        dropped = False
        for node in nodes:
            # whitespace right after a removed rule goes with it
            if node.type == "whitespace" and dropped:
                continue
            if node.type == "qualified-rule":
                dropped = not keep_rule(node)
            elif node.type == "at-rule" and node.lower_at_keyword == "media" and node.content is not None:
                # only the body is pruned, the media query stays as written
                children = clean(tinycss2.parse_rule_list(
                    node.content, skip_comments=False, skip_whitespace=False))
                node.content = children
                dropped = not any(child.type in RULE_TYPES for child in children)
            elif node.type == "error":
                logger.warning("Dropping unparsable CSS [%s]", node.message)
                dropped = True
            else:
                dropped = False
            if not dropped:
                cleaned.append(node)
        return cleaned

    return clean(rules)


def collect_important_comments(css: str) -> str:
    """Move every comment to the top of ``css``, each one only once."""
    comments: Dict[str, None] = {}

    def hoist(match):
        comments.setdefault(match.group(0))
        return ""

    body = CSS_COMMENT.sub(hoist, css)
    return "\n".join([*comments, body])


def filter_css(css_texts: Iterable[str], check: Callable[[str], bool]) -> str:
    cleaned = []

    for css in css_texts:
        rules = parse_stylesheet(css)
        kept = clean_stylesheet(rules, check)
        logger.debug("Kept %d of %d top-level rules",
                     sum(node.type in RULE_TYPES for node in kept),
                     sum(node.type in RULE_TYPES for node in rules))
        cleaned.append(tinycss2.serialize(kept))

    return collect_important_comments("\n".join(cleaned))
