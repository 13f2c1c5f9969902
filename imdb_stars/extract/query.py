from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup
from bs4.element import Tag


def make_soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html or "", "html.parser")


def query_text(node: Tag, selector: str) -> str:
    """
    Text of every element matching `selector` under `node`, joined and trimmed.
    Returns "" when nothing matches.
    """
    if node is None:
        return ""
    return "".join(el.get_text() for el in node.select(selector)).strip()


def query_attr(node: Tag, selector: str, attr: str) -> str:
    """
    Attribute of the first element matching `selector`.
    Returns "" when nothing matches or the first match lacks the attribute.
    """
    if node is None:
        return ""
    el = node.select_one(selector)
    if el is None:
        return ""
    value = el.get(attr)
    if value is None:
        return ""
    # multi-valued attributes (class, rel) come back as lists
    if isinstance(value, list):
        return " ".join(value)
    return value


def query_all(node: Tag, selector: str) -> List[Tag]:
    if node is None:
        return []
    return node.select(selector)
