"""Read-only view over a parsed HTML document."""

from bs4 import BeautifulSoup
from bs4.element import Tag
from typing import Optional


class ParsedDocument:
    """Minimal query interface over a BeautifulSoup tree.

    The extractor only needs to find the first node for a CSS selector and
    read an attribute or the text of that node.
    """

    def __init__(self, html: str):
        self._soup = BeautifulSoup(html, "lxml")

    @property
    def body(self) -> Optional[Tag]:
        return self._soup.body

    def find_first(self, query: str) -> Optional[Tag]:
        return self._soup.select_one(query)

    @staticmethod
    def attribute(node: Optional[Tag], name: str) -> Optional[str]:
        if node is None:
            return None
        value = node.get(name)
        # Multi-valued attributes such as class come back as lists
        if isinstance(value, list):
            value = " ".join(value)
        return value

    @staticmethod
    def text(node: Optional[Tag]) -> Optional[str]:
        if node is None:
            return None
        return node.get_text()
