"""Shared XML utilities for Openbox menu documents."""

from __future__ import annotations

from jgmenu_ob.exceptions import ParseError

try:
    from bs4 import BeautifulSoup
    from bs4.builder import ParserRejectedMarkup
    from bs4.dammit import EncodingDetector
    from bs4.element import CData, NavigableString, PreformattedString, Tag
    from lxml import etree
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ParseError(
        "BeautifulSoup4 is required for XML parsing (pip install beautifulsoup4 lxml)."
    ) from exc


def parse_menu_document(markup: str | bytes) -> Tag:
    """Parse an Openbox menu document and return its root element.

    Accepts both ``menu.xml`` style documents (``<openbox_menu>``) and
    pipe-menu output (``<openbox_pipe_menu>``).

    Raises:
        ParseError: If the markup is not well-formed XML.
    """
    if isinstance(markup, str):
        markup = markup.encode("utf-8")
        encoding = "utf-8"
    else:
        # XML without an encoding declaration is UTF-8.
        encoding = EncodingDetector.find_declared_encoding(markup) or "utf-8"
    # The soup builder recovers from syntax errors, so check well-formedness first.
    try:
        etree.fromstring(markup, etree.XMLParser(recover=False, encoding=encoding))
    except etree.XMLSyntaxError as exc:
        raise ParseError(f"Menu document could not be parsed: {exc}") from exc
    try:
        soup = BeautifulSoup(markup, "xml", from_encoding=encoding)
    except (ParserRejectedMarkup, etree.LxmlError) as exc:
        raise ParseError(f"Menu document could not be parsed: {exc}") from exc
    for child in soup.contents:
        if isinstance(child, Tag):
            return child
    raise ParseError("Menu document has no root element")


def is_text_node(node: object) -> bool:
    """Return True for character data, False for comments, PIs and doctypes."""
    if not isinstance(node, NavigableString):
        return False
    if isinstance(node, PreformattedString):
        return isinstance(node, CData)
    return True
