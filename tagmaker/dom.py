"""BeautifulSoup-backed DOM documents used for HTML serialization."""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING

from bs4 import BeautifulSoup, CData, NavigableString, Tag
from bs4.dammit import EntitySubstitution
from bs4.element import PageElement
from bs4.formatter import HTMLFormatter

if TYPE_CHECKING:
    from .nodes import Rendered

logger = logging.getLogger(__name__)

PARSER = "html.parser"

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


def is_void_tag(name: str) -> bool:
    return name.lower() in VOID_ELEMENTS


class SerializationError(RuntimeError):
    """Raised when a native tree cannot be turned into a string."""


def html_formatter(indent: int = 2) -> HTMLFormatter:
    """Formatter escaping only `&`, `<` and `>`, with HTML style void tags.

    Text is escaped inside every tag, `<script>` and `<style>` included; raw
    content is expected to arrive as CDATA sections.
    """
    return HTMLFormatter(
        entity_substitution=EntitySubstitution.substitute_xml,
        void_element_close_prefix=None,
        cdata_containing_tags=frozenset(),
        indent=indent,
    )


def _mark_void(tag: Tag) -> None:
    # bs4's own void table is case-sensitive and larger than ours; copies reset to it.
    tag.can_be_empty_element = is_void_tag(tag.name)


class Document:
    """A document context that owns the native nodes created through it."""

    def __init__(self) -> None:
        self.soup = BeautifulSoup("", PARSER)

    def __repr__(self) -> str:
        return f"<Document {id(self):#x}>"

    def create_element(self, name: str) -> Tag:
        tag = self.soup.new_tag(name)
        _mark_void(tag)
        return tag

    def create_text(self, text: str) -> NavigableString:
        return self.soup.new_string(text)

    def create_cdata(self, text: str) -> CData:
        return self.soup.new_string(text, CData)

    def create_fragment(self) -> BeautifulSoup:
        """Return an empty container whose children are spliced in when appended to a tag."""
        return BeautifulSoup("", PARSER)

    def import_node(self, node: PageElement) -> PageElement:
        """Deep-copy a node that was produced by another document."""
        if isinstance(node, BeautifulSoup):
            fragment = self.create_fragment()
            for child in list(node.contents):
                fragment.append(self.import_node(child))
            return fragment
        clone = copy.copy(node)
        if isinstance(clone, Tag):
            _mark_void(clone)
            for tag in clone.find_all(True):
                _mark_void(tag)
        return clone

    def adopt(self, rendered: "Rendered") -> PageElement:
        """Return the rendered node, imported first if another document owns it."""
        if rendered.document is self:
            return rendered.node
        logger.debug("importing %s from %r into %r", type(rendered.node).__name__, rendered.document, self)
        return self.import_node(rendered.node)

    def serialize(self, node: PageElement, *, pretty: bool = False, indent: int = 2) -> str:
        if not isinstance(node, PageElement):
            raise SerializationError(f"not a DOM node: {type(node).__name__}")
        formatter = html_formatter(indent)
        try:
            if isinstance(node, NavigableString):
                return node.output_ready(formatter)
            if pretty:
                return node.prettify(formatter=formatter)
            return node.decode(formatter=formatter)
        except RecursionError as exc:
            raise SerializationError("tree is too deep to serialize") from exc


__all__ = ["Document", "PARSER", "SerializationError", "VOID_ELEMENTS", "html_formatter", "is_void_tag"]
