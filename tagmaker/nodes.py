"""Renderable nodes: the base type and the text variants."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import NamedTuple, Optional, Union

from bs4.element import PageElement

from .dom import VOID_ELEMENTS, Document, is_void_tag


class VoidElementError(ValueError):
    """A child was added to an element whose tag cannot hold children."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"Cannot add children to a void element <{tag}>.")
        self.tag = tag


class Rendered(NamedTuple):
    """A native DOM node together with the document that created it."""

    node: PageElement
    document: Document


class Node(ABC):
    """Anything that can be turned into a native DOM node."""

    @abstractmethod
    def to_dom(self, document: Optional[Document] = None) -> Rendered:
        """Build the native node, inside `document` when one is given."""


@dataclass(frozen=True)
class TextNode(Node):
    """Plain text; `<`, `>` and `&` are escaped when serialized."""

    text: str

    def to_dom(self, document: Optional[Document] = None) -> Rendered:
        document = document if document is not None else Document()
        return Rendered(document.create_text(self.text), document)


@dataclass(frozen=True)
class RawTextNode(Node):
    """Text emitted verbatim inside a CDATA section."""

    text: str

    def to_dom(self, document: Optional[Document] = None) -> Rendered:
        document = document if document is not None else Document()
        return Rendered(document.create_cdata(self.text), document)


Child = Union[Node, str]


def as_node(value: Child) -> Node:
    """Resolve a child argument: strings become `TextNode`s."""
    if isinstance(value, Node):
        return value
    if isinstance(value, str):
        return TextNode(value)
    raise TypeError(f"Invalid child type: {type(value)!r}; expected Node or str")


__all__ = [
    "Child",
    "Node",
    "RawTextNode",
    "Rendered",
    "TextNode",
    "VOID_ELEMENTS",
    "VoidElementError",
    "as_node",
    "is_void_tag",
]
