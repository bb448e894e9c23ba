"""Shorthand for a chain of nested tags around shared content."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

from .dom import Document
from .element import Element
from .nodes import Child, Node, Rendered, as_node


class MultiWrap(Node):
    """Nest `children` inside `tags`, outermost tag first.

    `MultiWrap(["div", "p", "strong"], "Deep Text")` renders like
    `Element("div", Element("p", Element("strong", "Deep Text")))`. The nested
    elements are only built at render time and carry no attributes or classes.
    With no tags the children render side by side.
    """

    def __init__(self, tags: Iterable[str], *children: Child) -> None:
        self._tags: Tuple[str, ...] = tuple(tags)
        self._children: Tuple[Node, ...] = tuple(as_node(child) for child in children)

    def __repr__(self) -> str:
        return f"MultiWrap({list(self._tags)!r}, children={len(self._children)})"

    def __iter__(self) -> Iterator[str]:
        return iter(self._tags)

    @property
    def tags(self) -> Tuple[str, ...]:
        return self._tags

    @property
    def children(self) -> Tuple[Node, ...]:
        return self._children

    def expand(self) -> Optional[Element]:
        """Build the nested elements, or return None when there are no tags."""
        outer: Optional[Element] = None
        content: List[Node] = list(self._children)
        for tag in reversed(self._tags):
            outer = Element(tag, *content)
            content = [outer]
        return outer

    def to_dom(self, document: Optional[Document] = None) -> Rendered:
        document = document if document is not None else Document()
        outer = self.expand()
        if outer is not None:
            return outer.to_dom(document)
        fragment = document.create_fragment()
        for child in self._children:
            fragment.append(document.adopt(child.to_dom(document)))
        return Rendered(fragment, document)


__all__ = ["MultiWrap"]
