"""The `Element` node: a tag with attributes, classes, and children."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from bs4 import Tag

from .dom import Document
from .html_class import ClassInput, ClassSet
from .nodes import Child, Node, Rendered, VoidElementError, as_node, is_void_tag

CLASS_ATTR = "class"
DATA_PREFIX = "data-"
ARIA_PREFIX = "aria-"


class AttributeItems:
    """Live view of an element's attributes as `(name, value)` pairs.

    Every iteration starts from the current attribute store, in insertion order.
    `class` is never included; classes live in the element's `ClassSet`.
    """

    def __init__(self, attributes: Dict[str, str]) -> None:
        self._attributes = attributes

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return ((name, value) for name, value in self._attributes.items() if name != CLASS_ATTR)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"AttributeItems({list(self)!r})"


class Element(Node):
    """An HTML element built fluently; every mutator returns the element.

    Tags in `VOID_ELEMENTS` (compared case-insensitively) never accept children:
    `append_child`, `prepend_child`, initial children, and renaming an element
    with children to a void tag all raise `VoidElementError`.
    """

    def __init__(self, name: str, *children: Child) -> None:
        self._name = name
        self._classes = ClassSet()
        self._attributes: Dict[str, str] = {}
        self._children: List[Node] = []
        for child in children:
            self.append_child(child)

    def __repr__(self) -> str:
        return f"Element({self._name!r}, attrs={len(self._attributes)}, children={len(self._children)})"

    @property
    def name(self) -> str:
        return self._name

    def set_name(self, name: str) -> Element:
        """Rename the tag in place; attributes, classes and children are kept."""
        if self._children and is_void_tag(name):
            raise VoidElementError(name)
        self._name = name
        return self

    def is_void(self) -> bool:
        return is_void_tag(self._name)

    @property
    def children(self) -> Tuple[Node, ...]:
        return tuple(self._children)

    @property
    def classes(self) -> ClassSet:
        return self._classes

    # Children.

    def append_child(self, child: Child) -> Element:
        if self.is_void():
            raise VoidElementError(self._name)
        self._children.append(as_node(child))
        return self

    def prepend_child(self, child: Child) -> Element:
        if self.is_void():
            raise VoidElementError(self._name)
        self._children.insert(0, as_node(child))
        return self

    # Attributes.

    def set_attribute(self, name: str, value: str) -> Element:
        self._attributes[name] = value
        return self

    def get_attribute(self, name: str) -> Optional[str]:
        return self._attributes.get(name)

    def has_attribute(self, name: str) -> bool:
        return name in self._attributes

    def remove_attribute(self, name: str) -> Element:
        self._attributes.pop(name, None)
        return self

    def iter_attributes(self) -> AttributeItems:
        return AttributeItems(self._attributes)

    def set_id(self, value: str) -> Element:
        return self.set_attribute("id", value)

    def get_id(self) -> Optional[str]:
        return self.get_attribute("id")

    def set_boolean_attribute(self, name: str, present: bool = True) -> Element:
        """Set `name="name"` when present, otherwise drop the attribute."""
        if present:
            return self.set_attribute(name, name)
        return self.remove_attribute(name)

    def disabled(self, flag: bool = True) -> Element:
        return self.set_boolean_attribute("disabled", flag)

    def checked(self, flag: bool = True) -> Element:
        return self.set_boolean_attribute("checked", flag)

    def set_data_attribute(self, key: str, value: str) -> Element:
        return self.set_attribute(DATA_PREFIX + key, value)

    def get_data_attribute(self, key: str) -> Optional[str]:
        return self.get_attribute(DATA_PREFIX + key)

    def remove_data_attribute(self, key: str) -> Element:
        return self.remove_attribute(DATA_PREFIX + key)

    def set_aria_attribute(self, key: str, value: str) -> Element:
        return self.set_attribute(ARIA_PREFIX + key, value)

    def get_aria_attribute(self, key: str) -> Optional[str]:
        return self.get_attribute(ARIA_PREFIX + key)

    def remove_aria_attribute(self, key: str) -> Element:
        return self.remove_attribute(ARIA_PREFIX + key)

    # Classes.

    def set_class(self, *tokens: ClassInput) -> Element:
        self._classes = ClassSet(*tokens)
        return self

    def add_class(self, *tokens: ClassInput) -> Element:
        self._classes.merge(*tokens)
        return self

    def remove_class(self, *tokens: str) -> Element:
        for token in tokens:
            self._classes.remove(token)
        return self

    def toggle_class(self, *tokens: str) -> Element:
        for token in tokens:
            self._classes.toggle(token)
        return self

    # Rendering.

    def _create_native(self, document: Document) -> Tag:
        element = document.create_element(self._name)
        for name, value in self.iter_attributes():
            element[name] = str(value)
        # The ClassSet is the only source of the class attribute.
        if self._classes:
            element[CLASS_ATTR] = str(self._classes)
        return element

    def to_dom(self, document: Optional[Document] = None) -> Rendered:
        """Build the native subtree.

        Nested elements are walked with an explicit stack, so nesting depth is
        not bounded by the interpreter's recursion limit.
        """
        document = document if document is not None else Document()
        root = self._create_native(document)
        pending: List[Tuple[Element, Tag]] = [(self, root)]
        while pending:
            source, native = pending.pop()
            if source.is_void():
                continue
            for child in source._children:
                if isinstance(child, Element):
                    child_native = child._create_native(document)
                    native.append(child_native)
                    pending.append((child, child_native))
                else:
                    native.append(document.adopt(child.to_dom(document)))
        return Rendered(root, document)


__all__ = ["AttributeItems", "Element"]
