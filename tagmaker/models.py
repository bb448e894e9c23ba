"""Pydantic models for render options and node-tree documents."""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .element import Element
from .multi import MultiWrap
from .nodes import Node, RawTextNode, TextNode


class RenderOptions(BaseModel):
    """How a renderer lays out its output."""

    format_output: bool = Field(
        False,
        alias="formatOutput",
        description="Indent nested elements and put them on separate lines.",
    )
    indent: int = Field(
        2, ge=0, description="Spaces per nesting level when formatting output."
    )

    model_config = ConfigDict(populate_by_name=True)


class TextSpec(BaseModel):
    """Escaped text."""

    kind: Literal["text"] = "text"
    text: str = Field(..., description="Text content; markup characters are escaped.")

    def to_node(self) -> Node:
        return TextNode(self.text)


class RawTextSpec(BaseModel):
    """Text emitted unescaped inside a CDATA section."""

    kind: Literal["raw"] = "raw"
    text: str = Field(..., description="Content written verbatim.")

    def to_node(self) -> Node:
        return RawTextNode(self.text)


def _normalize_child(value: Any) -> Any:
    # Bare strings and numbers are text; mappings without a kind are elements.
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return {"kind": "text", "text": str(value)}
    if isinstance(value, dict) and "kind" not in value:
        return {"kind": "element", **value}
    return value


def _normalize_children(value: Any) -> Any:
    if isinstance(value, (str, dict)):
        value = [value]
    if isinstance(value, list):
        return [_normalize_child(item) for item in value]
    return value


class ElementSpec(BaseModel):
    """An element with its attributes and children."""

    kind: Literal["element"] = "element"
    tag: str = Field(..., description="Tag name, e.g. div.")
    id: Optional[str] = Field(None, description="Value of the id attribute.")
    classes: List[str] = Field(
        default_factory=list,
        description="Class tokens; a single string is split on whitespace.",
    )
    attrs: Dict[str, str] = Field(
        default_factory=dict, description="Generic attributes, in output order."
    )
    data: Dict[str, str] = Field(
        default_factory=dict, description="data-* attributes, keyed without the prefix."
    )
    aria: Dict[str, str] = Field(
        default_factory=dict, description="aria-* attributes, keyed without the prefix."
    )
    flags: List[str] = Field(
        default_factory=list,
        description="Boolean attributes rendered as name=\"name\" (e.g. disabled).",
    )
    children: List["NodeSpec"] = Field(
        default_factory=list, description="Child nodes, in order."
    )

    model_config = ConfigDict(coerce_numbers_to_str=True)

    @field_validator("classes", mode="before")
    @classmethod
    def _split_classes(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.split()
        return value

    @field_validator("children", mode="before")
    @classmethod
    def _coerce_children(cls, value: Any) -> Any:
        return _normalize_children(value)

    def to_node(self) -> Node:
        element = Element(self.tag, *(child.to_node() for child in self.children))
        if self.id is not None:
            element.set_id(self.id)
        for name, value in self.attrs.items():
            element.set_attribute(name, value)
        for key, value in self.data.items():
            element.set_data_attribute(key, value)
        for key, value in self.aria.items():
            element.set_aria_attribute(key, value)
        for flag in self.flags:
            element.set_boolean_attribute(flag)
        if self.classes:
            element.set_class(*self.classes)
        return element


class WrapSpec(BaseModel):
    """A chain of nested tags around shared children."""

    kind: Literal["wrap"] = "wrap"
    tags: List[str] = Field(
        default_factory=list, description="Tag names, outermost first."
    )
    children: List["NodeSpec"] = Field(
        default_factory=list, description="Content of the innermost tag."
    )

    @field_validator("children", mode="before")
    @classmethod
    def _coerce_children(cls, value: Any) -> Any:
        return _normalize_children(value)

    def to_node(self) -> Node:
        return MultiWrap(self.tags, *(child.to_node() for child in self.children))


NodeSpec = Annotated[
    Union[TextSpec, RawTextSpec, ElementSpec, WrapSpec],
    Field(discriminator="kind"),
]

ElementSpec.model_rebuild()
WrapSpec.model_rebuild()


class TreeDocument(BaseModel):
    """Root of a node-tree file."""

    root: NodeSpec

    @field_validator("root", mode="before")
    @classmethod
    def _coerce_root(cls, value: Any) -> Any:
        return _normalize_child(value)


AnySpec = Union[TextSpec, RawTextSpec, ElementSpec, WrapSpec]


def parse_tree(data: Any) -> AnySpec:
    """Validate raw tree data (a mapping or a string) and return its root spec."""
    return TreeDocument.model_validate({"root": data}).root


def load_tree(data: Any) -> Node:
    """Validate raw tree data and build the nodes it describes."""
    return parse_tree(data).to_node()


def count_elements(spec: AnySpec) -> int:
    """Count the element specs in a tree, wrap levels included."""
    if isinstance(spec, ElementSpec):
        return 1 + sum(count_elements(child) for child in spec.children)
    if isinstance(spec, WrapSpec):
        return len(spec.tags) + sum(count_elements(child) for child in spec.children)
    return 0


__all__ = [
    "AnySpec",
    "ElementSpec",
    "NodeSpec",
    "RawTextSpec",
    "RenderOptions",
    "TextSpec",
    "TreeDocument",
    "WrapSpec",
    "count_elements",
    "load_tree",
    "parse_tree",
]
