import pytest
from pydantic import ValidationError

from tagmaker.element import Element
from tagmaker.models import ElementSpec, RenderOptions, TextSpec, WrapSpec, count_elements, load_tree, parse_tree
from tagmaker.multi import MultiWrap
from tagmaker.nodes import RawTextNode, TextNode, VoidElementError
from tagmaker.renderer import Renderer


def test_render_options_accept_alias_and_name() -> None:
    assert RenderOptions.model_validate({"formatOutput": True}).format_output is True
    assert RenderOptions(format_output=True, indent=0).indent == 0
    assert RenderOptions().format_output is False


def test_render_options_reject_negative_indent() -> None:
    with pytest.raises(ValidationError):
        RenderOptions(indent=-1)


def test_shorthand_children_are_normalized() -> None:
    spec = parse_tree(
        {
            "tag": "ul",
            "classes": "list  compact",
            "children": [{"tag": "li", "children": "One"}, {"tag": "li", "children": [2]}],
        }
    )
    assert isinstance(spec, ElementSpec)
    assert spec.classes == ["list", "compact"]
    first, second = spec.children
    assert isinstance(first, ElementSpec)
    assert first.children == [TextSpec(text="One")]
    assert isinstance(second, ElementSpec)
    assert second.children == [TextSpec(text="2")]


def test_load_tree_builds_nodes() -> None:
    node = load_tree(
        {
            "tag": "input",
            "id": "subscribe",
            "attrs": {"type": "checkbox", "tabindex": 3},
            "data": {"item-id": "A123"},
            "aria": {"label": "Subscribe"},
            "flags": ["checked", "disabled"],
        }
    )
    assert isinstance(node, Element)
    assert Renderer.build(node) == (
        '<input id="subscribe" type="checkbox" tabindex="3" data-item-id="A123" '
        'aria-label="Subscribe" checked="checked" disabled="disabled">'
    )


def test_load_tree_handles_every_kind() -> None:
    node = load_tree(
        {
            "tag": "div",
            "children": [
                {"kind": "text", "text": "a < b"},
                {"kind": "raw", "text": "a < b"},
                {"kind": "wrap", "tags": ["p", "strong"], "children": ["deep"]},
            ],
        }
    )
    assert isinstance(node, Element)
    text, raw, wrap = node.children
    assert text == TextNode("a < b")
    assert raw == RawTextNode("a < b")
    assert isinstance(wrap, MultiWrap)
    assert Renderer.build(node) == "<div>a &lt; b<![CDATA[a < b]]><p><strong>deep</strong></p></div>"


def test_root_may_be_a_string() -> None:
    assert load_tree("just text") == TextNode("just text")


def test_unknown_kind_is_rejected() -> None:
    with pytest.raises(ValidationError):
        parse_tree({"kind": "comment", "text": "x"})


def test_missing_tag_is_rejected() -> None:
    with pytest.raises(ValidationError):
        parse_tree({"children": ["x"]})


def test_void_element_with_children_fails_when_built() -> None:
    spec = parse_tree({"tag": "br", "children": ["x"]})
    with pytest.raises(VoidElementError):
        spec.to_node()


def test_count_elements() -> None:
    spec = parse_tree(
        {
            "tag": "div",
            "children": [
                "text",
                {"tag": "p", "children": [{"tag": "em"}]},
                {"kind": "wrap", "tags": ["section", "article"], "children": [{"tag": "b"}]},
            ],
        }
    )
    assert count_elements(spec) == 6
    assert count_elements(TextSpec(text="x")) == 0
    assert count_elements(WrapSpec(tags=[])) == 0
