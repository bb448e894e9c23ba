"""Factory functions for common HTML elements.

Each function returns a new `Element`. Container helpers take children
positionally; helpers for tags with a required attribute take it first.
Names that clash with Python keywords or builtins end with an underscore
(`del_`, `input_`, `map_`, `object_`).
"""

from __future__ import annotations

from typing import Callable, Optional, Union

from .element import Element
from .html_class import ClassSet
from .nodes import Child

ContainerFactory = Callable[..., Element]
VoidFactory = Callable[[], Element]


def _container(name: str) -> ContainerFactory:
    def make(*children: Child) -> Element:
        return Element(name, *children)

    make.__name__ = make.__qualname__ = name
    make.__doc__ = f"Create a <{name}> element holding `children`."
    return make


def _void(name: str) -> VoidFactory:
    def make() -> Element:
        return Element(name)

    make.__name__ = make.__qualname__ = name
    make.__doc__ = f"Create an empty <{name}> element."
    return make


def _set_optional(element: Element, name: str, value: Optional[Union[str, int]]) -> Element:
    if value is not None:
        element.set_attribute(name, str(value))
    return element


# Document metadata.
head = _container("head")
title = _container("title")
meta = _void("meta")
style = _container("style")


def base(href: str, target: str) -> Element:
    return Element("base").set_attribute("href", href).set_attribute("target", target)


def link(rel: str, href: str) -> Element:
    return Element("link").set_attribute("rel", rel).set_attribute("href", href)


# Sectioning.
body = _container("body")
address = _container("address")
article = _container("article")
aside = _container("aside")
footer = _container("footer")
header = _container("header")
h1 = _container("h1")
h2 = _container("h2")
h3 = _container("h3")
h4 = _container("h4")
h5 = _container("h5")
h6 = _container("h6")
main = _container("main")
nav = _container("nav")
section = _container("section")

# Text content.
blockquote = _container("blockquote")
dd = _container("dd")
dl = _container("dl")
dt = _container("dt")
figcaption = _container("figcaption")
figure = _container("figure")
hr = _void("hr")
li = _container("li")
menu = _container("menu")
ol = _container("ol")
p = _container("p")
pre = _container("pre")
ul = _container("ul")


def div(cl: Optional[Union[str, ClassSet]] = None, *children: Child) -> Element:
    """Create a <div>; the first argument is its class list, not a child."""
    element = Element("div", *children)
    if cl:
        element.add_class(cl)
    return element


# Inline text semantics.
abbr = _container("abbr")
b = _container("b")
bdi = _container("bdi")
bdo = _container("bdo")
br = _void("br")
cite = _container("cite")
code = _container("code")
data = _container("data")
dfn = _container("dfn")
em = _container("em")
i = _container("i")
kbd = _container("kbd")
mark = _container("mark")
q = _container("q")
rp = _container("rp")
rt = _container("rt")
ruby = _container("ruby")
s = _container("s")
samp = _container("samp")
small = _container("small")
span = _container("span")
strong = _container("strong")
sub = _container("sub")
sup = _container("sup")
time = _container("time")
u = _container("u")
var = _container("var")
wbr = _void("wbr")


def a(href: str, *children: Child) -> Element:
    return Element("a", *children).set_attribute("href", href)


# Images and media.
area = _void("area")
audio = _container("audio")
map_ = _container("map")
track = _void("track")
video = _container("video")


def img(src: str, alt: Optional[str] = None, width: Optional[int] = None, height: Optional[int] = None) -> Element:
    element = Element("img").set_attribute("src", src)
    _set_optional(element, "alt", alt)
    _set_optional(element, "width", width)
    return _set_optional(element, "height", height)


# Embedded content.
iframe = _container("iframe")
object_ = _container("object")
picture = _container("picture")
portal = _container("portal")


def embed(src: str, type: Optional[str] = None, width: Optional[int] = None, height: Optional[int] = None) -> Element:
    element = Element("embed").set_attribute("src", src)
    _set_optional(element, "type", type)
    _set_optional(element, "width", width)
    return _set_optional(element, "height", height)


def source(src: str, type: Optional[str] = None) -> Element:
    return _set_optional(Element("source").set_attribute("src", src), "type", type)


# Scripting.
noscript = _container("noscript")
script = _container("script")

# Edits.
del_ = _container("del")
ins = _container("ins")

# Tables.
caption = _container("caption")
col = _void("col")
colgroup = _container("colgroup")
table = _container("table")
tbody = _container("tbody")
td = _container("td")
tfoot = _container("tfoot")
th = _container("th")
thead = _container("thead")
tr = _container("tr")

# Forms.
button = _container("button")
datalist = _container("datalist")
fieldset = _container("fieldset")
form = _container("form")
label = _container("label")
legend = _container("legend")
meter = _container("meter")
optgroup = _container("optgroup")
option = _container("option")
output = _container("output")
progress = _container("progress")
select = _container("select")
textarea = _container("textarea")


def input_(type: str = "text") -> Element:
    return Element("input").set_attribute("type", type)


# Interactive elements and web components.
details = _container("details")
dialog = _container("dialog")
summary = _container("summary")
slot = _container("slot")
template = _container("template")
