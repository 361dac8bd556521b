"""A tiny HTML construction DSL used by every jless site page.

``html_elem`` serializes a single element straight to a string; there is no
DOM and no validation of nested markup. Attribute values are escaped, content
is embedded verbatim, so callers compose fragments by nesting calls:

>>> from jless_site.html_dsl import a, li, ul
>>> ul(render=lambda: li(a("docs", href="./user-guide.html")))
'<ul><li><a href="./user-guide.html">docs</a></li></ul>'

Elements given no content at all serialize in self-closing form, which is
what image tags rely on:

>>> from jless_site.html_dsl import img
>>> img(src="/logo.svg")
'<img src="/logo.svg" />'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from html import escape

if typ.TYPE_CHECKING:
    import collections.abc as cabc

AttrValue = str | bool | None

# ``class`` is a keyword, so keyword callers spell it one of these ways.
_CLASS_ALIASES = frozenset({"klass", "class_"})

TAG_CATALOG: tuple[str, ...] = (
    "h1",
    "h2",
    "h3",
    "h4",
    "div",
    "span",
    "p",
    "a",
    "img",
    "ul",
    "li",
    "code",
    "table",
    "thead",
    "tbody",
    "th",
    "td",
    "tr",
)


@dc.dataclass(frozen=True, slots=True)
class Text:
    """Explicit element content."""

    value: str


@dc.dataclass(frozen=True, slots=True)
class Deferred:
    """Content produced by a zero-argument callable at render time."""

    render: cabc.Callable[[], str]


Content = Text | Deferred | None


def _select_content(
    content: str | None, render: cabc.Callable[[], str] | None
) -> Content:
    """Pick the content source; an explicit string beats a callable."""
    if content is not None:
        return Text(content)
    if render is not None:
        return Deferred(render)
    return None


def _resolve_content(content: Content) -> str | None:
    match content:
        case Text(value=value):
            return value
        case Deferred(render=render):
            return render()
        case _:
            return None


def _render_attributes(attributes: cabc.Iterable[tuple[str, AttrValue]]) -> str:
    parts: list[str] = []
    for name, value in attributes:
        if value is None or value is False:
            continue
        key = "class" if name in _CLASS_ALIASES else name
        if value is True:
            parts.append(f" {key}")
        else:
            parts.append(f' {key}="{escape(str(value), quote=True)}"')
    return "".join(parts)


def html_elem(
    tag: str,
    content: str | None = None,
    /,
    *,
    render: cabc.Callable[[], str] | None = None,
    attrs: cabc.Mapping[str, AttrValue] | None = None,
    **attributes: AttrValue,
) -> str:
    """Serialize one element into an HTML fragment.

    Parameters
    ----------
    tag : str
        Element name, emitted as-is.
    content : str, optional
        Inner markup, embedded verbatim. Takes precedence over ``render``.
    render : callable, optional
        Zero-argument callable returning inner markup; invoked exactly once
        when ``content`` is not supplied.
    attrs : Mapping[str, str | bool | None], optional
        Attributes whose names are not valid Python identifiers (for example
        ``data-language``). Serialized before ``attributes``.
    **attributes : str | bool | None
        Attributes in serialization order. ``None`` and ``False`` are
        omitted, ``True`` renders a bare attribute name, and ``klass`` or
        ``class_`` render as ``class``.

    Returns
    -------
    str
        ``<tag ...>content</tag>`` when any content source was supplied,
        even if it resolves to ``""``; ``<tag ... />`` otherwise.
    """
    ordered = list((attrs or {}).items()) + list(attributes.items())
    opening = f"<{tag}{_render_attributes(ordered)}"
    body = _resolve_content(_select_content(content, render))
    if body is None:
        return f"{opening} />"
    return f"{opening}>{body}</{tag}>"


class ElementConstructor(typ.Protocol):
    """Call signature shared by the shorthand constructors."""

    def __call__(
        self,
        content: str | None = None,
        /,
        *,
        render: cabc.Callable[[], str] | None = None,
        attrs: cabc.Mapping[str, AttrValue] | None = None,
        **attributes: AttrValue,
    ) -> str: ...


def _shorthand(tag: str) -> ElementConstructor:
    def constructor(
        content: str | None = None,
        /,
        *,
        render: cabc.Callable[[], str] | None = None,
        attrs: cabc.Mapping[str, AttrValue] | None = None,
        **attributes: AttrValue,
    ) -> str:
        return html_elem(tag, content, render=render, attrs=attrs, **attributes)

    constructor.__name__ = constructor.__qualname__ = tag
    constructor.__doc__ = f"Render a ``<{tag}>`` element via :func:`html_elem`."
    return constructor


SHORTHANDS: dict[str, ElementConstructor] = {tag: _shorthand(tag) for tag in TAG_CATALOG}

h1 = SHORTHANDS["h1"]
h2 = SHORTHANDS["h2"]
h3 = SHORTHANDS["h3"]
h4 = SHORTHANDS["h4"]
div = SHORTHANDS["div"]
span = SHORTHANDS["span"]
p = SHORTHANDS["p"]
a = SHORTHANDS["a"]
img = SHORTHANDS["img"]
ul = SHORTHANDS["ul"]
li = SHORTHANDS["li"]
code = SHORTHANDS["code"]
table = SHORTHANDS["table"]
thead = SHORTHANDS["thead"]
tbody = SHORTHANDS["tbody"]
th = SHORTHANDS["th"]
td = SHORTHANDS["td"]
tr = SHORTHANDS["tr"]

__all__ = [
    "SHORTHANDS",
    "TAG_CATALOG",
    "AttrValue",
    "Content",
    "Deferred",
    "ElementConstructor",
    "Text",
    "a",
    "code",
    "div",
    "h1",
    "h2",
    "h3",
    "h4",
    "html_elem",
    "img",
    "li",
    "p",
    "span",
    "table",
    "tbody",
    "td",
    "th",
    "thead",
    "tr",
    "ul",
]
