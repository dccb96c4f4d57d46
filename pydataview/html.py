"""HTML tag building and escaping helpers.

Every piece of markup produced by pydataview goes through :func:`tag`, so the
column renderers only decide *whether* content is encoded, never *how*.

Objects exposing ``__html__`` (for example ``markupsafe.Markup``) are treated
as already-safe markup when a tag is rendered with ``encode=None``.
"""

from __future__ import annotations

import html
import json
import re

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import EmptyTagNameError


VOID_ELEMENTS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}
)

# Named, decimal and hex character references left alone when double_encode is off.
_ENTITY_PATTERN = re.compile(r"&(?:[a-zA-Z][a-zA-Z0-9]*|#[0-9]+|#[xX][0-9a-fA-F]+);")


def encode(content: object, double_encode: bool = True) -> str:
    """Escape special HTML characters in content.

    Parameters
    ----------
    content : object
        Value to escape. Converted with ``str()``.
    double_encode : bool
        When False, existing character references such as ``&amp;`` are kept.

    Returns
    -------
    str
        The escaped text.
    """
    text = str(content)
    if double_encode:
        return html.escape(text, quote=True)

    parts: list[str] = []
    position = 0
    for match in _ENTITY_PATTERN.finditer(text):
        parts.append(html.escape(text[position : match.start()], quote=True))
        parts.append(match.group(0))
        position = match.end()
    parts.append(html.escape(text[position:], quote=True))
    return "".join(parts)


def is_safe(content: object) -> bool:
    """Return True if content declares itself as trusted markup."""
    return hasattr(content, "__html__")


def add_css_class(attributes: Mapping[str, Any], *classes: str | None) -> dict[str, Any]:
    """Return a copy of attributes with CSS classes appended.

    ``None`` and empty class names are ignored, and a class already present is
    not added twice.
    """
    result = dict(attributes)
    current = result.get("class")
    if current is None:
        existing: list[str] = []
    elif isinstance(current, str):
        existing = current.split()
    else:
        existing = [str(item) for item in current if item]

    changed = False
    for name in classes:
        if not name:
            continue
        for item in name.split():
            if item not in existing:
                existing.append(item)
                changed = True

    if changed or current is not None:
        result["class"] = " ".join(existing)
    return result


def render_attributes(attributes: Mapping[str, Any]) -> str:
    """Render a mapping of attributes to an HTML attribute string.

    - ``None`` and ``False`` values drop the attribute
    - ``True`` renders a bare boolean attribute
    - lists for ``class`` are joined by spaces, other lists and dicts are JSON
    - dict values for ``data``/``aria`` expand to ``data-*``/``aria-*``
    - callables are called without arguments and their result is rendered

    The result has a leading space when not empty.
    """
    rendered: list[str] = []
    for name, value in attributes.items():
        if callable(value):
            value = value()
        if value is None or value is False:
            continue
        if value is True:
            rendered.append(f" {encode(name)}")
            continue
        if name in {"data", "aria"} and isinstance(value, Mapping):
            for sub_name, sub_value in value.items():
                if sub_value is None or sub_value is False:
                    continue
                if not isinstance(sub_value, str):
                    sub_value = json.dumps(sub_value, ensure_ascii=False)
                rendered.append(f' {encode(name)}-{encode(sub_name)}="{encode(sub_value)}"')
            continue
        if isinstance(value, (list, tuple)):
            if name == "class":
                value = " ".join(str(item) for item in value if item)
            else:
                value = json.dumps(list(value), ensure_ascii=False)
        elif isinstance(value, Mapping):
            value = json.dumps(dict(value), ensure_ascii=False)
        rendered.append(f' {encode(name)}="{encode(value)}"')
    return "".join(rendered)


def render_content(
    content: Iterable[object],
    encode_mode: bool | None = None,
    double_encode: bool = True,
) -> str:
    """Join content items, escaping them according to the encode mode.

    Parameters
    ----------
    content : Iterable[object]
        Content items. Callables are called without arguments first.
    encode_mode : bool or None
        ``None`` escapes everything except objects with ``__html__``;
        ``True`` escapes everything; ``False`` escapes nothing.
    double_encode : bool
        Whether existing character references are encoded again.
    """
    parts: list[str] = []
    for item in content:
        if callable(item) and not is_safe(item):
            item = item()
        if encode_mode is False or (encode_mode is None and is_safe(item)):
            parts.append(str(item.__html__()) if is_safe(item) else str(item))
        else:
            parts.append(encode(item, double_encode))
    return "".join(parts)


def tag(
    name: str,
    content: object | Iterable[object] = "",
    attributes: Mapping[str, Any] | None = None,
    encode: bool | None = None,  # pylint: disable=redefined-outer-name
    double_encode: bool = True,
) -> str:
    """Build an HTML tag.

    Parameters
    ----------
    name : str
        The tag name, e.g. ``"td"``.
    content : object or sequence of objects
        A single content item, or a list or tuple of items to concatenate.
    attributes : Mapping[str, Any], optional
        Tag attributes, see :func:`render_attributes`.
    encode : bool or None
        Encode mode, see :func:`render_content`.
    double_encode : bool
        Whether existing character references are encoded again.

    Returns
    -------
    str
        The rendered tag.

    Raises
    ------
    EmptyTagNameError
        If ``name`` is empty.
    """
    if not name:
        raise EmptyTagNameError()
    attrs = render_attributes(attributes or {})
    if name.lower() in VOID_ELEMENTS:
        return f"<{name}{attrs}>"
    if not isinstance(content, (list, tuple)):
        content = [content]
    body = render_content(content, encode, double_encode)
    return f"<{name}{attrs}>{body}</{name}>"


def input_tag(input_type: str, name: str | None, value: object, attributes: Mapping[str, Any] | None = None) -> str:
    """Build an ``<input>`` tag, letting explicit attributes win over name/value."""
    attrs: dict[str, Any] = {"type": input_type}
    if name is not None:
        attrs["name"] = name
    if value is not None:
        attrs["value"] = value
    attrs.update(attributes or {})
    return tag("input", attributes=attrs)


def checkbox(name: str | None, value: object = None, attributes: Mapping[str, Any] | None = None) -> str:
    """Build a checkbox input."""
    return input_tag("checkbox", name, value, attributes)


def radio(name: str | None, value: object = None, attributes: Mapping[str, Any] | None = None) -> str:
    """Build a radio input."""
    return input_tag("radio", name, value, attributes)


class Anchor(BaseModel):
    """An ``<a>`` tag description produced before its label is known.

    Sortable headers compute the link URL and classes; the column renderer
    later fills in the label and renders it.
    """

    model_config = ConfigDict(frozen=True)

    url: str = "#"
    attributes: dict[str, Any] = Field(default_factory=dict)
    content: tuple[Any, ...] = ()
    encode: bool | None = None

    def with_content(self, *content: object) -> Anchor:
        """Return a copy with the given content."""
        return self.model_copy(update={"content": content})

    def with_encode(self, encode: bool | None) -> Anchor:  # pylint: disable=redefined-outer-name
        """Return a copy with the given encode mode."""
        return self.model_copy(update={"encode": encode})

    def with_url(self, url: str) -> Anchor:
        """Return a copy pointing to another URL."""
        return self.model_copy(update={"url": url})

    def add_class(self, *classes: str | None) -> Anchor:
        """Return a copy with CSS classes appended."""
        return self.model_copy(update={"attributes": add_css_class(self.attributes, *classes)})

    def render(self) -> str:
        """Render the anchor tag."""
        return tag("a", self.content, {**self.attributes, "href": self.url}, self.encode)

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.render()

