"""Serialization of tags and attribute sets to HTML strings."""

from __future__ import annotations

import html
from enum import Enum
from typing import List, Mapping

from .attributes import AttributeSet, Flag, Scalar
from .errors import InvalidArgumentError, Message


class Category(str, Enum):
    BLOCK = "block"
    INLINE = "inline"
    VOID = "void"


INLINE_TAGS = frozenset(
    {
        "a", "abbr", "acronym", "audio", "b", "bdi", "bdo", "big", "br", "button",
        "canvas", "cite", "code", "data", "datalist", "del", "dfn", "em", "embed",
        "i", "iframe", "img", "input", "ins", "kbd", "label", "map", "mark", "meter",
        "noscript", "object", "option", "output", "picture", "progress", "q", "ruby",
        "s", "samp", "script", "select", "slot", "small", "span", "strong", "sub",
        "sup", "svg", "template", "textarea", "time", "u", "td", "th", "tt", "var",
        "video", "wbr",
    }
)

VOID_TAGS = frozenset(
    {
        "area", "base", "br", "col", "command", "embed", "hr", "img", "input",
        "keygen", "link", "meta", "param", "source", "track", "wbr",
    }
)

# Attributes quoted with single quotes instead of double quotes.
SINGLE_QUOTED = frozenset({"style"})


def _normalize_tag(tag: str) -> str:
    name = tag.strip().lower()
    if not name:
        raise InvalidArgumentError(Message.TAG_NAME_EMPTY.value)
    return name


def category_for(tag: str) -> Category:
    name = _normalize_tag(tag)
    if name in VOID_TAGS:
        return Category.VOID
    if name in INLINE_TAGS:
        return Category.INLINE
    return Category.BLOCK


def render_attributes(attributes: AttributeSet | Mapping[str, object] | None) -> str:
    """Render attributes in alphabetical order, without a leading space."""

    if attributes is None:
        return ""
    if not isinstance(attributes, AttributeSet):
        attributes = AttributeSet(attributes)
    parts: List[str] = []
    for name, value in sorted(attributes.resolved().items()):
        if isinstance(value, Flag):
            parts.append(name)
        elif isinstance(value, Scalar):
            escaped = html.escape(value.text, quote=True)
            if name in SINGLE_QUOTED:
                parts.append(f"{name}='{escaped}'")
            else:
                parts.append(f'{name}="{escaped}"')
    return " ".join(parts)


def _open(tag: str, attributes: AttributeSet | Mapping[str, object] | None) -> str:
    rendered = render_attributes(attributes)
    return f"<{tag} {rendered}>" if rendered else f"<{tag}>"


def create_tag(
    tag: str,
    content: str = "",
    attributes: AttributeSet | Mapping[str, object] | None = None,
    category: Category | str | None = None,
) -> str:
    """Serialize one element; ``content`` is inserted as given."""

    name = _normalize_tag(tag)
    kind = Category(category) if category is not None else category_for(name)
    opening = _open(name, attributes)
    if kind is Category.VOID:
        return opening
    if kind is Category.INLINE:
        return f"{opening}{content}</{name}>"
    body = f"{content}\n" if content != "" else ""
    return f"{opening}\n{body}</{name}>"


def _ensure_block(name: str, category: Category | str | None) -> None:
    kind = Category(category) if category is not None else category_for(name)
    if kind is not Category.BLOCK:
        raise InvalidArgumentError(Message.INLINE_BEGIN_END.value)


def begin_tag(
    tag: str,
    attributes: AttributeSet | Mapping[str, object] | None = None,
    category: Category | str | None = None,
) -> str:
    name = _normalize_tag(tag)
    _ensure_block(name, category)
    return _open(name, attributes)


def end_tag(tag: str, category: Category | str | None = None) -> str:
    name = _normalize_tag(tag)
    _ensure_block(name, category)
    return f"</{name}>"


__all__ = [
    "Category",
    "INLINE_TAGS",
    "SINGLE_QUOTED",
    "VOID_TAGS",
    "begin_tag",
    "category_for",
    "create_tag",
    "end_tag",
    "render_attributes",
]
