"""Document metadata and scripting elements."""

from __future__ import annotations

from typing import Any

from ..capabilities import HasHref
from ..element import BlockElement, VoidElement


class Base(VoidElement):
    html_tag = "base"

    def href(self, value: Any):
        return self._set("href", value)

    def target(self, value: Any):
        return self._set("target", value)


class Link(HasHref, VoidElement):
    html_tag = "link"

    def as_(self, value: Any):
        return self._set("as", value)

    def crossorigin(self, value: Any):
        return self._set("crossorigin", value)

    def fetchpriority(self, value: Any):
        return self._set("fetchpriority", value)

    def integrity(self, value: Any):
        return self._set("integrity", value)

    def media(self, value: Any):
        return self._set("media", value)

    def sizes(self, value: Any):
        return self._set("sizes", value)


class Meta(VoidElement):
    html_tag = "meta"

    def charset(self, value: Any):
        return self._set("charset", value)

    def content(self, value: Any):
        """Set the ``content`` attribute; ``<meta>`` has no body."""

        return self._set("content", value)

    def http_equiv(self, value: Any):
        return self._set("http-equiv", value)

    def media(self, value: Any):
        return self._set("media", value)

    def name(self, value: Any):
        return self._set("name", value)


class NoScript(BlockElement):
    html_tag = "noscript"


class Script(BlockElement):
    html_tag = "script"

    def async_(self, value: bool = True):
        return self._set("async", value)

    def crossorigin(self, value: Any):
        return self._set("crossorigin", value)

    def defer(self, value: bool = True):
        return self._set("defer", value)

    def fetchpriority(self, value: Any):
        return self._set("fetchpriority", value)

    def integrity(self, value: Any):
        return self._set("integrity", value)

    def nomodule(self, value: bool = True):
        return self._set("nomodule", value)

    def referrerpolicy(self, value: Any):
        return self._set("referrerpolicy", value)

    def src(self, value: Any):
        return self._set("src", value)

    def type(self, value: Any):
        return self._set("type", value)


class Style(BlockElement):
    html_tag = "style"

    def blocking(self, value: Any):
        return self._set("blocking", value)

    def media(self, value: Any):
        return self._set("media", value)


class Template(BlockElement):
    html_tag = "template"

    def shadowrootclonable(self, value: bool = True):
        return self._set("shadowrootclonable", value)

    def shadowrootdelegatesfocus(self, value: bool = True):
        return self._set("shadowrootdelegatesfocus", value)

    def shadowrootmode(self, value: Any):
        return self._set("shadowrootmode", value)

    def shadowrootserializable(self, value: bool = True):
        return self._set("shadowrootserializable", value)


class Title(BlockElement):
    html_tag = "title"


__all__ = [
    "Base",
    "Link",
    "Meta",
    "NoScript",
    "Script",
    "Style",
    "Template",
    "Title",
]
