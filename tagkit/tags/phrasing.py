"""Phrasing content."""

from __future__ import annotations

from typing import Any

from ..capabilities import HasHref
from ..element import InlineElement


class A(HasHref, InlineElement):
    html_tag = "a"


class I(InlineElement):  # noqa: E742
    html_tag = "i"


class Span(InlineElement):
    html_tag = "span"


class Label(InlineElement):
    html_tag = "label"

    def for_(self, value: Any):
        return self._set("for", value)


class Strong(InlineElement):
    html_tag = "strong"


class Em(InlineElement):
    html_tag = "em"


class Small(InlineElement):
    html_tag = "small"


__all__ = ["A", "Em", "I", "Label", "Small", "Span", "Strong"]
