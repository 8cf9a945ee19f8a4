"""Document structure elements."""

from __future__ import annotations

from ..element import BlockElement


class Html(BlockElement):
    html_tag = "html"

    def xmlns(self, value):
        return self._set("xmlns", value)


class Head(BlockElement):
    html_tag = "head"


class Body(BlockElement):
    html_tag = "body"


__all__ = ["Body", "Head", "Html"]
