"""Flow content and sectioning elements."""

from __future__ import annotations

from ..element import BlockElement, VoidElement


class Div(BlockElement):
    html_tag = "div"


class P(BlockElement):
    html_tag = "p"


class Hr(VoidElement):
    html_tag = "hr"


class Main(BlockElement):
    html_tag = "main"


class Header(BlockElement):
    html_tag = "header"


class Footer(BlockElement):
    html_tag = "footer"


class Nav(BlockElement):
    html_tag = "nav"


class Section(BlockElement):
    html_tag = "section"


class Article(BlockElement):
    html_tag = "article"


class Aside(BlockElement):
    html_tag = "aside"


__all__ = [
    "Article",
    "Aside",
    "Div",
    "Footer",
    "Header",
    "Hr",
    "Main",
    "Nav",
    "P",
    "Section",
]
