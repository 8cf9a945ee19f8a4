from __future__ import annotations

from ..element import BlockElement


class H1(BlockElement):
    html_tag = "h1"


class H2(BlockElement):
    html_tag = "h2"


class H3(BlockElement):
    html_tag = "h3"


class H4(BlockElement):
    html_tag = "h4"


class H5(BlockElement):
    html_tag = "h5"


class H6(BlockElement):
    html_tag = "h6"


class HGroup(BlockElement):
    html_tag = "hgroup"


__all__ = ["H1", "H2", "H3", "H4", "H5", "H6", "HGroup"]
