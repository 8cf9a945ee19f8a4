"""Embedded content."""

from __future__ import annotations

from typing import Any

from ..capabilities import HasDimensions
from ..element import VoidElement


class Img(HasDimensions, VoidElement):
    html_tag = "img"

    def alt(self, value: Any):
        return self._set("alt", value)

    def crossorigin(self, value: Any):
        return self._set("crossorigin", value)

    def decoding(self, value: Any):
        return self._set("decoding", value)

    def elementtiming(self, value: Any):
        return self._set("elementtiming", value)

    def fetchpriority(self, value: Any):
        return self._set("fetchpriority", value)

    def ismap(self, value: bool = True):
        return self._set("ismap", value)

    def loading(self, value: Any):
        return self._set("loading", value)

    def referrerpolicy(self, value: Any):
        return self._set("referrerpolicy", value)

    def sizes(self, value: Any):
        return self._set("sizes", value)

    def src(self, value: Any):
        return self._set("src", value)

    def srcset(self, value: Any):
        return self._set("srcset", value)

    def usemap(self, value: Any):
        return self._set("usemap", value)


__all__ = ["Img"]
