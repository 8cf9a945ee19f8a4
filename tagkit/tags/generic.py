"""Element whose tag name is chosen at runtime."""

from __future__ import annotations

from typing import Any

from ..capabilities import HasContent, HasValue
from ..element import Element
from ..serializer import Category, begin_tag, category_for, end_tag
from ..values import member_value


class Tag(HasContent, HasValue, Element):
    """Any HTML tag; the category follows the tag name.

    Rendering without a tag name raises ``InvalidArgumentError``.
    """

    def tag_name(self, value: Any):
        name = str(member_value(value)).strip().lower()
        category = category_for(name) if name else Category.BLOCK
        return self._clone(tag_name=name, category=category)

    def type(self, value: Any):
        return self._set("type", value)

    def begin(self) -> str:
        """Opening tag of a block tag name; inline and void names raise."""

        return begin_tag(self._tag_name, self._render_attributes(), self._category) + "\n"

    def end(self) -> str:
        return "\n" + end_tag(self._tag_name, self._category)


__all__ = ["Tag"]
