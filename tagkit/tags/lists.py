"""List elements."""

from __future__ import annotations

from typing import Any, Iterable

from ..capabilities import HasValue
from ..element import BlockElement


class Li(HasValue, BlockElement):
    html_tag = "li"
    value_kind = "numeric"


class _ItemList(BlockElement):
    """List whose ``<li>`` children can be appended one by one."""

    def _append(self, item: Li):
        separator = ("\n",) if self._content else ()
        return self._clone(content=self._content + separator + (item,))

    def li(self, content: Any, value: Any = None):
        item = Li.tag().content(content)
        if value is not None:
            item = item.value(value)
        return self._append(item)

    def items(self, *items: Any):
        new = self
        for item in items:
            new = new._append(item) if isinstance(item, Li) else new.li(item)
        return new


class Ul(_ItemList):
    html_tag = "ul"


class Ol(_ItemList):
    html_tag = "ol"

    def reversed(self, value: bool = True):
        return self._set("reversed", value)

    def start(self, value: Any):
        return self._set("start", value)

    def type(self, value: Any):
        return self._set("type", value)


class Dl(BlockElement):
    html_tag = "dl"

    def term(self, term: Any, definitions: Iterable[Any] = ()):
        """Append a ``<dt>`` followed by one ``<dd>`` per definition."""

        parts = [Dt.tag().content(term)]
        parts.extend(Dd.tag().content(definition) for definition in definitions)
        content = list(self._content)
        for part in parts:
            if content:
                content.append("\n")
            content.append(part)
        return self._clone(content=tuple(content))


class Dt(BlockElement):
    html_tag = "dt"


class Dd(BlockElement):
    html_tag = "dd"


__all__ = ["Dd", "Dl", "Dt", "Li", "Ol", "Ul"]
