"""Attribute capabilities shared by element classes.

Each mixin adds fluent setters for one family of attributes. Setters never
mutate the receiver: they go through ``Element._set`` or ``Element._clone``,
both of which return a new instance.
"""

from __future__ import annotations

from typing import Any, ClassVar, Mapping

from markupsafe import escape

from .attributes import EMPTY, AttributeSet, append_class
from .values import member_value


def bool_word(value: Any, yes: str, no: str) -> Any:
    """Map booleans onto the keywords of an enumerated attribute."""

    if isinstance(value, bool):
        return yes if value else no
    return value


def prefixed(prefix: str, name: Any) -> str:
    key = str(member_value(name))
    return key if key.startswith(prefix) else f"{prefix}{key}"


def _evaluate(value: Any) -> Any:
    if callable(value) and not hasattr(value, "__html__"):
        return value()
    return value


class GlobalAttributes:
    """Attributes valid on every HTML element."""

    def accesskey(self, value: Any):
        return self._set("accesskey", value)

    def autocapitalize(self, value: Any):
        return self._set("autocapitalize", value)

    def autofocus(self, value: bool = True):
        return self._set("autofocus", value)

    def class_(self, value: Any, append: bool = False):
        """Set the CSS class; ``append=True`` adds to the classes already set."""

        if append and value is not None:
            merged = append_class(self._attributes.get("class"), value)
            return self._clone(attributes=self._attributes.with_value("class", merged))
        return self._set("class", value)

    def content_editable(self, value: Any):
        return self._set("contenteditable", bool_word(value, "true", "false"))

    def dir(self, value: Any):
        return self._set("dir", value)

    def draggable(self, value: Any):
        return self._set("draggable", bool_word(value, "true", "false"))

    def hidden(self, value: bool = True):
        return self._set("hidden", value)

    def id(self, value: Any):
        return self._set("id", value)

    def inert(self, value: bool = True):
        return self._set("inert", value)

    def lang(self, value: Any):
        return self._set("lang", value)

    def nonce(self, value: Any):
        return self._set("nonce", value)

    def popover(self, value: Any = True):
        return self._set("popover", value)

    def role(self, value: Any):
        return self._set("role", value)

    def spellcheck(self, value: Any):
        return self._set("spellcheck", bool_word(value, "true", "false"))

    def style(self, value: Any):
        return self._set("style", value)

    def tab_index(self, value: Any):
        return self._set("tabindex", value)

    def title(self, value: Any):
        return self._set("title", value)

    def translate(self, value: Any):
        return self._set("translate", bool_word(value, "yes", "no"))

    def item_id(self, value: Any):
        return self._set("itemid", value)

    def item_prop(self, value: Any):
        return self._set("itemprop", value)

    def item_ref(self, value: Any):
        return self._set("itemref", value)

    def item_scope(self, value: bool = True):
        return self._set("itemscope", value)

    def item_type(self, value: Any):
        return self._set("itemtype", value)


class AriaAttributes:
    """``aria-*`` helpers.

    Booleans render as ``"true"``/``"false"``; ``aria-describedby=True`` is
    resolved at render time against the element id.
    """

    describedby_suffix: ClassVar[str] = "help"
    _aria_suffix: str | None = None

    def add_aria_attribute(self, name: Any, value: Any):
        key = prefixed("aria-", name)
        value = _evaluate(value)
        if not (key == "aria-describedby" and value is True):
            value = bool_word(value, "true", "false")
        return self._clone(attributes=self._attributes.with_value(key, value))

    def aria_attributes(self, values: Mapping[Any, Any]):
        new = self
        for name, value in values.items():
            new = new.add_aria_attribute(name, value)
        return new

    def remove_aria_attribute(self, name: Any):
        return self._clone(attributes=self._attributes.without(prefixed("aria-", name)))

    def aria_describedby_suffix(self, suffix: str):
        return self._clone(aria_suffix=suffix)

    def _resolve_describedby(self, attributes: AttributeSet) -> AttributeSet:
        flag = attributes.as_dict().get("aria-describedby")
        if flag is not True and flag != "true":
            return attributes
        element_id = attributes.as_dict().get("id")
        if not isinstance(element_id, str) or element_id == "":
            return attributes.without("aria-describedby")
        suffix = self._aria_suffix or self.describedby_suffix
        return attributes.with_value("aria-describedby", f"{element_id}-{suffix}")


class DataAttributes:
    def add_data_attribute(self, name: Any, value: Any):
        value = bool_word(_evaluate(value), "true", "false")
        return self._clone(attributes=self._attributes.with_value(prefixed("data-", name), value))

    def data_attributes(self, values: Mapping[Any, Any]):
        new = self
        for name, value in values.items():
            new = new.add_data_attribute(name, value)
        return new

    def remove_data_attribute(self, name: Any):
        return self._clone(attributes=self._attributes.without(prefixed("data-", name)))


class EventAttributes:
    """Inline ``on*`` event handlers."""

    def add_event(self, event: Any, handler: Any):
        return self._clone(attributes=self._attributes.with_value(self._event_name(event), handler))

    def remove_event(self, event: Any):
        return self._clone(attributes=self._attributes.without(self._event_name(event)))

    @staticmethod
    def _event_name(event: Any) -> str:
        return prefixed("on", str(member_value(event)).lower())


class HasContent:
    def content(self, *values: Any):
        """Set the element content, HTML-escaping each value.

        Child elements are kept and rendered together with this element, so
        they see the same registry; ``Markup`` values are inserted as is.
        """

        return self._clone(content=tuple(self._content_part(value, True) for value in values if value is not None))

    def html(self, *values: Any):
        """Set raw markup as content; the caller is responsible for its safety."""

        return self._clone(content=tuple(self._content_part(value, False) for value in values if value is not None))

    def get_content(self) -> str:
        return self._content_html(self._registry)


class HasValue:
    # one of "scalar", "string" or "numeric", checked when rendering
    value_kind: ClassVar[str] = "scalar"

    def value(self, value: Any):
        return self._clone(value=value)


class HasName:
    def name(self, value: Any):
        return self._set("name", value)


class FormAssociated(HasName):
    def disabled(self, value: bool = True):
        return self._set("disabled", value)

    def form(self, value: Any):
        return self._set("form", value)


class HasRequired:
    def required(self, value: bool = True):
        return self._set("required", value)


class HasReadonly:
    def readonly(self, value: bool = True):
        return self._set("readonly", value)


class TextEntry(HasReadonly, HasRequired):
    """Attributes shared by text-like inputs and ``<textarea>``."""

    def autocomplete(self, value: Any):
        return self._set("autocomplete", value)

    def dirname(self, value: Any):
        return self._set("dirname", value)

    def maxlength(self, value: Any):
        return self._set("maxlength", value)

    def minlength(self, value: Any):
        return self._set("minlength", value)

    def placeholder(self, value: Any):
        return self._set("placeholder", value)


class HasPattern:
    def list_(self, value: Any):
        return self._set("list", value)

    def pattern(self, value: Any):
        return self._set("pattern", value)

    def size(self, value: Any):
        return self._set("size", value)


class HasRange:
    def max(self, value: Any):
        return self._set("max", value)

    def min(self, value: Any):
        return self._set("min", value)

    def step(self, value: Any):
        return self._set("step", value)


class HasHref:
    def download(self, value: Any = True):
        return self._set("download", value)

    def href(self, value: Any):
        return self._set("href", value)

    def hreflang(self, value: Any):
        return self._set("hreflang", value)

    def ping(self, value: Any):
        return self._set("ping", value)

    def referrerpolicy(self, value: Any):
        return self._set("referrerpolicy", value)

    def rel(self, value: Any):
        return self._set("rel", value)

    def target(self, value: Any):
        return self._set("target", value)

    def type(self, value: Any):
        return self._set("type", value)


class HasDimensions:
    def height(self, value: Any):
        return self._set("height", value)

    def width(self, value: Any):
        return self._set("width", value)


class HasLabel:
    """A ``<label>`` rendered next to, or around, a form control."""

    _label: str = ""
    _label_attributes: AttributeSet = EMPTY
    _not_label: bool = False
    _enclosed_by_label: bool = False

    def label(self, content: Any):
        return self._clone(label="" if content is None else str(escape(content)))

    def label_attributes(self, attributes: Mapping[str, Any]):
        return self._clone(label_attributes=self._label_attributes.merge(attributes))

    def label_class(self, value: Any, append: bool = False):
        if append and value is not None:
            merged = append_class(self._label_attributes.get("class"), value)
            return self._clone(label_attributes=self._label_attributes.with_value("class", merged))
        return self._clone(label_attributes=self._label_attributes.with_value("class", value))

    def label_for(self, value: Any):
        return self._clone(label_attributes=self._label_attributes.with_value("for", value))

    def not_label(self):
        return self._clone(not_label=True)

    def enclosed_by_label(self, value: bool = True):
        return self._clone(enclosed_by_label=value)

    def _has_label(self) -> bool:
        return not self._not_label and self._label != ""


__all__ = [
    "AriaAttributes",
    "DataAttributes",
    "EventAttributes",
    "FormAssociated",
    "GlobalAttributes",
    "HasContent",
    "HasDimensions",
    "HasHref",
    "HasLabel",
    "HasName",
    "HasPattern",
    "HasRange",
    "HasReadonly",
    "HasRequired",
    "HasValue",
    "TextEntry",
    "bool_word",
    "prefixed",
]
