"""Immutable element value objects and the render pipeline."""

from __future__ import annotations

import copy
from numbers import Number
from typing import Any, ClassVar, Dict, List, Mapping, Tuple

from markupsafe import Markup, escape

from .attributes import AttributeSet, append_class
from .capabilities import (
    AriaAttributes,
    DataAttributes,
    EventAttributes,
    GlobalAttributes,
    HasContent,
)
from .defaults import DefaultsRegistry, default_registry, resolve, resolve_provider
from .errors import InvalidValueTypeError, Message
from .serializer import Category, begin_tag, create_tag, end_tag
from .template import DEFAULT_TEMPLATE, render_template
from .validation import validate_attribute
from .values import member_value

_UNSET: Any = object()

_COLLECTIONS = (list, tuple, set, frozenset, dict)


def _type_name(value: object) -> str:
    return type(value).__name__


def check_value_kind(value: object, kind: str) -> object:
    """Return ``value`` ready for the attribute layer or raise on a type mismatch."""

    if value is None:
        return None
    if isinstance(value, bool):
        if kind == "string":
            raise InvalidValueTypeError(Message.VALUE_TYPE_MISMATCH.format_message(kind, _type_name(value)))
        return "1" if value else "0"
    if isinstance(value, _COLLECTIONS):
        raise InvalidValueTypeError(Message.VALUE_TYPE_MISMATCH.format_message(kind, _type_name(value)))
    value = member_value(value)
    if kind == "numeric":
        if isinstance(value, Number):
            return value
        try:
            float(str(value))
        except ValueError:
            raise InvalidValueTypeError(
                Message.VALUE_TYPE_MISMATCH.format_message(kind, _type_name(value))
            ) from None
        return value
    return value


class Element(GlobalAttributes, AriaAttributes, DataAttributes, EventAttributes):
    """Generic element engine.

    Subclasses describe one HTML tag declaratively through ``html_tag``,
    ``category``, ``default_attributes`` and ``default_template``.
    """

    html_tag: ClassVar[str] = ""
    category: ClassVar[Category] = Category.BLOCK
    default_attributes: ClassVar[Mapping[str, object]] = {}
    default_template: ClassVar[str] = DEFAULT_TEMPLATE

    # str fragments (already escaped) and child elements, rendered with the parent
    _content: Tuple[Any, ...] = ()
    _value: Any = _UNSET
    _template: str | None = None
    _token_values: Mapping[str, object] = {}
    _prefix: str = ""
    _prefix_tag: str | bool = False
    _prefix_attributes: AttributeSet = AttributeSet()
    _suffix: str = ""
    _suffix_tag: str | bool = False
    _suffix_attributes: AttributeSet = AttributeSet()
    _providers: Tuple[Tuple[str | None, object], ...] = ()
    _registry: DefaultsRegistry | None = None

    def __init__(self, attributes: Mapping[str, object] | None = None) -> None:
        self._tag_name = self.html_tag
        self._category = self.category
        self._attributes = AttributeSet(attributes)

    @classmethod
    def tag(cls, attributes: Mapping[str, object] | None = None):
        return cls(attributes)

    def _clone(self, **changes: Any):
        new = copy.copy(self)
        for key, value in changes.items():
            setattr(new, f"_{key}", value)
        return new

    def _set(self, name: str, value: Any):
        value = validate_attribute(name, value)
        return self._clone(attributes=self._attributes.with_value(name, value))

    @staticmethod
    def _content_part(value: Any, escaped: bool) -> Any:
        if isinstance(value, Element):
            return value
        return str(escape(value)) if escaped else str(value)

    def _content_html(self, registry: DefaultsRegistry | None = None) -> str:
        return "".join(render_child(part, registry) for part in self._content)

    # attributes

    def add_attribute(self, name: Any, value: Any):
        key = str(member_value(name))
        return self._clone(attributes=self._attributes.with_value(key, value))

    set_attribute = add_attribute

    def remove_attribute(self, name: Any):
        return self._clone(attributes=self._attributes.without(str(member_value(name))))

    def attributes(self, values: Mapping[Any, Any]):
        merged = self._attributes
        for name, value in values.items():
            merged = merged.with_value(str(member_value(name)), value)
        return self._clone(attributes=merged)

    def get_attribute(self, name: Any, default: Any = None) -> Any:
        return self._attributes.as_dict().get(str(member_value(name)), default)

    def get_attributes(self, registry: DefaultsRegistry | None = None) -> Dict[str, str | bool]:
        """Return the fully resolved attributes as a plain dict."""

        return self._render_attributes(registry).as_dict()

    @property
    def user_attributes(self) -> AttributeSet:
        return self._attributes

    # decoration

    def prefix(self, *values: Any):
        return self._clone(prefix="".join(str(value) for value in values if value is not None))

    def prefix_tag(self, value: Any):
        return self._clone(prefix_tag=value if value is False else str(member_value(value)))

    def prefix_attributes(self, values: Mapping[str, Any]):
        return self._clone(prefix_attributes=self._prefix_attributes.merge(values))

    def prefix_class(self, value: Any, append: bool = False):
        return self._clone(prefix_attributes=_with_class(self._prefix_attributes, value, append))

    def suffix(self, *values: Any):
        return self._clone(suffix="".join(str(value) for value in values if value is not None))

    def suffix_tag(self, value: Any):
        return self._clone(suffix_tag=value if value is False else str(member_value(value)))

    def suffix_attributes(self, values: Mapping[str, Any]):
        return self._clone(suffix_attributes=self._suffix_attributes.merge(values))

    def suffix_class(self, value: Any, append: bool = False):
        return self._clone(suffix_attributes=_with_class(self._suffix_attributes, value, append))

    def template(self, value: str):
        return self._clone(template=value)

    def token_values(self, values: Mapping[str, object]):
        merged = dict(self._token_values)
        merged.update(values)
        return self._clone(token_values=merged)

    # providers

    def add_default_provider(self, provider: Any):
        instance = resolve_provider(provider, "get_defaults")
        return self._clone(providers=self._providers + ((None, instance),))

    def add_theme_provider(self, theme: str, provider: Any):
        instance = resolve_provider(provider, "apply")
        return self._clone(providers=self._providers + ((theme, instance),))

    def with_registry(self, registry: DefaultsRegistry | None):
        return self._clone(registry=registry)

    # rendering

    def _provider_layers(self) -> List[Mapping[str, object]]:
        layers: List[Mapping[str, object]] = []
        for theme, provider in self._providers:
            if theme is None:
                layers.append(provider.get_defaults(self))  # type: ignore[attr-defined]
            else:
                layers.append(provider.apply(self, theme))  # type: ignore[attr-defined]
        return layers

    def _user_layer(self) -> AttributeSet:
        if self._value is _UNSET:
            return self._attributes
        value_kind = getattr(self, "value_kind", "scalar")
        return self._attributes.with_value("value", check_value_kind(self._value, value_kind))

    def _render_attributes(self, registry: DefaultsRegistry | None = None) -> AttributeSet:
        if registry is None:
            registry = self._registry if self._registry is not None else default_registry
        resolved = resolve(
            self.default_attributes,
            self._provider_layers(),
            registry.get_defaults(type(self)),
            self._user_layer(),
        )
        return self._finalize_attributes(resolved)

    def _finalize_attributes(self, attributes: AttributeSet) -> AttributeSet:
        return self._resolve_describedby(attributes)

    def _tag_html(self, attributes: AttributeSet, registry: DefaultsRegistry | None = None) -> str:
        return create_tag(self._tag_name, self._content_html(registry), attributes, self._category)

    def _decoration(self, content: str, tag: str | bool, attributes: AttributeSet) -> str:
        if content == "" or tag is False:
            return content
        return create_tag(str(tag), content, attributes)

    def _tokens(self, attributes: AttributeSet, registry: DefaultsRegistry | None = None) -> Dict[str, object]:
        return {
            "prefix": self._decoration(self._prefix, self._prefix_tag, self._prefix_attributes),
            "tag": self._tag_html(attributes, registry),
            "suffix": self._decoration(self._suffix, self._suffix_tag, self._suffix_attributes),
        }

    def render(self, registry: DefaultsRegistry | None = None) -> str:
        """Render the element; nested elements are rendered with the same registry."""

        if registry is None:
            registry = self._registry
        attributes = self._render_attributes(registry)
        # built-in tokens win over token_values of the same name
        tokens: Dict[str, object] = {str(key).strip("{}"): value for key, value in self._token_values.items()}
        tokens.update(self._tokens(attributes, registry))
        template = self._template if self._template is not None else self.default_template
        return render_template(template, tokens)

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> Markup:
        return Markup(self.render())

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._tag_name!r} {self._attributes!r}>"


def render_child(part: Any, registry: DefaultsRegistry | None = None) -> str:
    """Render a content fragment; a child with its own registry keeps it."""

    if isinstance(part, Element):
        return part.render(registry if part._registry is None else None)
    return str(part)


def _with_class(attributes: AttributeSet, value: Any, append: bool) -> AttributeSet:
    if append and value is not None:
        return attributes.with_value("class", append_class(attributes.get("class"), value))
    return attributes.with_value("class", value)


class BlockElement(HasContent, Element):
    category: ClassVar[Category] = Category.BLOCK

    def begin(self, registry: DefaultsRegistry | None = None) -> str:
        """Render the opening tag for ``begin() + content + end()`` composition."""

        attributes = self._render_attributes(registry)
        return begin_tag(self._tag_name, attributes, self._category) + "\n"

    def end(self) -> str:
        return "\n" + end_tag(self._tag_name, self._category)


class InlineElement(HasContent, Element):
    category: ClassVar[Category] = Category.INLINE


class VoidElement(Element):
    category: ClassVar[Category] = Category.VOID


__all__ = [
    "BlockElement",
    "Element",
    "InlineElement",
    "VoidElement",
    "check_value_kind",
    "render_child",
]
