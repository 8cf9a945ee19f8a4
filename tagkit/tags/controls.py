"""Composite form controls: select boxes, choice lists and button groups.

These elements do not serialize a tag of their own. They assemble child
elements at render time and hand the active registry down to every one of
them, so defaults for ``Tag``, ``Label`` or ``InputCheckbox`` apply inside the
composite exactly as they do outside it.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Mapping, Sequence, Tuple

from ..attributes import EMPTY, AttributeSet, append_class
from ..capabilities import FormAssociated, HasLabel, HasName, HasRequired, HasValue
from ..defaults import DefaultsRegistry
from ..element import Element, check_value_kind, render_child
from ..errors import InvalidArgumentError, InvalidValueTypeError, Message
from ..serializer import Category, create_tag
from ..template import LABELLED_TEMPLATE
from ..values import member_value
from .form import Button, ChoiceInput, InputCheckbox, InputHidden, InputRadio, InputReset, InputSubmit, Labelled
from .generic import Tag
from .phrasing import Label

DEFAULT_PROMPT = "Select an option"


class HasContainer:
    """Wraps the rendered children in a container tag; ``False`` disables it."""

    _container_tag: str | bool = "div"
    _container_attributes: AttributeSet = EMPTY

    def container_tag(self, value: Any = "div"):
        return self._clone(container_tag=value if value is False else str(member_value(value)))

    def container_attributes(self, values: Mapping[str, Any]):
        return self._clone(container_attributes=self._container_attributes.merge(values))

    def container_class(self, value: Any, append: bool = False):
        if append and value is not None:
            value = append_class(self._container_attributes.get("class"), value)
        return self._clone(container_attributes=self._container_attributes.with_value("class", value))

    def _container(
        self,
        parts: Sequence[str],
        registry: DefaultsRegistry | None,
        attributes: Mapping[str, Any] | None = None,
    ) -> str:
        content = "\n".join(part for part in parts if part != "")
        if self._container_tag is False:
            return content
        merged = AttributeSet(attributes).merge(self._container_attributes)
        container = Tag.tag().tag_name(self._container_tag).attributes(dict(merged.items()))
        return container.html(content).render(registry)


class Select(FormAssociated, HasRequired, HasValue, Labelled, Element):
    """``<select>`` built from an ``items`` mapping of option value to label.

    A nested mapping becomes an ``<optgroup>`` whose attributes come from
    ``groups``. The prompt option is always rendered first.
    """

    html_tag = "select"
    category = Category.BLOCK
    default_template = LABELLED_TEMPLATE

    _value: Any = None
    _items: Mapping[Any, Any] = {}
    _groups: Dict[str, AttributeSet] = {}
    _items_attributes: Dict[str, AttributeSet] = {}
    _prompt: str = DEFAULT_PROMPT
    _prompt_value: Any = None

    def autocomplete(self, value: Any):
        return self._set("autocomplete", value)

    def multiple(self, value: bool = True):
        return self._set("multiple", value)

    def size(self, value: Any):
        return self._set("size", value)

    def items(self, values: Mapping[Any, Any]):
        return self._clone(items=dict(values))

    def groups(self, values: Mapping[Any, Mapping[str, Any]]):
        return self._clone(groups={str(key): AttributeSet(attrs) for key, attrs in values.items()})

    def items_attributes(self, values: Mapping[Any, Mapping[str, Any]]):
        return self._clone(items_attributes={str(key): AttributeSet(attrs) for key, attrs in values.items()})

    def prompt(self, content: Any, value: Any = None):
        return self._clone(prompt=str(content), prompt_value=value)

    def _user_layer(self) -> AttributeSet:
        # the value selects options instead of rendering as an attribute
        return self._attributes

    def _selected(self, attributes: AttributeSet) -> List[str]:
        value = self._value
        is_list = isinstance(value, (list, tuple, set, frozenset))
        if attributes.as_dict().get("multiple") is True and value is not None and not is_list:
            raise InvalidArgumentError(Message.SELECT_MULTIPLE.format_message(type(value).__name__))
        values = list(value) if is_list else [value]
        return [str(check_value_kind(item, "scalar")) for item in values if item is not None]

    def _option(self, value: Any, content: Any, selected: List[str], registry: DefaultsRegistry | None) -> str:
        key = str(member_value(value))
        attributes = dict(self._items_attributes.get(key, EMPTY).items())
        attributes.update({"selected": key in selected, "value": key})
        return Tag.tag().tag_name("option").attributes(attributes).content(content).render(registry)

    def _tag_html(self, attributes: AttributeSet, registry: DefaultsRegistry | None = None) -> str:
        selected = self._selected(attributes)
        prompt = Tag.tag().tag_name("option").content(self._prompt)
        if self._prompt_value is not None:
            prompt = prompt.add_attribute("value", self._prompt_value)
        options = [prompt.render(registry)]
        for value, content in self._items.items():
            if isinstance(content, Mapping):
                group_attributes = self._groups.get(str(value), AttributeSet({"label": value}))
                group = Tag.tag().tag_name("optgroup").attributes(dict(group_attributes.items()))
                children = "\n".join(self._option(v, c, selected, registry) for v, c in content.items())
                options.append(group.html(children).render(registry))
            else:
                options.append(self._option(value, content, selected, registry))
        return create_tag(self._tag_name, "\n".join(options), attributes, self._category)


class ChoiceList(HasContainer, HasName, HasRequired, HasLabel, Element):
    """A group of checkbox or radio inputs sharing a name and a checked value."""

    item_type: ClassVar[type] = ChoiceInput
    array_name: ClassVar[bool] = False
    default_template = LABELLED_TEMPLATE

    _items: Tuple[ChoiceInput, ...] = ()
    _checked: Any = None
    _unchecked_value: Any = None
    _label_item_class: Any = None
    _label_item_append: bool = False

    def items(self, *items: ChoiceInput):
        for item in items:
            if not isinstance(item, self.item_type):
                raise InvalidValueTypeError(
                    Message.ITEM_TYPE.format_message(
                        type(self).__name__, self.item_type.__name__, type(item).__name__
                    )
                )
        return self._clone(items=tuple(items))

    def checked(self, value: Any):
        """Check the items whose value equals ``value`` (or is in it, for a list)."""

        return self._clone(checked=value)

    def unchecked_value(self, value: Any):
        return self._clone(unchecked_value=value)

    def label_item_class(self, value: Any, append: bool = False):
        return self._clone(label_item_class=value, label_item_append=append)

    def _item_name(self, attributes: AttributeSet) -> str | None:
        name = attributes.as_dict().get("name")
        if not isinstance(name, str):
            return None
        if self.array_name and not name.endswith("[]"):
            return f"{name}[]"
        return name

    def _tag_html(self, attributes: AttributeSet, registry: DefaultsRegistry | None = None) -> str:
        plain = attributes.as_dict()
        list_id = plain.get("id")
        name = self._item_name(attributes)
        shared = attributes
        for key in ("autofocus", "id", "name", "tabindex", "value"):
            shared = shared.without(key)
        container_attributes = {key: plain[key] for key in ("autofocus", "tabindex") if key in plain}

        parts: List[str] = []
        if self._unchecked_value is not None:
            hidden = InputHidden.tag().name(name or "")
            hidden = hidden.add_attribute("value", check_value_kind(self._unchecked_value, "scalar"))
            parts.append(hidden.render(registry))
        for index, item in enumerate(self._items):
            item = item.attributes(dict(shared.items()))
            if isinstance(list_id, str):
                item = item.id(f"{list_id}-w{index}")
            if name is not None:
                item = item.name(name)
            if self._checked is not None:
                item = item.checked(self._checked)
            if self._enclosed_by_label:
                item = item.enclosed_by_label()
            if self._label_item_class is not None:
                item = item.label_class(self._label_item_class, append=self._label_item_append)
            parts.append(render_child(item, registry))
        return self._container(parts, registry, container_attributes)

    def _tokens(self, attributes: AttributeSet, registry: DefaultsRegistry | None = None) -> Dict[str, object]:
        tokens = super()._tokens(attributes, registry)
        tokens["label"] = ""
        if self._has_label():
            label = Label.tag().attributes(dict(self._label_attributes.items())).html(self._label)
            tokens["label"] = label.render(registry)
        return tokens


class CheckboxList(ChoiceList):
    item_type = InputCheckbox
    array_name = True


class RadioList(ChoiceList):
    item_type = InputRadio


class ButtonGroup(HasContainer, Element):
    """Buttons rendered one per line inside a container.

    The group's own attributes land on the container; ``container_attributes``
    override them.
    """

    _buttons: Tuple[Element, ...] = ()
    _individual_container: str | bool = False

    def buttons(self, *buttons: Element):
        for button in buttons:
            if not isinstance(button, (Button, InputReset, InputSubmit)):
                raise InvalidValueTypeError(
                    Message.ITEM_TYPE.format_message(
                        type(self).__name__, "Button, InputReset or InputSubmit", type(button).__name__
                    )
                )
        return self._clone(buttons=tuple(buttons))

    def individual_container(self, value: Any = "div"):
        return self._clone(individual_container=value if value is False else str(member_value(value)))

    def _tag_html(self, attributes: AttributeSet, registry: DefaultsRegistry | None = None) -> str:
        parts: List[str] = []
        for button in self._buttons:
            html = render_child(button, registry)
            if self._individual_container is not False:
                html = Tag.tag().tag_name(self._individual_container).html(html).render(registry)
            parts.append(html)
        return self._container(parts, registry, dict(attributes.items()))


__all__ = ["ButtonGroup", "CheckboxList", "ChoiceList", "HasContainer", "RadioList", "Select"]
