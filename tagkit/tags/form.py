"""Forms and form controls."""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Iterable, Tuple

from ..attributes import AttributeSet, Flag
from ..capabilities import (
    FormAssociated,
    HasDimensions,
    HasLabel,
    HasPattern,
    HasRange,
    HasReadonly,
    HasRequired,
    HasValue,
    TextEntry,
)
from ..defaults import DefaultsRegistry
from ..element import BlockElement, InlineElement, VoidElement, check_value_kind
from ..template import CHOICE_TEMPLATE, LABELLED_TEMPLATE
from ..validation import one_of
from ..values import ButtonType, InputType, member_value
from .phrasing import Label


class Form(BlockElement):
    html_tag = "form"

    def accept_charset(self, value: Any):
        return self._set("accept-charset", value)

    def action(self, value: Any):
        return self._set("action", value)

    def autocomplete(self, value: Any):
        return self._set("autocomplete", value)

    def enctype(self, value: Any):
        return self._set("enctype", value)

    def method(self, value: Any):
        return self._set("method", value)

    def name(self, value: Any):
        return self._set("name", value)

    def novalidate(self, value: bool = True):
        return self._set("novalidate", value)

    def rel(self, value: Any):
        return self._set("rel", value)

    def target(self, value: Any):
        return self._set("target", value)


class FormSubmitter:
    """``form*`` overrides carried by submit buttons."""

    def formaction(self, value: Any):
        return self._set("formaction", value)

    def formenctype(self, value: Any):
        return self._set("formenctype", value)

    def formmethod(self, value: Any):
        return self._set("formmethod", value)

    def formnovalidate(self, value: bool = True):
        return self._set("formnovalidate", value)

    def formtarget(self, value: Any):
        return self._set("formtarget", value)


class Button(FormSubmitter, FormAssociated, HasValue, InlineElement):
    html_tag = "button"
    value_kind = "string"

    def command(self, value: Any):
        return self._set("command", value)

    def commandfor(self, value: Any):
        return self._set("commandfor", value)

    def popovertarget(self, value: Any):
        return self._set("popovertarget", value)

    def popovertargetaction(self, value: Any):
        return self._set("popovertargetaction", value)

    def type(self, value: Any):
        return self._clone(attributes=self._attributes.with_value("type", one_of(value, ButtonType, "type")))


class TextArea(FormAssociated, TextEntry, BlockElement):
    html_tag = "textarea"

    def cols(self, value: Any):
        return self._set("cols", value)

    def rows(self, value: Any):
        return self._set("rows", value)

    def wrap(self, value: Any):
        return self._set("wrap", value)


class Labelled(HasLabel):
    """Places a ``<label>`` element in the ``{label}`` token, or around the tag."""

    def _tokens(self, attributes: AttributeSet, registry: DefaultsRegistry | None = None) -> Dict[str, object]:
        tokens = super()._tokens(attributes, registry)
        tokens["tag"], tokens["label"] = self._label_html(attributes, str(tokens["tag"]), registry)
        return tokens

    def _label_html(
        self, attributes: AttributeSet, tag_html: str, registry: DefaultsRegistry | None = None
    ) -> Tuple[str, str]:
        """Return the ``(tag, label)`` fragments for the label placement."""

        if not self._has_label():
            return tag_html, ""
        label = Label.tag().attributes(dict(self._label_attributes.items()))
        if self._enclosed_by_label:
            return label.html("\n", tag_html, "\n", self._label, "\n").render(registry), ""
        element_id = attributes.as_dict().get("id")
        if "for" not in self._label_attributes and isinstance(element_id, str):
            label = label.for_(element_id)
        return tag_html, label.html(self._label).render(registry)


class Input(FormAssociated, HasValue, Labelled, VoidElement):
    """``<input>`` with an optional label rendered before it."""

    html_tag = "input"
    input_type: ClassVar[InputType] = InputType.TEXT
    default_attributes = {"type": InputType.TEXT.value}
    default_template = LABELLED_TEMPLATE

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.default_attributes = {**cls.default_attributes, "type": cls.input_type.value}


class InputText(TextEntry, HasPattern, Input):
    input_type = InputType.TEXT
    value_kind = "string"


class InputEmail(TextEntry, HasPattern, Input):
    input_type = InputType.EMAIL
    value_kind = "string"

    def multiple(self, value: bool = True):
        return self._set("multiple", value)


class InputPassword(TextEntry, HasPattern, Input):
    input_type = InputType.PASSWORD
    value_kind = "string"


class InputSearch(TextEntry, HasPattern, Input):
    input_type = InputType.SEARCH
    value_kind = "string"


class InputTel(TextEntry, HasPattern, Input):
    input_type = InputType.TEL
    value_kind = "string"


class InputUrl(TextEntry, HasPattern, Input):
    input_type = InputType.URL
    value_kind = "string"


class InputNumber(HasRange, HasReadonly, HasRequired, Input):
    input_type = InputType.NUMBER
    value_kind = "numeric"

    def placeholder(self, value: Any):
        return self._set("placeholder", value)


class InputRange(HasRange, Input):
    input_type = InputType.RANGE
    value_kind = "numeric"

    def list_(self, value: Any):
        return self._set("list", value)


class InputDate(HasRange, HasReadonly, HasRequired, Input):
    input_type = InputType.DATE
    value_kind = "string"


class InputDateTimeLocal(HasRange, HasReadonly, HasRequired, Input):
    input_type = InputType.DATETIME_LOCAL
    value_kind = "string"


class InputMonth(HasRange, HasReadonly, HasRequired, Input):
    input_type = InputType.MONTH
    value_kind = "string"


class InputTime(HasRange, HasReadonly, HasRequired, Input):
    input_type = InputType.TIME
    value_kind = "string"


class InputWeek(HasRange, HasReadonly, HasRequired, Input):
    input_type = InputType.WEEK
    value_kind = "string"


class InputColor(Input):
    input_type = InputType.COLOR
    value_kind = "string"

    def alpha(self, value: bool = True):
        return self._set("alpha", value)

    def autocomplete(self, value: Any):
        return self._set("autocomplete", value)

    def colorspace(self, value: Any):
        return self._set("colorspace", value)


class InputFile(HasRequired, Input):
    input_type = InputType.FILE
    value_kind = "string"

    def accept(self, value: Any):
        if isinstance(value, (list, tuple)):
            value = ",".join(str(member_value(item)) for item in value)
        return self._set("accept", value)

    def capture(self, value: Any):
        return self._set("capture", value)

    def multiple(self, value: bool = True):
        return self._set("multiple", value)


class InputHidden(Input):
    input_type = InputType.HIDDEN
    value_kind = "string"

    def autocomplete(self, value: Any):
        return self._set("autocomplete", value)


class InputImage(FormSubmitter, HasDimensions, Input):
    input_type = InputType.IMAGE
    value_kind = "string"

    def alt(self, value: Any):
        return self._set("alt", value)

    def src(self, value: Any):
        return self._set("src", value)


class InputSubmit(FormSubmitter, Input):
    input_type = InputType.SUBMIT
    value_kind = "string"


class InputReset(Input):
    input_type = InputType.RESET
    value_kind = "string"


class ChoiceInput(HasRequired, Input):
    """Checkbox and radio inputs: checked state, unchecked value and a trailing label."""

    default_template = CHOICE_TEMPLATE
    value_kind = "scalar"

    _checked: Any = None
    _unchecked_value: Any = None

    def checked(self, value: Any):
        """Mark the input checked.

        ``True`` always checks, ``False`` and ``None`` never do; any other
        value checks when it equals the rendered ``value`` attribute.
        """

        return self._clone(checked=value)

    def unchecked_value(self, value: Any):
        """Emit a hidden input carrying ``value`` when the control is unchecked."""

        return self._clone(unchecked_value=value)

    def _candidates(self) -> Iterable[Any] | None:
        checked = self._checked
        if isinstance(checked, (list, tuple, set, frozenset)):
            return [member_value(item) for item in checked]
        return None

    def _finalize_attributes(self, attributes: AttributeSet) -> AttributeSet:
        attributes = super()._finalize_attributes(attributes)
        if attributes.get("value") == Flag(True):
            attributes = attributes.with_value("value", "1")
        candidates = self._candidates()
        checked = member_value(self._checked)
        if candidates is None and (checked is None or checked is False):
            return attributes
        if checked is True:
            return attributes.with_value("checked", True)
        rendered_value = attributes.as_dict().get("value")
        value_text = rendered_value if isinstance(rendered_value, str) else ""
        if candidates is None:
            candidates = [checked]
        is_checked = any(
            item is not None and str(item) == value_text for item in candidates
        )
        return attributes.with_value("checked", is_checked).resolved()

    def _tokens(self, attributes: AttributeSet, registry: DefaultsRegistry | None = None) -> Dict[str, object]:
        tokens = super()._tokens(attributes, registry)
        tokens["unchecked"] = self._unchecked_html(attributes, registry)
        return tokens

    def _unchecked_html(self, attributes: AttributeSet, registry: DefaultsRegistry | None = None) -> str:
        if self._unchecked_value is None:
            return ""
        name = attributes.as_dict().get("name", "")
        value = check_value_kind(self._unchecked_value, "scalar")
        return InputHidden.tag().name(name).add_attribute("value", value).render(registry)


class InputCheckbox(ChoiceInput):
    input_type = InputType.CHECKBOX


class InputRadio(ChoiceInput):
    input_type = InputType.RADIO


__all__ = [
    "Button",
    "ChoiceInput",
    "Form",
    "Input",
    "InputCheckbox",
    "InputColor",
    "InputDate",
    "InputDateTimeLocal",
    "InputEmail",
    "InputFile",
    "InputHidden",
    "InputImage",
    "InputMonth",
    "InputNumber",
    "InputPassword",
    "InputRadio",
    "InputRange",
    "InputReset",
    "InputSearch",
    "InputSubmit",
    "InputTel",
    "InputText",
    "InputUrl",
    "InputWeek",
    "TextArea",
]
