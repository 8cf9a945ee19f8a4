"""Element catalogue."""

from __future__ import annotations

from typing import Dict, Type

from ..element import Element
from ..errors import ConfigurationError, Message
from .controls import ButtonGroup, CheckboxList, RadioList, Select
from .document import Body, Head, Html
from .embedded import Img
from .flow import Article, Aside, Div, Footer, Header, Hr, Main, Nav, P, Section
from .form import (
    Button,
    Form,
    InputCheckbox,
    InputColor,
    InputDate,
    InputDateTimeLocal,
    InputEmail,
    InputFile,
    InputHidden,
    InputImage,
    InputMonth,
    InputNumber,
    InputPassword,
    InputRadio,
    InputRange,
    InputReset,
    InputSearch,
    InputSubmit,
    InputTel,
    InputText,
    InputTime,
    InputUrl,
    InputWeek,
    TextArea,
)
from .generic import Tag
from .heading import H1, H2, H3, H4, H5, H6, HGroup
from .lists import Dd, Dl, Dt, Li, Ol, Ul
from .metadata import Base, Link, Meta, NoScript, Script, Style, Template, Title
from .phrasing import A, Em, I, Label, Small, Span, Strong

ELEMENTS: Dict[str, Type[Element]] = {
    cls.__name__: cls
    for cls in (
        A, Article, Aside, Base, Body, Button, ButtonGroup, CheckboxList, Dd, Div,
        Dl, Dt, Em, Footer, Form, H1, H2, H3, H4, H5, H6, HGroup, Head, Header,
        Hr, Html, I, Img, InputCheckbox, InputColor, InputDate, InputDateTimeLocal,
        InputEmail, InputFile, InputHidden, InputImage, InputMonth, InputNumber,
        InputPassword, InputRadio, InputRange, InputReset, InputSearch, InputSubmit,
        InputTel, InputText, InputTime, InputUrl, InputWeek, Label, Li, Link, Main,
        Meta, Nav, NoScript, Ol, P, RadioList, Script, Section, Select, Small, Span,
        Strong, Style, Tag, Template, TextArea, Title, Ul,
    )
}


def element_class(name: str) -> Type[Element]:
    """Look up an element class by its class name (``"Div"``) or tag (``"div"``)."""

    if name in ELEMENTS:
        return ELEMENTS[name]
    for cls in ELEMENTS.values():
        if cls.html_tag and cls.html_tag == name.lower() and cls.html_tag != "input":
            return cls
    raise ConfigurationError(Message.UNKNOWN_ELEMENT.format_message(name))


__all__ = sorted(ELEMENTS) + ["ELEMENTS", "element_class"]
