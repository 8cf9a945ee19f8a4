"""Closed-set and numeric checks for constrained attributes."""

from __future__ import annotations

import re
from enum import Enum
from typing import Dict, Iterable, List, Tuple, Type

from .errors import InvalidArgumentError, Message
from .values import (
    Autocapitalize,
    ButtonCommand,
    Capture,
    Colorspace,
    ContentEditable,
    Crossorigin,
    Decoding,
    Direction,
    Draggable,
    Enctype,
    Fetchpriority,
    Language,
    Loading,
    Method,
    Referrerpolicy,
    Role,
    ShadowRootMode,
    Translate,
    Wrap,
    enum_values,
)

_INT_RE = re.compile(r"^-?\d+$")

ENUM_ATTRIBUTES: Dict[str, Type[Enum]] = {
    "autocapitalize": Autocapitalize,
    "capture": Capture,
    "colorspace": Colorspace,
    "command": ButtonCommand,
    "contenteditable": ContentEditable,
    "crossorigin": Crossorigin,
    "decoding": Decoding,
    "dir": Direction,
    "draggable": Draggable,
    "enctype": Enctype,
    "fetchpriority": Fetchpriority,
    "formenctype": Enctype,
    "formmethod": Method,
    "lang": Language,
    "loading": Loading,
    "method": Method,
    "referrerpolicy": Referrerpolicy,
    "role": Role,
    "shadowrootmode": ShadowRootMode,
    "translate": Translate,
    "wrap": Wrap,
}

# attribute -> (minimum, constraint description)
INT_ATTRIBUTES: Dict[str, Tuple[int, str]] = {
    "cols": (1, "value > 0"),
    "maxlength": (0, "value >= 0"),
    "minlength": (0, "value >= 0"),
    "rows": (1, "value > 0"),
    "tabindex": (-1, "value >= -1"),
}


def _allowed_values(allowed: Type[Enum] | Iterable[object]) -> List[str]:
    if isinstance(allowed, type) and issubclass(allowed, Enum):
        return enum_values(allowed)
    return [str(item.value) if isinstance(item, Enum) else str(item) for item in allowed]


def one_of(value: object, allowed: Type[Enum] | Iterable[object], attribute: str) -> object:
    """Check ``value`` against a closed set and return it with enums resolved.

    ``None`` means "remove the attribute" and is always accepted.
    """

    if value is None:
        return None
    if isinstance(value, Enum):
        value = value.value
    options = _allowed_values(allowed)
    if str(value) not in options or isinstance(value, bool):
        raise InvalidArgumentError(
            Message.VALUE_NOT_IN_LIST.format_message(value, attribute, "', '".join(options))
        )
    return value


def is_int_like(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and bool(_INT_RE.match(value))


def int_like(value: object, attribute: str, minimum: int, constraint: str) -> object:
    """Check that ``value`` is an integer (or integer string) not below ``minimum``."""

    if value is None:
        return None
    if not is_int_like(value) or int(value) < minimum:  # type: ignore[arg-type]
        raise InvalidArgumentError(
            Message.ATTRIBUTE_INVALID_VALUE.format_message(value, attribute, constraint)
        )
    return value


def validate_attribute(name: str, value: object) -> object:
    """Validate ``value`` for ``name`` when the attribute is constrained.

    Unconstrained names (``data-*``, ``aria-*``, custom attributes) pass
    through untouched.
    """

    if name in ENUM_ATTRIBUTES:
        return one_of(value, ENUM_ATTRIBUTES[name], name)
    if name in INT_ATTRIBUTES:
        minimum, constraint = INT_ATTRIBUTES[name]
        return int_like(value, name, minimum, constraint)
    return value


def is_constrained(name: str) -> bool:
    return name in ENUM_ATTRIBUTES or name in INT_ATTRIBUTES


__all__ = [
    "ENUM_ATTRIBUTES",
    "INT_ATTRIBUTES",
    "int_like",
    "is_constrained",
    "is_int_like",
    "one_of",
    "validate_attribute",
]
