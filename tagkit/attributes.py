"""Attribute values and immutable attribute sets."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Mapping, Tuple, Union


@dataclass(frozen=True)
class Absent:
    """Marks an attribute that must not render.

    Stored in a later layer it masks whatever an earlier layer provided.
    """

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absent()


@dataclass(frozen=True)
class Flag:
    enabled: bool


@dataclass(frozen=True)
class Scalar:
    text: str


AttributeValue = Union[Absent, Flag, Scalar]

_VALUE_TYPES = (Absent, Flag, Scalar)


def _json_value(raw: object) -> object:
    if raw is None or isinstance(raw, (bool, int, float, str)):
        return raw
    if isinstance(raw, Enum):
        return raw.value
    if isinstance(raw, (list, tuple, set, frozenset)):
        return [_json_value(item) for item in raw]
    if isinstance(raw, Mapping):
        return {str(key): _json_value(value) for key, value in raw.items()}
    if callable(raw) and not hasattr(raw, "__html__"):
        return _json_value(raw())
    return str(raw)


def _join_classes(items: List[AttributeValue]) -> str:
    names: List[str] = []
    for item in items:
        if isinstance(item, Scalar) and item.text.strip():
            names.append(item.text.strip())
    return " ".join(names)


def _style_declarations(styles: Mapping[object, object]) -> str:
    parts: List[str] = []
    for key, raw in styles.items():
        value = normalize(raw)
        if isinstance(value, Scalar) and value.text != "":
            parts.append(f"{key}: {value.text};")
    return " ".join(parts)


def normalize(raw: object, name: str | None = None) -> AttributeValue:
    """Convert a heterogeneous input into an :data:`AttributeValue`.

    ``name`` only matters for collections: ``class`` lists are space joined and
    ``style`` mappings become declarations; other collections are JSON encoded.
    """

    if raw is None:
        return ABSENT
    if isinstance(raw, _VALUE_TYPES):
        return raw
    if isinstance(raw, bool):
        return Flag(raw)
    if isinstance(raw, Enum):
        return Scalar(str(raw.value))
    if isinstance(raw, str):
        return Scalar(raw)
    if isinstance(raw, (int, float)):
        return Scalar(str(raw))
    if isinstance(raw, (list, tuple, set, frozenset)):
        if name == "class":
            return Scalar(_join_classes([normalize(item) for item in raw]))
        return Scalar(json.dumps(_json_value(raw), ensure_ascii=False))
    if isinstance(raw, Mapping):
        if name == "style":
            return Scalar(_style_declarations(raw))
        return Scalar(json.dumps(_json_value(raw), ensure_ascii=False))
    if callable(raw) and not hasattr(raw, "__html__"):
        return normalize(raw(), name)
    return Scalar(str(raw))


class AttributeSet:
    """Immutable ordered mapping of attribute name to :data:`AttributeValue`.

    Every operation returns a new set; assigning an existing name keeps its
    position and replaces the value.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, object] | None = None) -> None:
        normalized: Dict[str, AttributeValue] = {}
        for name, raw in (values or {}).items():
            normalized[str(name)] = normalize(raw, str(name))
        self._values = normalized

    @classmethod
    def _from_normalized(cls, values: Dict[str, AttributeValue]) -> "AttributeSet":
        instance = cls.__new__(cls)
        instance._values = values
        return instance

    def with_value(self, name: str, raw: object) -> "AttributeSet":
        values = dict(self._values)
        values[name] = normalize(raw, name)
        return self._from_normalized(values)

    def without(self, name: str) -> "AttributeSet":
        if name not in self._values:
            return self
        values = dict(self._values)
        del values[name]
        return self._from_normalized(values)

    def merge(self, other: "AttributeSet | Mapping[str, object]") -> "AttributeSet":
        """Key-wise replace with ``other``; ``Absent`` entries stay as tombstones."""

        if not isinstance(other, AttributeSet):
            other = AttributeSet(other)
        values = dict(self._values)
        values.update(other._values)
        return self._from_normalized(values)

    def resolved(self) -> "AttributeSet":
        """Drop tombstones and disabled flags."""

        return self._from_normalized(
            {
                name: value
                for name, value in self._values.items()
                if not isinstance(value, Absent) and value != Flag(False)
            }
        )

    def get(self, name: str, default: AttributeValue | None = None) -> AttributeValue | None:
        return self._values.get(name, default)

    def items(self) -> List[Tuple[str, AttributeValue]]:
        return list(self._values.items())

    def names(self) -> List[str]:
        return list(self._values)

    def as_dict(self) -> Dict[str, str | bool]:
        """Return the renderable attributes as plain ``str`` or ``True`` values."""

        plain: Dict[str, str | bool] = {}
        for name, value in self.resolved().items():
            plain[name] = value.text if isinstance(value, Scalar) else True
        return plain

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        return bool(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AttributeSet):
            return self._values == other._values
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._values.items()))

    def __repr__(self) -> str:
        return f"AttributeSet({self._values!r})"


EMPTY = AttributeSet()


def class_names(value: AttributeValue | None) -> List[str]:
    if isinstance(value, Scalar):
        return value.text.split()
    return []


def append_class(existing: AttributeValue | None, raw: object) -> AttributeValue:
    """Append CSS classes to ``existing`` without duplicating names."""

    addition = normalize(raw, "class")
    if not isinstance(addition, Scalar):
        return existing if existing is not None else ABSENT
    names = class_names(existing)
    for item in addition.text.split():
        if item not in names:
            names.append(item)
    return Scalar(" ".join(names))


__all__ = [
    "ABSENT",
    "Absent",
    "AttributeSet",
    "AttributeValue",
    "EMPTY",
    "Flag",
    "Scalar",
    "append_class",
    "class_names",
    "normalize",
]
