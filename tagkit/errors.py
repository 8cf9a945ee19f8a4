"""Exception types and message templates for tagkit."""

from __future__ import annotations

from enum import Enum


class Message(str, Enum):
    """Message templates shared by validators and renderers."""

    VALUE_NOT_IN_LIST = "Value '{0}' is not in the list of valid values for '{1}': '{2}'."
    ATTRIBUTE_INVALID_VALUE = "{0} is not a valid value for '{1}'. It must be {2}."
    VALUE_TYPE_MISMATCH = "The value must be a {0} or null value. The value is: {1}."
    TAG_NAME_EMPTY = "Tag name cannot be empty."
    INLINE_BEGIN_END = "Inline elements cannot be used with begin/end syntax."
    UNKNOWN_PROVIDER = "Unknown provider '{0}'. Registered providers: {1}."
    INVALID_PROVIDER = "Provider {0!r} must implement '{1}()'."
    UNKNOWN_ELEMENT = "Unknown element type '{0}'."
    ITEM_TYPE = "{0} items must be {1} elements, got {2}."
    SELECT_MULTIPLE = "The value must be a list when 'multiple' is enabled. The value is: {0}."

    def format_message(self, *args: object) -> str:
        return self.value.format(*args)


class TagkitError(Exception):
    """Base class for every error raised by tagkit."""


class InvalidArgumentError(TagkitError, ValueError):
    """An attribute value violates a closed set or a numeric constraint."""


class InvalidValueTypeError(TagkitError, TypeError):
    """A value of the wrong type reached the renderer."""


class ConfigurationError(TagkitError):
    """Providers, registries or config files are wired incorrectly."""


__all__ = [
    "ConfigurationError",
    "InvalidArgumentError",
    "InvalidValueTypeError",
    "Message",
    "TagkitError",
]
