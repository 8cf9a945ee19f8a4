"""Declarative, immutable HTML element builders."""

from .attributes import ABSENT, AttributeSet, Flag, Scalar, normalize
from .defaults import (
    DefaultsRegistry,
    default_registry,
    get_defaults,
    register_provider,
    reset_defaults,
    set_defaults,
)
from .element import BlockElement, Element, InlineElement, VoidElement
from .errors import ConfigurationError, InvalidArgumentError, InvalidValueTypeError, TagkitError
from .serializer import begin_tag, create_tag, end_tag, render_attributes
from .tags import *  # noqa: F401,F403
from .tags import ELEMENTS, element_class
from .template import render_template

__version__ = "0.1.0"
