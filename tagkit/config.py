"""Defaults files and the render context used by the command line."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping

from jinja2 import Environment
from markupsafe import escape
from pydantic import ValidationError

from .capabilities import HasContent, HasLabel, HasValue
from .defaults import DefaultsRegistry
from .element import Element
from .errors import ConfigurationError, TagkitError
from .io_utils import PathLike, read_yaml
from .jinja import create_environment
from .models import DefaultsConfig, ElementSpec
from .tags import element_class
from .tags.controls import ButtonGroup, ChoiceList, Select
from .tags.form import ChoiceInput
from .tags.generic import Tag
from .validation import validate_attribute


class MappingThemeProvider:
    """Theme provider backed by a ``theme -> element class name -> attributes`` table."""

    def __init__(self, themes: Mapping[str, Mapping[str, Mapping[str, Any]]]) -> None:
        self.themes = {name: dict(table) for name, table in themes.items()}

    def apply(self, element: Element, theme: str) -> Mapping[str, Any]:
        table = self.themes.get(theme, {})
        for cls in type(element).__mro__:
            if cls.__name__ in table:
                return table[cls.__name__]
        return table.get("*", {})


def _joined(parts: List[Any]) -> List[Any]:
    """Interleave content parts with newlines, one part per line."""

    joined: List[Any] = []
    for part in parts:
        if joined:
            joined.append("\n")
        joined.append(part)
    return joined


def load_config(path: PathLike) -> DefaultsConfig:
    data = read_yaml(path) or {}
    try:
        return DefaultsConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid defaults file {path}: {exc}") from exc


def load_defaults(path: PathLike, registry: DefaultsRegistry | None = None) -> DefaultsRegistry:
    """Populate ``registry`` (a new one when omitted) from a YAML defaults file."""

    registry = registry if registry is not None else DefaultsRegistry()
    apply_defaults(load_config(path), registry)
    return registry


def apply_defaults(config: DefaultsConfig, registry: DefaultsRegistry) -> None:
    for name, attributes in config.defaults.items():
        registry.set_defaults(element_class(name), attributes)


def load_spec(path: PathLike) -> List[ElementSpec]:
    """Load one element spec or a list of them."""

    data = read_yaml(path)
    if data is None:
        return []
    items = data if isinstance(data, list) else [data]
    try:
        return [ElementSpec.model_validate(item) for item in items]
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid element spec in {path}: {exc}") from exc


@dataclass
class RenderContext:
    """Configuration for rendering element specs and page templates."""

    registry: DefaultsRegistry = field(default_factory=DefaultsRegistry)
    themes: MappingThemeProvider | None = None
    template_dirs: List[Path] = field(default_factory=list)

    @classmethod
    def from_file(cls, path: PathLike | None, template_dirs: List[Path] | None = None) -> "RenderContext":
        ctx = cls(template_dirs=list(template_dirs or []))
        if path is None:
            return ctx
        config = load_config(path)
        apply_defaults(config, ctx.registry)
        if config.themes:
            ctx.themes = MappingThemeProvider(config.themes)
        return ctx

    def jinja_env(self) -> Environment:
        return create_environment(self.template_dirs, self.registry)

    def build(self, spec: ElementSpec) -> Element:
        """Turn a spec into an element, validating constrained attributes."""

        element: Any = element_class(spec.element).tag()
        if isinstance(element, Tag):
            element = element.tag_name(spec.tag_name or "")
        checked_attributes: Dict[str, Any] = {
            name: validate_attribute(name, value) for name, value in spec.attributes.items()
        }
        element = element.attributes(checked_attributes)

        children = [self.build(child) for child in spec.children]
        if isinstance(element, ChoiceList):
            element = element.items(*children)
        elif isinstance(element, ButtonGroup):
            element = element.buttons(*children)
        elif spec.content is not None or spec.html is not None or children:
            if not isinstance(element, HasContent):
                raise ConfigurationError(f"Element '{spec.element}' cannot have content.")
            parts: List[Any] = []
            if spec.content is not None:
                parts.append(escape(spec.content))
            if spec.html is not None:
                parts.append(spec.html)
            parts.extend(children)
            element = element.html(*_joined(parts))
        if spec.items:
            if not isinstance(element, Select):
                raise ConfigurationError(f"Element '{spec.element}' does not take items.")
            element = element.items(spec.items)

        if spec.label is not None and isinstance(element, HasLabel):
            element = element.label(spec.label)
        if spec.value is not None and isinstance(element, HasValue):
            element = element.value(spec.value)
        if spec.checked is not None and isinstance(element, (ChoiceInput, ChoiceList)):
            element = element.checked(spec.checked)
        if spec.template is not None:
            element = element.template(spec.template)
        for theme in spec.themes:
            if self.themes is None:
                raise ConfigurationError(f"Theme '{theme}' requested but no themes are configured.")
            element = element.add_theme_provider(theme, self.themes)
        return element.with_registry(self.registry)

    def render(self, spec: ElementSpec) -> str:
        return self.build(spec).render()

    def validate(self, spec: ElementSpec, path: str = "") -> List[str]:
        """Return every problem found in ``spec`` and its children."""

        location = f"{path}/{spec.element}" if path else spec.element
        errors: List[str] = []
        try:
            element_class(spec.element)
        except TagkitError as exc:
            errors.append(f"{location}: {exc}")
        for name, value in spec.attributes.items():
            try:
                validate_attribute(name, value)
            except TagkitError as exc:
                errors.append(f"{location}: {exc}")
        for index, child in enumerate(spec.children):
            errors.extend(self.validate(child, f"{location}[{index}]"))
        return errors


__all__ = [
    "MappingThemeProvider",
    "RenderContext",
    "apply_defaults",
    "load_config",
    "load_defaults",
    "load_spec",
]
