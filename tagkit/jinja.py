"""Jinja2 integration: element classes as template globals."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Type

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

from .defaults import DefaultsRegistry
from .element import Element
from .tags import ELEMENTS


class BoundElement:
    """Template-side stand-in for an element class bound to one registry.

    ``tag()`` returns elements that carry the registry, so ``{{ Div.tag() }}``
    picks up the defaults the environment was created with.
    """

    def __init__(self, cls: Type[Element], registry: DefaultsRegistry) -> None:
        self.cls = cls
        self.registry = registry

    def tag(self, attributes: Mapping[str, object] | None = None) -> Element:
        return self.cls.tag(attributes).with_registry(self.registry)

    __call__ = tag

    def __getattr__(self, name: str) -> Any:
        return getattr(self.cls, name)

    def __repr__(self) -> str:
        return f"<BoundElement {self.cls.__name__}>"


def element_globals(registry: DefaultsRegistry | None = None) -> Dict[str, Any]:
    if registry is None:
        return dict(ELEMENTS)
    return {name: BoundElement(cls, registry) for name, cls in ELEMENTS.items()}


def create_environment(
    template_dirs: Iterable[Path] = (),
    registry: DefaultsRegistry | None = None,
) -> Environment:
    """Create a Jinja environment exposing every element class as a global.

    Elements implement ``__html__`` so ``{{ Div.tag().content(title) }}`` is
    inserted without double escaping. With a ``registry`` the globals build
    elements bound to it, and the ``render`` filter renders any element
    against it instead of the process-wide defaults.
    """

    dirs: List[str] = [str(path) for path in template_dirs]
    env = Environment(
        loader=FileSystemLoader(dirs) if dirs else None,
        autoescape=select_autoescape(["html", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    env.globals.update(element_globals(registry))

    def render_element(element: Element) -> Markup:
        return Markup(element.render(registry=registry))

    env.filters["render"] = render_element
    return env


__all__ = ["BoundElement", "create_environment", "element_globals"]
