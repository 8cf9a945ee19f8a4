from typing import Any, Dict

import pytest

from tagkit.defaults import default_registry, unregister_provider
from tagkit.tags import Html


class DefaultProvider:
    """Deterministic defaults: documents get a class, everything else a class and a title."""

    def get_defaults(self, element: Any) -> Dict[str, str]:
        if isinstance(element, Html):
            return {"class": "default-class"}
        return {"class": "default-class", "title": "default-title"}


class DefaultThemeProvider:
    def apply(self, element: Any, theme: str) -> Dict[str, str]:
        if isinstance(element, Html):
            return {
                "default": {"class": "tag-default"},
                "primary": {"class": "tag-primary"},
            }.get(theme, {})
        return {
            "highlight": {"style": "background-color: yellow;"},
            "muted": {"class": "text-muted"},
        }.get(theme, {})


@pytest.fixture(autouse=True)
def _reset_registry():
    default_registry.reset()
    yield
    default_registry.reset()
    unregister_provider("stub-theme")
    unregister_provider("stub-defaults")


@pytest.fixture
def default_provider():
    return DefaultProvider


@pytest.fixture
def theme_provider():
    return DefaultThemeProvider
