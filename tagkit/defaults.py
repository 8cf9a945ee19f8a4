"""Default attribute layers: providers, the global registry and resolution."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Protocol, runtime_checkable

from .attributes import AttributeSet
from .errors import ConfigurationError, Message


@runtime_checkable
class DefaultsProvider(Protocol):
    def get_defaults(self, element: Any) -> Mapping[str, object]: ...


@runtime_checkable
class ThemeProvider(Protocol):
    def apply(self, element: Any, theme: str) -> Mapping[str, object]: ...


class DefaultsRegistry:
    """Per element class default attributes.

    A process-wide instance backs :func:`set_defaults` and friends; elements
    may be handed another instance with ``with_registry`` or
    ``render(registry=...)`` to keep a render pass isolated.
    """

    def __init__(self) -> None:
        self._defaults: Dict[type, AttributeSet] = {}

    def set_defaults(self, element_type: type, attributes: Mapping[str, object] | AttributeSet) -> None:
        if not isinstance(attributes, AttributeSet):
            attributes = AttributeSet(attributes)
        if attributes:
            self._defaults[element_type] = attributes
        else:
            self._defaults.pop(element_type, None)

    def get_defaults(self, element_type: type) -> AttributeSet:
        return self._defaults.get(element_type, AttributeSet())

    def reset(self, element_type: type | None = None) -> None:
        if element_type is None:
            self._defaults.clear()
        else:
            self._defaults.pop(element_type, None)

    def element_types(self) -> List[type]:
        return list(self._defaults)

    @contextmanager
    def scoped(self) -> Iterator["DefaultsRegistry"]:
        """Restore the registry content on exit."""

        snapshot = dict(self._defaults)
        try:
            yield self
        finally:
            self._defaults = snapshot

    def __len__(self) -> int:
        return len(self._defaults)


default_registry = DefaultsRegistry()


def set_defaults(element_type: type, attributes: Mapping[str, object] | AttributeSet) -> None:
    default_registry.set_defaults(element_type, attributes)


def get_defaults(element_type: type) -> AttributeSet:
    return default_registry.get_defaults(element_type)


def reset_defaults(element_type: type | None = None) -> None:
    default_registry.reset(element_type)


_PROVIDERS: Dict[str, object] = {}


def register_provider(name: str, provider: object) -> None:
    """Register a provider class or instance under ``name``."""

    if not name:
        raise ConfigurationError("Provider name cannot be empty.")
    _PROVIDERS[name] = provider


def unregister_provider(name: str) -> None:
    _PROVIDERS.pop(name, None)


def providers() -> List[str]:
    return sorted(_PROVIDERS)


def resolve_provider(provider: object, method: str) -> object:
    """Turn a provider reference into an instance implementing ``method``.

    References may be instances, classes (instantiated without arguments) or
    names passed to :func:`register_provider`.
    """

    if isinstance(provider, str):
        if provider not in _PROVIDERS:
            registered = ", ".join(providers()) or "none"
            raise ConfigurationError(Message.UNKNOWN_PROVIDER.format_message(provider, registered))
        provider = _PROVIDERS[provider]
    if isinstance(provider, type):
        provider = provider()
    if not callable(getattr(provider, method, None)):
        raise ConfigurationError(Message.INVALID_PROVIDER.format_message(provider, method))
    return provider


def resolve(
    class_defaults: Mapping[str, object] | AttributeSet,
    provider_layers: Iterable[Mapping[str, object] | AttributeSet],
    global_defaults: Mapping[str, object] | AttributeSet,
    user_values: Mapping[str, object] | AttributeSet,
) -> AttributeSet:
    """Merge the default layers, later layers winning key by key.

    An ``Absent`` value in a later layer removes the key from the result.
    """

    merged = AttributeSet().merge(class_defaults)
    for layer in provider_layers:
        merged = merged.merge(layer)
    merged = merged.merge(global_defaults)
    merged = merged.merge(user_values)
    return merged.resolved()


__all__ = [
    "DefaultsProvider",
    "DefaultsRegistry",
    "ThemeProvider",
    "default_registry",
    "get_defaults",
    "providers",
    "register_provider",
    "reset_defaults",
    "resolve",
    "resolve_provider",
    "set_defaults",
    "unregister_provider",
]
