from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any, TypeVar

from dependency_injector import providers

from ._identifiers import registration_name
from ._registry import get_context


if TYPE_CHECKING:
    from collections.abc import Callable

    from ._identifiers import Name
    from ._registry import RegistryContext
    from ._scope import ObjectScope

    T = TypeVar("T")


logger = logging.getLogger(__name__)

# (service type, name) -> provider name, shared by every store.
_keys: dict[tuple[Any, str | None], str] = {}
_taken_keys: set[str] = set()
_keys_lock = threading.Lock()


def type_name(service_type: Any) -> str:
    return getattr(service_type, "__name__", None) or repr(service_type)


def registration_key(service_type: Any, name: str | None = None) -> str:
    """Provider name used for the (service type, name) pair inside a container.

    Pairs are keyed by the type object itself, so two distinct classes sharing
    a qualname (or `list[int]` and `list[str]`) never share a provider name.
    The readable base gets a `#<n>` suffix when another pair already owns it.

    Example:
      registration_key(Greeter)       -> "app.greeting.Greeter"
      registration_key(Greeter, "a")  -> "app.greeting.Greeter[a]"

    """
    pair = (service_type, name)
    with _keys_lock:
        key = _keys.get(pair)
        if key is None:
            base = _readable_key(service_type, name)
            key, n = base, 1
            while key in _taken_keys:
                n += 1
                key = f"{base}#{n}"
            _keys[pair] = key
            _taken_keys.add(key)
        return key


def find_registration_key(service_type: Any, name: str | None = None) -> str | None:
    """Provider name for the pair, or None if the pair was never registered anywhere."""
    with _keys_lock:
        return _keys.get((service_type, name))


def _readable_key(service_type: Any, name: str | None) -> str:
    module = getattr(service_type, "__module__", None)
    qualname = getattr(service_type, "__qualname__", None)
    # Generic aliases forward __module__/__qualname__ to their origin.
    if isinstance(service_type, type) and module and qualname:
        base = f"{module}.{qualname}"
    else:
        base = repr(service_type)
    return base if name is None else f"{base}[{name}]"


def register(
    service_type: type[T],
    factory: Callable[[], T],
    name: Name | None = None,
    *,
    identifier: Name | None = None,
    scope: ObjectScope | None = None,
    context: RegistryContext | None = None,
) -> providers.Provider:
    """Bind `factory` to (service_type, name) in the active container.

    The factory is not called here, only when a matching resolution occurs.
    Re-registering the same key replaces the previous binding.
    Returns the dependency-injector provider so callers can keep configuring it.

    Example:
      register(Greeter, lambda: EnglishGreeter(), "en", scope=ObjectScope.TRANSIENT)

    """
    if not callable(factory):
        msg = f"Factory for {type_name(service_type)} must be callable, got {type(factory).__name__}"
        raise TypeError(msg)

    ctx = get_context(context)
    resolved_scope = scope if scope is not None else ctx.default_scope
    provider = resolved_scope.provider_for(factory)
    return _bind(ctx, service_type, registration_name(name, identifier), provider)


def register_instance(
    service_type: type[T],
    instance: T,
    name: Name | None = None,
    *,
    identifier: Name | None = None,
    context: RegistryContext | None = None,
) -> providers.Provider:
    """Bind a pre-built instance (always shared)."""
    return _bind(get_context(context), service_type, registration_name(name, identifier), providers.Object(instance))


def unregister(
    service_type: Any,
    name: Name | None = None,
    *,
    identifier: Name | None = None,
    context: RegistryContext | None = None,
) -> bool:
    """Remove a binding from the active container. Returns False if there was none."""
    store = get_context(context).active
    key = find_registration_key(service_type, registration_name(name, identifier))
    if key is None or key not in store.providers:
        return False
    delattr(store, key)
    return True


def is_registered(
    service_type: Any,
    name: Name | None = None,
    *,
    identifier: Name | None = None,
    context: RegistryContext | None = None,
) -> bool:
    store = get_context(context).active
    key = find_registration_key(service_type, registration_name(name, identifier))
    return key is not None and key in store.providers


def _bind(ctx: RegistryContext, service_type: Any, name: str | None, provider: providers.Provider) -> providers.Provider:
    key = registration_key(service_type, name)
    store = ctx.active
    if key in store.providers:
        logger.debug("Replacing registration %s", key)
    store.set_provider(key, provider)
    return provider
