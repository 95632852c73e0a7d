from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar, overload

from ._errors import MissingRegistrationError
from ._identifiers import registration_name
from ._registration import find_registration_key, type_name
from ._registry import get_context


if TYPE_CHECKING:
    from dependency_injector import providers

    from ._identifiers import Name
    from ._registry import RegistryContext

    T = TypeVar("T")


logger = logging.getLogger(__name__)


@overload
def resolve(
    service_type: type[T],
    name: Name | None = ...,
    *,
    identifier: Name | None = ...,
    context: RegistryContext | None = ...,
) -> T: ...


@overload
def resolve(
    service_type: Any,
    name: Name | None = ...,
    *,
    identifier: Name | None = ...,
    context: RegistryContext | None = ...,
) -> Any: ...


def resolve(
    service_type: Any,
    name: Name | None = None,
    *,
    identifier: Name | None = None,
    context: RegistryContext | None = None,
) -> Any:
    """Resolve (service_type, name) from the active container.

    The active container is read at call time, so factories that resolve their
    own dependencies see the same store as the outer call.

    Raises:
      MissingRegistrationError: no binding exists for the key.

    """
    attempted = registration_name(name, identifier)
    provider = _lookup(service_type, attempted, context)
    if provider is None:
        raise MissingRegistrationError(type_name(service_type), attempted)
    return provider()


@overload
def resolve_optional(
    service_type: type[T],
    name: Name | None = ...,
    *,
    identifier: Name | None = ...,
    context: RegistryContext | None = ...,
) -> T | None: ...


@overload
def resolve_optional(
    service_type: Any,
    name: Name | None = ...,
    *,
    identifier: Name | None = ...,
    context: RegistryContext | None = ...,
) -> Any | None: ...


def resolve_optional(
    service_type: Any,
    name: Name | None = None,
    *,
    identifier: Name | None = None,
    context: RegistryContext | None = None,
) -> Any | None:
    """Like `resolve`, but returns None when the key is not registered.

    Only the requested key is checked: errors raised while the factory builds
    the instance (including missing nested registrations) still propagate.
    """
    attempted = registration_name(name, identifier)
    provider = _lookup(service_type, attempted, context)
    if provider is None:
        logger.debug("No registration for %s (name: %s)", type_name(service_type), attempted)
        return None
    return provider()


def _lookup(service_type: Any, name: str | None, context: RegistryContext | None) -> providers.Provider | None:
    key = find_registration_key(service_type, name)
    if key is None:
        return None
    return get_context(context).active.providers.get(key)
