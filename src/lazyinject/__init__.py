"""Lazy injection helpers over a swappable dependency-injector container.

This package wraps `dependency_injector.containers.DynamicContainer` with a
process-wide default container that can be swapped for a custom one (handy in
tests), registration helpers keyed by service type and an optional name, and
lazy accessors that resolve on first use.

Exports:
- `RegistryContext`: holds the active container; `default_context` is the
  process-wide instance used when no context is passed.
- `active_container`, `use_custom_container`, `use_default_container`: switch
  the default context's active container.
- `register`, `register_instance`, `unregister`, `is_registered`: bind
  factories to (service type, name) keys with an `ObjectScope`.
- `resolve`, `resolve_optional`: look a service up, raising
  `MissingRegistrationError` or returning None when it is not registered.
- `Inject`, `SafeInject`: lazy accessors, usable standalone (`.value`) or as
  class attributes.
- `ServiceIdentifier`, `InjectIdentifiable`: symbolic registration names.
- `DescribableError`, `DescribedError`, `describe`: errors that describe
  themselves with a plain text message.
"""

from ._errors import DescribableError, DescribedError, MissingRegistrationError, describe
from ._identifiers import InjectIdentifiable, ServiceIdentifier, registration_name
from ._lazy import Inject, SafeInject
from ._registration import is_registered, register, register_instance, registration_key, unregister
from ._registry import (
    RegistryContext,
    active_container,
    default_context,
    use_custom_container,
    use_default_container,
)
from ._resolution import resolve, resolve_optional
from ._scope import ObjectScope


__all__ = [
    "DescribableError",
    "DescribedError",
    "Inject",
    "InjectIdentifiable",
    "MissingRegistrationError",
    "ObjectScope",
    "RegistryContext",
    "SafeInject",
    "ServiceIdentifier",
    "active_container",
    "default_context",
    "describe",
    "is_registered",
    "register",
    "register_instance",
    "registration_key",
    "registration_name",
    "resolve",
    "resolve_optional",
    "unregister",
    "use_custom_container",
    "use_default_container",
]
