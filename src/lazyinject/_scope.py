from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from dependency_injector import providers


if TYPE_CHECKING:
    from collections.abc import Callable


class ObjectScope(Enum):
    """How instances produced by a registration are shared.

    Lifetimes are implemented by dependency-injector providers:
    - TRANSIENT: `providers.Factory`, a fresh instance per resolution
    - SINGLETON: `providers.Singleton`, one instance per registration
    - THREAD_SAFE_SINGLETON: `providers.ThreadSafeSingleton`
    - THREAD_LOCAL: `providers.ThreadLocalSingleton`, one instance per thread
    """

    TRANSIENT = "transient"
    SINGLETON = "singleton"
    THREAD_SAFE_SINGLETON = "thread_safe_singleton"
    THREAD_LOCAL = "thread_local"

    def provider_for(self, factory: Callable[[], object]) -> providers.Provider:
        return _PROVIDER_TYPES[self](factory)


_PROVIDER_TYPES: dict[ObjectScope, type[providers.Provider]] = {
    ObjectScope.TRANSIENT: providers.Factory,
    ObjectScope.SINGLETON: providers.Singleton,
    ObjectScope.THREAD_SAFE_SINGLETON: providers.ThreadSafeSingleton,
    ObjectScope.THREAD_LOCAL: providers.ThreadLocalSingleton,
}
