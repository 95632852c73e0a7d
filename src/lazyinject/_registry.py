from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING

from dependency_injector import containers

from ._scope import ObjectScope


if TYPE_CHECKING:
    from collections.abc import Iterator


logger = logging.getLogger(__name__)


class RegistryContext:
    """Holds the active container: a custom store when one is installed, else the default.

    - switching is a whole-value replacement, never a merge
    - `use_default` drops the custom store and is idempotent
    - `default_scope` applies to registrations that do not pass a scope.
    """

    def __init__(
        self,
        default: containers.DynamicContainer | None = None,
        *,
        default_scope: ObjectScope = ObjectScope.SINGLETON,
    ) -> None:
        self._default = default if default is not None else containers.DynamicContainer()
        self._custom: containers.DynamicContainer | None = None
        self._lock = threading.RLock()
        self.default_scope = default_scope

    @property
    def active(self) -> containers.DynamicContainer:
        with self._lock:
            return self._custom if self._custom is not None else self._default

    @property
    def default(self) -> containers.DynamicContainer:
        return self._default

    @property
    def is_custom(self) -> bool:
        with self._lock:
            return self._custom is not None

    def use_custom(self, store: containers.DynamicContainer) -> None:
        """Route every following registration and resolution to `store`."""
        with self._lock:
            self._custom = store
        logger.debug("Switched active container to custom store %r", store)

    def use_default(self) -> None:
        with self._lock:
            self._custom = None
        logger.debug("Switched active container to the default store")

    @contextmanager
    def using(self, store: containers.DynamicContainer) -> Iterator[containers.DynamicContainer]:
        """Install `store` for the duration of the block, then restore the previous selection."""
        with self._lock:
            previous = self._custom
            self._custom = store
        try:
            yield store
        finally:
            with self._lock:
                self._custom = previous


default_context = RegistryContext()


def get_context(context: RegistryContext | None = None) -> RegistryContext:
    return context if context is not None else default_context


def active_container() -> containers.DynamicContainer:
    return default_context.active


def use_custom_container(store: containers.DynamicContainer) -> None:
    default_context.use_custom(store)


def use_default_container() -> None:
    default_context.use_default()
