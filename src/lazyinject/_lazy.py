from __future__ import annotations

import threading
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar, overload

from ._identifiers import is_symbolic, registration_name
from ._resolution import resolve, resolve_optional


if TYPE_CHECKING:
    from collections.abc import Callable

    from ._identifiers import Name
    from ._registry import RegistryContext


T = TypeVar("T")
V = TypeVar("V")

# Per-instance cells when used as a class attribute.
_CELLS_ATTR = "__lazyinject_cells__"


class _State(Enum):
    UNEVALUATED = "unevaluated"
    RESOLVED = "resolved"
    FAILED = "failed"


class _LazyCell(Generic[V]):
    """Evaluate-once slot: unevaluated -> resolved | failed, never back."""

    __slots__ = ("_error", "_lock", "_state", "_value")

    def __init__(self) -> None:
        # Held while the factory runs: same-thread re-entry works, but two threads
        # first-accessing cells whose factories read each other deadlock.
        self._lock = threading.RLock()
        self._state = _State.UNEVALUATED
        self._value: V | None = None
        self._error: Exception | None = None

    @property
    def is_evaluated(self) -> bool:
        return self._state is not _State.UNEVALUATED

    def get(self, evaluate: Callable[[], V]) -> V:
        with self._lock:
            if self._state is _State.UNEVALUATED:
                try:
                    self._value = evaluate()
                except Exception as e:
                    self._error = e
                    self._state = _State.FAILED
                    raise
                self._state = _State.RESOLVED

            if self._state is _State.FAILED:
                raise self._error  # type: ignore[misc]

            return self._value  # type: ignore[return-value]

    def set(self, value: V) -> None:
        with self._lock:
            self._value = value
            self._error = None
            self._state = _State.RESOLVED


class _LazyInjection(Generic[T, V]):
    def __init__(
        self,
        service_type: type[T],
        name: Name | None = None,
        *,
        identifier: Name | None = None,
        context: RegistryContext | None = None,
    ) -> None:
        self.service_type = service_type
        # A symbolic identifier passed positionally is treated like `identifier=`.
        if identifier is None and is_symbolic(name):
            name, identifier = None, name
        self._identifier = identifier
        self._name = registration_name(name, identifier)
        self._context = context
        self._cell: _LazyCell[V] = _LazyCell()
        self._attr: str | None = None

    @property
    def name(self) -> str | None:
        """Registration name this accessor resolves, fixed at construction."""
        return self._name

    @property
    def identifier(self) -> Name | None:
        return self._identifier

    @property
    def value(self) -> V:
        return self._cell.get(self._evaluate)

    @value.setter
    def value(self, value: V) -> None:
        self._cell.set(value)

    @property
    def is_evaluated(self) -> bool:
        return self._cell.is_evaluated

    def _evaluate(self) -> V:
        raise NotImplementedError

    # Descriptor protocol: one lazy cell per owner instance.

    def __set_name__(self, owner: type, attr: str) -> None:
        self._attr = attr

    @overload
    def __get__(self, instance: None, owner: type | None = None) -> _LazyInjection[T, V]: ...

    @overload
    def __get__(self, instance: object, owner: type | None = None) -> V: ...

    def __get__(self, instance: object | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return self._cell_of(instance).get(self._evaluate)

    def __set__(self, instance: object, value: V) -> None:
        self._cell_of(instance).set(value)

    def _cell_of(self, instance: object) -> _LazyCell[V]:
        if self._attr is None:
            msg = f"{type(self).__name__} must be declared as a class attribute to be used as a descriptor"
            raise TypeError(msg)
        cells: dict[str, _LazyCell[V]] = instance.__dict__.setdefault(_CELLS_ATTR, {})
        cell = cells.get(self._attr)
        if cell is None:
            cell = cells.setdefault(self._attr, _LazyCell())
        return cell

    def __repr__(self) -> str:
        type_repr = getattr(self.service_type, "__name__", repr(self.service_type))
        return f"{type(self).__name__}({type_repr}, name={self._name!r})"


class Inject(_LazyInjection[T, T]):
    """Lazily resolve a service on first access and keep the result.

    The container lookup happens on first access, not at construction, so the
    active container may be switched or the registration added in between.
    A missing registration raises MissingRegistrationError on first access,
    and every later access raises it again.

    Example:
      greeter = Inject(Greeter, "en")
      register(Greeter, lambda: EnglishGreeter(), "en")
      greeter.value.greet()

      class Handler:
          greeter = Inject(Greeter, Language.EN)

    """

    def _evaluate(self) -> T:
        return resolve(self.service_type, self._name, context=self._context)


class SafeInject(_LazyInjection[T, "T | None"]):
    """Like `Inject`, but a missing registration yields None (and None is kept).

    `try_resolve_now` retries without touching the cached value; assign its
    result to `value` to adopt it.
    """

    def _evaluate(self) -> T | None:
        return resolve_optional(self.service_type, self._name, context=self._context)

    def try_resolve_now(self) -> T | None:
        return self._evaluate()

