from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable


@runtime_checkable
class InjectIdentifiable(Protocol):
    """Symbolic alias for a registration name."""

    @property
    def inject_id(self) -> str: ...


class ServiceIdentifier(Enum):
    """Base for closed sets of registration names.

    Example:
      class Storage(ServiceIdentifier):
          LOCAL = auto()
          REMOTE = auto()

      register(Store, LocalStore, identifier=Storage.LOCAL)
      # bound under the name "LOCAL"

    """

    @property
    def inject_id(self) -> str:
        return self.name


if TYPE_CHECKING:
    Name = str | InjectIdentifiable | Enum


def project_name(name: Name) -> str:
    """Stable string projection of a raw name or symbolic identifier."""
    if isinstance(name, InjectIdentifiable):
        return name.inject_id
    # Plain enums (including str-mixins) project to their symbolic label.
    if isinstance(name, Enum):
        return name.name
    if isinstance(name, str):
        return name
    msg = f"Registration name must be a str or an identifier, got {type(name).__name__}"
    raise TypeError(msg)


def registration_name(name: Name | None = None, identifier: Name | None = None) -> str | None:
    """Pick the binding name: explicit name, else the identifier's projection, else unnamed."""
    if name is not None:
        return project_name(name)
    if identifier is not None:
        return project_name(identifier)
    return None


def is_symbolic(name: object) -> bool:
    """True for any non-string name; enum members count even when they mix in `str`."""
    if name is None:
        return False
    return isinstance(name, Enum) or not isinstance(name, str)
