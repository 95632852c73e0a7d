from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DescribableError(Protocol):
    """Anything that can describe itself as a human-readable failure reason."""

    def message(self) -> str: ...


class DescribedError(Exception):
    """Exception carrying a plain text message.

    Lets a bare string satisfy `DescribableError`:

      raise DescribedError("database is not configured")

    """

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text

    def message(self) -> str:
        return self.text


class MissingRegistrationError(DescribedError, LookupError):
    """No binding exists for the requested (service type, name) key in the active store."""

    def __init__(self, service_type_name: str, attempted_name: str | None = None) -> None:
        suffix = "." if attempted_name is None else f" and name: {attempted_name}."
        super().__init__(f"Please make sure you register {service_type_name} with its component{suffix}")
        self.service_type_name = service_type_name
        self.attempted_name = attempted_name


def describe(error: str | BaseException | DescribableError) -> DescribableError:
    """Return `error` if it already describes itself, otherwise wrap its text."""
    if isinstance(error, DescribableError):
        return error
    return DescribedError(str(error))
