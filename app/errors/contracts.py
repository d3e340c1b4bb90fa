"""Structured error contracts.

Defines a protocol for exceptions that carry a rendered structured error
and a lightweight carrier implementation callers can raise.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from imap_protocol.dataclasses import StructuredError


@runtime_checkable
class HasStructuredError(Protocol):
    """Exceptions that expose a rendered structured error."""

    def get_error(self) -> StructuredError:
        """Return structured error."""


class IMAPError(Exception):
    """Raisable carrier of a structured error.

    ``str()`` yields the operator-facing log message, the user-facing
    text is available via ``display_message``.
    """

    def __init__(self, error: StructuredError) -> None:
        """Create a carrier with the rendered error and its cause."""
        super().__init__(error.log_message)
        self._error = error
        self.__cause__ = error.cause

    def __repr__(self) -> str:
        """Return repr with error code."""
        return f"IMAPError({self._error.error_code!r}, {str(self)!r})"

    def get_error(self) -> StructuredError:
        """Return structured error."""
        return self._error

    @property
    def error_code(self) -> str:
        """Return ``PREFIX-NNNN`` code."""
        return self._error.error_code

    @property
    def display_message(self) -> str:
        """Return user-facing text."""
        return self._error.display_message


def find_structured_error(exc: BaseException) -> StructuredError | None:
    """Walk the cause chain and return the first carried structured error."""
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, HasStructuredError):
            return current.get_error()
        current = current.__cause__
    return None
