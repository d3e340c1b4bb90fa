"""Data classes for IMAP error handling.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from constants import FOLDER_EVENT_TOPIC
from enums import Category
from errors import IMAPError


@dataclass(frozen=True, slots=True)
class Define:
    """Declaration of a code with its own values."""

    message: str
    category: Category
    number: int
    display_message: str | None = None


@dataclass(frozen=True, slots=True)
class Extend:
    """Declaration of an extended variant of an earlier code.

    Number, category and display message come from ``base``.
    """

    message: str
    base: StrEnum


@dataclass(frozen=True, slots=True)
class Alias:
    """Declaration copying values from the generic catalog."""

    source: StrEnum
    extends: StrEnum | None = None
    message: str | None = None


Declaration = Define | Extend | Alias


@dataclass(frozen=True, slots=True)
class ErrorCode:
    """Resolved catalog record."""

    name: StrEnum
    message: str
    category: Category
    number: int
    display_message: str | None = None
    extends: StrEnum | None = None


@dataclass(frozen=True, slots=True)
class ContextBundle:
    """Session identity attached to pick an enriched code variant."""

    server: str
    login: str
    user_id: int
    context_id: int
    account_id: int = 0

    def as_args(self) -> tuple[object, ...]:
        """Get trailing template values in fixed order."""
        return (self.server, self.login, self.user_id, self.context_id)


@dataclass(frozen=True, slots=True)
class MailConfig:
    """Connection parameters of the mail account."""

    server: str
    login: str
    account_id: int = 0
    port: int | None = None


@dataclass(frozen=True)
class StructuredError:
    """Rendered error handed to callers."""

    number: int
    prefix: str
    category: Category
    log_message: str
    display_message: str
    cause: BaseException | None = None

    @property
    def error_code(self) -> str:
        """Get ``PREFIX-NNNN`` code."""
        return f"{self.prefix}-{self.number:04d}"

    def to_exception(self) -> IMAPError:
        """Wrap into a raisable exception."""
        return IMAPError(self)


@dataclass(frozen=True, slots=True)
class FolderInvalidationEvent:
    """Notification that a cached folder is gone on the server."""

    folder: str
    context_id: int
    user_id: int
    session: ContextBundle
    content_related: bool = False
    topic: str = FOLDER_EVENT_TOPIC

    def as_properties(self) -> dict[str, Any]:
        """Get event properties."""
        return {
            "topic": self.topic,
            "content_related": self.content_related,
            "folder": self.folder,
            "context": self.context_id,
            "user": self.user_id,
            "session": self.session,
        }


@dataclass(frozen=True, slots=True)
class LogSink:
    """Loguru file sink of a container, None id when no file is set."""

    handler_id: int | None
