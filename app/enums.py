"""Enums.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from __future__ import annotations

from enum import Enum, IntEnum, StrEnum


class LogLevel(IntEnum):
    """Log verbosity of an error category.

    Higher value means the error is only worth logging at a more verbose
    level.
    """

    ERROR = 0
    WARNING = 1
    INFO = 2
    DEBUG = 3
    TRACE = 4

    def implies(self, other: LogLevel) -> bool:
        """Check that this level includes `other` level detail."""
        return self >= other


class CategoryType(StrEnum):
    """Category type names."""

    PERMISSION_DENIED = "PERMISSION_DENIED"
    USER_INPUT = "USER_INPUT"
    TRY_AGAIN = "TRY_AGAIN"
    CAPACITY = "CAPACITY"
    SERVICE_DOWN = "SERVICE_DOWN"
    CONFIGURATION = "CONFIGURATION"
    CONNECTIVITY = "CONNECTIVITY"
    CONFLICT = "CONFLICT"
    ERROR = "ERROR"
    WARNING = "WARNING"


class Category(Enum):
    """Error category.

    Carries a log level and a flag telling whether the rendered text of
    an error may be shown verbatim to end users.
    """

    PERMISSION_DENIED = (CategoryType.PERMISSION_DENIED, LogLevel.DEBUG, True)
    USER_INPUT = (CategoryType.USER_INPUT, LogLevel.DEBUG, True)
    CONFLICT = (CategoryType.CONFLICT, LogLevel.DEBUG, True)
    TRY_AGAIN = (CategoryType.TRY_AGAIN, LogLevel.INFO, False)
    CAPACITY = (CategoryType.CAPACITY, LogLevel.ERROR, True)
    WARNING = (CategoryType.WARNING, LogLevel.WARNING, True)
    SERVICE_DOWN = (CategoryType.SERVICE_DOWN, LogLevel.ERROR, False)
    CONFIGURATION = (CategoryType.CONFIGURATION, LogLevel.ERROR, False)
    CONNECTIVITY = (CategoryType.CONNECTIVITY, LogLevel.ERROR, False)
    ERROR = (CategoryType.ERROR, LogLevel.ERROR, False)

    def __init__(
        self,
        category_type: CategoryType,
        log_level: LogLevel,
        displayable: bool,
    ) -> None:
        """Unpack member value."""
        self.type = category_type
        self.log_level = log_level
        self.displayable = displayable

    @property
    def is_transient(self) -> bool:
        """Check if category denotes a retryable condition."""
        return self.type == CategoryType.TRY_AGAIN
