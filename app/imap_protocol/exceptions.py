"""Exceptions for IMAP error catalogs and raw protocol failures.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum, unique

from errors import BaseDomainException


@unique
class ErrorCodes(IntEnum):
    """Error codes."""

    BASE_ERROR = 0
    DUPLICATE_EXTENSION_ERROR = 1
    UNKNOWN_EXTENSION_TARGET_ERROR = 2
    EXTENSION_DEPTH_ERROR = 3
    UNKNOWN_ALIAS_ERROR = 4
    UNKNOWN_CODE_ERROR = 5
    MISSING_CATEGORY_ERROR = 6
    DUPLICATE_CODE_ERROR = 7


class CatalogError(BaseDomainException):
    """Catalog construction or lookup error."""

    code: ErrorCodes = ErrorCodes.BASE_ERROR


class DuplicateExtensionError(CatalogError):
    """Two codes extend the same base code."""

    code = ErrorCodes.DUPLICATE_EXTENSION_ERROR


class UnknownExtensionTargetError(CatalogError):
    """Extension target is not declared before the extending code."""

    code = ErrorCodes.UNKNOWN_EXTENSION_TARGET_ERROR


class ExtensionDepthError(CatalogError):
    """Extension target is itself an extended variant."""

    code = ErrorCodes.EXTENSION_DEPTH_ERROR


class UnknownAliasError(CatalogError):
    """Aliased code is absent from the generic catalog."""

    code = ErrorCodes.UNKNOWN_ALIAS_ERROR


class UnknownCodeError(CatalogError, LookupError):
    """Code is not registered in the catalog."""

    code = ErrorCodes.UNKNOWN_CODE_ERROR


class MissingCategoryError(CatalogError):
    """Code declared without category."""

    code = ErrorCodes.MISSING_CATEGORY_ERROR


class DuplicateCodeError(CatalogError):
    """Code identifier declared twice."""

    code = ErrorCodes.DUPLICATE_CODE_ERROR


class MessagingError(Exception):
    """Raw failure reported by the mail protocol client.

    ``next_exception`` is the nested failure the client chained, it
    defaults to ``__cause__``.
    """

    def __init__(
        self,
        message: str | None = None,
        next_exception: BaseException | None = None,
    ) -> None:
        """Create failure with optional nested exception."""
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        self.message = message
        if next_exception is not None:
            self.__cause__ = next_exception

    @property
    def next_exception(self) -> BaseException | None:
        """Get nested failure."""
        return self.__cause__


class ConnectQuotaExceededError(MessagingError):
    """Server refused another connection for this login."""
