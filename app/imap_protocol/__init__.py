"""IMAP error catalog, factory and classifier.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .base import (
    ConnectionProvider,
    EventPublisher,
    FallbackClassifier,
    FolderListingCache,
    FolderRef,
    IMAPCapabilities,
    ImapConnection,
    RightsCache,
    UserFlagsCache,
)
from .catalog import CodeCatalog, build_imap_catalog, build_mail_catalog
from .classifier import ProtocolClassifier, is_folder_absent
from .codes import IMAPCodes
from .dataclasses import (
    ContextBundle,
    ErrorCode,
    FolderInvalidationEvent,
    MailConfig,
    StructuredError,
)
from .exceptions import (
    CatalogError,
    ConnectQuotaExceededError,
    DuplicateCodeError,
    DuplicateExtensionError,
    ExtensionDepthError,
    MessagingError,
    MissingCategoryError,
    UnknownAliasError,
    UnknownCodeError,
    UnknownExtensionTargetError,
)
from .extension import ExtensionResolver
from .factory import ExceptionFactory
from .fallback import MessagingFallbackClassifier
from .mail_codes import MailCodes
from .utils import setup_logging

__all__ = [
    "CatalogError",
    "CodeCatalog",
    "ConnectQuotaExceededError",
    "ConnectionProvider",
    "ContextBundle",
    "DuplicateCodeError",
    "DuplicateExtensionError",
    "ErrorCode",
    "EventPublisher",
    "ExceptionFactory",
    "ExtensionDepthError",
    "ExtensionResolver",
    "FallbackClassifier",
    "FolderInvalidationEvent",
    "FolderListingCache",
    "FolderRef",
    "IMAPCapabilities",
    "IMAPCodes",
    "ImapConnection",
    "MailCodes",
    "MailConfig",
    "MessagingError",
    "MessagingFallbackClassifier",
    "MissingCategoryError",
    "ProtocolClassifier",
    "RightsCache",
    "StructuredError",
    "UnknownAliasError",
    "UnknownCodeError",
    "UnknownExtensionTargetError",
    "UserFlagsCache",
    "build_imap_catalog",
    "build_mail_catalog",
    "is_folder_absent",
    "setup_logging",
]
