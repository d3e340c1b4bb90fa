"""Collaborator interfaces of the IMAP error layer.

Caches, the event publisher and the live connection live outside of this
package. They are injected as an :class:`IMAPCapabilities` bundle.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from loguru import logger as loguru_logger

from .dataclasses import (
    ContextBundle,
    FolderInvalidationEvent,
    MailConfig,
    StructuredError,
)

log = loguru_logger.bind(name="imap_errors")


class FolderListingCache(Protocol):
    """Cached folder listings of mail accounts."""

    def remove_cached_entry(
        self,
        full_name: str,
        account_id: int,
        context: ContextBundle,
    ) -> None: ...

    def clear_cache(self, account_id: int, context: ContextBundle) -> None: ...


class RightsCache(Protocol):
    """Cached access rights of folders."""

    def remove_cached_rights(
        self,
        full_name: str,
        account_id: int,
        context: ContextBundle,
    ) -> None: ...


class UserFlagsCache(Protocol):
    """Cached user flags of folders."""

    def remove_user_flags(
        self,
        full_name: str,
        account_id: int,
        context: ContextBundle,
    ) -> None: ...


class EventPublisher(Protocol):
    """Event bus."""

    def post_event(self, event: FolderInvalidationEvent) -> None: ...


class ImapConnection(Protocol):
    """Live protocol connection."""

    def force_set_subscribed(self, full_name: str, subscribed: bool) -> None:
        """Set subscription flag on server regardless of local state."""


class ConnectionProvider(Protocol):
    """Source of an already open connection."""

    def opt_connection(self, context: ContextBundle) -> ImapConnection | None:
        """Get open connection of session or None."""


@runtime_checkable
class FolderRef(Protocol):
    """Folder handle of the protocol client."""

    full_name: str


class FallbackClassifier(Protocol):
    """Generic classification of raw messaging failures."""

    def classify(
        self,
        failure: BaseException,
        config: MailConfig | None,
        context: ContextBundle | None,
        folder: FolderRef | None,
    ) -> StructuredError: ...


@dataclass(frozen=True, slots=True)
class IMAPCapabilities:
    """Side-effect collaborators.

    Publisher and connection provider are optional, absence is a no-op.
    """

    folder_cache: FolderListingCache
    rights_cache: RightsCache
    flags_cache: UserFlagsCache
    event_publisher: EventPublisher | None = None
    connection_provider: ConnectionProvider | None = None
