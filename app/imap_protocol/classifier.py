"""Classification of raw IMAP failures.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Any, Mapping

from config import Settings
from constants import FULL_NAME_PROPERTY, UNKNOWN_PLACEHOLDER

from .base import FallbackClassifier, FolderRef, IMAPCapabilities, log
from .codes import IMAPCodes
from .dataclasses import (
    ContextBundle,
    FolderInvalidationEvent,
    MailConfig,
    StructuredError,
)
from .exceptions import ConnectQuotaExceededError
from .factory import ExceptionFactory
from .mail_codes import MailCodes
from .utils import best_effort, get_property


def is_folder_absent(text: str) -> bool:
    """Check failure text for wording of a missing mailbox."""
    text = text.lower()
    if "not found" in text:
        return True
    return "mailbox" in text and (
        "doesn't exist" in text or "does not exist" in text
    )


class ProtocolClassifier:
    """Turn raw IMAP failures into structured errors.

    Checks run in order and the first match wins:

    1. nested connection quota failure, identity is not needed;
    2. no identity context, handed to the fallback classifier;
    3. folder absence wording, caches of the folder are invalidated;
    4. anything else, handed to the fallback classifier.

    Side effects never change the returned error.
    """

    def __init__(
        self,
        factory: ExceptionFactory,
        mail_factory: ExceptionFactory,
        fallback: FallbackClassifier,
        capabilities: IMAPCapabilities,
        settings: Settings,
    ) -> None:
        """Set factories, fallback and side-effect collaborators."""
        self._factory = factory
        self._mail_factory = mail_factory
        self._fallback = fallback
        self._capabilities = capabilities
        self._settings = settings

    def classify(
        self,
        failure: BaseException,
        config: MailConfig | None = None,
        context: ContextBundle | None = None,
        folder: FolderRef | None = None,
        account_id: int = 0,
        aux_props: Mapping[str, Any] | None = None,
    ) -> StructuredError:
        """Classify failure.

        :param BaseException failure: raw protocol failure
        :param MailConfig | None config: account connection parameters
        :param ContextBundle | None context: session identity
        :param FolderRef | None folder: folder the failed call touched
        :param int account_id: mail account id
        :param Mapping | None aux_props: extra properties, only
            ``fullName`` is consulted
        :return StructuredError: classified error
        """
        nested = getattr(failure, "next_exception", None) or failure.__cause__
        if isinstance(nested, ConnectQuotaExceededError):
            log.debug(f"Connection quota exceeded: {nested!r}")
            server = config.server if config else UNKNOWN_PLACEHOLDER
            login = config.login if config else UNKNOWN_PLACEHOLDER
            return self._factory.create(
                IMAPCodes.CONNECTION_UNAVAILABLE,
                server,
                login,
                cause=nested,
            )

        if context is None:
            log.debug("No session context, using fallback classifier")
            return self._fallback.classify(failure, config, context, folder)

        if not is_folder_absent(str(failure)):
            return self._fallback.classify(failure, config, context, folder)

        full_name = get_property(FULL_NAME_PROPERTY, aux_props)
        if full_name is None and folder is not None:
            full_name = folder.full_name

        if full_name is None:
            log.debug(f"Unknown folder not found for account {account_id}")
            self._clear_cache(account_id, context)
            return self._mail_factory.create(
                MailCodes.FOLDER_NOT_FOUND_SIMPLE,
                cause=failure,
            )

        log.debug(f"Folder {full_name!r} not found for account {account_id}")
        self._remove_cached_entry(full_name, account_id, context)
        self._remove_cached_rights(full_name, account_id, context)
        self._remove_user_flags(full_name, account_id, context)
        self._publish_invalidation(full_name, account_id, context)

        return self._mail_factory.create(
            MailCodes.FOLDER_NOT_FOUND,
            full_name,
            cause=failure,
        )

    @best_effort
    def _clear_cache(self, account_id: int, context: ContextBundle) -> None:
        self._capabilities.folder_cache.clear_cache(account_id, context)

    @best_effort
    def _remove_cached_entry(
        self,
        full_name: str,
        account_id: int,
        context: ContextBundle,
    ) -> None:
        self._capabilities.folder_cache.remove_cached_entry(
            full_name,
            account_id,
            context,
        )

    @best_effort
    def _remove_cached_rights(
        self,
        full_name: str,
        account_id: int,
        context: ContextBundle,
    ) -> None:
        self._capabilities.rights_cache.remove_cached_rights(
            full_name,
            account_id,
            context,
        )

    @best_effort
    def _remove_user_flags(
        self,
        full_name: str,
        account_id: int,
        context: ContextBundle,
    ) -> None:
        self._capabilities.flags_cache.remove_user_flags(
            full_name,
            account_id,
            context,
        )

    @best_effort
    def _publish_invalidation(
        self,
        full_name: str,
        account_id: int,
        context: ContextBundle,
    ) -> None:
        publisher = self._capabilities.event_publisher
        if publisher is None or not self._settings.PUBLISH_FOLDER_EVENTS:
            return

        publisher.post_event(
            FolderInvalidationEvent(
                folder=self._settings.prepare_full_name(account_id, full_name),
                context_id=context.context_id,
                user_id=context.user_id,
                session=context,
            ),
        )
