"""Structured error factory.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import StrEnum

from config import Settings
from constants import GENERIC_ERROR_MESSAGE, GENERIC_RETRY_MESSAGE
from enums import LogLevel

from .base import IMAPCapabilities, ImapConnection
from .catalog import CodeCatalog
from .codes import IMAPCodes
from .dataclasses import ContextBundle, ErrorCode, StructuredError
from .extension import ExtensionResolver
from .rendering import render_template
from .utils import best_effort


class ExceptionFactory:
    """Render codes of one catalog into structured errors."""

    def __init__(
        self,
        catalog: CodeCatalog,
        resolver: ExtensionResolver,
        capabilities: IMAPCapabilities,
        settings: Settings,
    ) -> None:
        """Set catalog, extension index and side-effect collaborators."""
        self._catalog = catalog
        self._resolver = resolver
        self._capabilities = capabilities
        self._settings = settings

    @property
    def prefix(self) -> str:
        """Get namespace tag of produced errors."""
        return self._catalog.prefix

    def format_message(self, code: StrEnum, *args: object) -> str:
        """Render log template of `code` without any policy."""
        return render_template(self._catalog.get(code).message, args)

    def create(
        self,
        code: StrEnum,
        *args: object,
        context: ContextBundle | None = None,
        cause: BaseException | None = None,
        connection: ImapConnection | None = None,
    ) -> StructuredError:
        """Create structured error.

        With `context` and a registered extended variant, server, login,
        user id and context id are appended to `args` and the extended
        template is rendered as log message. Number, category and display
        message always come from `code` itself, so the display message
        never carries context values. Without an extended variant the
        context is dropped.

        :param StrEnum code: catalog identifier
        :param object args: template values in slot order
        :param ContextBundle | None context: session identity
        :param BaseException | None cause: wrapped failure
        :param ImapConnection | None connection: live connection for the
            folder access hook
        :raises UnknownCodeError: code is not registered
        :return StructuredError: rendered error
        """
        record = self._catalog.get(code)

        if code is IMAPCodes.NO_ACCESS:
            self._on_no_access(args, context, connection)

        base_message = render_template(record.message, args)
        log_message = base_message
        if context is not None:
            extended = self._resolver.resolve(code)
            if extended is not None:
                log_message = render_template(
                    extended.message,
                    (*args, *context.as_args()),
                )

        return StructuredError(
            number=record.number,
            prefix=self._catalog.prefix,
            category=record.category,
            log_message=log_message,
            display_message=self._get_display_message(record, base_message),
            cause=cause,
        )

    @staticmethod
    def _get_display_message(record: ErrorCode, rendered: str) -> str:
        if record.display_message is not None:
            return record.display_message

        category = record.category
        if category.log_level.implies(LogLevel.DEBUG) or category.displayable:
            return rendered

        if category.is_transient:
            return GENERIC_RETRY_MESSAGE
        return GENERIC_ERROR_MESSAGE

    def _on_no_access(
        self,
        args: tuple[object, ...],
        context: ContextBundle | None,
        connection: ImapConnection | None,
    ) -> None:
        """Forget a folder the user lost access to."""
        if not args or args[0] is None:
            return

        full_name = str(args[0])
        if full_name == self._settings.ROOT_FOLDER_ID:
            return

        if context is not None:
            self._remove_cached_entry(full_name, context)
            if connection is None:
                connection = self._opt_connection(context)

        if connection is not None:
            self._force_unsubscribe(connection, full_name)

    @best_effort
    def _remove_cached_entry(
        self,
        full_name: str,
        context: ContextBundle,
    ) -> None:
        self._capabilities.folder_cache.remove_cached_entry(
            full_name,
            context.account_id,
            context,
        )

    @best_effort
    def _opt_connection(self, context: ContextBundle) -> ImapConnection | None:
        provider = self._capabilities.connection_provider
        if provider is None:
            return None
        return provider.opt_connection(context)

    @best_effort
    def _force_unsubscribe(
        self,
        connection: ImapConnection,
        full_name: str,
    ) -> None:
        connection.force_set_subscribed(full_name, False)
