"""Tests for structured error factory.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from unittest.mock import Mock

import pytest

from config import Settings
from constants import GENERIC_ERROR_MESSAGE, GENERIC_RETRY_MESSAGE
from enums import Category
from errors import IMAPError
from imap_protocol import (
    CodeCatalog,
    ContextBundle,
    ExceptionFactory,
    ExtensionResolver,
    IMAPCapabilities,
    IMAPCodes,
    MailCodes,
    UnknownCodeError,
    build_imap_catalog,
    build_mail_catalog,
)
from imap_protocol.messages import NO_ACCESS_MSG, NO_READ_ACCESS_MSG
from imap_protocol.rendering import _SLOT

_CATALOG = build_imap_catalog(build_mail_catalog())
_RESOLVER = ExtensionResolver(_CATALOG)

_WITH_EXTENSION = [
    record.name for record in _CATALOG if _RESOLVER.resolve(record.name)
]
_WITHOUT_EXTENSION = [
    record.name for record in _CATALOG if not _RESOLVER.resolve(record.name)
]
_HIDDEN = [
    record.name for record in _CATALOG if not record.category.displayable
]


def _count_slots(template: str) -> int:
    highest = 0
    ordinal = 0
    for match in _SLOT.finditer(template):
        if match["conversion"] in "%n":
            continue
        if match["index"]:
            highest = max(highest, int(match["index"]))
        else:
            ordinal += 1
            highest = max(highest, ordinal)
    return highest


def _args_for(code: IMAPCodes) -> tuple[str, ...]:
    slots = _count_slots(_CATALOG.get(code).message)
    return tuple(f"arg{index}" for index in range(1, slots + 1))


class TestRendering:
    """Test rendering with and without context."""

    def test_without_context(self, factory: ExceptionFactory) -> None:
        """Test base template is rendered."""
        error = factory.create(IMAPCodes.NO_READ_ACCESS, "INBOX")

        assert error.log_message == "No read access to mail folder INBOX"
        assert error.display_message == NO_READ_ACCESS_MSG
        assert error.number == 2005
        assert error.prefix == "IMAP"
        assert error.error_code == "IMAP-2005"
        assert error.category is Category.PERMISSION_DENIED
        assert error.cause is None

    def test_with_context(
        self,
        factory: ExceptionFactory,
        context: ContextBundle,
    ) -> None:
        """Test extended template gets context values appended."""
        error = factory.create(
            IMAPCodes.NO_READ_ACCESS,
            "INBOX",
            context=context,
        )

        assert error.log_message == (
            "No read access to mail folder INBOX on server imap.example.com "
            "with login john (user=3, context=1)"
        )
        assert error.display_message == NO_READ_ACCESS_MSG
        assert error.number == 2005

    @pytest.mark.parametrize("code", _WITH_EXTENSION)
    def test_context_keeps_identity(
        self,
        factory: ExceptionFactory,
        context: ContextBundle,
        code: IMAPCodes,
    ) -> None:
        """Test enrichment only grows the log text."""
        args = _args_for(code)
        plain = factory.create(code, *args)
        enriched = factory.create(code, *args, context=context)

        assert enriched.number == plain.number
        assert enriched.category is plain.category
        assert enriched.prefix == plain.prefix
        assert enriched.display_message == plain.display_message

        log = enriched.log_message
        assert "$s" not in log
        positions = [
            log.index("imap.example.com"),
            log.index("john"),
            log.index("user=3"),
            log.index("context=1"),
        ]
        assert positions == sorted(positions)
        for arg in args:
            assert arg in log

    @pytest.mark.parametrize("code", _WITHOUT_EXTENSION)
    def test_context_dropped_without_variant(
        self,
        factory: ExceptionFactory,
        context: ContextBundle,
        code: IMAPCodes,
    ) -> None:
        """Test context has no effect without extended variant."""
        args = _args_for(code)
        assert factory.create(code, *args, context=context) == (
            factory.create(code, *args)
        )

    def test_missing_arguments(self, factory: ExceptionFactory) -> None:
        """Test slots without value stay literal."""
        error = factory.create(IMAPCodes.FLAG_FAILED, "\\Seen")
        assert error.log_message == (
            'Flag \\Seen could not be changed due to following reason "%2$s"'
        )

    def test_same_inputs_equal_errors(
        self,
        factory: ExceptionFactory,
        context: ContextBundle,
    ) -> None:
        """Test creation is deterministic."""
        cause = ValueError("boom")
        first = factory.create(
            IMAPCodes.RENAME_FAILED,
            "a",
            "b",
            "c",
            context=context,
            cause=cause,
        )
        second = factory.create(
            IMAPCodes.RENAME_FAILED,
            "a",
            "b",
            "c",
            context=context,
            cause=cause,
        )
        assert first == second

    def test_cause_and_exception(self, factory: ExceptionFactory) -> None:
        """Test wrapped cause is carried by raisable exception."""
        cause = OSError("reset by peer")
        error = factory.create(IMAPCodes.IO_ERROR, "reset", cause=cause)
        exc = error.to_exception()

        assert error.cause is cause
        assert isinstance(exc, IMAPError)
        assert exc.__cause__ is cause
        assert exc.error_code == "IMAP-1008"
        assert str(exc) == "An I/O error occurred: reset"

    def test_unknown_code(self, factory: ExceptionFactory) -> None:
        """Test code of another catalog."""
        with pytest.raises(UnknownCodeError):
            factory.create(MailCodes.FOLDER_NOT_FOUND_SIMPLE)

    def test_format_message(self, factory: ExceptionFactory) -> None:
        """Test log template rendering only."""
        assert factory.format_message(IMAPCodes.SQL_ERROR, "timeout") == (
            "A SQL error occurred: timeout"
        )

    def test_mail_factory_prefix(self, mail_factory: ExceptionFactory) -> None:
        """Test generic catalog prefix."""
        error = mail_factory.create(MailCodes.FOLDER_NOT_FOUND_SIMPLE)

        assert mail_factory.prefix == "MSG"
        assert error.error_code == "MSG-1014"


class TestDisplayPolicy:
    """Test choice of user-facing text."""

    def test_explicit_display_message(
        self,
        factory: ExceptionFactory,
    ) -> None:
        """Test defined display message is used verbatim."""
        error = factory.create(IMAPCodes.NOT_CONNECTED)

        assert error.category is Category.ERROR
        assert error.display_message == (
            "Cannot access the mailbox. Please try again later."
        )
        assert error.log_message == "No connection available to access mailbox"

    def test_debug_category_shows_rendered_text(
        self,
        mail_factory: ExceptionFactory,
    ) -> None:
        """Test categories logged at debug level show rendered text."""
        error = mail_factory.create(MailCodes.FOLDER_NOT_FOUND, "Archive")

        assert error.category is Category.USER_INPUT
        assert error.display_message == error.log_message
        assert error.display_message == (
            'Mail folder "Archive" could not be found'
        )

    def test_displayable_category_shows_rendered_text(
        self,
        mail_factory: ExceptionFactory,
    ) -> None:
        """Test displayable categories show rendered text."""
        error = mail_factory.create(MailCodes.QUOTA_EXCEEDED, "STORAGE")

        assert error.category is Category.CAPACITY
        assert error.display_message == "Mailbox quota exceeded: STORAGE"

    def test_transient_category(self, mail_factory: ExceptionFactory) -> None:
        """Test retryable categories show generic retry notice."""
        error = mail_factory.create(
            MailCodes.CONNECT_ERROR,
            "imap.example.com",
            "john",
        )

        assert error.category is Category.TRY_AGAIN
        assert error.display_message == GENERIC_RETRY_MESSAGE
        assert "imap.example.com" in error.log_message

    @pytest.mark.parametrize(
        ("code", "category"),
        [
            (IMAPCodes.SQL_ERROR, Category.ERROR),
            (IMAPCodes.URI_PARSE_FAILED, Category.CONFIGURATION),
        ],
    )
    def test_opaque_category(
        self,
        factory: ExceptionFactory,
        code: IMAPCodes,
        category: Category,
    ) -> None:
        """Test other categories show generic failure notice."""
        error = factory.create(code, "secret detail")

        assert error.category is category
        assert error.display_message == GENERIC_ERROR_MESSAGE
        assert "secret detail" in error.log_message

    @pytest.mark.parametrize("code", _HIDDEN)
    def test_placeholder_like_arguments_never_shown(
        self,
        factory: ExceptionFactory,
        context: ContextBundle,
        code: IMAPCodes,
    ) -> None:
        """Test hidden categories never leak template or argument text."""
        arg = "%1$s %2$s %s %d %% {0}"
        slots = _count_slots(_CATALOG.get(code).message)
        args = (arg,) * slots

        for ctx in (None, context):
            error = factory.create(code, *args, context=ctx)
            assert _CATALOG.get(code).message not in error.display_message
            assert arg not in error.display_message
            if slots:
                assert arg in error.log_message


class TestNoAccessHook:
    """Test folder access denied side effects."""

    def test_invalidates_cache_and_subscription(
        self,
        factory: ExceptionFactory,
        context: ContextBundle,
        folder_cache: Mock,
        connection_provider: Mock,
        connection: Mock,
    ) -> None:
        """Test hook with context and provided connection."""
        error = factory.create(IMAPCodes.NO_ACCESS, "Shared", context=context)

        folder_cache.remove_cached_entry.assert_called_once_with(
            "Shared",
            0,
            context,
        )
        connection_provider.opt_connection.assert_called_once_with(context)
        connection.force_set_subscribed.assert_called_once_with(
            "Shared",
            False,
        )
        assert error.display_message == NO_ACCESS_MSG

    def test_explicit_connection(
        self,
        factory: ExceptionFactory,
        context: ContextBundle,
        connection_provider: Mock,
    ) -> None:
        """Test passed connection wins over provider."""
        explicit = Mock()
        factory.create(
            IMAPCodes.NO_ACCESS,
            "Shared",
            context=context,
            connection=explicit,
        )

        explicit.force_set_subscribed.assert_called_once_with("Shared", False)
        connection_provider.opt_connection.assert_not_called()

    def test_without_context(
        self,
        factory: ExceptionFactory,
        folder_cache: Mock,
        connection_provider: Mock,
    ) -> None:
        """Test no cache invalidation without context."""
        explicit = Mock()
        factory.create(IMAPCodes.NO_ACCESS, "Shared", connection=explicit)

        folder_cache.remove_cached_entry.assert_not_called()
        connection_provider.opt_connection.assert_not_called()
        explicit.force_set_subscribed.assert_called_once_with("Shared", False)

    def test_root_folder(
        self,
        factory: ExceptionFactory,
        context: ContextBundle,
        folder_cache: Mock,
        connection: Mock,
    ) -> None:
        """Test hook skips mailbox root."""
        factory.create(IMAPCodes.NO_ACCESS, "", context=context)

        folder_cache.remove_cached_entry.assert_not_called()
        connection.force_set_subscribed.assert_not_called()

    def test_without_arguments(
        self,
        factory: ExceptionFactory,
        context: ContextBundle,
        folder_cache: Mock,
    ) -> None:
        """Test hook needs a folder name."""
        factory.create(IMAPCodes.NO_ACCESS, context=context)
        folder_cache.remove_cached_entry.assert_not_called()

    def test_non_string_folder(
        self,
        factory: ExceptionFactory,
        context: ContextBundle,
        folder_cache: Mock,
        connection: Mock,
    ) -> None:
        """Test folder argument of other type is converted to text."""
        factory.create(IMAPCodes.NO_ACCESS, 42, context=context)

        folder_cache.remove_cached_entry.assert_called_once_with(
            "42",
            0,
            context,
        )
        connection.force_set_subscribed.assert_called_once_with("42", False)

    def test_none_folder(
        self,
        factory: ExceptionFactory,
        context: ContextBundle,
        folder_cache: Mock,
        connection: Mock,
    ) -> None:
        """Test null folder argument is ignored."""
        factory.create(IMAPCodes.NO_ACCESS, None, context=context)

        folder_cache.remove_cached_entry.assert_not_called()
        connection.force_set_subscribed.assert_not_called()

    @pytest.mark.parametrize(
        "code",
        [
            IMAPCodes.NO_ACCESS_EXT,
            IMAPCodes.NO_READ_ACCESS,
            IMAPCodes.NO_MAIL_MODULE_ACCESS,
        ],
    )
    def test_other_codes(
        self,
        factory: ExceptionFactory,
        context: ContextBundle,
        folder_cache: Mock,
        connection: Mock,
        code: IMAPCodes,
    ) -> None:
        """Test hook is bound to one code."""
        factory.create(code, "Shared", context=context)

        folder_cache.remove_cached_entry.assert_not_called()
        connection.force_set_subscribed.assert_not_called()

    def test_failing_collaborators(
        self,
        factory: ExceptionFactory,
        context: ContextBundle,
        folder_cache: Mock,
        connection: Mock,
    ) -> None:
        """Test side-effect failures are discarded."""
        folder_cache.remove_cached_entry.side_effect = RuntimeError("down")
        connection.force_set_subscribed.side_effect = OSError("closed")

        error = factory.create(IMAPCodes.NO_ACCESS, "Shared", context=context)

        assert error.number == 2003
        connection.force_set_subscribed.assert_called_once()

    def test_without_connection_provider(
        self,
        imap_catalog: CodeCatalog,
        imap_resolver: ExtensionResolver,
        folder_cache: Mock,
        context: ContextBundle,
        settings: Settings,
    ) -> None:
        """Test hook without connection source."""
        factory = ExceptionFactory(
            imap_catalog,
            imap_resolver,
            IMAPCapabilities(
                folder_cache=folder_cache,
                rights_cache=Mock(),
                flags_cache=Mock(),
            ),
            settings,
        )
        factory.create(IMAPCodes.NO_ACCESS, "Shared", context=context)

        folder_cache.remove_cached_entry.assert_called_once()

    def test_custom_root_folder(
        self,
        imap_catalog: CodeCatalog,
        imap_resolver: ExtensionResolver,
        capabilities: IMAPCapabilities,
        folder_cache: Mock,
        context: ContextBundle,
    ) -> None:
        """Test configured root folder id is honored."""
        factory = ExceptionFactory(
            imap_catalog,
            imap_resolver,
            capabilities,
            Settings(ROOT_FOLDER_ID="INBOX"),
        )
        factory.create(IMAPCodes.NO_ACCESS, "INBOX", context=context)

        folder_cache.remove_cached_entry.assert_not_called()
