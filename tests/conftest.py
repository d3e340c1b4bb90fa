"""Test main config.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass
from typing import Iterator
from unittest.mock import Mock

import pytest
from dishka import Container

from config import Settings
from imap_protocol import (
    CodeCatalog,
    ContextBundle,
    ExceptionFactory,
    ExtensionResolver,
    IMAPCapabilities,
    MailConfig,
    MessagingFallbackClassifier,
    ProtocolClassifier,
    build_imap_catalog,
    build_mail_catalog,
)
from ioc import make_imap_errors_container


@dataclass
class Folder:
    """Folder handle stub."""

    full_name: str


@pytest.fixture
def settings() -> Settings:
    """Get settings."""
    return Settings()


@pytest.fixture
def folder_cache() -> Mock:
    """Get folder listing cache mock."""
    return Mock()


@pytest.fixture
def rights_cache() -> Mock:
    """Get rights cache mock."""
    return Mock()


@pytest.fixture
def flags_cache() -> Mock:
    """Get user flags cache mock."""
    return Mock()


@pytest.fixture
def event_publisher() -> Mock:
    """Get event publisher mock."""
    return Mock()


@pytest.fixture
def connection() -> Mock:
    """Get live connection mock."""
    return Mock()


@pytest.fixture
def connection_provider(connection: Mock) -> Mock:
    """Get connection provider returning `connection`."""
    provider = Mock()
    provider.opt_connection.return_value = connection
    return provider


@pytest.fixture
def capabilities(
    folder_cache: Mock,
    rights_cache: Mock,
    flags_cache: Mock,
    event_publisher: Mock,
    connection_provider: Mock,
) -> IMAPCapabilities:
    """Get collaborator bundle."""
    return IMAPCapabilities(
        folder_cache=folder_cache,
        rights_cache=rights_cache,
        flags_cache=flags_cache,
        event_publisher=event_publisher,
        connection_provider=connection_provider,
    )


@pytest.fixture
def context() -> ContextBundle:
    """Get session identity."""
    return ContextBundle(
        server="imap.example.com",
        login="john",
        user_id=3,
        context_id=1,
        account_id=0,
    )


@pytest.fixture
def mail_config() -> MailConfig:
    """Get account connection parameters."""
    return MailConfig(server="imap.example.com", login="john", port=993)


@pytest.fixture
def folder() -> Folder:
    """Get folder handle."""
    return Folder(full_name="INBOX/Drafts")


@pytest.fixture(scope="session")
def mail_catalog() -> CodeCatalog:
    """Get generic mail catalog."""
    return build_mail_catalog()


@pytest.fixture(scope="session")
def imap_catalog(mail_catalog: CodeCatalog) -> CodeCatalog:
    """Get IMAP catalog."""
    return build_imap_catalog(mail_catalog)


@pytest.fixture(scope="session")
def imap_resolver(imap_catalog: CodeCatalog) -> ExtensionResolver:
    """Get IMAP extension index."""
    return ExtensionResolver(imap_catalog)


@pytest.fixture(scope="session")
def mail_resolver(mail_catalog: CodeCatalog) -> ExtensionResolver:
    """Get generic mail extension index."""
    return ExtensionResolver(mail_catalog)


@pytest.fixture
def factory(
    imap_catalog: CodeCatalog,
    imap_resolver: ExtensionResolver,
    capabilities: IMAPCapabilities,
    settings: Settings,
) -> ExceptionFactory:
    """Get IMAP error factory."""
    return ExceptionFactory(
        imap_catalog,
        imap_resolver,
        capabilities,
        settings,
    )


@pytest.fixture
def mail_factory(
    mail_catalog: CodeCatalog,
    mail_resolver: ExtensionResolver,
    capabilities: IMAPCapabilities,
    settings: Settings,
) -> ExceptionFactory:
    """Get generic mail error factory."""
    return ExceptionFactory(
        mail_catalog,
        mail_resolver,
        capabilities,
        settings,
    )


@pytest.fixture
def fallback() -> Mock:
    """Get fallback classifier mock."""
    return Mock()


@pytest.fixture
def classifier(
    factory: ExceptionFactory,
    mail_factory: ExceptionFactory,
    fallback: Mock,
    capabilities: IMAPCapabilities,
    settings: Settings,
) -> ProtocolClassifier:
    """Get classifier with mocked fallback."""
    return ProtocolClassifier(
        factory,
        mail_factory,
        fallback,
        capabilities,
        settings,
    )


@pytest.fixture
def messaging_fallback(
    mail_factory: ExceptionFactory,
) -> MessagingFallbackClassifier:
    """Get default fallback classifier."""
    return MessagingFallbackClassifier(mail_factory)


@pytest.fixture
def container(
    settings: Settings,
    capabilities: IMAPCapabilities,
) -> Iterator[Container]:
    """Get DI container."""
    container = make_imap_errors_container(settings, capabilities)
    yield container
    container.close()
