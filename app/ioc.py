"""DI Provider of IMAP error layer.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Iterator, NewType

from dishka import (
    Container,
    Provider,
    Scope,
    from_context,
    make_container,
    provide,
)

from config import Settings
from imap_protocol import (
    CodeCatalog,
    ExceptionFactory,
    ExtensionResolver,
    FallbackClassifier,
    IMAPCapabilities,
    MessagingFallbackClassifier,
    ProtocolClassifier,
    build_imap_catalog,
    build_mail_catalog,
)
from imap_protocol.base import log
from imap_protocol.dataclasses import LogSink
from imap_protocol.utils import setup_logging

MailCodeCatalog = NewType("MailCodeCatalog", CodeCatalog)
MailExtensionResolver = NewType("MailExtensionResolver", ExtensionResolver)
MailExceptionFactory = NewType("MailExceptionFactory", ExceptionFactory)


class IMAPErrorsProvider(Provider):
    """Provider for IMAP error handling."""

    scope = Scope.APP
    settings = from_context(provides=Settings, scope=Scope.APP)
    capabilities = from_context(provides=IMAPCapabilities, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def get_log_sink(self, settings: Settings) -> Iterator[LogSink]:
        """Add file sink, removed when the container is closed."""
        sink = LogSink(setup_logging(settings))
        yield sink
        if sink.handler_id is not None:
            log.remove(sink.handler_id)

    @provide(scope=Scope.APP)
    def get_mail_catalog(self) -> MailCodeCatalog:
        """Build generic mail catalog."""
        return MailCodeCatalog(build_mail_catalog())

    @provide(scope=Scope.APP)
    def get_imap_catalog(self, mail_catalog: MailCodeCatalog) -> CodeCatalog:
        """Build IMAP catalog."""
        return build_imap_catalog(mail_catalog)

    @provide(scope=Scope.APP)
    def get_mail_resolver(
        self,
        mail_catalog: MailCodeCatalog,
    ) -> MailExtensionResolver:
        """Index extensions of generic mail catalog."""
        return MailExtensionResolver(ExtensionResolver(mail_catalog))

    @provide(scope=Scope.APP)
    def get_imap_resolver(self, catalog: CodeCatalog) -> ExtensionResolver:
        """Index extensions of IMAP catalog."""
        return ExtensionResolver(catalog)

    @provide(scope=Scope.APP)
    def get_mail_factory(
        self,
        mail_catalog: MailCodeCatalog,
        mail_resolver: MailExtensionResolver,
        capabilities: IMAPCapabilities,
        settings: Settings,
    ) -> MailExceptionFactory:
        """Create generic mail error factory."""
        return MailExceptionFactory(
            ExceptionFactory(
                mail_catalog,
                mail_resolver,
                capabilities,
                settings,
            ),
        )

    @provide(scope=Scope.APP)
    def get_imap_factory(
        self,
        catalog: CodeCatalog,
        resolver: ExtensionResolver,
        capabilities: IMAPCapabilities,
        settings: Settings,
    ) -> ExceptionFactory:
        """Create IMAP error factory."""
        return ExceptionFactory(catalog, resolver, capabilities, settings)

    @provide(scope=Scope.APP)
    def get_fallback(
        self,
        mail_factory: MailExceptionFactory,
    ) -> FallbackClassifier:
        """Create generic fallback classifier."""
        return MessagingFallbackClassifier(mail_factory)

    @provide(scope=Scope.APP)
    def get_classifier(
        self,
        factory: ExceptionFactory,
        mail_factory: MailExceptionFactory,
        fallback: FallbackClassifier,
        capabilities: IMAPCapabilities,
        settings: Settings,
    ) -> ProtocolClassifier:
        """Create protocol classifier."""
        return ProtocolClassifier(
            factory,
            mail_factory,
            fallback,
            capabilities,
            settings,
        )


def make_imap_errors_container(
    settings: Settings,
    capabilities: IMAPCapabilities,
    *providers: Provider,
) -> Container:
    """Create container with settings and collaborators in context.

    Extra `providers` may override bindings, e.g. the fallback classifier.
    Catalogs, resolvers and factories are built before returning, so
    declaration faults are raised here.
    """
    container = make_container(
        IMAPErrorsProvider(),
        *providers,
        context={Settings: settings, IMAPCapabilities: capabilities},
    )
    try:
        container.get(LogSink)
        container.get(ProtocolClassifier)
    except Exception:
        container.close()
        raise
    return container
