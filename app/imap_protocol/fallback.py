"""Generic classification of messaging failures.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .base import FolderRef
from .dataclasses import ContextBundle, MailConfig, StructuredError
from .factory import ExceptionFactory
from .mail_codes import MailCodes


class MessagingFallbackClassifier:
    """Map any messaging failure to a generic mail error."""

    def __init__(self, mail_factory: ExceptionFactory) -> None:
        """Set factory of the generic mail catalog."""
        self._factory = mail_factory

    def classify(
        self,
        failure: BaseException,
        config: MailConfig | None,
        context: ContextBundle | None,
        folder: FolderRef | None,
    ) -> StructuredError:
        """Classify failure by its text."""
        text = str(failure)

        if "quota" in text.lower():
            return self._factory.create(
                MailCodes.QUOTA_EXCEEDED,
                text,
                context=context,
                cause=failure,
            )

        if folder is not None and folder.full_name:
            text = f"{text} (folder={folder.full_name})"

        return self._factory.create(
            MailCodes.MESSAGING_ERROR,
            text,
            context=context,
            cause=failure,
        )
