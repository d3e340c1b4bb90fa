"""Module with settings.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import os

from pydantic import BaseModel, field_validator


class Settings(BaseModel):
    """IMAP error layer settings."""

    DEBUG: bool = False

    LOG_FILE: str | None = None
    LOG_RETENTION: str = "10 days"
    LOG_ROTATION: str = "1d"

    ROOT_FOLDER_ID: str = ""
    DEFAULT_FOLDER_PREFIX: str = "default"
    FOLDER_SEPARATOR: str = "/"

    PUBLISH_FOLDER_EVENTS: bool = True

    @field_validator("FOLDER_SEPARATOR")
    def check_separator(cls, value: str) -> str:  # noqa: N805
        """Separator must be a single character."""
        if len(value) != 1:
            raise ValueError("FOLDER_SEPARATOR must be a single character")
        return value

    @property
    def log_level(self) -> str:
        """Get loguru sink level."""
        return "DEBUG" if self.DEBUG else "INFO"

    def prepare_full_name(self, account_id: int, full_name: str) -> str:
        """Build account-qualified folder identity.

        :param int account_id: mail account id
        :param str full_name: folder full name on the server
        :return str: e.g. ``default0/INBOX``
        """
        return (
            f"{self.DEFAULT_FOLDER_PREFIX}{account_id}"
            f"{self.FOLDER_SEPARATOR}{full_name}"
        )

    @classmethod
    def from_os(cls) -> "Settings":
        """Get cls from environ."""
        return Settings(**os.environ)
