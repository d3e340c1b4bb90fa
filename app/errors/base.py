"""Errors base.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum


class BaseDomainException(Exception):  # noqa N818
    """Base exception.

    Every concrete subclass declares a stable ``code``.
    """

    code: IntEnum

    def __init_subclass__(cls) -> None:
        """Initialize subclass."""
        super().__init_subclass__()

        if not hasattr(cls, "code"):
            raise AttributeError("code must be set")

    def __init__(self, *args: object, **details: object) -> None:
        """Keep keyword details for logging and tests."""
        super().__init__(*args)
        self.details = details
