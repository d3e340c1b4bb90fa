"""Errors package.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .base import BaseDomainException
from .contracts import HasStructuredError, IMAPError, find_structured_error

__all__ = [
    "BaseDomainException",
    "HasStructuredError",
    "IMAPError",
    "find_structured_error",
]
