"""Tests for error categories.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import pytest

from enums import Category, CategoryType, LogLevel


@pytest.mark.parametrize(
    ("category", "log_level", "displayable"),
    [
        (Category.PERMISSION_DENIED, LogLevel.DEBUG, True),
        (Category.USER_INPUT, LogLevel.DEBUG, True),
        (Category.CONFLICT, LogLevel.DEBUG, True),
        (Category.TRY_AGAIN, LogLevel.INFO, False),
        (Category.CAPACITY, LogLevel.ERROR, True),
        (Category.WARNING, LogLevel.WARNING, True),
        (Category.SERVICE_DOWN, LogLevel.ERROR, False),
        (Category.CONFIGURATION, LogLevel.ERROR, False),
        (Category.CONNECTIVITY, LogLevel.ERROR, False),
        (Category.ERROR, LogLevel.ERROR, False),
    ],
)
def test_category_attributes(
    category: Category,
    log_level: LogLevel,
    displayable: bool,
) -> None:
    """Test log level and display flag of every category."""
    assert category.log_level is log_level
    assert category.displayable is displayable
    assert category.type == CategoryType[category.name]


def test_transient_category() -> None:
    """Test only try again is transient."""
    assert [c for c in Category if c.is_transient] == [Category.TRY_AGAIN]


def test_log_level_implies() -> None:
    """Test more verbose levels include less verbose ones."""
    assert LogLevel.DEBUG.implies(LogLevel.DEBUG)
    assert LogLevel.TRACE.implies(LogLevel.DEBUG)
    assert not LogLevel.INFO.implies(LogLevel.DEBUG)
    assert not LogLevel.ERROR.implies(LogLevel.WARNING)
