"""Tests for template rendering.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import pytest

from imap_protocol.rendering import context_tail, render_template


@pytest.mark.parametrize(
    ("template", "args", "expected"),
    [
        ("Folder %1$s", ("INBOX",), "Folder INBOX"),
        ("%2$s then %1$s", ("a", "b"), "b then a"),
        ("%1$s and %1$s", ("x",), "x and x"),
        ("%d of %d", (3, 7), "3 of 7"),
        ("100%% sure", (), "100% sure"),
        ("line%nbreak", (), "line\nbreak"),
        ("No slots", ("unused",), "No slots"),
        ("Count %1$s", (5,), "Count 5"),
        ("Value %1$s", (None,), "Value None"),
    ],
)
def test_render_template(
    template: str,
    args: tuple[object, ...],
    expected: str,
) -> None:
    """Test slot substitution."""
    assert render_template(template, args) == expected


def test_missing_arguments_stay_literal() -> None:
    """Test slots without value are kept as written."""
    rendered = render_template('Flag %1$s failed with "%2$s"', ("\\Seen",))
    assert rendered == 'Flag \\Seen failed with "%2$s"'


def test_missing_sequential_arguments_stay_literal() -> None:
    """Test sequential slots without value are kept as written."""
    assert render_template("%d of %d", (1,)) == "1 of %d"


def test_argument_text_is_not_expanded() -> None:
    """Test substitution is a single pass."""
    rendered = render_template("Folder %1$s (%2$s)", ("%2$s", "x"))
    assert rendered == "Folder %2$s (x)"


def test_percent_escape_does_not_consume_argument() -> None:
    """Test escaped percent keeps sequential numbering."""
    assert render_template("%s is 50%% of %s", ("a", "b")) == (
        "a is 50% of b"
    )


def test_context_tail() -> None:
    """Test context slots follow base slots."""
    assert context_tail(1) == (
        "on server %2$s with login %3$s (user=%4$s, context=%5$s)"
    )
    assert context_tail(0) == (
        "on server %1$s with login %2$s (user=%3$s, context=%4$s)"
    )
