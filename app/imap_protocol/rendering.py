"""Printf-style template rendering.

Templates use positional slots ``%1$s`` or sequential ones ``%s``/``%d``,
``%%`` is a literal percent sign and ``%n`` a line break. Slots with no
matching argument are left in the text as written. Substitution is a
single pass, so argument text is never expanded again.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import re
from typing import Sequence

from constants import EXT_LENGTH

_SLOT = re.compile(r"%(?:(?P<index>[1-9]\d*)\$)?(?P<conversion>[sd%n])")


def render_template(template: str, args: Sequence[object]) -> str:
    """Substitute arguments into template slots.

    :param str template: printf-style template
    :param Sequence[object] args: positional values
    :return str: rendered text, unmatched slots kept literally
    """
    ordinal = 0

    def _substitute(match: re.Match[str]) -> str:
        nonlocal ordinal
        conversion = match["conversion"]
        if conversion == "%":
            return "%"
        if conversion == "n":
            return "\n"

        if match["index"]:
            position = int(match["index"]) - 1
        else:
            position = ordinal
            ordinal += 1

        if position >= len(args):
            return match.group(0)
        return str(args[position])

    return _SLOT.sub(_substitute, template)


def context_tail(shift: int) -> str:
    """Build the context part of an extended template.

    :param int shift: number of slots the base template consumes
    :return str: server, login, user and context slots after `shift`
    """
    server, login, user, context = range(shift + 1, shift + 1 + EXT_LENGTH)
    return (
        f"on server %{server}$s with login %{login}$s "
        f"(user=%{user}$s, context=%{context}$s)"
    )
