"""Utils for IMAP error handling.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import functools
from typing import Any, Callable, Mapping

from config import Settings

from .base import log


def setup_logging(settings: Settings) -> int | None:
    """Add file sink for IMAP error records.

    :return int | None: loguru handler id, None when no file is configured
    """
    if not settings.LOG_FILE:
        return None

    return log.add(
        settings.LOG_FILE,
        level=settings.log_level,
        filter=lambda rec: rec["extra"].get("name") == "imap_errors",
        retention=settings.LOG_RETENTION,
        rotation=settings.LOG_ROTATION,
        colorize=False,
    )


def best_effort(func: Callable) -> Callable:
    """Log a side-effect call and discard any exception it raises."""
    name = func.__name__

    @functools.wraps(func)
    def wrapped(*args: Any, **kwargs: Any) -> Any:
        logger = log.opt(depth=1)

        logger.debug(f"Calling '{name}'")
        try:
            return func(*args, **kwargs)
        except Exception as err:
            logger.warning(f"{name} call raised: {err!r}")
            return None

    return wrapped


def get_property(name: str, props: Mapping[str, Any] | None) -> str | None:
    """Get string property, values of other types count as absent."""
    if not props:
        return None

    value = props.get(name)
    if isinstance(value, str):
        return value
    return None
