"""Base code to extended variant index.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import StrEnum
from types import MappingProxyType

from .catalog import CodeCatalog
from .dataclasses import ErrorCode
from .exceptions import DuplicateExtensionError


class ExtensionResolver:
    """Inverse index of extension backlinks of a catalog."""

    __slots__ = ("_catalog", "_index")

    def __init__(self, catalog: CodeCatalog) -> None:
        """Scan catalog once and invert ``extends`` links.

        :raises DuplicateExtensionError: two codes extend the same base
        """
        index: dict[StrEnum, ErrorCode] = {}
        for record in catalog:
            if record.extends is None:
                continue
            existing = index.get(record.extends)
            if existing is not None:
                raise DuplicateExtensionError(
                    f"{record.name} and {existing.name} both extend "
                    f"{record.extends}",
                    code=record.name,
                    target=record.extends,
                    existing=existing.name,
                )
            index[record.extends] = record

        self._catalog = catalog
        self._index = MappingProxyType(index)

    def resolve(self, code: StrEnum) -> ErrorCode | None:
        """Get extended variant of `code` or None."""
        extended = self._index.get(code)
        if extended is None or self._catalog.find(code) is None:
            return None
        return extended

    def __len__(self) -> int:
        return len(self._index)
