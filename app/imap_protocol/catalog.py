"""Error code catalog.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import StrEnum
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from constants import IMAP_PREFIX, MAIL_PREFIX

from .codes import IMAP_DECLARATIONS
from .dataclasses import Alias, Declaration, Define, ErrorCode, Extend
from .exceptions import (
    DuplicateCodeError,
    ExtensionDepthError,
    MissingCategoryError,
    UnknownAliasError,
    UnknownCodeError,
    UnknownExtensionTargetError,
)
from .mail_codes import MAIL_DECLARATIONS


class CodeCatalog:
    """Read-only registry of resolved error codes.

    Codes are looked up by enum member identity, so two catalogs whose
    identifiers share a string value never answer for each other.
    """

    __slots__ = ("_codes", "_prefix")

    def __init__(self, prefix: str, codes: Mapping[StrEnum, ErrorCode]):
        """Wrap resolved records."""
        self._prefix = prefix
        self._codes = MappingProxyType(dict(codes))

    @property
    def prefix(self) -> str:
        """Get namespace tag of the catalog."""
        return self._prefix

    def find(self, code: StrEnum) -> ErrorCode | None:
        """Get record or None."""
        record = self._codes.get(code)
        if record is None or record.name is not code:
            return None
        return record

    def get(self, code: StrEnum) -> ErrorCode:
        """Get record.

        :raises UnknownCodeError: code is not registered
        """
        record = self.find(code)
        if record is None:
            raise UnknownCodeError(
                f"Code {code!r} is not registered in {self._prefix} catalog",
                code=code,
            )
        return record

    def __contains__(self, code: object) -> bool:
        return isinstance(code, StrEnum) and self.find(code) is not None

    def __iter__(self) -> Iterator[ErrorCode]:
        return iter(self._codes.values())

    def __len__(self) -> int:
        return len(self._codes)

    @classmethod
    def build(
        cls,
        prefix: str,
        declarations: Iterable[tuple[StrEnum, Declaration]],
        generic: "CodeCatalog | None" = None,
    ) -> "CodeCatalog":
        """Resolve declarations in order into a catalog.

        Aliases copy values from `generic` once, here, so no lookup into
        the generic catalog happens per call.

        :param str prefix: namespace tag
        :param Iterable declarations: pairs of identifier and declaration
        :param CodeCatalog | None generic: catalog aliases point into
        :raises DuplicateCodeError: identifier declared twice
        :raises MissingCategoryError: code declared without category
        :raises UnknownExtensionTargetError: extension target not declared
            earlier
        :raises ExtensionDepthError: extension target is an extension
        :raises UnknownAliasError: aliased code is not in `generic`
        :return CodeCatalog: catalog
        """
        records: dict[StrEnum, ErrorCode] = {}

        def lookup(code: StrEnum) -> ErrorCode | None:
            record = records.get(code)
            if record is None or record.name is not code:
                return None
            return record

        def extension_target(name: StrEnum, base: StrEnum) -> ErrorCode:
            target = lookup(base)
            if target is None:
                raise UnknownExtensionTargetError(
                    f"{name} extends {base} which is not declared before it",
                    code=name,
                    target=base,
                )
            if target.extends is not None:
                raise ExtensionDepthError(
                    f"{name} extends {base} which already extends "
                    f"{target.extends}",
                    code=name,
                    target=base,
                )
            return target

        for name, declaration in declarations:
            if lookup(name) is not None:
                raise DuplicateCodeError(
                    f"Code {name} declared twice",
                    code=name,
                )

            match declaration:
                case Define():
                    if declaration.category is None:
                        raise MissingCategoryError(
                            f"Code {name} has no category",
                            code=name,
                        )
                    record = ErrorCode(
                        name=name,
                        message=declaration.message,
                        category=declaration.category,
                        number=declaration.number,
                        display_message=declaration.display_message,
                    )

                case Extend():
                    base = extension_target(name, declaration.base)
                    record = ErrorCode(
                        name=name,
                        message=declaration.message,
                        category=base.category,
                        number=base.number,
                        display_message=base.display_message,
                        extends=base.name,
                    )

                case Alias():
                    source = None
                    if generic is not None:
                        source = generic.find(declaration.source)
                    if source is None:
                        raise UnknownAliasError(
                            f"{name} aliases {declaration.source} which is "
                            "not in the generic catalog",
                            code=name,
                            source=declaration.source,
                        )
                    message = declaration.message or source.message
                    if declaration.extends is None:
                        record = ErrorCode(
                            name=name,
                            message=message,
                            category=source.category,
                            number=source.number,
                            display_message=source.display_message,
                        )
                    else:
                        base = extension_target(name, declaration.extends)
                        record = ErrorCode(
                            name=name,
                            message=message,
                            category=base.category,
                            number=base.number,
                            display_message=base.display_message,
                            extends=base.name,
                        )

                case _:
                    raise TypeError(f"Unsupported declaration {declaration!r}")

            records[name] = record

        return cls(prefix, records)


def build_mail_catalog() -> CodeCatalog:
    """Build generic mail catalog."""
    return CodeCatalog.build(MAIL_PREFIX, MAIL_DECLARATIONS)


def build_imap_catalog(mail_catalog: CodeCatalog) -> CodeCatalog:
    """Build IMAP catalog aliasing into `mail_catalog`."""
    return CodeCatalog.build(IMAP_PREFIX, IMAP_DECLARATIONS, mail_catalog)
