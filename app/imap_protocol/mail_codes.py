"""Generic mail error codes shared by all mail protocols.

The IMAP catalog aliases several of these instead of duplicating values.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import StrEnum, unique

from enums import Category

from .dataclasses import Declaration, Define, Extend
from .rendering import context_tail as _ext


@unique
class MailCodes(StrEnum):
    """Generic mail code identifiers."""

    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"
    MISSING_PARAMETER = "MISSING_PARAMETER"
    MISSING_CONNECT_PARAM = "MISSING_CONNECT_PARAM"
    JSON_ERROR = "JSON_ERROR"
    INVALID_PERMISSION = "INVALID_PERMISSION"
    NO_CREATE_ACCESS = "NO_CREATE_ACCESS"
    NO_CREATE_ACCESS_EXT = "NO_CREATE_ACCESS_EXT"
    INVALID_FOLDER_NAME = "INVALID_FOLDER_NAME"
    DUPLICATE_FOLDER = "DUPLICATE_FOLDER"
    DUPLICATE_FOLDER_EXT = "DUPLICATE_FOLDER_EXT"
    IO_ERROR = "IO_ERROR"
    FOLDER_DOES_NOT_HOLD_MESSAGES = "FOLDER_DOES_NOT_HOLD_MESSAGES"
    FOLDER_DOES_NOT_HOLD_MESSAGES_EXT = "FOLDER_DOES_NOT_HOLD_MESSAGES_EXT"
    INVALID_FIELD = "INVALID_FIELD"
    INVALID_FIELD_EXT = "INVALID_FIELD_EXT"
    UNSUPPORTED_VERSIT_ATTACHMENT = "UNSUPPORTED_VERSIT_ATTACHMENT"
    ENCODING_ERROR = "ENCODING_ERROR"
    FOLDER_NOT_FOUND = "FOLDER_NOT_FOUND"
    FOLDER_NOT_FOUND_EXT = "FOLDER_NOT_FOUND_EXT"
    FOLDER_NOT_FOUND_SIMPLE = "FOLDER_NOT_FOUND_SIMPLE"
    READ_ONLY_FOLDER = "READ_ONLY_FOLDER"
    READ_ONLY_FOLDER_EXT = "READ_ONLY_FOLDER_EXT"
    CONNECT_ERROR = "CONNECT_ERROR"
    QUOTA_EXCEEDED = "QUOTA_EXCEEDED"
    MESSAGING_ERROR = "MESSAGING_ERROR"


MAIL_DECLARATIONS: tuple[tuple[MailCodes, Declaration], ...] = (
    (
        MailCodes.UNEXPECTED_ERROR,
        Define("Unexpected error: %1$s", Category.ERROR, 1000),
    ),
    (
        MailCodes.MISSING_PARAMETER,
        Define("Missing parameter %1$s", Category.ERROR, 1001),
    ),
    (
        MailCodes.MISSING_CONNECT_PARAM,
        Define(
            "Missing parameter in mail connection: %1$s",
            Category.ERROR,
            1002,
        ),
    ),
    (
        MailCodes.JSON_ERROR,
        Define("A JSON error occurred: %1$s", Category.ERROR, 1003),
    ),
    (
        MailCodes.INVALID_PERMISSION,
        Define(
            "Invalid permission values: fp=%1$s orp=%2$s owp=%3$s odp=%4$s",
            Category.PERMISSION_DENIED,
            1004,
        ),
    ),
    (
        MailCodes.NO_CREATE_ACCESS,
        Define(
            "No create access to mail folder %1$s",
            Category.PERMISSION_DENIED,
            1005,
            "You do not have the permission to create subfolders here.",
        ),
    ),
    (
        MailCodes.NO_CREATE_ACCESS_EXT,
        Extend(
            f"No create access to mail folder %1$s {_ext(1)}",
            MailCodes.NO_CREATE_ACCESS,
        ),
    ),
    (
        MailCodes.INVALID_FOLDER_NAME,
        Define(
            'Invalid folder name: "%1$s". '
            "Please avoid the following characters: %2$s",
            Category.USER_INPUT,
            1006,
            "The folder name contains characters that are not allowed.",
        ),
    ),
    (
        MailCodes.DUPLICATE_FOLDER,
        Define(
            "A folder named %1$s already exists",
            Category.USER_INPUT,
            1007,
            "A folder with the same name already exists.",
        ),
    ),
    (
        MailCodes.DUPLICATE_FOLDER_EXT,
        Extend(
            f"A folder named %1$s already exists {_ext(1)}",
            MailCodes.DUPLICATE_FOLDER,
        ),
    ),
    (
        MailCodes.IO_ERROR,
        Define("An I/O error occurred: %1$s", Category.ERROR, 1008),
    ),
    (
        MailCodes.FOLDER_DOES_NOT_HOLD_MESSAGES,
        Define(
            "Mail folder %1$s does not hold messages "
            "and is therefore not selectable",
            Category.USER_INPUT,
            1009,
            "This folder cannot contain E-Mails.",
        ),
    ),
    (
        MailCodes.FOLDER_DOES_NOT_HOLD_MESSAGES_EXT,
        Extend(
            "Mail folder %1$s does not hold messages "
            f"and is therefore not selectable {_ext(1)}",
            MailCodes.FOLDER_DOES_NOT_HOLD_MESSAGES,
        ),
    ),
    (
        MailCodes.INVALID_FIELD,
        Define("Invalid field: %1$s", Category.ERROR, 1010),
    ),
    (
        MailCodes.INVALID_FIELD_EXT,
        Extend(f"Invalid field: %1$s {_ext(1)}", MailCodes.INVALID_FIELD),
    ),
    (
        MailCodes.UNSUPPORTED_VERSIT_ATTACHMENT,
        Define(
            "Versit attachment %1$s is not supported",
            Category.USER_INPUT,
            1011,
            "This attachment type is not supported.",
        ),
    ),
    (
        MailCodes.ENCODING_ERROR,
        Define("Unsupported encoding: %1$s", Category.ERROR, 1012),
    ),
    (
        MailCodes.FOLDER_NOT_FOUND,
        Define(
            'Mail folder "%1$s" could not be found',
            Category.USER_INPUT,
            1013,
        ),
    ),
    (
        MailCodes.FOLDER_NOT_FOUND_EXT,
        Extend(
            f'Mail folder "%1$s" could not be found {_ext(1)}',
            MailCodes.FOLDER_NOT_FOUND,
        ),
    ),
    (
        MailCodes.FOLDER_NOT_FOUND_SIMPLE,
        Define(
            "Mail folder could not be found",
            Category.USER_INPUT,
            1014,
        ),
    ),
    (
        MailCodes.READ_ONLY_FOLDER,
        Define(
            "Mail folder %1$s is read-only",
            Category.PERMISSION_DENIED,
            1015,
            "This folder is read-only.",
        ),
    ),
    (
        MailCodes.READ_ONLY_FOLDER_EXT,
        Extend(
            f"Mail folder %1$s is read-only {_ext(1)}",
            MailCodes.READ_ONLY_FOLDER,
        ),
    ),
    (
        MailCodes.CONNECT_ERROR,
        Define(
            "Cannot connect to mail server %1$s with login %2$s",
            Category.TRY_AGAIN,
            1016,
        ),
    ),
    (
        MailCodes.QUOTA_EXCEEDED,
        Define("Mailbox quota exceeded: %1$s", Category.CAPACITY, 1017),
    ),
    (
        MailCodes.MESSAGING_ERROR,
        Define("Messaging error: %1$s", Category.ERROR, 1018),
    ),
)
