"""IMAP error codes.

Each ``*_EXT`` code extends its base code with server, login, user and
context of the session. It keeps number, category and display message of
the base and only grows the logged text.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import StrEnum, unique

from constants import GENERIC_ERROR_MESSAGE
from enums import Category

from . import messages as msg
from .dataclasses import Alias, Declaration, Define, Extend
from .mail_codes import MailCodes
from .rendering import context_tail as _ext

_PD = Category.PERMISSION_DENIED
_UI = Category.USER_INPUT


@unique
class IMAPCodes(StrEnum):
    """IMAP code identifiers."""

    MISSING_CONNECT_PARAM = "MISSING_CONNECT_PARAM"
    NOT_CONNECTED = "NOT_CONNECTED"
    NOT_CONNECTED_EXT = "NOT_CONNECTED_EXT"
    MISSING_PARAMETER = "MISSING_PARAMETER"
    JSON_ERROR = "JSON_ERROR"
    INVALID_PERMISSION = "INVALID_PERMISSION"
    NO_MAIL_MODULE_ACCESS = "NO_MAIL_MODULE_ACCESS"
    NO_ACCESS = "NO_ACCESS"
    NO_ACCESS_EXT = "NO_ACCESS_EXT"
    NO_LOOKUP_ACCESS = "NO_LOOKUP_ACCESS"
    NO_LOOKUP_ACCESS_EXT = "NO_LOOKUP_ACCESS_EXT"
    NO_READ_ACCESS = "NO_READ_ACCESS"
    NO_READ_ACCESS_EXT = "NO_READ_ACCESS_EXT"
    NO_DELETE_ACCESS = "NO_DELETE_ACCESS"
    NO_DELETE_ACCESS_EXT = "NO_DELETE_ACCESS_EXT"
    NO_INSERT_ACCESS = "NO_INSERT_ACCESS"
    NO_INSERT_ACCESS_EXT = "NO_INSERT_ACCESS_EXT"
    NO_CREATE_ACCESS = "NO_CREATE_ACCESS"
    NO_CREATE_ACCESS_EXT = "NO_CREATE_ACCESS_EXT"
    NO_ADMINISTER_ACCESS = "NO_ADMINISTER_ACCESS"
    NO_ADMINISTER_ACCESS_EXT = "NO_ADMINISTER_ACCESS_EXT"
    NO_WRITE_ACCESS = "NO_WRITE_ACCESS"
    NO_WRITE_ACCESS_EXT = "NO_WRITE_ACCESS_EXT"
    NO_KEEP_SEEN_ACCESS = "NO_KEEP_SEEN_ACCESS"
    NO_KEEP_SEEN_ACCESS_EXT = "NO_KEEP_SEEN_ACCESS_EXT"
    FOLDER_DOES_NOT_HOLD_FOLDERS = "FOLDER_DOES_NOT_HOLD_FOLDERS"
    FOLDER_DOES_NOT_HOLD_FOLDERS_EXT = "FOLDER_DOES_NOT_HOLD_FOLDERS_EXT"
    INVALID_FOLDER_NAME = "INVALID_FOLDER_NAME"
    DUPLICATE_FOLDER = "DUPLICATE_FOLDER"
    DUPLICATE_FOLDER_EXT = "DUPLICATE_FOLDER_EXT"
    FOLDER_CREATION_FAILED = "FOLDER_CREATION_FAILED"
    FOLDER_CREATION_FAILED_EXT = "FOLDER_CREATION_FAILED_EXT"
    NO_ADMINISTER_ACCESS_ON_INITIAL = "NO_ADMINISTER_ACCESS_ON_INITIAL"
    NO_ADMINISTER_ACCESS_ON_INITIAL_EXT = "NO_ADMINISTER_ACCESS_ON_INITIAL_EXT"
    NO_ADMIN_ACL = "NO_ADMIN_ACL"
    NO_ADMIN_ACL_EXT = "NO_ADMIN_ACL_EXT"
    NO_DEFAULT_FOLDER_UPDATE = "NO_DEFAULT_FOLDER_UPDATE"
    NO_DEFAULT_FOLDER_UPDATE_EXT = "NO_DEFAULT_FOLDER_UPDATE_EXT"
    DELETE_FAILED = "DELETE_FAILED"
    DELETE_FAILED_EXT = "DELETE_FAILED_EXT"
    NO_DEFAULT_FOLDER_CREATION = "NO_DEFAULT_FOLDER_CREATION"
    NO_DEFAULT_FOLDER_CREATION_EXT = "NO_DEFAULT_FOLDER_CREATION_EXT"
    MISSING_DEFAULT_FOLDER_NAME = "MISSING_DEFAULT_FOLDER_NAME"
    MISSING_DEFAULT_FOLDER_NAME_EXT = "MISSING_DEFAULT_FOLDER_NAME_EXT"
    UPDATE_FAILED = "UPDATE_FAILED"
    UPDATE_FAILED_EXT = "UPDATE_FAILED_EXT"
    NO_FOLDER_DELETE = "NO_FOLDER_DELETE"
    NO_FOLDER_DELETE_EXT = "NO_FOLDER_DELETE_EXT"
    NO_DEFAULT_FOLDER_DELETE = "NO_DEFAULT_FOLDER_DELETE"
    NO_DEFAULT_FOLDER_DELETE_EXT = "NO_DEFAULT_FOLDER_DELETE_EXT"
    IO_ERROR = "IO_ERROR"
    UNKNOWN_HOST_ERROR = "UNKNOWN_HOST_ERROR"
    FLAG_FAILED = "FLAG_FAILED"
    FLAG_FAILED_EXT = "FLAG_FAILED_EXT"
    FOLDER_DOES_NOT_HOLD_MESSAGES = "FOLDER_DOES_NOT_HOLD_MESSAGES"
    FOLDER_DOES_NOT_HOLD_MESSAGES_EXT = "FOLDER_DOES_NOT_HOLD_MESSAGES_EXT"
    INVALID_SEARCH_PARAMS = "INVALID_SEARCH_PARAMS"
    IMAP_SEARCH_FAILED = "IMAP_SEARCH_FAILED"
    IMAP_SEARCH_FAILED_EXT = "IMAP_SEARCH_FAILED_EXT"
    IMAP_SORT_FAILED = "IMAP_SORT_FAILED"
    IMAP_SORT_FAILED_EXT = "IMAP_SORT_FAILED_EXT"
    UNKNOWN_SEARCH_FIELD = "UNKNOWN_SEARCH_FIELD"
    UNKNOWN_SEARCH_FIELD_EXT = "UNKNOWN_SEARCH_FIELD_EXT"
    INVALID_FIELD = "INVALID_FIELD"
    INVALID_FIELD_EXT = "INVALID_FIELD_EXT"
    NO_MOVE_TO_SUBFLD = "NO_MOVE_TO_SUBFLD"
    NO_MOVE_TO_SUBFLD_EXT = "NO_MOVE_TO_SUBFLD_EXT"
    MOVE_ON_DELETE_FAILED = "MOVE_ON_DELETE_FAILED"
    MOVE_ON_DELETE_FAILED_EXT = "MOVE_ON_DELETE_FAILED_EXT"
    MISSING_SOURCE_TARGET_FOLDER_ON_MOVE = (
        "MISSING_SOURCE_TARGET_FOLDER_ON_MOVE"
    )
    MISSING_SOURCE_TARGET_FOLDER_ON_MOVE_EXT = (
        "MISSING_SOURCE_TARGET_FOLDER_ON_MOVE_EXT"
    )
    NO_EQUAL_MOVE = "NO_EQUAL_MOVE"
    NO_EQUAL_MOVE_EXT = "NO_EQUAL_MOVE_EXT"
    FAILED_READ_ONLY_CHECK = "FAILED_READ_ONLY_CHECK"
    FAILED_READ_ONLY_CHECK_EXT = "FAILED_READ_ONLY_CHECK_EXT"
    UNKNOWN_FOLDER_MODE = "UNKNOWN_FOLDER_MODE"
    UNKNOWN_FOLDER_MODE_EXT = "UNKNOWN_FOLDER_MODE_EXT"
    UID_EXPUNGE_FAILED = "UID_EXPUNGE_FAILED"
    UID_EXPUNGE_FAILED_EXT = "UID_EXPUNGE_FAILED_EXT"
    NO_FOLDER_OPEN = "NO_FOLDER_OPEN"
    NO_FOLDER_OPEN_EXT = "NO_FOLDER_OPEN_EXT"
    MESSAGE_CONTENT_ERROR = "MESSAGE_CONTENT_ERROR"
    MESSAGE_CONTENT_ERROR_EXT = "MESSAGE_CONTENT_ERROR_EXT"
    NO_ATTACHMENT_FOUND = "NO_ATTACHMENT_FOUND"
    NO_ATTACHMENT_FOUND_EXT = "NO_ATTACHMENT_FOUND_EXT"
    UNSUPPORTED_VERSIT_ATTACHMENT = "UNSUPPORTED_VERSIT_ATTACHMENT"
    FAILED_VERSIT_SAVE = "FAILED_VERSIT_SAVE"
    THREAD_SORT_NOT_SUPPORTED = "THREAD_SORT_NOT_SUPPORTED"
    THREAD_SORT_NOT_SUPPORTED_EXT = "THREAD_SORT_NOT_SUPPORTED_EXT"
    ENCODING_ERROR = "ENCODING_ERROR"
    PROTOCOL_ERROR = "PROTOCOL_ERROR"
    FOLDER_NOT_FOUND = "FOLDER_NOT_FOUND"
    FOLDER_NOT_FOUND_EXT = "FOLDER_NOT_FOUND_EXT"
    READ_ONLY_FOLDER = "READ_ONLY_FOLDER"
    READ_ONLY_FOLDER_EXT = "READ_ONLY_FOLDER_EXT"
    CONNECT_ERROR = "CONNECT_ERROR"
    NO_ROOT_MOVE = "NO_ROOT_MOVE"
    UNSUPPORTED_SORT_FIELD = "UNSUPPORTED_SORT_FIELD"
    UNSUPPORTED_SORT_FIELD_EXT = "UNSUPPORTED_SORT_FIELD_EXT"
    MISSING_PERSONAL_NAMESPACE = "MISSING_PERSONAL_NAMESPACE"
    THREAD_SORT_PARSING_ERROR = "THREAD_SORT_PARSING_ERROR"
    SQL_ERROR = "SQL_ERROR"
    RENAME_FAILED = "RENAME_FAILED"
    RENAME_FAILED_EXT = "RENAME_FAILED_EXT"
    NO_RENAME_ACCESS = "NO_RENAME_ACCESS"
    NO_RENAME_ACCESS_EXT = "NO_RENAME_ACCESS_EXT"
    URI_PARSE_FAILED = "URI_PARSE_FAILED"
    NO_DEFAULT_FOLDER_UNSUBSCRIBE = "NO_DEFAULT_FOLDER_UNSUBSCRIBE"
    NO_DEFAULT_FOLDER_UNSUBSCRIBE_EXT = "NO_DEFAULT_FOLDER_UNSUBSCRIBE_EXT"
    INVALID_MESSAGE = "INVALID_MESSAGE"
    INVALID_MESSAGE_EXT = "INVALID_MESSAGE_EXT"
    CONNECTION_UNAVAILABLE = "CONNECTION_UNAVAILABLE"
    OWNER_MUST_BE_ADMIN = "OWNER_MUST_BE_ADMIN"
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"
    MAX_NUMBER_OF_MESSAGES_EXCEEDED = "MAX_NUMBER_OF_MESSAGES_EXCEEDED"
    TOO_MANY_FOLDERS = "TOO_MANY_FOLDERS"
    SUBSCRIBE_AFTER_CREATE_FAILED = "SUBSCRIBE_AFTER_CREATE_FAILED"
    NO_DEPUTY_PERMISSION_CHANGE = "NO_DEPUTY_PERMISSION_CHANGE"
    NO_DEPUTY_PERMISSION_DELETE = "NO_DEPUTY_PERMISSION_DELETE"
    NO_UPDATE_ACCESS = "NO_UPDATE_ACCESS"
    NO_UPDATE_ACCESS_EXT = "NO_UPDATE_ACCESS_EXT"


C = IMAPCodes

IMAP_DECLARATIONS: tuple[tuple[IMAPCodes, Declaration], ...] = (
    (C.MISSING_CONNECT_PARAM, Alias(MailCodes.MISSING_CONNECT_PARAM)),
    (
        C.NOT_CONNECTED,
        Define(
            "No connection available to access mailbox",
            Category.ERROR,
            2001,
            msg.NOT_CONNECTED_MSG,
        ),
    ),
    (
        C.NOT_CONNECTED_EXT,
        Extend(
            f"No connection available to access mailbox {_ext(0)}",
            C.NOT_CONNECTED,
        ),
    ),
    (C.MISSING_PARAMETER, Alias(MailCodes.MISSING_PARAMETER)),
    (C.JSON_ERROR, Alias(MailCodes.JSON_ERROR)),
    (C.INVALID_PERMISSION, Alias(MailCodes.INVALID_PERMISSION)),
    (
        C.NO_MAIL_MODULE_ACCESS,
        Define(
            "User %1$s has no mail module access due to user configuration",
            _PD,
            2003,
            msg.NO_MAIL_MODULE_ACCESS_MSG,
        ),
    ),
    (
        C.NO_ACCESS,
        Define(
            "No access to mail folder %1$s",
            _PD,
            2003,
            msg.NO_ACCESS_MSG,
        ),
    ),
    (
        C.NO_ACCESS_EXT,
        Extend(f"No access to mail folder %1$s {_ext(1)}", C.NO_ACCESS),
    ),
    (
        C.NO_LOOKUP_ACCESS,
        Define(
            "No lookup access to mail folder %1$s",
            _PD,
            2004,
            msg.NO_LOOKUP_ACCESS_MSG,
        ),
    ),
    (
        C.NO_LOOKUP_ACCESS_EXT,
        Extend(
            f"No lookup access to mail folder %1$s {_ext(1)}",
            C.NO_LOOKUP_ACCESS,
        ),
    ),
    (
        C.NO_READ_ACCESS,
        Define(
            "No read access to mail folder %1$s",
            _PD,
            2005,
            msg.NO_READ_ACCESS_MSG,
        ),
    ),
    (
        C.NO_READ_ACCESS_EXT,
        Extend(
            f"No read access to mail folder %1$s {_ext(1)}",
            C.NO_READ_ACCESS,
        ),
    ),
    (
        C.NO_DELETE_ACCESS,
        Define(
            "No delete access to mail folder %1$s",
            _PD,
            2006,
            msg.NO_DELETE_ACCESS_MSG,
        ),
    ),
    (
        C.NO_DELETE_ACCESS_EXT,
        Extend(
            f"No delete access to mail folder %1$s {_ext(1)}",
            C.NO_DELETE_ACCESS,
        ),
    ),
    (
        C.NO_INSERT_ACCESS,
        Define(
            "No insert access to mail folder %1$s",
            _PD,
            2007,
            msg.NO_INSERT_ACCESS_MSG,
        ),
    ),
    (
        C.NO_INSERT_ACCESS_EXT,
        Extend(
            f"No insert access to mail folder %1$s {_ext(1)}",
            C.NO_INSERT_ACCESS,
        ),
    ),
    (C.NO_CREATE_ACCESS, Alias(MailCodes.NO_CREATE_ACCESS)),
    (
        C.NO_CREATE_ACCESS_EXT,
        Alias(MailCodes.NO_CREATE_ACCESS_EXT, extends=C.NO_CREATE_ACCESS),
    ),
    (
        C.NO_ADMINISTER_ACCESS,
        Define(
            "No administer access to mail folder %1$s",
            _PD,
            2009,
            msg.NO_ADMINISTER_ACCESS_MSG,
        ),
    ),
    (
        C.NO_ADMINISTER_ACCESS_EXT,
        Extend(
            f"No administer access to mail folder %1$s {_ext(1)}",
            C.NO_ADMINISTER_ACCESS,
        ),
    ),
    (
        C.NO_WRITE_ACCESS,
        Define(
            "No write access to IMAP folder %1$s",
            _PD,
            2010,
            msg.NO_WRITE_ACCESS_MSG,
        ),
    ),
    (
        C.NO_WRITE_ACCESS_EXT,
        Extend(
            f"No write access to IMAP folder %1$s {_ext(1)}",
            C.NO_WRITE_ACCESS,
        ),
    ),
    (
        C.NO_KEEP_SEEN_ACCESS,
        Define(
            "No keep-seen access to mail folder %1$s",
            _PD,
            2011,
            msg.NO_KEEP_SEEN_ACCESS_MSG,
        ),
    ),
    (
        C.NO_KEEP_SEEN_ACCESS_EXT,
        Extend(
            f"No keep-seen access to mail folder %1$s {_ext(1)}",
            C.NO_KEEP_SEEN_ACCESS,
        ),
    ),
    (
        C.FOLDER_DOES_NOT_HOLD_FOLDERS,
        Define(
            "Folder %1$s does not allow subfolders.",
            _PD,
            2012,
            msg.FOLDER_DOES_NOT_HOLD_FOLDERS_MSG,
        ),
    ),
    (
        C.FOLDER_DOES_NOT_HOLD_FOLDERS_EXT,
        Extend(
            f"Folder %1$s does not allow subfolders {_ext(1)}.",
            C.FOLDER_DOES_NOT_HOLD_FOLDERS,
        ),
    ),
    (C.INVALID_FOLDER_NAME, Alias(MailCodes.INVALID_FOLDER_NAME)),
    (C.DUPLICATE_FOLDER, Alias(MailCodes.DUPLICATE_FOLDER)),
    (
        C.DUPLICATE_FOLDER_EXT,
        Alias(MailCodes.DUPLICATE_FOLDER_EXT, extends=C.DUPLICATE_FOLDER),
    ),
    (
        C.FOLDER_CREATION_FAILED,
        Define(
            'Mail folder "%1$s" could not be created (maybe due to '
            "insufficient permission on parent folder %2$s or due to an "
            "invalid folder name)",
            _UI,
            2015,
            msg.FOLDER_CREATION_FAILED_MSG,
        ),
    ),
    (
        C.FOLDER_CREATION_FAILED_EXT,
        Extend(
            'Mail folder "%1$s" could not be created (maybe due to '
            "insufficient permission on parent folder %2$s or due to an "
            f"invalid folder name) {_ext(2)}",
            C.FOLDER_CREATION_FAILED,
        ),
    ),
    (
        C.NO_ADMINISTER_ACCESS_ON_INITIAL,
        Define(
            "The composed rights could not be applied to new folder %1$s "
            "due to missing administer right in its initial rights "
            "specified by IMAP server. However, the folder has been created.",
            _PD,
            2016,
            msg.NO_ADMINISTER_ACCESS_ON_INITIAL_MSG,
        ),
    ),
    (
        C.NO_ADMINISTER_ACCESS_ON_INITIAL_EXT,
        Extend(
            "The composed rights could not be applied to new folder %1$s "
            "due to missing administer right in its initial rights "
            "specified by IMAP server. However, the folder has been "
            f"created {_ext(1)}.",
            C.NO_ADMINISTER_ACCESS_ON_INITIAL,
        ),
    ),
    (
        C.NO_ADMIN_ACL,
        Define(
            "No administer permission specified for folder %1$s",
            _UI,
            2017,
            msg.NO_ADMIN_ACL_MSG,
        ),
    ),
    (
        C.NO_ADMIN_ACL_EXT,
        Extend(
            f"No administer permission specified for folder %1$s {_ext(1)}",
            C.NO_ADMIN_ACL,
        ),
    ),
    (
        C.NO_DEFAULT_FOLDER_UPDATE,
        Define(
            "Default folder %1$s must not be updated",
            _PD,
            2018,
            msg.NO_DEFAULT_FOLDER_UPDATE_MSG,
        ),
    ),
    (
        C.NO_DEFAULT_FOLDER_UPDATE_EXT,
        Extend(
            f"Default folder %1$s must not be updated {_ext(1)}",
            C.NO_DEFAULT_FOLDER_UPDATE,
        ),
    ),
    (
        C.DELETE_FAILED,
        Define(
            "Deletion of folder %1$s failed",
            Category.ERROR,
            2019,
            msg.DELETE_FAILED_MSG,
        ),
    ),
    (
        C.DELETE_FAILED_EXT,
        Extend(
            f"Deletion of folder %1$s failed {_ext(1)}",
            C.DELETE_FAILED,
        ),
    ),
    (
        C.NO_DEFAULT_FOLDER_CREATION,
        Define(
            "IMAP default folder %1$s could not be created",
            Category.ERROR,
            2020,
            msg.NO_DEFAULT_FOLDER_CREATION_MSG,
        ),
    ),
    (
        C.NO_DEFAULT_FOLDER_CREATION_EXT,
        Extend(
            f"IMAP default folder %1$s could not be created {_ext(1)}",
            C.NO_DEFAULT_FOLDER_CREATION,
        ),
    ),
    (
        C.MISSING_DEFAULT_FOLDER_NAME,
        Define(
            "Missing default %1$s folder",
            Category.ERROR,
            2021,
            msg.MISSING_DEFAULT_FOLDER_NAME_MSG,
        ),
    ),
    (
        C.MISSING_DEFAULT_FOLDER_NAME_EXT,
        Extend(
            f"Missing default %1$s folder {_ext(1)}",
            C.MISSING_DEFAULT_FOLDER_NAME,
        ),
    ),
    (
        C.UPDATE_FAILED,
        Define(
            "Update of folder %1$s failed",
            Category.ERROR,
            2022,
            msg.UPDATE_FAILED_MSG,
        ),
    ),
    (
        C.UPDATE_FAILED_EXT,
        Extend(f"Update of folder %1$s failed {_ext(1)}", C.UPDATE_FAILED),
    ),
    (
        C.NO_FOLDER_DELETE,
        Define(
            "Folder %1$s cannot be deleted",
            _PD,
            2023,
            msg.NO_FOLDER_DELETE_MSG,
        ),
    ),
    (
        C.NO_FOLDER_DELETE_EXT,
        Extend(
            f"Folder %1$s cannot be deleted {_ext(1)}",
            C.NO_FOLDER_DELETE,
        ),
    ),
    (
        C.NO_DEFAULT_FOLDER_DELETE,
        Define(
            "Default folder %1$s cannot be deleted",
            _PD,
            2024,
            msg.NO_DEFAULT_FOLDER_DELETE_MSG,
        ),
    ),
    (
        C.NO_DEFAULT_FOLDER_DELETE_EXT,
        Extend(
            f"Default folder %1$s cannot be deleted {_ext(1)}",
            C.NO_DEFAULT_FOLDER_DELETE,
        ),
    ),
    (C.IO_ERROR, Alias(MailCodes.IO_ERROR)),
    (
        C.UNKNOWN_HOST_ERROR,
        Alias(
            MailCodes.IO_ERROR,
            message="The IP address could not be determined: %1$s",
        ),
    ),
    (
        C.FLAG_FAILED,
        Define(
            'Flag %1$s could not be changed due to following reason "%2$s"',
            Category.ERROR,
            2025,
            msg.FLAG_FAILED_MSG,
        ),
    ),
    (
        C.FLAG_FAILED_EXT,
        Extend(
            "Flag %1$s could not be changed due to following reason "
            f'"%2$s" {_ext(2)}',
            C.FLAG_FAILED,
        ),
    ),
    (
        C.FOLDER_DOES_NOT_HOLD_MESSAGES,
        Alias(MailCodes.FOLDER_DOES_NOT_HOLD_MESSAGES),
    ),
    (
        C.FOLDER_DOES_NOT_HOLD_MESSAGES_EXT,
        Alias(
            MailCodes.FOLDER_DOES_NOT_HOLD_MESSAGES_EXT,
            extends=C.FOLDER_DOES_NOT_HOLD_MESSAGES,
        ),
    ),
    (
        C.INVALID_SEARCH_PARAMS,
        Define(
            "Number of search fields (%d) do not match number of "
            "search patterns (%d)",
            Category.ERROR,
            2028,
        ),
    ),
    (
        C.IMAP_SEARCH_FAILED,
        Define(
            'IMAP search failed due to reason "%1$s". '
            "Switching to application-based search",
            Category.SERVICE_DOWN,
            2029,
            msg.IMAP_SEARCH_FAILED_MSG,
        ),
    ),
    (
        C.IMAP_SEARCH_FAILED_EXT,
        Extend(
            f'IMAP search failed due to reason "%1$s" {_ext(1)}. '
            "Switching to application-based search.",
            C.IMAP_SEARCH_FAILED,
        ),
    ),
    (
        C.IMAP_SORT_FAILED,
        Define(
            'IMAP sort failed due to reason "%1$s". '
            "Switching to application-based sorting.",
            Category.SERVICE_DOWN,
            2030,
            msg.IMAP_SORT_FAILED_MSG,
        ),
    ),
    (
        C.IMAP_SORT_FAILED_EXT,
        Extend(
            f'IMAP sort failed due to reason "%1$s" {_ext(1)}. '
            "Switching to application-based sorting.",
            C.IMAP_SORT_FAILED,
        ),
    ),
    (
        C.UNKNOWN_SEARCH_FIELD,
        Define(
            "Unknown search field: %1$s",
            Category.ERROR,
            2031,
            msg.UNKNOWN_SEARCH_FIELD_MSG,
        ),
    ),
    (
        C.UNKNOWN_SEARCH_FIELD_EXT,
        Extend(
            f"Unknown search field: %1$s {_ext(1)}",
            C.UNKNOWN_SEARCH_FIELD,
        ),
    ),
    (C.INVALID_FIELD, Alias(MailCodes.INVALID_FIELD)),
    (
        C.INVALID_FIELD_EXT,
        Alias(MailCodes.INVALID_FIELD_EXT, extends=C.INVALID_FIELD),
    ),
    (
        C.NO_MOVE_TO_SUBFLD,
        Define(
            "Mail folder %1$s must not be moved to subsequent folder %2$s",
            _PD,
            2032,
            msg.NO_MOVE_TO_SUBFLD_MSG,
        ),
    ),
    (
        C.NO_MOVE_TO_SUBFLD_EXT,
        Extend(
            "Mail folder %1$s must not be moved to subsequent folder "
            f"%2$s {_ext(2)}",
            C.NO_MOVE_TO_SUBFLD,
        ),
    ),
    (
        C.MOVE_ON_DELETE_FAILED,
        Define(
            "This message could not be moved to trash folder, possibly "
            "because your mailbox is nearly full.\nIn that case, please try "
            "to empty your deleted items first, or delete smaller messages "
            "first.",
            Category.CAPACITY,
            2034,
            msg.MOVE_ON_DELETE_FAILED_MSG,
        ),
    ),
    (
        C.MOVE_ON_DELETE_FAILED_EXT,
        Extend(
            f"This message could not be moved to trash folder {_ext(0)}, "
            "possibly because your mailbox is nearly full.\nIn that case, "
            "please try to empty your deleted items first, or delete "
            "smaller messages first.",
            C.MOVE_ON_DELETE_FAILED,
        ),
    ),
    (
        C.MISSING_SOURCE_TARGET_FOLDER_ON_MOVE,
        Define(
            "Missing %1$s folder in mail move operation",
            Category.ERROR,
            2035,
            msg.MISSING_SOURCE_TARGET_FOLDER_ON_MOVE_MSG,
        ),
    ),
    (
        C.MISSING_SOURCE_TARGET_FOLDER_ON_MOVE_EXT,
        Extend(
            f"Missing %1$s folder in mail move operation {_ext(1)}",
            C.MISSING_SOURCE_TARGET_FOLDER_ON_MOVE,
        ),
    ),
    (
        C.NO_EQUAL_MOVE,
        Define(
            "Message move aborted for user %1$s. Source and destination "
            'folder are equal to "%2$s"',
            _UI,
            2036,
            msg.NO_EQUAL_MOVE_MSG,
        ),
    ),
    (
        C.NO_EQUAL_MOVE_EXT,
        Extend(
            "Message move aborted for user %1$s. Source and destination "
            f'folder are equal to "%2$s" {_ext(2)}',
            C.NO_EQUAL_MOVE,
        ),
    ),
    (
        C.FAILED_READ_ONLY_CHECK,
        Define(
            "IMAP folder read-only check failed",
            Category.ERROR,
            2037,
            msg.FAILED_READ_ONLY_CHECK_MSG,
        ),
    ),
    (
        C.FAILED_READ_ONLY_CHECK_EXT,
        Extend(
            f"Folder read-only check failed {_ext(0)}",
            C.FAILED_READ_ONLY_CHECK,
        ),
    ),
    (
        C.UNKNOWN_FOLDER_MODE,
        Define("Unknown folder open mode %1$s", Category.ERROR, 2038),
    ),
    (
        C.UNKNOWN_FOLDER_MODE_EXT,
        Extend(
            f"Unknown folder open mode %1$s {_ext(1)}",
            C.UNKNOWN_FOLDER_MODE,
        ),
    ),
    (
        C.UID_EXPUNGE_FAILED,
        Define(
            "Message(s) %1$s in folder %2$s could not be deleted due to "
            'error "%3$s"',
            Category.ERROR,
            2039,
            msg.UID_EXPUNGE_FAILED_MSG,
        ),
    ),
    (
        C.UID_EXPUNGE_FAILED_EXT,
        Extend(
            "Message(s) %1$s in folder %2$s could not be deleted due to "
            f'error "%3$s" {_ext(3)}',
            C.UID_EXPUNGE_FAILED,
        ),
    ),
    (
        C.NO_FOLDER_OPEN,
        Define(
            "Not allowed to open folder %1$s due to missing read access",
            _PD,
            2041,
            msg.NO_FOLDER_OPEN_MSG,
        ),
    ),
    (
        C.NO_FOLDER_OPEN_EXT,
        Extend(
            "Not allowed to open folder %1$s due to missing read access "
            f"{_ext(1)}",
            C.NO_FOLDER_OPEN,
        ),
    ),
    (
        C.MESSAGE_CONTENT_ERROR,
        Define(
            "The raw content's input stream of message %1$s in folder "
            "%2$s cannot be read",
            Category.ERROR,
            2042,
            msg.MESSAGE_CONTENT_ERROR_MSG,
        ),
    ),
    (
        C.MESSAGE_CONTENT_ERROR_EXT,
        Extend(
            "The raw content's input stream of message %1$s in folder "
            f"%2$s cannot be read {_ext(2)}",
            C.MESSAGE_CONTENT_ERROR,
        ),
    ),
    (
        C.NO_ATTACHMENT_FOUND,
        Define(
            "No attachment was found with id %1$s in message",
            _UI,
            2043,
            msg.NO_ATTACHMENT_FOUND_MSG,
        ),
    ),
    (
        C.NO_ATTACHMENT_FOUND_EXT,
        Extend(
            f"No attachment was found with id %1$s in message {_ext(1)}",
            C.NO_ATTACHMENT_FOUND,
        ),
    ),
    (
        C.UNSUPPORTED_VERSIT_ATTACHMENT,
        Alias(MailCodes.UNSUPPORTED_VERSIT_ATTACHMENT),
    ),
    (
        C.FAILED_VERSIT_SAVE,
        Define(
            "Versit object could not be saved",
            Category.ERROR,
            2045,
            msg.FAILED_VERSIT_SAVE_MSG,
        ),
    ),
    (
        C.THREAD_SORT_NOT_SUPPORTED,
        Define(
            'No support of capability "THREAD=REFERENCES"',
            Category.ERROR,
            2046,
            msg.THREAD_SORT_NOT_SUPPORTED_MSG,
        ),
    ),
    (
        C.THREAD_SORT_NOT_SUPPORTED_EXT,
        Extend(
            f'No support of capability "THREAD=REFERENCES" {_ext(0)}',
            C.THREAD_SORT_NOT_SUPPORTED,
        ),
    ),
    (C.ENCODING_ERROR, Alias(MailCodes.ENCODING_ERROR)),
    (
        C.PROTOCOL_ERROR,
        Define(
            "A protocol exception occurred during execution of IMAP "
            'request "%1$s".\nError message: %2$s',
            Category.ERROR,
            2047,
            msg.PROTOCOL_ERROR_MSG,
        ),
    ),
    (C.FOLDER_NOT_FOUND, Alias(MailCodes.FOLDER_NOT_FOUND)),
    (
        C.FOLDER_NOT_FOUND_EXT,
        Alias(MailCodes.FOLDER_NOT_FOUND_EXT, extends=C.FOLDER_NOT_FOUND),
    ),
    (C.READ_ONLY_FOLDER, Alias(MailCodes.READ_ONLY_FOLDER)),
    (
        C.READ_ONLY_FOLDER_EXT,
        Alias(MailCodes.READ_ONLY_FOLDER_EXT, extends=C.READ_ONLY_FOLDER),
    ),
    (C.CONNECT_ERROR, Alias(MailCodes.CONNECT_ERROR)),
    (
        C.NO_ROOT_MOVE,
        Define(
            "Mailbox' root folder must not be source or the destination "
            "full name of a move operation.",
            Category.ERROR,
            2048,
            msg.NO_ROOT_MOVE_MSG,
        ),
    ),
    (
        C.UNSUPPORTED_SORT_FIELD,
        Define(
            "Sort field %1$s is not supported via IMAP SORT command",
            Category.ERROR,
            2049,
            msg.UNSUPPORTED_SORT_FIELD_MSG,
        ),
    ),
    (
        C.UNSUPPORTED_SORT_FIELD_EXT,
        Extend(
            "Sort field %1$s is not supported via IMAP SORT command "
            f"{_ext(1)}",
            C.UNSUPPORTED_SORT_FIELD,
        ),
    ),
    (
        C.MISSING_PERSONAL_NAMESPACE,
        Define("Missing personal namespace", Category.ERROR, 2050),
    ),
    (
        C.THREAD_SORT_PARSING_ERROR,
        Define(
            "Parsing thread-sort string failed: %1$s.",
            Category.ERROR,
            2051,
        ),
    ),
    (
        C.SQL_ERROR,
        Define("A SQL error occurred: %1$s", Category.ERROR, 2052),
    ),
    (
        C.RENAME_FAILED,
        Define(
            'Rename of folder "%1$s" to "%2$s" failed with "%3$s".',
            Category.ERROR,
            2053,
            msg.RENAME_FAILED_MSG,
        ),
    ),
    (
        C.RENAME_FAILED_EXT,
        Extend(
            'Rename of folder "%1$s" to "%2$s" failed with "%3$s" '
            f"{_ext(3)}.",
            C.RENAME_FAILED,
        ),
    ),
    (
        C.NO_RENAME_ACCESS,
        Define(
            "No rename access to mail folder %1$s",
            _PD,
            2054,
            msg.NO_RENAME_ACCESS_MSG,
        ),
    ),
    (
        C.NO_RENAME_ACCESS_EXT,
        Extend(
            f"No rename access to mail folder %1$s {_ext(1)}",
            C.NO_RENAME_ACCESS,
        ),
    ),
    (
        C.URI_PARSE_FAILED,
        Define(
            'Unable to parse IMAP server URI "%1$s".',
            Category.CONFIGURATION,
            2055,
        ),
    ),
    (
        C.NO_DEFAULT_FOLDER_UNSUBSCRIBE,
        Define(
            "Default folder %1$s must not be unsubscribed.",
            _UI,
            2056,
            msg.NO_DEFAULT_FOLDER_UNSUBSCRIBE_MSG,
        ),
    ),
    (
        C.NO_DEFAULT_FOLDER_UNSUBSCRIBE_EXT,
        Extend(
            f"Default folder %1$s must not be unsubscribed {_ext(1)}",
            C.NO_DEFAULT_FOLDER_UNSUBSCRIBE,
        ),
    ),
    (
        C.INVALID_MESSAGE,
        Define(
            "IMAP server refuses to import one or more E-Mails.",
            _UI,
            2057,
            msg.INVALID_MESSAGE_MSG,
        ),
    ),
    (
        C.INVALID_MESSAGE_EXT,
        Extend(
            "IMAP server %1$s refuses to import one or more E-Mails with "
            "login %2$s (user=%3$s, context=%4$s)",
            C.INVALID_MESSAGE,
        ),
    ),
    (
        C.CONNECTION_UNAVAILABLE,
        Define(
            "Currently not possible to establish a new connection to "
            "server %1$s with login %2$s. Please try again.",
            Category.TRY_AGAIN,
            2058,
            msg.CONNECTION_UNAVAILABLE_MSG,
        ),
    ),
    (
        C.OWNER_MUST_BE_ADMIN,
        Define(
            "Update of folder %1$s failed. Owner is required to keep "
            "administrative rights.",
            _UI,
            2059,
            msg.OWNER_MUST_BE_ADMIN_MSG,
        ),
    ),
    (
        C.UNEXPECTED_ERROR,
        Define(
            "Unexpected error: %1$s",
            Category.ERROR,
            11,
            GENERIC_ERROR_MESSAGE,
        ),
    ),
    (
        C.MAX_NUMBER_OF_MESSAGES_EXCEEDED,
        Define(
            "Too many messages requested (limit is %1$s). "
            "Please query a smaller range.",
            _UI,
            2060,
            msg.MAX_NUMBER_OF_MESSAGES_EXCEEDED_MSG,
        ),
    ),
    (
        C.TOO_MANY_FOLDERS,
        Define(
            'Mail folder "%1$s" could not be created since there are too '
            "many folders. Please delete a folder in order to create a new "
            "one.",
            _UI,
            2061,
            msg.TOO_MANY_FOLDERS_MSG,
        ),
    ),
    (
        C.SUBSCRIBE_AFTER_CREATE_FAILED,
        Define(
            'Mail folder "%1$s" could be successfully created, but '
            "subscription of that folder failed.",
            Category.WARNING,
            2062,
            msg.SUBSCRIBE_AFTER_CREATE_FAILED_MSG,
        ),
    ),
    (
        C.NO_DEPUTY_PERMISSION_CHANGE,
        Define(
            "The deputy permission for entity %1$s must not be changed "
            "for folder %2$s",
            _UI,
            2063,
            msg.NO_DEPUTY_PERMISSION_CHANGE_MSG,
        ),
    ),
    (
        C.NO_DEPUTY_PERMISSION_DELETE,
        Define(
            "The deputy permission for entity %1$s must not be removed "
            "for folder %2$s",
            _UI,
            2064,
            msg.NO_DEPUTY_PERMISSION_DELETE_MSG,
        ),
    ),
    (
        C.NO_UPDATE_ACCESS,
        Define(
            "No write access to IMAP folder %1$s. Therefore not possible "
            "to set/update any message flags or color/user flags.",
            _PD,
            2010,
            msg.NO_UPDATE_ACCESS_MSG,
        ),
    ),
    (
        C.NO_UPDATE_ACCESS_EXT,
        Extend(
            f"No write access to IMAP folder %1$s {_ext(1)}. Therefore not "
            "possible to set/update any message flags or color/user flags.",
            C.NO_UPDATE_ACCESS,
        ),
    ),
)

del C
