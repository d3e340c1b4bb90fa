"""User-facing messages of IMAP error codes.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Final

NOT_CONNECTED_MSG: Final = "Cannot access the mailbox. Please try again later."
NO_MAIL_MODULE_ACCESS_MSG: Final = "You are not allowed to use E-Mail."
NO_ACCESS_MSG: Final = "You do not have the permission to access this folder."
NO_LOOKUP_ACCESS_MSG: Final = "You are not allowed to see this folder."
NO_READ_ACCESS_MSG: Final = (
    "You do not have the permission to read E-Mails in this folder."
)
NO_DELETE_ACCESS_MSG: Final = (
    "You do not have the permission to delete E-Mails in this folder."
)
NO_INSERT_ACCESS_MSG: Final = (
    "You do not have the permission to add E-Mails to this folder."
)
NO_ADMINISTER_ACCESS_MSG: Final = (
    "You do not have the permission to administer this folder."
)
NO_WRITE_ACCESS_MSG: Final = (
    "You do not have the permission to write to this folder."
)
NO_KEEP_SEEN_ACCESS_MSG: Final = (
    "You do not have the permission to mark E-Mails as seen in this folder."
)
FOLDER_DOES_NOT_HOLD_FOLDERS_MSG: Final = (
    "This folder does not allow subfolders."
)
FOLDER_CREATION_FAILED_MSG: Final = (
    "The folder could not be created. Please check the folder name and "
    "your permissions on the parent folder."
)
NO_ADMINISTER_ACCESS_ON_INITIAL_MSG: Final = (
    "The folder has been created, but its permissions could not be applied."
)
NO_ADMIN_ACL_MSG: Final = (
    "At least one user must keep the administer permission of this folder."
)
NO_DEFAULT_FOLDER_UPDATE_MSG: Final = "Standard folders cannot be changed."
DELETE_FAILED_MSG: Final = "The folder could not be deleted."
NO_DEFAULT_FOLDER_CREATION_MSG: Final = (
    "A standard folder could not be created."
)
MISSING_DEFAULT_FOLDER_NAME_MSG: Final = "A standard folder is missing."
UPDATE_FAILED_MSG: Final = "The folder could not be updated."
NO_FOLDER_DELETE_MSG: Final = "This folder cannot be deleted."
NO_DEFAULT_FOLDER_DELETE_MSG: Final = "Standard folders cannot be deleted."
FLAG_FAILED_MSG: Final = "The flag could not be changed."
IMAP_SEARCH_FAILED_MSG: Final = (
    "The mail server could not perform the search."
)
IMAP_SORT_FAILED_MSG: Final = "The mail server could not sort the E-Mails."
UNKNOWN_SEARCH_FIELD_MSG: Final = "The search field is not supported."
NO_MOVE_TO_SUBFLD_MSG: Final = (
    "A folder cannot be moved into one of its own subfolders."
)
MOVE_ON_DELETE_FAILED_MSG: Final = (
    "The E-Mail could not be moved to trash, possibly because your "
    "mailbox is nearly full. Please empty your trash folder or delete "
    "smaller E-Mails first."
)
MISSING_SOURCE_TARGET_FOLDER_ON_MOVE_MSG: Final = (
    "The source or destination folder of the move is missing."
)
NO_EQUAL_MOVE_MSG: Final = (
    "Source and destination folder of the move are the same."
)
FAILED_READ_ONLY_CHECK_MSG: Final = "The folder could not be checked."
UID_EXPUNGE_FAILED_MSG: Final = "The E-Mails could not be deleted."
NO_FOLDER_OPEN_MSG: Final = (
    "You do not have the permission to open this folder."
)
MESSAGE_CONTENT_ERROR_MSG: Final = "The E-Mail content cannot be read."
NO_ATTACHMENT_FOUND_MSG: Final = "The attachment could not be found."
FAILED_VERSIT_SAVE_MSG: Final = "The attachment could not be saved."
THREAD_SORT_NOT_SUPPORTED_MSG: Final = (
    "The mail server does not support conversation view."
)
PROTOCOL_ERROR_MSG: Final = (
    "The mail server reported an error. Please try again later."
)
NO_ROOT_MOVE_MSG: Final = "The mailbox root folder cannot be moved."
UNSUPPORTED_SORT_FIELD_MSG: Final = "Sorting by this field is not supported."
RENAME_FAILED_MSG: Final = "The folder could not be renamed."
NO_RENAME_ACCESS_MSG: Final = (
    "You do not have the permission to rename this folder."
)
NO_DEFAULT_FOLDER_UNSUBSCRIBE_MSG: Final = (
    "Standard folders cannot be unsubscribed."
)
INVALID_MESSAGE_MSG: Final = (
    "The mail server refused to import one or more E-Mails."
)
CONNECTION_UNAVAILABLE_MSG: Final = (
    "Currently no connection to the mail server is possible. "
    "Please try again later."
)
OWNER_MUST_BE_ADMIN_MSG: Final = (
    "The folder owner must keep the administer permission."
)
MAX_NUMBER_OF_MESSAGES_EXCEEDED_MSG: Final = (
    "Too many E-Mails requested. Please select a smaller range."
)
TOO_MANY_FOLDERS_MSG: Final = (
    "The folder could not be created because there are too many folders. "
    "Please delete a folder first."
)
SUBSCRIBE_AFTER_CREATE_FAILED_MSG: Final = (
    "The folder has been created, but could not be subscribed."
)
NO_DEPUTY_PERMISSION_CHANGE_MSG: Final = (
    "The deputy permission must not be changed."
)
NO_DEPUTY_PERMISSION_DELETE_MSG: Final = (
    "The deputy permission must not be removed."
)
NO_UPDATE_ACCESS_MSG: Final = (
    "You do not have the permission to change flags of E-Mails in this "
    "folder."
)
