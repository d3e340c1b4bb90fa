"""Constants.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Final

IMAP_PREFIX: Final[str] = "IMAP"
MAIL_PREFIX: Final[str] = "MSG"

# server, login, user id, context id
EXT_LENGTH: Final[int] = 4

UNKNOWN_PLACEHOLDER: Final[str] = "<unknown>"
FULL_NAME_PROPERTY: Final[str] = "fullName"

GENERIC_ERROR_MESSAGE: Final[str] = (
    "An error occurred inside the server which prevented it from "
    "fulfilling the request."
)
GENERIC_RETRY_MESSAGE: Final[str] = (
    "A temporary error occurred inside the server which prevented it from "
    "fulfilling the request. Please try again later."
)

FOLDER_EVENT_TOPIC: Final[str] = "mail/folder/invalidated"
