"""Well-known folder identifiers and the data roles of the note and folder models."""

from enum import IntEnum

_DISPLAY_ROLE = 0
_EDIT_ROLE = 2
_USER_ROLE = 256


class SpecialFolderId(IntEnum):
    """Identifiers of folders that always exist."""

    INVALID_ID = -10
    ROOT_FOLDER = 1
    ALL_NOTES_FOLDER = 2
    TRASH_FOLDER = 3
    USER_FOLDER = 4  # folders created by the user get this id or higher


class NoteRole(IntEnum):
    """Roles under which a note's fields are read from and written to the note list."""

    DISPLAY = _DISPLAY_ROLE
    EDIT = _EDIT_ROLE
    ID = _USER_ROLE
    PARENT_FOLDER_ID = _USER_ROLE + 1
    TITLE = _USER_ROLE + 2
    CONTENT = _USER_ROLE + 3
    CREATION_TIME = _USER_ROLE + 4
    MODIFICATION_TIME = _USER_ROLE + 5
    IS_IN_TRASH = _USER_ROLE + 6
    IS_PINNED = _USER_ROLE + 7
    COLOR = _USER_ROLE + 8


class FolderRole(IntEnum):
    """Roles under which a folder's fields are read from and written to the folder tree."""

    DISPLAY = _DISPLAY_ROLE
    EDIT = _EDIT_ROLE
    ID = _USER_ROLE
    PARENT_ID = _USER_ROLE + 1
    PREVIOUS_FOLDER_ID = _USER_ROLE + 2
    NAME = _USER_ROLE + 3
    COLOR = _USER_ROLE + 4
    NOTES_INSIDE_COUNT = _USER_ROLE + 5


def is_user_folder(folder_id: int) -> bool:
    """Return True if the folder id belongs to a folder created by the user."""
    return folder_id >= SpecialFolderId.USER_FOLDER