"""Plain records describing notes and folders."""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional


@dataclass
class NoteData:
    """A single note as kept by the application."""

    id: int = 0
    parent_folder_id: int = 0
    title: str = ""
    content: str = ""
    creation_time: Optional[datetime] = None
    modification_time: Optional[datetime] = None
    is_in_trash: bool = False
    is_pinned: bool = False
    color: str = "#000000"

    def copy(self) -> "NoteData":
        """Return an independent copy of this note."""
        return replace(self)


@dataclass
class FolderData:
    """A folder in the folder tree."""

    id: int = 0
    parent_id: int = 0
    previous_folder_id: int = 0
    name: str = ""
    color: str = "#ffffff"
    notes_inside_count: int = 0

    def copy(self) -> "FolderData":
        """Return an independent copy of this folder."""
        return replace(self)