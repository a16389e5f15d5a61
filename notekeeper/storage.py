"""SQLite storage of notes, folders and the images embedded in notes."""

import os
import sqlite3
from datetime import datetime
from io import BytesIO
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Union

from PIL import Image

from notekeeper.data import FolderData, NoteData
from notekeeper.ids import SpecialFolderId

_NOTE_TABLE = (
    "CREATE TABLE note("
    "id INTEGER PRIMARY KEY, "
    "parent_folder_id INTEGER, "
    "title TEXT, "
    "content TEXT, "
    "creation_time INTEGER NOT NULL DEFAULT 0, "
    "modification_time INTEGER NOT NULL DEFAULT 0, "
    "is_pinned INTEGER NOT NULL DEFAULT 0, "
    "color TEXT NOT NULL "
    ")"
)

_FOLDER_TABLE = (
    "CREATE TABLE folder("
    "id INTEGER PRIMARY KEY, "
    "name TEXT, "
    "parent_id INTEGER NOT NULL DEFAULT 0, "
    "previous_folder_id INTEGER NOT NULL DEFAULT 0, "
    "color TEXT NOT NULL "
    ")"
)

_IMAGE_TABLE = (
    "CREATE TABLE image("
    "id INTEGER PRIMARY KEY, "
    "data MEDIUMBLOB, "
    "note_id INTEGER "
    ")"
)

_NOTE_COLUMNS = (
    "id, parent_folder_id, title, content, creation_time, modification_time, is_pinned, color"
)


class StorageError(Exception):
    """Raised when the database rejects an operation."""


def _to_msecs(moment: Optional[datetime]) -> int:
    if moment is None:
        return 0
    return int(round(moment.timestamp() * 1000))


def _from_msecs(msecs: Optional[int]) -> datetime:
    return datetime.fromtimestamp((msecs or 0) / 1000)


def _placeholders(count: int) -> str:
    return ",".join("?" * count)


class PersistenceManager:
    """Keeps notes, folders and images in an SQLite database file."""

    def __init__(self, path: Union[str, "os.PathLike[str]"]) -> None:
        path_text = os.fspath(path)
        in_memory = path_text == ":memory:"
        needs_tables = in_memory or not Path(path_text).exists()
        try:
            self._db = sqlite3.connect(path_text, isolation_level=None)
        except sqlite3.Error as exc:
            raise StorageError(f"cannot open database {path_text!r}: {exc}") from exc
        if needs_tables:
            self._create_default_tables()

    # -- lifecycle -------------------------------------------------------

    def close(self) -> None:
        """Close the database connection."""
        self._db.close()

    def __enter__(self) -> "PersistenceManager":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    # -- helpers ---------------------------------------------------------

    def _execute(self, sql: str, params: Sequence = ()) -> sqlite3.Cursor:
        try:
            return self._db.execute(sql, tuple(params))
        except sqlite3.Error as exc:
            raise StorageError(str(exc)) from exc

    def _update_many(self, sql_prefix: str, value, ids: Iterable[int]) -> None:
        id_list = list(ids)
        if not id_list:
            return
        self._execute(f"{sql_prefix} WHERE id IN ({_placeholders(len(id_list))})", [value, *id_list])

    @staticmethod
    def _note_from_row(row: Sequence) -> NoteData:
        parent = int(row[1] or 0)
        return NoteData(
            id=int(row[0]),
            parent_folder_id=parent,
            title=row[2] or "",
            content=row[3] or "",
            creation_time=_from_msecs(row[4]),
            modification_time=_from_msecs(row[5]),
            is_pinned=bool(row[6]),
            color=row[7],
            is_in_trash=parent == SpecialFolderId.TRASH_FOLDER,
        )

    def _create_default_tables(self) -> None:
        for statement in (_NOTE_TABLE, _FOLDER_TABLE, _IMAGE_TABLE):
            self._execute(statement)

        all_notes = FolderData(
            name="All notes",
            parent_id=SpecialFolderId.ROOT_FOLDER,
            previous_folder_id=SpecialFolderId.INVALID_ID,
        )
        self._add_folder_with_id(all_notes, SpecialFolderId.ALL_NOTES_FOLDER)

        trash = FolderData(name="Trash", parent_id=SpecialFolderId.ROOT_FOLDER)
        self._add_folder_with_id(trash, SpecialFolderId.TRASH_FOLDER)

        user_folder = FolderData(
            name="New Folder",
            parent_id=SpecialFolderId.ROOT_FOLDER,
            previous_folder_id=SpecialFolderId.ALL_NOTES_FOLDER,
        )
        user_folder_id = self.add_folder(user_folder)

        trash.id = int(SpecialFolderId.TRASH_FOLDER)
        trash.previous_folder_id = user_folder_id
        self.update_folder(trash)

    def _add_folder_with_id(self, folder: FolderData, folder_id: int) -> None:
        self._execute(
            "INSERT INTO folder (id, name, parent_id, previous_folder_id, color) VALUES(?, ?, ?, ?, ?)",
            (int(folder_id), folder.name, int(folder.parent_id), int(folder.previous_folder_id), folder.color),
        )

    # -- notes -----------------------------------------------------------

    def add_note(self, note: NoteData) -> int:
        """Store a new note and return the id it was given."""
        cursor = self._execute(
            "INSERT INTO note "
            "(parent_folder_id, title, content, creation_time, modification_time, is_pinned, color) "
            "VALUES(?, ?, ?, ?, ?, ?, ?)",
            (
                int(note.parent_folder_id),
                note.title,
                note.content,
                _to_msecs(note.creation_time),
                _to_msecs(note.modification_time),
                int(note.is_pinned),
                note.color,
            ),
        )
        return int(cursor.lastrowid)

    def update_note(self, note: NoteData) -> None:
        """Overwrite the stored note that has the note's id."""
        self._execute(
            "UPDATE note SET parent_folder_id = ?, title = ?, content = ?, creation_time = ?, "
            "modification_time = ?, is_pinned = ?, color = ? WHERE id = ?",
            (
                int(note.parent_folder_id),
                note.title,
                note.content,
                _to_msecs(note.creation_time),
                _to_msecs(note.modification_time),
                int(note.is_pinned),
                note.color,
                int(note.id),
            ),
        )

    def set_color_of_notes(self, note_ids: Iterable[int], color: str) -> None:
        """Give all listed notes the same colour."""
        self._update_many("UPDATE note SET color = ?", color, note_ids)

    def set_is_pinned_of_notes(self, note_ids: Iterable[int], is_pinned: bool) -> None:
        """Pin or unpin all listed notes."""
        self._update_many("UPDATE note SET is_pinned = ?", int(bool(is_pinned)), note_ids)

    def load_note(self, note_id: int) -> NoteData:
        """Load one note; raise KeyError if there is none with that id."""
        row = self._execute(f"SELECT {_NOTE_COLUMNS} FROM note WHERE id = ? LIMIT 1", (int(note_id),)).fetchone()
        if row is None:
            raise KeyError(note_id)
        return self._note_from_row(row)

    def load_all_notes(self) -> List[NoteData]:
        """Load every note that is not in the trash."""
        rows = self._execute(
            f"SELECT {_NOTE_COLUMNS} FROM note WHERE parent_folder_id != ?",
            (int(SpecialFolderId.TRASH_FOLDER),),
        )
        return [self._note_from_row(row) for row in rows]

    def load_all_notes_from_folder(self, folder_id: int) -> List[NoteData]:
        """Load the notes whose parent is the given folder."""
        rows = self._execute(f"SELECT {_NOTE_COLUMNS} FROM note WHERE parent_folder_id = ?", (int(folder_id),))
        return [self._note_from_row(row) for row in rows]

    def delete_all_notes_from_folder(self, folder_id: int) -> None:
        """Delete every note inside the given folder."""
        self._execute("DELETE FROM note WHERE parent_folder_id = ?", (int(folder_id),))

    def delete_note(self, note_id: int) -> None:
        """Delete a note and the images that belong to it."""
        self._execute("DELETE FROM note WHERE id = ?", (int(note_id),))
        self.delete_all_images_from_notes([note_id])

    def delete_notes(self, note_ids: Iterable[int]) -> None:
        """Delete several notes and the images that belong to them."""
        id_list = [int(i) for i in note_ids]
        if not id_list:
            return
        self._execute(f"DELETE FROM note WHERE id IN ({_placeholders(len(id_list))})", id_list)
        self.delete_all_images_from_notes(id_list)

    def move_notes_to_folder(self, note_ids: Iterable[int], folder_id: int) -> None:
        """Move the listed notes into a folder."""
        self._update_many("UPDATE note SET parent_folder_id = ?", int(folder_id), note_ids)

    def get_note_ids(self) -> List[int]:
        """Return the ids of all stored notes, trash included."""
        return [int(row[0]) for row in self._execute("SELECT id FROM note")]

    def count_all_notes(self) -> int:
        """Count the notes that are not in the trash."""
        row = self._execute(
            "SELECT COUNT(*) FROM note WHERE parent_folder_id != ?", (int(SpecialFolderId.TRASH_FOLDER),)
        ).fetchone()
        return int(row[0])

    def count_notes_in_folder(self, folder_id: int) -> int:
        """Count the notes whose parent is the given folder."""
        row = self._execute("SELECT COUNT(*) FROM note WHERE parent_folder_id = ?", (int(folder_id),)).fetchone()
        return int(row[0])

    def get_notes_inside_folders_counts(self) -> Dict[int, int]:
        """Map each folder id that holds notes to the number of notes in it."""
        rows = self._execute("SELECT parent_folder_id, COUNT(*) FROM note GROUP BY parent_folder_id")
        return {int(folder_id or 0): int(count) for folder_id, count in rows}

    # -- trash -----------------------------------------------------------

    def move_note_to_trash(self, note_id: int) -> None:
        """Move one note into the trash."""
        self._execute(
            "UPDATE note SET parent_folder_id = ? WHERE id = ?",
            (int(SpecialFolderId.TRASH_FOLDER), int(note_id)),
        )

    def move_notes_to_trash(self, note_ids: Iterable[int]) -> None:
        """Move several notes into the trash."""
        self._update_many("UPDATE note SET parent_folder_id = ?", int(SpecialFolderId.TRASH_FOLDER), note_ids)

    def move_all_notes_from_folder_to_trash(self, folder_id: int) -> None:
        """Move every note of a folder into the trash."""
        self._execute(
            "UPDATE note SET parent_folder_id = ? WHERE parent_folder_id = ?",
            (int(SpecialFolderId.TRASH_FOLDER), int(folder_id)),
        )

    def restore_note_from_trash(self, note_id: int) -> None:
        """Move a note from the trash into the all-notes folder."""
        self._execute(
            "UPDATE note SET parent_folder_id = ? WHERE id = ?",
            (int(SpecialFolderId.ALL_NOTES_FOLDER), int(note_id)),
        )

    def load_all_notes_from_trash(self) -> List[NoteData]:
        """Load the notes in the trash."""
        return self.load_all_notes_from_folder(SpecialFolderId.TRASH_FOLDER)

    def count_notes_in_trash(self) -> int:
        """Count the notes in the trash."""
        return self.count_notes_in_folder(SpecialFolderId.TRASH_FOLDER)

    # -- folders ---------------------------------------------------------

    def load_all_folders(self) -> List[FolderData]:
        """Load every folder."""
        rows = self._execute("SELECT id, name, parent_id, previous_folder_id, color FROM folder")
        return [
            FolderData(
                id=int(row[0]),
                name=row[1] or "",
                parent_id=int(row[2]),
                previous_folder_id=int(row[3]),
                color=row[4],
            )
            for row in rows
        ]

    def load_ids_of_subfolders(self, folder_id: int) -> List[int]:
        """Return the ids of the folders directly inside the given folder."""
        return [int(row[0]) for row in self._execute("SELECT id FROM folder WHERE parent_id = ?", (int(folder_id),))]

    def add_folder(self, folder: FolderData) -> int:
        """Store a new folder and return the id it was given."""
        cursor = self._execute(
            "INSERT INTO folder (name, parent_id, previous_folder_id, color) VALUES(?, ?, ?, ?)",
            (folder.name, int(folder.parent_id), int(folder.previous_folder_id), folder.color),
        )
        return int(cursor.lastrowid)

    def update_folder(self, folder: FolderData) -> None:
        """Overwrite the stored folder that has the folder's id."""
        self._execute(
            "UPDATE folder SET name = ?, parent_id = ?, previous_folder_id = ?, color = ? WHERE id = ?",
            (folder.name, int(folder.parent_id), int(folder.previous_folder_id), folder.color, int(folder.id)),
        )

    def delete_folder(self, folder_id: int) -> None:
        """Delete a folder record."""
        self._execute("DELETE FROM folder WHERE id = ?", (int(folder_id),))

    # -- images ----------------------------------------------------------

    def add_image(self, image_data: Union[Image.Image, bytes], note_id: int) -> int:
        """Store an image for a note as PNG and return its id."""
        if isinstance(image_data, Image.Image):
            buffer = BytesIO()
            image_data.save(buffer, "PNG")
            blob = buffer.getvalue()
        else:
            blob = bytes(image_data)
        cursor = self._execute("INSERT INTO image (data, note_id) VALUES(?, ?)", (blob, int(note_id)))
        return int(cursor.lastrowid)

    def load_image(self, image_id: int) -> Image.Image:
        """Load a stored image; raise KeyError if there is none with that id."""
        row = self._execute("SELECT data FROM image WHERE id = ?", (int(image_id),)).fetchone()
        if row is None:
            raise KeyError(image_id)
        image = Image.open(BytesIO(row[0]))
        image.load()
        return image

    def delete_all_images_from_notes(self, note_ids: Iterable[int]) -> None:
        """Delete every image that belongs to one of the listed notes."""
        id_list = [int(i) for i in note_ids]
        if not id_list:
            return
        self._execute(f"DELETE FROM image WHERE note_id IN ({_placeholders(len(id_list))})", id_list)