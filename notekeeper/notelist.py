"""The list of notes shown for the currently selected folder."""

from datetime import datetime
from typing import Any, Callable, Iterable, List, Optional

from notekeeper.data import NoteData
from notekeeper.ids import NoteRole, SpecialFolderId
from notekeeper.mimedata import NOTE_MIME_TYPE, NoteMimeData, encode_notes
from notekeeper.storage import PersistenceManager

NEW_NOTE_TITLE = "Untitled"
NEW_NOTE_COLOR = "#85a5cc"


class Signal:
    """A list of callbacks that are all called when the signal is emitted."""

    def __init__(self) -> None:
        self._callbacks: List[Callable[..., Any]] = []

    def connect(self, callback: Callable[..., Any]) -> None:
        """Call the callback on every later emission."""
        self._callbacks.append(callback)

    def emit(self, *args: Any) -> None:
        """Call every connected callback with the given arguments."""
        for callback in list(self._callbacks):
            callback(*args)


_SETTERS = {
    NoteRole.TITLE: lambda n, v: setattr(n, "title", str(v)),
    NoteRole.EDIT: lambda n, v: setattr(n, "title", str(v)),
    NoteRole.CONTENT: lambda n, v: setattr(n, "content", str(v)),
    NoteRole.ID: lambda n, v: setattr(n, "id", int(v)),
    NoteRole.PARENT_FOLDER_ID: lambda n, v: setattr(n, "parent_folder_id", int(v)),
    NoteRole.CREATION_TIME: lambda n, v: setattr(n, "creation_time", v),
    NoteRole.MODIFICATION_TIME: lambda n, v: setattr(n, "modification_time", v),
    NoteRole.IS_IN_TRASH: lambda n, v: setattr(n, "is_in_trash", bool(v)),
    NoteRole.IS_PINNED: lambda n, v: setattr(n, "is_pinned", bool(v)),
    NoteRole.COLOR: lambda n, v: setattr(n, "color", str(v)),
}

_GETTERS = {
    NoteRole.TITLE: lambda n: n.title,
    NoteRole.EDIT: lambda n: n.title,
    NoteRole.DISPLAY: lambda n: n.title,
    NoteRole.CONTENT: lambda n: n.content,
    NoteRole.ID: lambda n: n.id,
    NoteRole.PARENT_FOLDER_ID: lambda n: n.parent_folder_id,
    NoteRole.CREATION_TIME: lambda n: n.creation_time,
    NoteRole.MODIFICATION_TIME: lambda n: n.modification_time,
    NoteRole.IS_IN_TRASH: lambda n: n.is_in_trash,
    NoteRole.IS_PINNED: lambda n: n.is_pinned,
    NoteRole.COLOR: lambda n: n.color,
}


class NoteListModel:
    """Holds the notes of one folder and keeps the storage in step with edits.

    Signals:
        notes_moved(source_folder_id, destination_folder_id, count)
        notes_added(folder_id, count)
        notes_removed(folder_id, count)
        data_changed(row)
        rows_inserted(first, last)
        rows_removed(first, last)
        model_reset()
    """

    def __init__(self, storage: PersistenceManager) -> None:
        self._storage = storage
        self._notes: List[NoteData] = []
        self._dirty: List[NoteData] = []
        self.current_folder_id: int = -1

        self.notes_moved = Signal()
        self.notes_added = Signal()
        self.notes_removed = Signal()
        self.data_changed = Signal()
        self.rows_inserted = Signal()
        self.rows_removed = Signal()
        self.model_reset = Signal()

    def __len__(self) -> int:
        return len(self._notes)

    def _check_row(self, row: int) -> None:
        if not 0 <= row < len(self._notes):
            raise IndexError(f"row {row} out of range")

    def _in_trash(self) -> bool:
        return self.current_folder_id == SpecialFolderId.TRASH_FOLDER

    def _mark_dirty(self, note: NoteData) -> None:
        if not any(note is d for d in self._dirty):
            self._dirty.append(note)

    def _should_display(self, note: NoteData) -> bool:
        if note.parent_folder_id == self.current_folder_id:
            return True
        return (
            self.current_folder_id == SpecialFolderId.ALL_NOTES_FOLDER
            and note.parent_folder_id != SpecialFolderId.TRASH_FOLDER
        )

    def note(self, row: int) -> NoteData:
        """Return a copy of the note at the row."""
        self._check_row(row)
        return self._notes[row].copy()

    def data(self, row: int, role: int) -> Any:
        """Return the note field for the role, or None for an unknown role."""
        self._check_row(row)
        getter = _GETTERS.get(role)
        return getter(self._notes[row]) if getter else None

    def set_note(self, row: int, note: NoteData) -> None:
        """Replace the note at the row; it is saved on the next save_dirty."""
        self._check_row(row)
        stored = note.copy()
        self._notes[row] = stored
        self._mark_dirty(stored)
        self.data_changed.emit(row)

    def set_data(self, row: int, value: Any, role: int) -> bool:
        """Set the field for the role; return False if the role cannot be set."""
        if not 0 <= row < len(self._notes):
            return False
        setter = _SETTERS.get(role)
        if setter is None:
            return False
        note = self._notes[row]
        setter(note, value)
        self._mark_dirty(note)
        self.data_changed.emit(row)
        return True

    def insert_rows(self, row: int, count: int) -> bool:
        """Create count new notes at the row; refused inside the trash."""
        if self._in_trash():
            return False
        if not 0 <= row <= len(self._notes):
            raise IndexError(f"row {row} out of range")
        created = []
        for _ in range(count):
            now = datetime.now()
            note = NoteData(
                parent_folder_id=self.current_folder_id,
                title=NEW_NOTE_TITLE,
                creation_time=now,
                modification_time=now,
                color=NEW_NOTE_COLOR,
            )
            note.id = self._storage.add_note(note)
            created.append(note)
        self._notes[row:row] = created
        self.rows_inserted.emit(row, row + count - 1)
        self.notes_added.emit(self.current_folder_id, count)
        return True

    def remove_rows(self, row: int, count: int) -> bool:
        """Move the notes to the trash, or delete them when the trash is shown."""
        if count <= 0:
            return True
        self._check_row(row)
        self._check_row(row + count - 1)
        for note in self._notes[row:row + count]:
            if self._in_trash():
                self._storage.delete_note(note.id)
                self.notes_removed.emit(int(SpecialFolderId.TRASH_FOLDER), 1)
            else:
                self._storage.move_note_to_trash(note.id)
                self.notes_moved.emit(note.parent_folder_id, int(SpecialFolderId.TRASH_FOLDER), 1)
        del self._notes[row:row + count]
        self.rows_removed.emit(row, row + count - 1)
        return True

    def create_new_note(self) -> Optional[int]:
        """Create a note at the top and return its row, or None in the trash."""
        if self._in_trash():
            return None
        return 0 if self.insert_rows(0, 1) else None

    def move_notes_to_folder(self, note_ids: Iterable[int], folder_id: int) -> None:
        """Move notes to a folder, dropping those no longer shown here."""
        ids = set(note_ids)
        self._storage.move_notes_to_folder(ids, folder_id)
        row = 0
        while row < len(self._notes):
            note = self._notes[row]
            if note.id not in ids:
                row += 1
                continue
            old_parent = note.parent_folder_id
            note.parent_folder_id = folder_id
            self.notes_moved.emit(old_parent, folder_id, 1)
            if self._should_display(note):
                row += 1
                continue
            del self._notes[row]
            self.rows_removed.emit(row, row)

    def set_color_of_notes(self, rows: Iterable[int], color: str) -> None:
        """Give the notes at the rows one colour, in memory and in storage."""
        rows = list(rows)
        self._storage.set_color_of_notes(self.note_ids(rows), color)
        for row in rows:
            self._notes[row].color = color
            self.data_changed.emit(row)

    def set_is_pinned_of_notes(self, rows: Iterable[int], is_pinned: bool) -> None:
        """Pin or unpin the notes at the rows, in memory and in storage."""
        rows = list(rows)
        self._storage.set_is_pinned_of_notes(self.note_ids(rows), is_pinned)
        for row in rows:
            self._notes[row].is_pinned = bool(is_pinned)
            self.data_changed.emit(row)

    def remove_notes(self, rows: Iterable[int]) -> None:
        """Remove the notes at the rows, to the trash or for good in the trash."""
        ordered = sorted(set(rows), reverse=True)
        ids = self.note_ids(ordered)
        if self._in_trash():
            self._storage.delete_notes(ids)
        else:
            self._storage.move_notes_to_trash(ids)
        for row in ordered:
            parent = self._notes[row].parent_folder_id
            if self._in_trash():
                self.notes_removed.emit(parent, 1)
            else:
                self.notes_moved.emit(parent, int(SpecialFolderId.TRASH_FOLDER), 1)
            del self._notes[row]
            self.rows_removed.emit(row, row)

    def restore_note_from_trash(self, row: int) -> None:
        """Move the note at the row back into the all-notes folder."""
        self._check_row(row)
        self._storage.restore_note_from_trash(self._notes[row].id)
        self.notes_moved.emit(int(SpecialFolderId.TRASH_FOLDER), int(SpecialFolderId.ALL_NOTES_FOLDER), 1)
        del self._notes[row]
        self.rows_removed.emit(row, row)

    def select_folder(self, folder_id: int) -> None:
        """Save pending edits and load the notes of another folder."""
        self.save_dirty()
        self.current_folder_id = folder_id
        if folder_id == SpecialFolderId.ALL_NOTES_FOLDER:
            self._notes = self._storage.load_all_notes()
        elif folder_id == SpecialFolderId.TRASH_FOLDER:
            self._notes = self._storage.load_all_notes_from_trash()
        else:
            self._notes = self._storage.load_all_notes_from_folder(folder_id)
        self.model_reset.emit()

    def on_folder_deleted(self, folder_id: int) -> None:
        """Move the notes of a deleted folder into the trash."""
        moved = self._storage.count_notes_in_folder(folder_id)
        self._storage.move_all_notes_from_folder_to_trash(folder_id)
        self.notes_moved.emit(int(SpecialFolderId.ALL_NOTES_FOLDER), int(SpecialFolderId.TRASH_FOLDER), moved)

    def save_dirty(self) -> None:
        """Write every edited note that is still listed to storage."""
        for note in self._dirty:
            if any(note is n for n in self._notes):
                self._storage.update_note(note)
        self._dirty.clear()

    def note_ids(self, rows: Iterable[int]) -> List[int]:
        """Return the ids of the notes at the rows."""
        return [self._notes[row].id for row in rows]

    def mime_types(self) -> List[str]:
        """Return the MIME types this list can produce."""
        return [NOTE_MIME_TYPE]

    def mime_data(self, rows: Iterable[int]) -> Optional[dict]:
        """Encode the notes at the rows for dragging, or None if there are none."""
        return encode_notes(
            NoteMimeData(self._notes[row].id, self._notes[row].parent_folder_id) for row in rows
        )