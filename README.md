# notekeeper

The data and logic layer of a sticky-note application: notes and folders
kept in SQLite, the list of notes in the selected folder, sorting and
filtering, and small helpers for selecting and dragging notes.

## Modules

- `notekeeper.data`: the `NoteData` and `FolderData` records, each with a
  `copy()` method.
- `notekeeper.ids`: the special folder ids (`SpecialFolderId`: all notes,
  trash, root, invalid, and the first user folder id), the roles of note and
  folder fields (`NoteRole`, `FolderRole`) and `is_user_folder(folder_id)`.
- `notekeeper.storage`: `PersistenceManager`, which keeps notes, folders and
  images in an SQLite file and works as a context manager. Opening a path
  that does not exist yet (or `":memory:"`) creates the tables and the
  default folders "All notes", "Trash" and one "New Folder". Database errors
  raise `StorageError`; `load_note` and `load_image` raise `KeyError` for an
  unknown id. Images are stored as PNG and loaded back as Pillow images.
- `notekeeper.notelist`: `NoteListModel`, the notes of the folder chosen
  with `select_folder`. Edits made with `set_data` or `set_note` are kept in
  memory until `save_dirty()` writes them (`select_folder` calls it first).
  Removing notes from an ordinary folder moves them to the trash; removing
  them while the trash is selected deletes them for good, images included.
  Changes are reported through `Signal` objects: `notes_moved`,
  `notes_added`, `notes_removed`, `data_changed`, `rows_inserted`,
  `rows_removed` and `model_reset`.
- `notekeeper.mimedata`: `NoteMimeData`, `encode_notes` and `decode_notes`
  for the `application/note` drag payload, a mapping of MIME type to bytes.
- `notekeeper.sorting`: `note_less_than`, `sort_notes` and `filter_notes`
  (case-insensitive match on the title). Pinned notes come first in either
  `SortOrder`. `sort_role_for_index` and `sort_order_for_index` map the
  entries of a sort-options chooser (creation time, modification time,
  title; ascending, descending).
- `notekeeper.selection`: `most_frequent_colors`, `selected_count_label`,
  `should_pin` and `drag_hot_spot`.
- `notekeeper.layout`: `notes_fitting_in_row`, `width_for_notes_in_row` and
  `context_menu_actions`, which lists the labels of the note list's context
  menu for a given state.
- `notekeeper.imaging`: `replace_color`, which recolours matching pixels of
  an RGB or RGBA Pillow image in place, keeping each pixel's alpha.

## Installation

```
pip install .
```

## Example

```python
from notekeeper.storage import PersistenceManager
from notekeeper.notelist import NoteListModel
from notekeeper.ids import SpecialFolderId, NoteRole
from notekeeper.sorting import SortOrder, sort_notes

with PersistenceManager("notes.db") as storage:
    model = NoteListModel(storage)
    model.select_folder(SpecialFolderId.ALL_NOTES_FOLDER)

    row = model.create_new_note()
    model.set_data(row, "Shopping list", NoteRole.TITLE)
    model.save_dirty()

    notes = [model.note(r) for r in range(len(model))]
    for note in sort_notes(notes, NoteRole.TITLE, SortOrder.ASCENDING):
        print(note.title)
```

## What it does not do

The package has no user interface and no command to start. There is no
note editor, no folder tree model (folders can be stored, loaded and
updated, but their order and nesting are left to the caller), and no
downloading of images; images are stored only when handed to
`PersistenceManager.add_image`. `NoteListModel` saves edits only when
`save_dirty()` or `select_folder()` is called, never on a timer.

## Tests

```
pip install .[test]
pytest
```