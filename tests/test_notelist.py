import pytest

from notekeeper.data import NoteData
from notekeeper.ids import NoteRole, SpecialFolderId
from notekeeper.mimedata import NOTE_MIME_TYPE, decode_notes
from notekeeper.notelist import NoteListModel, Signal
from notekeeper.storage import PersistenceManager

USER = int(SpecialFolderId.USER_FOLDER)
TRASH = int(SpecialFolderId.TRASH_FOLDER)
ALL = int(SpecialFolderId.ALL_NOTES_FOLDER)


@pytest.fixture
def storage():
    with PersistenceManager(":memory:") as pm:
        yield pm


@pytest.fixture
def model(storage):
    m = NoteListModel(storage)
    m.select_folder(USER)
    return m


def record(signal):
    calls = []
    signal.connect(lambda *a: calls.append(a))
    return calls


def test_signal_calls_all_callbacks():
    sig = Signal()
    a, b = [], []
    sig.connect(lambda *x: a.append(x))
    sig.connect(lambda *x: b.append(x))
    sig.emit(1, "x")
    assert a == [(1, "x")] and b == [(1, "x")]


def test_insert_creates_stored_note(model, storage):
    added = record(model.notes_added)
    assert model.insert_rows(0, 1) is True
    assert len(model) == 1
    note = model.note(0)
    assert note.title == "Untitled"
    assert note.color == "#85a5cc"
    assert note.parent_folder_id == USER
    assert storage.load_note(note.id).title == "Untitled"
    assert added == [(USER, 1)]


def test_insert_several_gives_distinct_ids(model, storage):
    model.insert_rows(0, 3)
    ids = model.note_ids(range(3))
    assert len(set(ids)) == 3
    assert storage.count_notes_in_folder(USER) == 3


def test_insert_refused_in_trash(model):
    model.select_folder(TRASH)
    assert model.insert_rows(0, 1) is False
    assert model.create_new_note() is None
    assert len(model) == 0


def test_create_new_note_returns_top_row(model):
    model.insert_rows(0, 1)
    first_id = model.note(0).id
    assert model.create_new_note() == 0
    assert model.note(1).id == first_id


def test_data_roles(model):
    model.insert_rows(0, 1)
    assert model.data(0, NoteRole.DISPLAY) == model.data(0, NoteRole.TITLE)
    assert model.data(0, NoteRole.PARENT_FOLDER_ID) == USER
    assert model.data(0, 12345) is None
    with pytest.raises(IndexError):
        model.data(5, NoteRole.TITLE)


def test_set_data_saved_only_on_save_dirty(model, storage):
    model.insert_rows(0, 1)
    changed = record(model.data_changed)
    assert model.set_data(0, "Shopping", NoteRole.TITLE) is True
    note_id = model.note(0).id
    assert changed == [(0,)]
    assert storage.load_note(note_id).title == "Untitled"
    model.save_dirty()
    assert storage.load_note(note_id).title == "Shopping"


def test_set_data_rejects_display_role_and_bad_row(model):
    model.insert_rows(0, 1)
    assert model.set_data(0, "x", NoteRole.DISPLAY) is False
    assert model.set_data(9, "x", NoteRole.TITLE) is False


def test_select_folder_saves_pending_edits(model, storage):
    model.insert_rows(0, 1)
    note_id = model.note(0).id
    model.set_data(0, "body text", NoteRole.CONTENT)
    model.select_folder(ALL)
    assert storage.load_note(note_id).content == "body text"
    assert [n for n in model.note_ids(range(len(model)))] == [note_id]


def test_set_note_replaces_and_marks_dirty(model, storage):
    model.insert_rows(0, 1)
    note = model.note(0)
    note.title = "Replaced"
    model.set_note(0, note)
    model.save_dirty()
    assert storage.load_note(note.id).title == "Replaced"


def test_remove_rows_moves_to_trash(model, storage):
    model.insert_rows(0, 2)
    moved = record(model.notes_moved)
    ids = model.note_ids([0, 1])
    assert model.remove_rows(0, 1) is True
    assert len(model) == 1
    assert moved == [(USER, TRASH, 1)]
    assert storage.load_note(ids[0]).is_in_trash
    assert model.note(0).id == ids[1]


def test_remove_rows_in_trash_deletes(model, storage):
    model.insert_rows(0, 1)
    note_id = model.note(0).id
    model.remove_rows(0, 1)
    model.select_folder(TRASH)
    removed = record(model.notes_removed)
    model.remove_rows(0, 1)
    assert removed == [(TRASH, 1)]
    with pytest.raises(KeyError):
        storage.load_note(note_id)


def test_remove_notes_several(model, storage):
    model.insert_rows(0, 3)
    ids = model.note_ids([0, 1, 2])
    moved = record(model.notes_moved)
    model.remove_notes([0, 2])
    assert model.note_ids([0]) == [ids[1]]
    assert len(moved) == 2
    assert storage.count_notes_in_trash() == 2


def test_restore_from_trash(model, storage):
    model.insert_rows(0, 1)
    note_id = model.note(0).id
    model.remove_rows(0, 1)
    model.select_folder(TRASH)
    moved = record(model.notes_moved)
    model.restore_note_from_trash(0)
    assert len(model) == 0
    assert moved == [(TRASH, ALL, 1)]
    assert storage.load_note(note_id).parent_folder_id == ALL


def test_move_notes_out_of_shown_folder(model, storage):
    model.insert_rows(0, 2)
    ids = model.note_ids([0, 1])
    moved = record(model.notes_moved)
    model.move_notes_to_folder({ids[0]}, ALL)
    assert model.note_ids(range(len(model))) == [ids[1]]
    assert moved == [(USER, ALL, 1)]
    assert storage.load_note(ids[0]).parent_folder_id == ALL


def test_move_notes_stay_visible_in_all_notes(model, storage):
    model.insert_rows(0, 1)
    note_id = model.note(0).id
    model.select_folder(ALL)
    model.move_notes_to_folder([note_id], USER)
    assert len(model) == 1
    assert model.note(0).parent_folder_id == USER


def test_set_color_and_pin(model, storage):
    model.insert_rows(0, 2)
    ids = model.note_ids([0, 1])
    model.set_color_of_notes([0, 1], "#112233")
    model.set_is_pinned_of_notes([1], True)
    assert all(storage.load_note(i).color == "#112233" for i in ids)
    assert storage.load_note(ids[1]).is_pinned
    assert not storage.load_note(ids[0]).is_pinned
    assert model.data(1, NoteRole.IS_PINNED) is True


def test_on_folder_deleted(model, storage):
    model.insert_rows(0, 2)
    moved = record(model.notes_moved)
    model.on_folder_deleted(USER)
    assert moved == [(ALL, TRASH, 2)]
    assert storage.count_notes_in_folder(USER) == 0
    assert storage.count_notes_in_trash() == 2


def test_mime_data_round_trip(model):
    model.insert_rows(0, 2)
    mime = model.mime_data([0, 1])
    decoded = decode_notes(mime)
    assert [d.note_id for d in decoded] == model.note_ids([0, 1])
    assert all(d.parent_folder_id == USER for d in decoded)
    assert model.mime_types() == [NOTE_MIME_TYPE]
    assert model.mime_data([]) is None


def test_note_returns_copy(model):
    model.insert_rows(0, 1)
    copy = model.note(0)
    copy.title = "changed"
    assert model.data(0, NoteRole.TITLE) == "Untitled"


def test_save_dirty_skips_removed(model, storage):
    model.insert_rows(0, 1)
    note_id = model.note(0).id
    model.set_data(0, "lost", NoteRole.TITLE)
    model.remove_rows(0, 1)
    model.save_dirty()
    stored = storage.load_note(note_id)
    assert stored.title == "Untitled"
    assert isinstance(stored, NoteData) and stored.is_in_trash