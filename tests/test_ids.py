import pytest

from notekeeper.ids import FolderRole, NoteRole, SpecialFolderId, is_user_folder


def test_special_folder_ids_match_source():
    assert SpecialFolderId.TRASH_FOLDER == 3
    assert SpecialFolderId.INVALID_ID == -10
    assert SpecialFolderId.ALL_NOTES_FOLDER == SpecialFolderId.ROOT_FOLDER + 1
    assert is_user_folder(3) is False
    assert is_user_folder(SpecialFolderId.USER_FOLDER) is True
    assert SpecialFolderId.USER_FOLDER == 4


def test_special_folders_are_not_user_folders():
    for folder in (
        SpecialFolderId.ROOT_FOLDER,
        SpecialFolderId.ALL_NOTES_FOLDER,
        SpecialFolderId.TRASH_FOLDER,
        SpecialFolderId.INVALID_ID,
    ):
        assert is_user_folder(folder) is False


def test_user_folders():
    assert is_user_folder(SpecialFolderId.USER_FOLDER) is True
    assert is_user_folder(SpecialFolderId.USER_FOLDER + 100) is True


def test_note_roles_after_id_are_consecutive():
    expected = [
        NoteRole.ID,
        NoteRole.PARENT_FOLDER_ID,
        NoteRole.TITLE,
        NoteRole.CONTENT,
        NoteRole.CREATION_TIME,
        NoteRole.MODIFICATION_TIME,
        NoteRole.IS_IN_TRASH,
        NoteRole.IS_PINNED,
        NoteRole.COLOR,
    ]
    looked_up = [NoteRole(NoteRole.ID.value + offset) for offset in range(len(expected))]
    assert looked_up == expected


def test_folder_roles_after_id_are_consecutive():
    expected = [
        FolderRole.ID,
        FolderRole.PARENT_ID,
        FolderRole.PREVIOUS_FOLDER_ID,
        FolderRole.NAME,
        FolderRole.COLOR,
        FolderRole.NOTES_INSIDE_COUNT,
    ]
    looked_up = [FolderRole(FolderRole.ID.value + offset) for offset in range(len(expected))]
    assert looked_up == expected


def test_roles_are_unique_and_share_base_roles():
    assert len({r.value for r in NoteRole}) == len(list(NoteRole))
    assert len({r.value for r in FolderRole}) == len(list(FolderRole))
    assert NoteRole(FolderRole.ID.value) is NoteRole.ID
    assert NoteRole(FolderRole.DISPLAY.value) is NoteRole.DISPLAY
    assert FolderRole(NoteRole.EDIT.value) is FolderRole.EDIT
    assert NoteRole.DISPLAY < NoteRole.EDIT < NoteRole.ID


def test_unknown_role_value_raises():
    with pytest.raises(ValueError):
        NoteRole(NoteRole.COLOR.value + 100)