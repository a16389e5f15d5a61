"""Ordering and filtering of notes as shown in the note list."""

from datetime import datetime
from enum import IntEnum
from functools import cmp_to_key
from typing import Any, Iterable, List

from notekeeper.data import NoteData
from notekeeper.ids import NoteRole


class SortOrder(IntEnum):
    ASCENDING = 0
    DESCENDING = 1


_SORT_ROLES = {
    0: NoteRole.CREATION_TIME,
    1: NoteRole.MODIFICATION_TIME,
    2: NoteRole.TITLE,
}

_SORT_ORDERS = {
    0: SortOrder.ASCENDING,
    1: SortOrder.DESCENDING,
}

_TIME_ROLES = (NoteRole.CREATION_TIME, NoteRole.MODIFICATION_TIME)


def _role_value(note: NoteData, role: int) -> Any:
    getters = {
        NoteRole.DISPLAY: lambda n: n.title,
        NoteRole.EDIT: lambda n: n.title,
        NoteRole.TITLE: lambda n: n.title,
        NoteRole.CONTENT: lambda n: n.content,
        NoteRole.ID: lambda n: n.id,
        NoteRole.PARENT_FOLDER_ID: lambda n: n.parent_folder_id,
        NoteRole.CREATION_TIME: lambda n: n.creation_time,
        NoteRole.MODIFICATION_TIME: lambda n: n.modification_time,
        NoteRole.IS_IN_TRASH: lambda n: n.is_in_trash,
        NoteRole.IS_PINNED: lambda n: n.is_pinned,
        NoteRole.COLOR: lambda n: n.color,
    }
    getter = getters.get(role)
    return getter(note) if getter else None


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _time_less(left: "datetime | None", right: "datetime | None") -> bool:
    if left is None:
        return right is not None
    if right is None:
        return False
    return left < right


def note_less_than(left: NoteData, right: NoteData, sort_role: int, order: SortOrder) -> bool:
    """Compare two notes; pinned notes always come first in either order."""
    if left.is_pinned and not right.is_pinned:
        return order != SortOrder.DESCENDING
    if right.is_pinned and not left.is_pinned:
        return order == SortOrder.DESCENDING

    left_value = _role_value(left, sort_role)
    right_value = _role_value(right, sort_role)
    if sort_role in _TIME_ROLES:
        return _time_less(left_value, right_value)
    return _as_text(left_value).casefold() < _as_text(right_value).casefold()


def sort_notes(notes: Iterable[NoteData], sort_role: int, order: SortOrder) -> List[NoteData]:
    """Return the notes stably sorted by the given role and order."""
    if order == SortOrder.DESCENDING:
        def compare(a: NoteData, b: NoteData) -> int:
            if note_less_than(b, a, sort_role, order):
                return -1
            if note_less_than(a, b, sort_role, order):
                return 1
            return 0
    else:
        def compare(a: NoteData, b: NoteData) -> int:
            if note_less_than(a, b, sort_role, order):
                return -1
            if note_less_than(b, a, sort_role, order):
                return 1
            return 0
    return sorted(notes, key=cmp_to_key(compare))


def filter_notes(notes: Iterable[NoteData], text: str) -> List[NoteData]:
    """Keep the notes whose title contains the text, ignoring case."""
    needle = text.casefold()
    return [note for note in notes if needle in note.title.casefold()]


def sort_role_for_index(index: int) -> NoteRole:
    """Map an entry of the sort-role chooser to a note role."""
    try:
        return _SORT_ROLES[index]
    except KeyError:
        raise ValueError(f"no sort role for index {index}") from None


def sort_order_for_index(index: int) -> SortOrder:
    """Map an entry of the sort-order chooser to a sort order."""
    try:
        return _SORT_ORDERS[index]
    except KeyError:
        raise ValueError(f"no sort order for index {index}") from None