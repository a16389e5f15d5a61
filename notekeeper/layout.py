"""Geometry of the note grid and the entries of the note list's context menu."""

from typing import List

GRID_SIZE = 220

REMOVE_SELECTED = "Remove selected notes"
PIN_SELECTED = "Pin selected notes"
UNPIN_SELECTED = "Unpin selected notes"
SELECT_ALL = "Select all"
EXIT_SELECTING = "Exit selecting"
NEW_NOTE = "New note"
PIN_NOTE = "Pin note"
UNPIN_NOTE = "Unpin note"
RESTORE_NOTE = "Restore note"
DELETE_NOTE = "Delete note"
SELECT_NOTE = "Select note"


def _check_grid(grid_width: int) -> None:
    if grid_width <= 0:
        raise ValueError("grid width must be positive")


def notes_fitting_in_row(width: int, scrollbar_width: int, grid_width: int) -> int:
    """Return how many grid cells fit in a row of the given width beside the scroll bar."""
    _check_grid(grid_width)
    available = width - scrollbar_width - 1
    count = abs(available) // grid_width
    return count if available >= 0 else -count


def width_for_notes_in_row(count: int, scrollbar_width: int, grid_width: int) -> int:
    """Return the view width needed to show ``count`` notes in one row."""
    _check_grid(grid_width)
    return count * grid_width + scrollbar_width + 1


def context_menu_actions(
    selecting: bool,
    in_trash: bool,
    has_index: bool,
    is_pinned: bool,
    row_count: int,
) -> List[str]:
    """Return the labels of the context menu entries, in menu order.

    In selecting state ``is_pinned`` tells whether every selected note is
    pinned; otherwise it tells whether the note under the cursor is pinned.
    """
    if selecting:
        return [
            REMOVE_SELECTED,
            UNPIN_SELECTED if is_pinned else PIN_SELECTED,
            SELECT_ALL,
            EXIT_SELECTING,
        ]

    actions: List[str] = []
    if not in_trash:
        actions.append(NEW_NOTE)
        if has_index:
            actions.append(UNPIN_NOTE if is_pinned else PIN_NOTE)
    elif has_index:
        actions.append(RESTORE_NOTE)

    if has_index:
        actions.extend([DELETE_NOTE, SELECT_NOTE])

    if row_count > 0:
        actions.append(SELECT_ALL)

    return actions