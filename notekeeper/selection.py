"""Helpers behind selecting and dragging several notes in the note list."""

from collections import Counter
from typing import Hashable, Iterable, List, Tuple

MAX_SHOWN_SELECTED_COUNT = 9999
MAX_DRAWN_NOTES = 4
_NOTE_STACK_STEP = 3
_HOT_SPOT_X = 20
_HOT_SPOT_Y = 40


def most_frequent_colors(colors: Iterable[Hashable], n: int) -> List[Hashable]:
    """Return the note colours ordered from most to least frequent.

    With exactly two colours of equal frequency among more than two notes,
    the second colour is listed twice so a stack of notes shows both.
    When more than ``n`` entries result, the entry at position ``n`` is dropped.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    counts = Counter(colors)
    total = sum(counts.values())
    ranked = counts.most_common()

    if len(ranked) == 2 and ranked[0][1] == ranked[1][1] and total > 2:
        ranked.append(ranked[1])

    if len(ranked) > n:
        del ranked[n]

    return [color for color, _ in ranked]


def selected_count_label(count: int) -> str:
    """Return the text shown for the number of selected notes."""
    if count > MAX_SHOWN_SELECTED_COUNT:
        return f"{MAX_SHOWN_SELECTED_COUNT}+"
    return str(count)


def should_pin(pinned_flags: Iterable[bool]) -> bool:
    """Decide whether toggling pins the selection: unpin only if all are pinned."""
    return not all(pinned_flags)


def drag_hot_spot(count: int) -> Tuple[int, int]:
    """Return the cursor hot spot of the drag image for ``count`` dragged notes."""
    if count < 1:
        raise ValueError("at least one note must be dragged")
    offset = (min(count, MAX_DRAWN_NOTES) - 1) * _NOTE_STACK_STEP
    return offset + _HOT_SPOT_X, offset + _HOT_SPOT_Y