"""Encoding of dragged notes into a MIME payload."""

import struct
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional

NOTE_MIME_TYPE = "application/note"

_RECORD = struct.Struct(">ii")


@dataclass(frozen=True)
class NoteMimeData:
    """Identifies a dragged note and the folder it came from."""

    note_id: int
    parent_folder_id: int

    type = NOTE_MIME_TYPE


def encode_notes(entries: Iterable[NoteMimeData]) -> Optional[dict]:
    """Encode notes into a MIME mapping, or return None if there are none."""
    payload = b"".join(_RECORD.pack(e.note_id, e.parent_folder_id) for e in entries)
    if not payload:
        return None
    return {NOTE_MIME_TYPE: payload}


def decode_notes(mime: Optional[Mapping[str, bytes]]) -> List[NoteMimeData]:
    """Decode notes from a MIME mapping; missing data yields an empty list."""
    if not mime or NOTE_MIME_TYPE not in mime:
        return []
    payload = bytes(mime[NOTE_MIME_TYPE])
    if len(payload) % _RECORD.size:
        raise ValueError("truncated note MIME data")
    return [NoteMimeData(note_id, parent) for note_id, parent in _RECORD.iter_unpack(payload)]