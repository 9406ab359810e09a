"""JSON library file: a backup of every song as a list of records.

Each record has the external shape::

    {"id": "song-1718000000000-3f9a1c", "title": "Hino Grace",
     "artist": "John Newton", "key": "G", "content": "G  C\\n...",
     "createdAt": 1718000000000, "updatedAt": 1718000000000}

``artist`` and ``key`` are omitted when empty.
"""

import json
import logging
from pathlib import Path

from .exceptions import LibraryError
from .models import Song

logger = logging.getLogger(__name__)


def load_library(path: Path) -> list[Song]:
    """Return the songs stored at *path*; a missing file is an empty library.

    Raises LibraryError if the file is not a JSON list of song records.
    """
    if not path.exists():
        logger.debug("No library at %s; starting empty", path)
        return []

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise LibraryError(str(path), str(exc)) from exc
    if not isinstance(data, list):
        raise LibraryError(str(path), "expected a JSON list of songs")

    songs = []
    for i, record in enumerate(data):
        try:
            songs.append(Song.from_record(record))
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise LibraryError(str(path), f"record {i} is invalid ({exc!r})") from exc

    logger.debug("Loaded %d songs from %s", len(songs), path)
    return songs


def save_library(path: Path, songs: list[Song]) -> None:
    """Write *songs* to *path* as pretty-printed JSON."""
    records = [song.to_record() for song in songs]
    path.write_text(json.dumps(records, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    logger.debug("Saved %d songs to %s", len(songs), path)
