"""Batch import of interchange documents with deduplication.

A song's identity is its dedupe key (normalised title, artist and content),
never its id, so importing the same document twice, or two documents that
share songs, adds each song only once.
"""

import logging
import time
import uuid
from collections.abc import Callable, Iterable

from .chordpro import parse_song, split_songs
from .models import ImportResult, Song

logger = logging.getLogger(__name__)


def dedupe_key(title: str, artist: str | None, content: str) -> str:
    """Return the identity key used to detect already-imported songs."""
    return "|".join(
        part.strip().lower() for part in (title, artist or "", content)
    )


def new_song_id(now: int) -> str:
    """Return a fresh id such as ``song-1718000000000-3f9a1c``."""
    return f"song-{now}-{uuid.uuid4().hex[:6]}"


def prefixed_title(title: str, category: str) -> str:
    """Prepend *category* unless the title already starts with it.

    ``("Grace", "Hino")`` → ``"Hino Grace"``; ``("Hino 23", "Hino")`` stays.
    """
    if not category or title.lower().startswith(category.lower()):
        return title
    return f"{category} {title}"


def import_sections(
    existing: Iterable[Song],
    sections: Iterable[str],
    category: str = "",
    *,
    now: int | None = None,
    id_factory: Callable[[int], str] | None = None,
    default_artist: str | None = None,
) -> ImportResult:
    """Turn section texts into new songs, skipping ones already present.

    A section without a title or without a body counts as failed; the batch
    carries on.  A section whose dedupe key is already known (from *existing*
    or from earlier in the same batch) is skipped, which is not a failure.
    Every accepted song gets ``created_at == updated_at == now`` and an id
    not used by *existing* or by an earlier song of the batch.

    Args:
        existing:       Songs already in the library.
        sections:       Section texts, usually from :func:`split_songs`.
        category:       Free-form title prefix, e.g. ``"Hino"`` or ``"Louvor"``.
        now:            Batch start time in epoch ms (defaults to the clock).
        id_factory:     Builds an id from *now*; defaults to :func:`new_song_id`.
        default_artist: Artist recorded when a section has none.

    Returns:
        An :class:`~cifra.models.ImportResult` holding the new songs.
    """
    if now is None:
        now = int(time.time() * 1000)
    id_factory = id_factory or new_song_id

    existing = list(existing)
    seen = {dedupe_key(song.title, song.artist, song.content) for song in existing}
    taken_ids = {song.id for song in existing}
    result = ImportResult()

    for index, section in enumerate(sections, start=1):
        if not section.strip():
            continue

        parsed = parse_song(section)
        if not parsed.title or not parsed.body:
            logger.warning("Section %d has no %s; not imported", index,
                           "title" if not parsed.title else "content")
            result.failed += 1
            continue

        title = prefixed_title(parsed.title, category)
        artist = parsed.artist or default_artist
        key = dedupe_key(title, artist, parsed.body)
        if key in seen:
            logger.debug("Section %d (%s) already in library; skipped", index, title)
            result.skipped += 1
            continue
        seen.add(key)

        song_id = id_factory(now)
        while song_id in taken_ids:
            song_id = id_factory(now)
        taken_ids.add(song_id)

        result.songs.append(
            Song(
                id=song_id,
                title=title,
                content=parsed.body,
                artist=artist,
                key=parsed.key,
                created_at=now,
                updated_at=now,
            )
        )
        result.imported += 1

    logger.info(
        "Import finished: %d imported, %d skipped, %d failed",
        result.imported, result.skipped, result.failed,
    )
    return result


def import_document(
    existing: Iterable[Song], document: str, category: str = "", **kwargs
) -> ImportResult:
    """Split *document* into sections and import them."""
    return import_sections(existing, split_songs(document), category, **kwargs)
