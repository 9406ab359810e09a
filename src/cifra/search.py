from .models import Song

SORT_FIELDS = ("title", "artist", "recent", "created")


def search_songs(songs: list[Song], query: str) -> list[Song]:
    """Return songs whose title, artist or content contains *query*.

    Matching is case-insensitive.  A blank query returns every song.
    """
    if not query.strip():
        return list(songs)

    needle = query.lower()
    return [
        song
        for song in songs
        if needle in song.title.lower()
        or needle in (song.artist or "").lower()
        or needle in song.content.lower()
    ]


def sort_songs(songs: list[Song], by: str) -> list[Song]:
    """Return a sorted copy of *songs*.

    ``title``/``artist`` sort A–Z; ``recent``/``created`` sort newest first.
    Raises ValueError for any other field.
    """
    if by == "title":
        return sorted(songs, key=lambda s: s.title.casefold())
    if by == "artist":
        return sorted(songs, key=lambda s: (s.artist or "").casefold())
    if by == "recent":
        return sorted(songs, key=lambda s: s.updated_at, reverse=True)
    if by == "created":
        return sorted(songs, key=lambda s: s.created_at, reverse=True)
    raise ValueError(f"Unknown sort field: {by!r} (expected one of {', '.join(SORT_FIELDS)})")
