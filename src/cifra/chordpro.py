"""Multi-song interchange format (a ChordPro subset).

A document holds one or more songs.  Each song opens with metadata
directives followed by the chart itself, verbatim::

    {title: Amazing Grace}
    {artist: John Newton}
    {key: G}

    G                C           G
    Amazing grace, how sweet the sound

Songs are separated by a line of three or more dashes.  Documents that
simply concatenate songs are split before each ``{title:`` directive
instead.

Directive mapping
-----------------

+-------------------------------+----------------------------+
| Directive                     | Field                      |
+===============================+============================+
| ``{title: …}`` / ``{t: …}``   | ``InterchangeSong.title``  |
+-------------------------------+----------------------------+
| ``{artist: …}`` / ``{a: …}``  | ``InterchangeSong.artist`` |
+-------------------------------+----------------------------+
| ``{key: …}`` / ``{k: …}``     | ``InterchangeSong.key``    |
+-------------------------------+----------------------------+

Keywords are case-sensitive.  Every other line, including other
directives, is body content.

Usage::

    from cifra.chordpro import split_songs, parse_song
    songs = [parse_song(section) for section in split_songs(text)]
"""

import re

from .models import InterchangeSong, Song

SEPARATOR = "\n\n---\n\n"

# A line holding only dashes (three or more).
_SEPARATOR_LINE_RE = re.compile(r"^[ \t]*-{3,}[ \t]*$", re.MULTILINE)

# Zero-width position before each line that opens with a title directive.
_TITLE_START_RE = re.compile(r"(?=^\{(?:title|t):)", re.MULTILINE)

_TITLE_PREFIXES = ("{title:", "{t:")
_ARTIST_PREFIXES = ("{artist:", "{a:")
_KEY_PREFIXES = ("{key:", "{k:")


def split_songs(document: str) -> list[str]:
    """Split a multi-song document into per-song section texts.

    Explicit separator lines win.  Without them, each ``{title:``/``{t:``
    line starts a new section.  Failing both, the whole trimmed document is
    one section.
    """
    normalized = document.replace("\r\n", "\n").removeprefix("\ufeff")

    separator_parts = _non_empty(_SEPARATOR_LINE_RE.split(normalized))
    if len(separator_parts) > 1:
        return separator_parts

    # A lone separator (e.g. trailing "---") must not end up in a body.
    remainder = "\n".join(separator_parts)
    title_parts = _non_empty(_TITLE_START_RE.split(remainder))
    if title_parts:
        return title_parts

    return [normalized.strip()]


def parse_song(section: str) -> InterchangeSong:
    """Parse one section into title/artist/key and the remaining body.

    Missing directives simply leave the field absent.  Body lines keep their
    internal spacing and order; only the joined body is trimmed.
    """
    title = ""
    artist: str | None = None
    key: str | None = None
    body: list[str] = []

    for line in section.split("\n"):
        trimmed = line.strip()
        if trimmed.startswith(_TITLE_PREFIXES):
            title = _directive_value(trimmed)
        elif trimmed.startswith(_ARTIST_PREFIXES):
            artist = _directive_value(trimmed)
        elif trimmed.startswith(_KEY_PREFIXES):
            key = _directive_value(trimmed)
        else:
            body.append(line)

    return InterchangeSong(
        title=title,
        artist=artist or None,
        key=key or None,
        body="\n".join(body).strip(),
    )


def export_song(song: Song) -> str:
    """Return the interchange text for one song."""
    lines: list[str] = []
    if song.title:
        lines.append(f"{{title: {song.title}}}")
    if song.artist:
        lines.append(f"{{artist: {song.artist}}}")
    if song.key:
        lines.append(f"{{key: {song.key}}}")
    lines.append("")
    lines.append(song.content)
    return "\n".join(lines)


def export_library(songs: list[Song]) -> str:
    """Return one document holding every song, separated by ``---`` lines."""
    return SEPARATOR.join(export_song(song) for song in songs)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _non_empty(parts: list[str]) -> list[str]:
    return [part.strip() for part in parts if part.strip()]


def _directive_value(trimmed: str) -> str:
    """``{title: Foo}`` → ``Foo``."""
    value = trimmed.split(":", 1)[1]
    return value.removesuffix("}").strip()
