from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class ChordSymbol:
    """A chord split into its root and an opaque suffix.

    Example: "G7/B" → root "G", suffix "7/B".  The suffix is never
    interpreted, only carried through.
    """

    root: str
    suffix: str = ""

    def __str__(self) -> str:
        return self.root + self.suffix


@dataclass(frozen=True)
class ChordPosition:
    """A chord token and the character column where it starts."""

    chord: str
    column: int


# ---------------------------------------------------------------------------
# Classified lines
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EmptyLine:
    """Blank or whitespace-only line."""


@dataclass(frozen=True)
class DirectiveLine:
    """Structural line such as ``{title: Foo}`` or ``[Refrão]`` (trimmed)."""

    text: str


@dataclass(frozen=True)
class LyricLine:
    """Performable text with no chord annotation."""

    text: str


@dataclass(frozen=True)
class ChordLine:
    """Chord annotation line; ``chords`` are ordered left to right."""

    text: str
    chords: tuple[ChordPosition, ...] = ()


@dataclass(frozen=True)
class PairedLine:
    """A chord line merged with the lyric line printed beneath it."""

    chord_line: ChordLine
    lyric_line: LyricLine


ParsedLine = Union[EmptyLine, DirectiveLine, LyricLine, ChordLine, PairedLine]


# ---------------------------------------------------------------------------
# Songs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class InterchangeSong:
    """One section of an interchange document, parsed into fields."""

    title: str = ""
    artist: str | None = None
    key: str | None = None
    body: str = ""


@dataclass
class Song:
    """A stored song record.  Timestamps are epoch milliseconds."""

    id: str
    title: str
    content: str
    artist: str | None = None
    key: str | None = None
    created_at: int = 0
    updated_at: int = 0

    def to_record(self) -> dict:
        """Return the external record shape (camelCase timestamps)."""
        record: dict = {"id": self.id, "title": self.title}
        if self.artist:
            record["artist"] = self.artist
        if self.key:
            record["key"] = self.key
        record["content"] = self.content
        record["createdAt"] = self.created_at
        record["updatedAt"] = self.updated_at
        return record

    @classmethod
    def from_record(cls, record: dict) -> "Song":
        """Build a Song from an external record.

        Raises KeyError when ``id``, ``title`` or ``content`` is missing.
        """
        return cls(
            id=str(record["id"]),
            title=record["title"],
            content=record["content"],
            artist=record.get("artist") or None,
            key=record.get("key") or None,
            created_at=int(record.get("createdAt") or 0),
            updated_at=int(record.get("updatedAt") or 0),
        )


@dataclass
class ImportResult:
    """Outcome of one batch import."""

    imported: int = 0
    failed: int = 0
    skipped: int = 0  # dedupe hits: successful no-ops, not failures
    songs: list[Song] = field(default_factory=list)
