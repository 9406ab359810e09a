"""Line classification for monospaced chord charts.

A chart stores chords on their own line, space-aligned above the lyric they
belong to::

    G                C           G
    Amazing grace, how sweet the sound

Classifiers turn each raw line into one of the :data:`~cifra.models.ParsedLine`
variants.  Pairing a chord line with the lyric beneath it is a separate pass,
:func:`pair_lines`; no classifier ever produces a :class:`PairedLine`.
"""

from abc import ABC, abstractmethod

from .grammar import find_chord_tokens, is_chord_name, strip_chord_tokens
from .models import (
    ChordLine,
    ChordPosition,
    DirectiveLine,
    EmptyLine,
    LyricLine,
    PairedLine,
    ParsedLine,
)


class LineClassifier(ABC):
    """Abstract base class for line classification strategies."""

    @abstractmethod
    def classify(self, raw_line: str) -> ParsedLine:
        """Classify a single line.  Must never raise."""

    def classify_content(self, content: str) -> list[ParsedLine]:
        """Classify every line of *content*, in order."""
        return [self.classify(line) for line in content.split("\n")]


def _classify_structure(line: str) -> ParsedLine | None:
    """Handle the checks every strategy shares: blanks and directives."""
    trimmed = line.strip()
    if not trimmed:
        return EmptyLine()
    if trimmed.startswith(("{", "[")):
        return DirectiveLine(trimmed)
    return None


class HeuristicClassifier(LineClassifier):
    """Token-count heuristic.

    Two or more chord tokens make a chord line even when some are really
    words ("A", "E"); a single token makes a chord line only when nothing
    else is left on the line.
    """

    def classify(self, raw_line: str) -> ParsedLine:
        line = raw_line.removesuffix("\r")
        structural = _classify_structure(line)
        if structural is not None:
            return structural

        matches = find_chord_tokens(line)
        if not matches:
            return LyricLine(line)
        if len(matches) >= 2:
            return ChordLine(line, tuple(matches))

        if strip_chord_tokens(line).strip():
            return LyricLine(line)
        return ChordLine(line, tuple(matches))


class StrictClassifier(LineClassifier):
    """Chord line only when every whitespace-separated token is a chord."""

    def classify(self, raw_line: str) -> ParsedLine:
        line = raw_line.removesuffix("\r")
        structural = _classify_structure(line)
        if structural is not None:
            return structural

        chords: list[ChordPosition] = []
        col = 0
        for token in line.split():
            if not is_chord_name(token):
                return LyricLine(line)
            col = line.index(token, col)
            chords.append(ChordPosition(token, col))
            col += len(token)
        return ChordLine(line, tuple(chords))


def pair_lines(lines: list[ParsedLine]) -> list[ParsedLine]:
    """Merge each chord line with the lyric line directly beneath it.

    Chord lines followed by anything else (instrumental passages, a blank, a
    directive) are left as they are.  Order is preserved.
    """
    paired: list[ParsedLine] = []
    i = 0
    while i < len(lines):
        current = lines[i]
        following = lines[i + 1] if i + 1 < len(lines) else None
        if isinstance(current, ChordLine) and isinstance(following, LyricLine):
            paired.append(PairedLine(current, following))
            i += 2
            continue
        paired.append(current)
        i += 1
    return paired
