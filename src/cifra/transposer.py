"""Chromatic transposition of chord symbols.

Only the root is moved.  Everything after it (quality, extensions and any
slash bass) is carried through untouched, so ``G7/B`` up a fourth is
``C7/B``.  After moving, the root is respelled from one of two chromatic
tables depending on the accidental preference.
"""

from enum import Enum
from functools import lru_cache

from .grammar import split_chord


class Accidental(Enum):
    SHARPS = "sharps"
    FLATS = "flats"


CHROMATIC_SHARPS = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
CHROMATIC_FLATS = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")

_SCALES = {
    Accidental.SHARPS: CHROMATIC_SHARPS,
    Accidental.FLATS: CHROMATIC_FLATS,
}

SHARP_KEYS = frozenset({"G", "D", "A", "E", "B", "F#", "C#"})
FLAT_KEYS = frozenset({"F", "Bb", "Eb", "Ab", "Db", "Gb", "Cb"})


def pitch_class(root: str) -> int | None:
    """Return the chromatic index (0–11) of *root*, or None if unknown."""
    if root in CHROMATIC_SHARPS:
        return CHROMATIC_SHARPS.index(root)
    if root in CHROMATIC_FLATS:
        return CHROMATIC_FLATS.index(root)
    return None


@lru_cache(maxsize=1024)
def transpose_chord(
    chord: str, semitones: int, preference: Accidental = Accidental.SHARPS
) -> str:
    """Return *chord* moved by *semitones*, respelled per *preference*.

    Strings that don't start with a recognised root (``Cb``, ``E#``, ``N.C.``,
    stray words) are returned unchanged.
    """
    symbol = split_chord(chord)
    if symbol is None:
        return chord

    index = pitch_class(symbol.root)
    if index is None:
        return chord

    new_index = ((index + semitones) % 12 + 12) % 12
    return _SCALES[preference][new_index] + symbol.suffix


def resolve_key_signature(key: str) -> Accidental:
    """Return the accidental preference conventionally used for *key*.

    C major / A minor and anything unrecognised default to sharps.
    """
    if key in SHARP_KEYS:
        return Accidental.SHARPS
    if key in FLAT_KEYS:
        return Accidental.FLATS
    if "#" in key:
        return Accidental.SHARPS
    if "b" in key:
        return Accidental.FLATS
    return Accidental.SHARPS
