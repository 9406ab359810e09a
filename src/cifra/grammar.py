"""Chord token grammar shared by the line classifiers and the transposer.

A chord token is a root letter ``A``–``G``, an optional accidental (``#`` or
``b``), an optional quality (``maj``, ``min``, ``m``, ``sus``, ``dim``,
``aug``, ``add``) followed by an optional digit, and an optional slash bass
note::

    C   Am   F#m   Bb   Cmaj7   Dsus4   Gadd9   G7   G/B   D/F#

When scanning free text a token must start at a word boundary and must not
be followed by a letter, digit or underscore, so ``Deus`` and ``Amor`` never
match.  Lyrics that happen to be spelled like a chord (``A``, ``E``) still
do; the classifiers deal with that heuristically.
"""

import re

from .models import ChordPosition, ChordSymbol

# ---------------------------------------------------------------------------
# Regexes
# ---------------------------------------------------------------------------

_ROOT_PAT = r"[A-G][#b]?"
_QUALITY_PAT = r"(?:maj|min|m|sus|dim|aug|add)?"
_CHORD_PAT = _ROOT_PAT + _QUALITY_PAT + r"[0-9]?" + r"(?:/" + _ROOT_PAT + r")?"

# Scans a line for chord tokens.  \w is Unicode-aware, so accented letters
# count as letters: "Dá" is a word, not a D chord.
CHORD_TOKEN_RE = re.compile(r"\b" + _CHORD_PAT + r"(?!\w)")

# A whole field that is exactly one chord name.
CHORD_NAME_RE = re.compile(_CHORD_PAT)

# Root + everything else, for a field already known to hold one chord.
CHORD_ROOT_RE = re.compile(r"^(" + _ROOT_PAT + r")(.*)$", re.DOTALL)


def find_chord_tokens(line: str) -> list[ChordPosition]:
    """Return every non-overlapping chord token in *line* with its column."""
    return [ChordPosition(m.group(), m.start()) for m in CHORD_TOKEN_RE.finditer(line)]


def strip_chord_tokens(line: str) -> str:
    """Return *line* with every chord token removed."""
    return CHORD_TOKEN_RE.sub("", line)


def is_chord_name(token: str) -> bool:
    """Return True if *token* is exactly one chord name."""
    return CHORD_NAME_RE.fullmatch(token) is not None


def split_chord(symbol: str) -> ChordSymbol | None:
    """Split a chord symbol into root and suffix.

    Only the root is validated; the suffix is whatever follows it.  Returns
    ``None`` if *symbol* does not start with a root.
    """
    m = CHORD_ROOT_RE.match(symbol)
    if not m:
        return None
    return ChordSymbol(root=m.group(1), suffix=m.group(2))
