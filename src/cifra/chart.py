"""Whole-chart transposition.

Chord lines are rewritten in place so every chord stays over the syllable
it was aligned to.  Respelling can change a chord's width (``C`` → ``Db``);
the spaces after a widened chord absorb the difference, and when there are
none to spare the following chords shift right so that at least one space
always separates two chords.  Lines that are not chord lines are copied
through verbatim.
"""

from .classifier import HeuristicClassifier, LineClassifier
from .models import ChordLine
from .transposer import Accidental, resolve_key_signature, transpose_chord


def transpose_chord_line(
    line: ChordLine, semitones: int, preference: Accidental = Accidental.SHARPS
) -> str:
    """Return the text of *line* with each chord transposed at its column."""
    if not line.chords:
        return line.text

    parts = [line.text[: line.chords[0].column]]
    shift = 0  # columns the output currently runs ahead of the original

    for i, pos in enumerate(line.chords):
        new_chord = transpose_chord(pos.chord, semitones, preference)
        parts.append(new_chord)
        shift += len(new_chord) - len(pos.chord)

        end = pos.column + len(pos.chord)
        is_last = i + 1 == len(line.chords)
        gap = line.text[end:] if is_last else line.text[end : line.chords[i + 1].column]

        if shift > 0:
            spaces = len(gap) - len(gap.lstrip(" "))
            keep = 0 if is_last else 1
            take = min(shift, max(spaces - keep, 0))
            gap = gap[take:]
            shift -= take
        elif shift < 0 and not is_last:
            gap = " " * -shift + gap
            shift = 0
        parts.append(gap)

    return "".join(parts)


def transpose_chart(
    content: str,
    semitones: int,
    preference: Accidental | None = None,
    key: str | None = None,
    classifier: LineClassifier | None = None,
) -> str:
    """Transpose every chord line of *content*.

    When *preference* is not given it comes from the key signature of *key*,
    or sharps when the song has no key.
    """
    if preference is None:
        preference = resolve_key_signature(key) if key else Accidental.SHARPS
    classifier = classifier or HeuristicClassifier()

    out: list[str] = []
    for raw in content.split("\n"):
        parsed = classifier.classify(raw)
        if isinstance(parsed, ChordLine):
            ending = "\r" if raw.endswith("\r") else ""
            out.append(transpose_chord_line(parsed, semitones, preference) + ending)
        else:
            out.append(raw)
    return "\n".join(out)
