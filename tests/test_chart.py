from cifra.chart import transpose_chart, transpose_chord_line
from cifra.classifier import HeuristicClassifier, StrictClassifier
from cifra.models import ChordLine
from cifra.transposer import Accidental

CHART = (
    "G                C           G\n"
    "Amazing grace, how sweet the sound\n"
    "                        D\n"
    "That saved a wretch like me"
)


def chord_line(text: str) -> ChordLine:
    parsed = HeuristicClassifier().classify(text)
    assert isinstance(parsed, ChordLine)
    return parsed


# ---------------------------------------------------------------------------
# transpose_chord_line
# ---------------------------------------------------------------------------


def test_same_width_chords_keep_columns():
    assert transpose_chord_line(chord_line("C   G   Am"), 2) == "D   A   Bm"


def test_wider_chords_absorb_following_spaces():
    line = chord_line("C   G   Am")
    assert transpose_chord_line(line, 1, Accidental.FLATS) == "Db  Ab  Bbm"


def test_wider_chords_push_right_when_no_room():
    line = chord_line("C G")
    assert transpose_chord_line(line, 1, Accidental.FLATS) == "Db Ab"


def test_narrower_chords_pad_to_keep_columns():
    line = chord_line("C#  D#m  F")
    assert transpose_chord_line(line, -1, Accidental.SHARPS) == "C   Dm   E"


def test_leading_indent_preserved():
    assert transpose_chord_line(chord_line("      D"), 2) == "      E"


def test_non_chord_text_on_chord_line_kept():
    # Two tokens make this a chord line; the word between them survives.
    assert transpose_chord_line(chord_line("A Deus E"), 2) == "B Deus F#"


def test_zero_semitones_is_identity():
    line = chord_line("Am7   G/B  D")
    assert transpose_chord_line(line, 0) == "Am7   G/B  D"


# ---------------------------------------------------------------------------
# transpose_chart
# ---------------------------------------------------------------------------


def test_transpose_chart_only_touches_chord_lines():
    out = transpose_chart(CHART, 2).split("\n")
    assert out[0] == "A                D           A"
    assert out[1] == "Amazing grace, how sweet the sound"
    assert out[2] == "                        E"
    assert out[3] == "That saved a wretch like me"


def test_transpose_chart_preference_from_key():
    out = transpose_chart("C   F", 1, key="F")
    assert out == "Db  Gb"


def test_transpose_chart_explicit_preference_wins_over_key():
    out = transpose_chart("C   F", 1, Accidental.SHARPS, key="F")
    assert out == "C#  F#"


def test_transpose_chart_defaults_to_sharps_without_key():
    assert transpose_chart("C", 1) == "C#"


def test_transpose_chart_leaves_directives_and_blanks():
    content = "{comment: Refrão}\n\n  [Intro]\nG  D"
    out = transpose_chart(content, 2).split("\n")
    assert out[:3] == ["{comment: Refrão}", "", "  [Intro]"]
    assert out[3] == "A  E"


def test_transpose_chart_with_strict_classifier():
    content = "A casa de E\nG  D"
    heuristic = transpose_chart(content, 2)
    strict = transpose_chart(content, 2, classifier=StrictClassifier())
    assert heuristic.split("\n")[0] == "B casa de F#"
    assert strict.split("\n")[0] == "A casa de E"
    assert strict.split("\n")[1] == "A  E"


def test_transpose_chart_keeps_crlf_endings():
    content = "G   C\r\nAmazing grace\r\n"
    assert transpose_chart(content, 2) == "A   D\r\nAmazing grace\r\n"


def test_transpose_chart_full_octave_round_trip():
    assert transpose_chart(CHART, 12) == CHART
