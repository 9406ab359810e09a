from cifra.classifier import HeuristicClassifier, StrictClassifier, pair_lines
from cifra.models import ChordLine, ChordPosition, DirectiveLine, EmptyLine, LyricLine, PairedLine


def classify(line: str):
    return HeuristicClassifier().classify(line)


# ---------------------------------------------------------------------------
# HeuristicClassifier — structure
# ---------------------------------------------------------------------------


def test_classify_empty():
    assert classify("") == EmptyLine()
    assert classify("   ") == EmptyLine()
    assert classify("\r") == EmptyLine()


def test_classify_directive_braces():
    assert classify("{title: Foo}") == DirectiveLine("{title: Foo}")


def test_classify_directive_brackets_trimmed():
    assert classify("  [Refrão]  ") == DirectiveLine("[Refrão]")


def test_classify_bracketed_chord_is_directive():
    # Anything opening with "[" is structural, even "[G]".
    assert isinstance(classify("[G]"), DirectiveLine)


# ---------------------------------------------------------------------------
# HeuristicClassifier — chords and lyrics
# ---------------------------------------------------------------------------


def test_classify_chord_line_positions():
    parsed = classify("C   G   Am")
    assert isinstance(parsed, ChordLine)
    assert parsed.chords == (
        ChordPosition("C", 0),
        ChordPosition("G", 4),
        ChordPosition("Am", 8),
    )


def test_classify_lyric():
    assert classify("I once was lost") == LyricLine("I once was lost")


def test_classify_single_chord_alone():
    parsed = classify("                        D")
    assert isinstance(parsed, ChordLine)
    assert parsed.chords == (ChordPosition("D", 24),)


def test_classify_single_token_with_words_is_lyric():
    assert isinstance(classify("E agora, Senhor"), LyricLine)


def test_classify_two_tokens_biased_to_chord_line():
    # Known false positive: two chord-shaped words make a chord line.
    assert isinstance(classify("A casa de E"), ChordLine)


def test_classify_keeps_original_text_without_cr():
    parsed = classify("  G    D\r")
    assert parsed == ChordLine("  G    D", (ChordPosition("G", 2), ChordPosition("D", 7)))


def test_classify_lyric_preserves_spacing():
    assert classify("  how sweet  the sound\r") == LyricLine("  how sweet  the sound")


def test_classify_content_line_by_line():
    lines = HeuristicClassifier().classify_content("{t: X}\nG  D\nla la\n")
    assert [type(line) for line in lines] == [DirectiveLine, ChordLine, LyricLine, EmptyLine]


# ---------------------------------------------------------------------------
# StrictClassifier
# ---------------------------------------------------------------------------


def test_strict_all_tokens_chords():
    parsed = StrictClassifier().classify("Am7   G/B  D")
    assert isinstance(parsed, ChordLine)
    assert parsed.chords == (
        ChordPosition("Am7", 0),
        ChordPosition("G/B", 6),
        ChordPosition("D", 11),
    )


def test_strict_rejects_mixed_line():
    assert isinstance(StrictClassifier().classify("A casa de E"), LyricLine)


def test_strict_shares_structure_rules():
    assert StrictClassifier().classify("  ") == EmptyLine()
    assert StrictClassifier().classify("{key: G}") == DirectiveLine("{key: G}")


def test_strict_repeated_chord_columns():
    parsed = StrictClassifier().classify("G G")
    assert [c.column for c in parsed.chords] == [0, 2]


# ---------------------------------------------------------------------------
# pair_lines
# ---------------------------------------------------------------------------


def test_pair_chord_with_following_lyric():
    lines = HeuristicClassifier().classify_content("G     C\nAmazing grace")
    paired = pair_lines(lines)
    assert len(paired) == 1
    assert isinstance(paired[0], PairedLine)
    assert paired[0].lyric_line.text == "Amazing grace"
    assert paired[0].chord_line.chords[1] == ChordPosition("C", 6)


def test_pair_leaves_instrumental_chord_lines():
    lines = HeuristicClassifier().classify_content("C  F  G\n\nG   C\nla la")
    paired = pair_lines(lines)
    assert [type(line) for line in paired] == [ChordLine, EmptyLine, PairedLine]


def test_pair_preserves_order_of_other_lines():
    lines = HeuristicClassifier().classify_content("{t: X}\nverse one\nG  D")
    assert pair_lines(lines) == lines


def test_classifier_never_pairs():
    lines = HeuristicClassifier().classify_content("G     C\nAmazing grace")
    assert not any(isinstance(line, PairedLine) for line in lines)
