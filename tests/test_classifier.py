from lyricsheet.classifier import (
    CHORD_TOKEN_RE,
    classify,
    classify_lines,
    is_chords,
    is_title,
)
from lyricsheet.models import ClassifiedLine, LineType

# ---------------------------------------------------------------------------
# TITLE
# ---------------------------------------------------------------------------


def test_classify_title_keywords():
    for line in (
        "Verse 1",
        "CHORUS",
        "(Chorus)",
        "  Bridge  ",
        "Pre-Chorus 2",
        "pre chorus",
        "Tag",
        "Coda",
        "Intro",
        "Outro:",
        "Tagline of the song",
    ):
        assert classify(line) == LineType.TITLE, line


def test_classify_title_suffix_tag():
    assert classify("Amazing Grace//Title") == LineType.TITLE


def test_title_beats_chords():
    assert classify("Chorus//chords") == LineType.TITLE
    assert classify("Bridge x2") == LineType.TITLE


def test_parentheses_removed_after_trim():
    # " verse " keeps its leading space once the parentheses are gone
    assert not is_title("( Verse )")
    assert classify("( Verse )") == LineType.NORMAL


# ---------------------------------------------------------------------------
# CHORDS
# ---------------------------------------------------------------------------


def test_classify_chord_lines():
    for line in (
        "C G Am F",
        "C#m7/E",
        "Cx4",
        "4x G",
        "(C - G) x2",
        "Bbmaj7  Dsus4  Cadd9",
        "Gm7b5 Edim7 Faug",
        "D/f#  Am7/G",
        "  G   D   Em   C  ",
    ):
        assert classify(line) == LineType.CHORDS, line


def test_classify_chords_suffix_tag():
    assert classify("Amazing grace//CHORDS") == LineType.CHORDS


def test_lyrics_suffix_tag_blocks_chords():
    assert not is_chords("C G//lyrics")
    assert classify("C G//lyrics") == LineType.NORMAL


def test_lowercase_roots_are_chords():
    assert classify("a b c") == LineType.CHORDS


def test_whitespace_only_line_is_chords():
    assert classify("   ") == LineType.CHORDS


def test_empty_line_is_not_chords():
    assert not is_chords("")
    assert classify("") == LineType.NORMAL


def test_chords_split_on_ascii_blanks_only():
    assert classify("C\tG\x0bAm\fF") == LineType.CHORDS
    assert classify("C\u00a0G") == LineType.NORMAL
    assert classify("C\u3000G") == LineType.NORMAL


def test_chord_token_regex():
    assert CHORD_TOKEN_RE.fullmatch("C#m7/E")
    assert CHORD_TOKEN_RE.fullmatch("Ebsus4")
    assert not CHORD_TOKEN_RE.fullmatch("H7")
    assert not CHORD_TOKEN_RE.fullmatch("Amazing")
    assert not CHORD_TOKEN_RE.fullmatch("C/")


# ---------------------------------------------------------------------------
# NONBREAK / NORMAL
# ---------------------------------------------------------------------------


def test_classify_nonbreak():
    assert classify("<>") == LineType.NONBREAK
    assert classify("  <>  ") == LineType.NONBREAK


def test_double_sentinel_is_normal():
    assert classify("<> <>") == LineType.NORMAL


def test_unicode_spaces_are_not_trimmed():
    assert classify("\u00a0<>") == LineType.NORMAL
    assert classify("\u3000Verse 1") == LineType.NORMAL


def test_control_characters_are_trimmed():
    assert classify("\x01<>\x1f") == LineType.NONBREAK
    assert classify("\x01Verse 1") == LineType.TITLE


def test_classify_normal():
    for line in ("Hello world", "Amazing grace, how sweet the sound", "I sang the chorus loud", "H7"):
        assert classify(line) == LineType.NORMAL, line


# ---------------------------------------------------------------------------
# classify_lines
# ---------------------------------------------------------------------------


def test_classify_lines_preserves_order():
    result = classify_lines(["Verse 1", "G C D", "Amazing grace", "<>"])
    assert result == [
        ClassifiedLine("Verse 1", LineType.TITLE),
        ClassifiedLine("G C D", LineType.CHORDS),
        ClassifiedLine("Amazing grace", LineType.NORMAL),
        ClassifiedLine("<>", LineType.NONBREAK),
    ]


def test_classify_lines_empty():
    assert classify_lines([]) == []
