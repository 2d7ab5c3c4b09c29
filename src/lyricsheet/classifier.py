"""Line classification for song/lyric sheets.

Every line falls into exactly one :class:`~lyricsheet.models.LineType`.  Rules
are tried in priority order and the first match wins:

  1. TITLE     - section keyword prefix (``Verse 1``, ``(Chorus)``) or an
                 explicit ``//title`` suffix
  2. CHORDS    - every token is a chord name (``C G Am F``, ``C#m7/E``), or an
                 explicit ``//chords`` suffix
  3. NONBREAK  - the ``<>`` sentinel
  4. NORMAL    - everything else

Titles take precedence over chords: ``Chorus//chords`` and ``Bridge x2`` are
both TITLE lines.
"""

import re
from collections.abc import Iterable

from .models import ClassifiedLine, LineType

# ---------------------------------------------------------------------------
# Regexes and keyword tables
# ---------------------------------------------------------------------------

# Lowercase prefixes that mark a section title.
TITLE_KEYWORDS = (
    "verse",
    "chorus",
    "tag",
    "pre-chorus",
    "pre chorus",
    "coda",
    "bridge",
    "intro",
    "outro",
)

TITLE_TAG = "//title"
CHORDS_TAG = "//chords"
LYRICS_TAG = "//lyrics"
NONBREAK_SENTINEL = "<>"

# One chord: root, accidental, degree, up to three qualities each with an
# optional number, then a trailing altered degree.
#   C  Am  C#m7  Bbmaj7  Dsus4  Cadd9  Gm7b5  Edim7  Faug
_CHORD_PAT = (
    r"[a-gA-G](?:#|b)?[0-9]*"
    r"(?:(?:sus|dim|maj|dom|min|m|aug|add)?[0-9]*){3}"
    r"(?:#|b)?[0-9]*"
)

# A chord, optionally over a bass chord of the same shape: G/B, C#m7/E
CHORD_TOKEN_RE = re.compile(rf"{_CHORD_PAT}(?:/{_CHORD_PAT})?")

# Repeat counts written next to a chord run: x4, 2X
_MULTIPLIER_SUFFIX_RE = re.compile(r"[xX][0-9]+")
_MULTIPLIER_PREFIX_RE = re.compile(r"[0-9]+[xX]")

# Characters that separate chords without being part of them: C-G, (Am)
_SEPARATOR_TABLE = str.maketrans("-()", "   ")

# Whitespace is ASCII only: a line is trimmed of control characters and spaces
# (U+0000..U+0020) and split on the six ASCII blanks.  NBSP and U+3000 are
# ordinary characters here.
_TRIM_CHARS = "".join(map(chr, range(0x21)))
_BLANK_RE = re.compile(r"[ \t\n\x0b\f\r]")


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def classify(line: str) -> LineType:
    """Return the :class:`LineType` of a single line of a song sheet.

    Never raises; any string (including ``""``) has a type.
    """
    if is_title(line):
        return LineType.TITLE
    if is_chords(line):
        return LineType.CHORDS
    if is_nonbreak(line):
        return LineType.NONBREAK
    return LineType.NORMAL


def classify_lines(lines: Iterable[str]) -> list[ClassifiedLine]:
    """Classify each line of an already-split sheet, preserving order."""
    return [ClassifiedLine(text=line, line_type=classify(line)) for line in lines]


def is_title(line: str) -> bool:
    # Parentheses are removed after trimming, so "( Verse )" keeps its
    # leading space and is not a title.
    normalized = line.lower().strip(_TRIM_CHARS).replace("(", "").replace(")", "")
    if normalized.endswith(TITLE_TAG):
        return True
    return normalized.startswith(TITLE_KEYWORDS)


def is_chords(line: str) -> bool:
    """Return True if *line* contains only chord names.

    Dashes and parentheses count as separators and repeat multipliers
    (``x4``, ``2x``) are ignored, so ``(C - G) x2`` is a chord line.  A
    whitespace-only line has no tokens and is therefore a chord line; the
    empty string is not.
    """
    if not line:
        return False
    lowered = line.lower()
    if lowered.endswith(CHORDS_TAG):
        return True
    if lowered.endswith(LYRICS_TAG):
        return False

    check = line.translate(_SEPARATOR_TABLE)
    check = _MULTIPLIER_SUFFIX_RE.sub("", check)
    check = _MULTIPLIER_PREFIX_RE.sub("", check)
    tokens = [token for token in _BLANK_RE.split(check) if token]
    return all(CHORD_TOKEN_RE.fullmatch(token) for token in tokens)


def is_nonbreak(line: str) -> bool:
    return line.strip(_TRIM_CHARS) == NONBREAK_SENTINEL
