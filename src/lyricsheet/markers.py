"""Reversible encoding of section-title lines into placeholder markers.

When a sheet is flattened to plain text, title lines would be indistinguishable
from lyrics that happen to start with "Verse" or "Chorus".  Encoding replaces
each section keyword on a TITLE line with a marker made of ``#`` characters;
decoding puts the canonical keyword back.

Label → marker table
--------------------

+----------------+-----------------------+
| Label          | Marker                |
+================+=======================+
| ``Verse``      | ``" ##### "``         |
| ``Chorus``     | ``" ###### "``        |
| ``Tag``        | ``" ####### "``       |
| ``Pre-chorus`` | ``" ######## "``      |
| ``Pre chorus`` | ``" ######### "``     |
| ``Coda``       | ``" ########## "``    |
| ``Bridge``     | ``" ########### "``   |
| ``Intro``      | ``" ############ "``  |
| ``Outro``      | ``" ############# "`` |
+----------------+-----------------------+

The markers are shared with text encoded by earlier releases and must not
change.  Shorter ``#`` runs are contained in longer ones and ``Chorus`` is
contained in ``Pre-chorus``, so each direction is a single regex pass whose
alternatives are ordered longest first.  That way a match can never be
rewritten twice and the longer keyword or marker always wins.

Decoding restores the canonical spelling from the table, not the original
casing: ``"VERSE 2"`` round-trips to ``"Verse 2"``.

Usage::

    from lyricsheet.markers import decode_titles, encode_titles
    flat = encode_titles(lines)
    restored = decode_titles(flat)
"""

import logging
import re
from collections.abc import Iterable, Sequence

from .classifier import classify
from .exceptions import MarkerTableError
from .models import LineType, SectionLabel

logger = logging.getLogger(__name__)

# Replacement used when a matched marker has no entry in the reverse table.
FALLBACK_LABEL = "verse"

SECTION_LABELS: tuple[SectionLabel, ...] = (
    SectionLabel("Verse", " ##### "),
    SectionLabel("Chorus", " ###### "),
    SectionLabel("Tag", " ####### "),
    SectionLabel("Pre-chorus", " ######## "),
    SectionLabel("Pre chorus", " ######### "),
    SectionLabel("Coda", " ########## "),
    SectionLabel("Bridge", " ########### "),
    SectionLabel("Intro", " ############ "),
    SectionLabel("Outro", " ############# "),
)


def build_marker_table(pairs: Iterable[SectionLabel]) -> tuple[SectionLabel, ...]:
    """Return *pairs* as an immutable table after checking it can round-trip.

    Raises MarkerTableError if a label or marker is empty, or if two entries
    share a label (case-insensitively) or a marker.
    """
    table = tuple(pairs)
    seen_labels: set[str] = set()
    seen_markers: set[str] = set()
    for entry in table:
        if not entry.label or not entry.marker:
            raise MarkerTableError(f"empty label or marker in {entry!r}")
        key = entry.label.lower()
        if key in seen_labels:
            raise MarkerTableError(f"duplicate label {entry.label!r}")
        if entry.marker in seen_markers:
            raise MarkerTableError(f"duplicate marker {entry.marker!r} for {entry.label!r}")
        seen_labels.add(key)
        seen_markers.add(entry.marker)
    return table


def _alternation(words: Iterable[str]) -> re.Pattern[str]:
    # Longest first, so "Pre-chorus" beats "Chorus" and a 6-# marker beats a 5-# one.
    # ASCII case folding only, so a dotted capital I never matches "intro".
    ordered = sorted(words, key=len, reverse=True)
    return re.compile("|".join(re.escape(w) for w in ordered), re.IGNORECASE | re.ASCII)


class MarkerCodec:
    """Encode and decode title lines with one label/marker table."""

    def __init__(self, table: Iterable[SectionLabel] = SECTION_LABELS):
        self.table = build_marker_table(table)
        self._label_to_marker = {e.label.lower(): e.marker for e in self.table}
        self._marker_to_label = {e.marker: e.label for e in self.table}
        self._label_re = _alternation(e.label for e in self.table)
        self._marker_re = _alternation(e.marker for e in self.table)

    def encode_line(self, line: str) -> str:
        """Replace every section label in *line* with its marker."""
        return self._label_re.sub(lambda m: self._label_to_marker[m.group().lower()], line)

    def decode_line(self, line: str) -> str:
        """Replace every marker in *line* with its canonical label."""
        return self._marker_re.sub(
            lambda m: self._marker_to_label.get(m.group(), FALLBACK_LABEL), line
        )

    def encode(self, lines: Sequence[str]) -> list[str]:
        """Return *lines* with every TITLE line encoded; other lines untouched."""
        result: list[str] = []
        for line in lines:
            if classify(line) == LineType.TITLE:
                line = self.encode_line(line)
            result.append(line)
        logger.debug("encoded %d line(s)", len(result))
        return result

    def decode(self, lines: Sequence[str]) -> list[str]:
        """Return *lines* with every marker decoded, regardless of line type."""
        result = [self.decode_line(line) for line in lines]
        logger.debug("decoded %d line(s)", len(result))
        return result


_default_codec = MarkerCodec()


def encode_titles(lines: Sequence[str]) -> list[str]:
    return _default_codec.encode(lines)


def decode_titles(lines: Sequence[str]) -> list[str]:
    return _default_codec.decode(lines)
