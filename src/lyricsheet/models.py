from dataclasses import dataclass
from enum import Enum, auto


class LineType(Enum):
    NORMAL = auto()  # plain lyric text (fallback)
    TITLE = auto()  # section title: Verse 1, (Chorus), Bridge//title
    CHORDS = auto()  # chord-only line: C G Am F
    NONBREAK = auto()  # "<>" sentinel, no visual break at this point


@dataclass(frozen=True)
class SectionLabel:
    """A canonical section keyword and the placeholder it encodes to.

    Example: ``SectionLabel("Verse", " ##### ")``
    """

    label: str
    marker: str


@dataclass(frozen=True)
class ClassifiedLine:
    """A line of a song sheet together with its :class:`LineType`."""

    text: str
    line_type: LineType
