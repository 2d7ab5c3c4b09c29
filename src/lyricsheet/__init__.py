from .classifier import classify, classify_lines
from .markers import (
    SECTION_LABELS,
    MarkerCodec,
    build_marker_table,
    decode_titles,
    encode_titles,
)
from .models import ClassifiedLine, LineType, SectionLabel

__all__ = [
    "SECTION_LABELS",
    "ClassifiedLine",
    "LineType",
    "MarkerCodec",
    "SectionLabel",
    "build_marker_table",
    "classify",
    "classify_lines",
    "decode_titles",
    "encode_titles",
]
