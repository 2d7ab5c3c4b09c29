class LyricSheetError(Exception):
    """Base exception for lyricsheet."""


class MarkerTableError(LyricSheetError):
    """Raised when a label/marker table cannot be used for round-tripping."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid marker table: {reason}")
