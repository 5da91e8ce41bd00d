"""Typed errors raised by the duration engine.

Every error carries a stable ``kind`` string so callers (HTTP layer, CLI)
can branch on it without matching message text.
"""


class ParseError(Exception):
    """Base class for scan and validation failures."""

    kind = "parse_error"

    @property
    def message(self) -> str:
        return str(self)


class MalformedRange(ParseError):
    """Raised when text looks like a range but cannot be parsed strictly."""

    kind = "malformed_range"

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Malformed timestamp: {text}")


class InvalidMinutes(ParseError):
    """Raised when a minutes field exceeds 59."""

    kind = "invalid_minutes"

    def __init__(self, range_text: str, value: int):
        self.range_text = range_text
        self.value = value
        super().__init__(
            f"Invalid timestamp range: {range_text} "
            f"(minutes {value} exceeds 59, use H:MM:SS format)"
        )


class InvalidSeconds(ParseError):
    """Raised when a seconds field exceeds 59."""

    kind = "invalid_seconds"

    def __init__(self, range_text: str, value: int):
        self.range_text = range_text
        self.value = value
        super().__init__(
            f"Invalid timestamp range: {range_text} (seconds {value} exceeds 59)"
        )


class EndBeforeStart(ParseError):
    """Raised when a range ends before it starts."""

    kind = "end_before_start"

    def __init__(self, range_text: str):
        self.range_text = range_text
        super().__init__(
            f"Invalid timestamp range: {range_text} (end time is before start time)"
        )


class NoRangesFound(ParseError):
    """Raised when the input holds no timestamp ranges at all."""

    kind = "no_ranges_found"

    def __init__(self):
        super().__init__("No valid timestamps found")


class DurationOverflow(ParseError):
    """Raised when an accumulated duration exceeds ``MAX_TOTAL_SECONDS``."""

    kind = "duration_overflow"

    def __init__(self, seconds: int, limit: int):
        self.seconds = seconds
        self.limit = limit
        super().__init__(
            f"Total duration of {seconds} seconds exceeds the supported maximum of {limit}"
        )
