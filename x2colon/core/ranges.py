"""Range scanning and validation.

A range is a parenthesized pair of timestamps joined by a dash, e.g.
``(0:00-1:23)`` or ``(1:00:00–1:05:30)``. Scanning and validation are
kept apart: the scanner only raises for structural problems, while
numeric problems are attached to each ``Range`` as a ``RangeDefect`` so
that every consumer can apply its own policy.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .errors import (
    EndBeforeStart,
    InvalidMinutes,
    InvalidSeconds,
    MalformedRange,
    ParseError,
)
from .timestamps import Timestamp, parse_timestamp

logger = logging.getLogger(__name__)

# hyphen, en dash, em dash
DASHES = ("-", "–", "—")

# Anything between parens with a colon, a dash, then another colon.
# Each run stops at the delimiter that follows it, so a failed attempt
# costs time linear in the text up to the next ")".
# Compiled once at import and shared read-only by every scan.
_LOOSE_RANGE_RE = re.compile(r"\([^):]*:[^)\-–—]*[-–—][^):]*:[^)]*\)")


class DefectKind(str, Enum):
    INVALID_MINUTES = "invalid_minutes"
    INVALID_SECONDS = "invalid_seconds"
    END_BEFORE_START = "end_before_start"


@dataclass(frozen=True)
class RangeDefect:
    """Numeric validation failure attached to a scanned range."""

    kind: DefectKind
    value: Optional[int] = None

    def to_error(self, range_text: str) -> ParseError:
        if self.kind is DefectKind.INVALID_MINUTES:
            return InvalidMinutes(range_text, self.value)
        if self.kind is DefectKind.INVALID_SECONDS:
            return InvalidSeconds(range_text, self.value)
        return EndBeforeStart(range_text)


@dataclass(frozen=True)
class Range:
    start_pos: int
    end_pos: int
    text: str
    start: Timestamp
    end: Timestamp
    duration: int = 0
    defect: Optional[RangeDefect] = None

    @property
    def is_valid(self) -> bool:
        return self.defect is None


def validate_range(start: Timestamp, end: Timestamp) -> Tuple[int, Optional[RangeDefect]]:
    """Check field bounds and ordering, returning ``(duration, defect)``.

    The first failing check wins: start minutes, end minutes, start
    seconds, end seconds, then ordering. Hours are never bounded.
    """
    if start.minutes > 59:
        return 0, RangeDefect(DefectKind.INVALID_MINUTES, start.minutes)
    if end.minutes > 59:
        return 0, RangeDefect(DefectKind.INVALID_MINUTES, end.minutes)
    if start.seconds > 59:
        return 0, RangeDefect(DefectKind.INVALID_SECONDS, start.seconds)
    if end.seconds > 59:
        return 0, RangeDefect(DefectKind.INVALID_SECONDS, end.seconds)

    start_secs = start.to_seconds()
    end_secs = end.to_seconds()
    if end_secs < start_secs:
        return 0, RangeDefect(DefectKind.END_BEFORE_START)
    return end_secs - start_secs, None


def match_range(text: str, pos: int) -> Optional[Range]:
    """Strictly match ``"(" TIMESTAMP DASH TIMESTAMP ")"`` at ``pos``."""
    if not text.startswith("(", pos):
        return None

    parsed = parse_timestamp(text, pos + 1)
    if parsed is None:
        return None
    start, cursor = parsed

    if cursor >= len(text) or text[cursor] not in DASHES:
        return None

    parsed = parse_timestamp(text, cursor + 1)
    if parsed is None:
        return None
    end, cursor = parsed

    if not text.startswith(")", cursor):
        return None
    end_pos = cursor + 1

    duration, defect = validate_range(start, end)
    return Range(
        start_pos=pos,
        end_pos=end_pos,
        text=text[pos:end_pos],
        start=start,
        end=end,
        duration=duration,
        defect=defect,
    )


def scan_ranges(text: str) -> List[Range]:
    """Find every range in ``text``, left to right and non-overlapping.

    A ``(`` that does not start a strict range is treated as plain text,
    unless the text from that paren up to the next ``)`` loosely looks like
    a range (colon, dash, colon). In that case ``MalformedRange`` is raised.
    Loose matches starting after the candidate paren are ignored.
    """
    ranges: List[Range] = []
    # neither a strict nor a loose match can start past the last ")"
    last_close = text.rfind(")")
    cursor = 0
    while True:
        paren = text.find("(", cursor)
        if paren < 0 or paren > last_close:
            break

        found = match_range(text, paren)
        if found is not None:
            ranges.append(found)
            cursor = found.end_pos
            continue

        loose = _LOOSE_RANGE_RE.match(text, paren)
        if loose:
            logger.debug("Malformed range at offset %d: %s", paren, loose.group(0))
            raise MalformedRange(loose.group(0))
        cursor = paren + 1

    logger.debug("Scanned %d range(s)", len(ranges))
    return ranges


def group_ranges(text: str, ranges: List[Range]) -> List[List[Range]]:
    """Split ranges into runs joined by a ``+`` connector.

    Two neighbours belong to the same run when the text between them,
    stripped of whitespace, is exactly ``"+"``.
    """
    groups: List[List[Range]] = []
    for rng in ranges:
        if groups:
            previous = groups[-1][-1]
            if text[previous.end_pos:rng.start_pos].strip() == "+":
                groups[-1].append(rng)
                continue
        groups.append([rng])
    return groups
