"""Duration aggregation: sum the ranges of a script into output lines."""
from __future__ import annotations

import logging
from typing import List

from pydantic import BaseModel

from .errors import DurationOverflow, NoRangesFound
from .ranges import Range, group_ranges, scan_ranges
from .timestamps import format_duration

logger = logging.getLogger(__name__)

# Width of the counter used by the first implementation of this tool.
# Totals beyond it are rejected rather than wrapped or clamped.
MAX_TOTAL_SECONDS = 2**32 - 1


class DurationResult(BaseModel):
    seconds: int
    format: str

    @classmethod
    def from_seconds(cls, seconds: int) -> "DurationResult":
        return cls(seconds=seconds, format=format_duration(seconds))


class LineResult(BaseModel):
    """One output line, possibly built from several ``+``-joined ranges."""

    id: int
    input: str
    result: DurationResult


class ParseOutput(BaseModel):
    lines: List[LineResult]
    total: DurationResult


def _checked(seconds: int) -> int:
    if seconds > MAX_TOTAL_SECONDS:
        raise DurationOverflow(seconds, MAX_TOTAL_SECONDS)
    return seconds


def build_output(text: str, ranges: List[Range]) -> ParseOutput:
    """Group already validated ranges into lines and compute the total.

    An empty ``ranges`` list yields an output with no lines and a zero
    total; deciding whether that is an error is up to the caller.
    """
    lines: List[LineResult] = []
    total = 0
    for line_id, group in enumerate(group_ranges(text, ranges), 1):
        seconds = _checked(sum(r.duration for r in group))
        lines.append(LineResult(
            id=line_id,
            input=" + ".join(r.text for r in group),
            result=DurationResult.from_seconds(seconds),
        ))
        total = _checked(total + seconds)

    logger.debug("Built %d line(s) from %d range(s), total %ds", len(lines), len(ranges), total)
    return ParseOutput(lines=lines, total=DurationResult.from_seconds(total))


def calculate_durations(text: str) -> ParseOutput:
    """Scan ``text`` and sum every timestamp range it contains.

    Raises ``MalformedRange`` for range-like text that does not parse,
    the matching validation error for the first out-of-bounds or reversed
    range, ``NoRangesFound`` when nothing was found and
    ``DurationOverflow`` when a sum exceeds ``MAX_TOTAL_SECONDS``.
    """
    ranges = scan_ranges(text)

    for rng in ranges:
        if rng.defect is not None:
            raise rng.defect.to_error(rng.text)

    if not ranges:
        raise NoRangesFound()

    return build_output(text, ranges)
