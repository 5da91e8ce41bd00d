"""
Core engine for x2-colon.

Pure, side-effect-free logic: scanning timestamp ranges out of free text,
validating them, summing them into lines and stripping them from scripts.
"""

__all__ = [
    "Timestamp",
    "parse_timestamp",
    "format_duration",
    "Range",
    "RangeDefect",
    "scan_ranges",
    "group_ranges",
    "validate_range",
    "DurationResult",
    "LineResult",
    "ParseOutput",
    "calculate_durations",
    "clean_script",
]

from .timestamps import Timestamp, parse_timestamp, format_duration
from .ranges import Range, RangeDefect, scan_ranges, group_ranges, validate_range
from .durations import DurationResult, LineResult, ParseOutput, calculate_durations
from .cleaner import clean_script
