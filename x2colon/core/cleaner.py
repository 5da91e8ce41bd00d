"""Strip timestamp ranges out of a script while keeping the prose readable."""
from __future__ import annotations

import logging
from typing import List, Tuple

from .errors import MalformedRange
from .ranges import Range, group_ranges, scan_ranges

logger = logging.getLogger(__name__)


def _tail(parts: List[str]) -> str:
    for part in reversed(parts):
        if part:
            return part[-1]
    return ""


def _cuts(text: str, groups: List[List[Range]]) -> List[Tuple[int, int, bool, bool]]:
    """Excision spans ``(start, end, space_before, space_after)`` in order.

    A span that begins exactly where the previous one ended is folded into
    it, so back-to-back runs are judged as a single cut.
    """
    cuts: List[Tuple[int, int, bool, bool]] = []
    kept_from = 0
    for group in groups:
        start = group[0].start_pos
        end = group[-1].end_pos

        # a space already consumed by the previous cut is not taken twice
        space_before = start > kept_from and text[start - 1] == " "
        if space_before:
            start -= 1
        space_after = end < len(text) and text[end] == " "
        if space_after:
            end += 1

        if cuts and start == kept_from:
            prev_start, _, prev_before, _ = cuts[-1]
            cuts[-1] = (prev_start, end, prev_before, space_after)
        else:
            cuts.append((start, end, space_before, space_after))
        kept_from = end
    return cuts


def clean_script(text: str) -> str:
    """Remove every range (and ``+`` connectors between them) from ``text``.

    Never raises: if the text holds a malformed range, or no range at all,
    it is returned unchanged. Each ``+``-joined run is cut as one unit and
    may take one adjacent space per side with it; runs that touch are cut
    together. When a space went on both sides one is put back, otherwise a
    single space is inserted only where the cut would glue two words.
    """
    try:
        ranges = scan_ranges(text)
    except MalformedRange as e:
        logger.debug("Leaving script untouched: %s", e)
        return text
    if not ranges:
        return text

    parts: List[str] = []
    kept_from = 0
    for start, end, space_before, space_after in _cuts(text, group_ranges(text, ranges)):
        parts.append(text[kept_from:start])
        before = _tail(parts)
        after = text[end] if end < len(text) else ""

        if space_before and space_after:
            if before and after and not before.isspace() and not after.isspace():
                parts.append(" ")
        elif before.isalnum() and after.isalnum():
            parts.append(" ")
        kept_from = end

    parts.append(text[kept_from:])
    cleaned = "".join(parts)

    # connectors left behind by partial removal
    cleaned = cleaned.replace(" + ", " ").replace("+ ", "").replace(" +", "")
    logger.debug("Removed %d range(s), %d -> %d chars", len(ranges), len(text), len(cleaned))
    return cleaned
