"""Timestamp literal parsing and duration formatting."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

# ASCII digits only; ``\d`` would also accept other Unicode digits.
_HMS_RE = re.compile(r"([0-9]+):([0-9]+):([0-9]+)")
_MS_RE = re.compile(r"([0-9]+):([0-9]+)")


@dataclass(frozen=True)
class Timestamp:
    """A parsed ``H:MM:SS`` or ``M:SS`` literal.

    Fields are unbounded here; the range validator enforces the 59 limits.
    """

    minutes: int
    seconds: int
    hours: int = 0

    def to_seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60 + self.seconds


def parse_timestamp(text: str, pos: int = 0) -> Optional[Tuple[Timestamp, int]]:
    """Parse a timestamp starting exactly at ``pos``.

    ``H:MM:SS`` is tried before ``M:SS`` so ``1:23:45`` is never read as
    ``1:23`` followed by a stray ``:45``. Returns ``(timestamp, end)`` where
    ``end`` is the index just past the literal, or ``None`` if nothing
    matches at ``pos``.
    """
    m = _HMS_RE.match(text, pos)
    if m:
        hours, minutes, seconds = (int(g) for g in m.groups())
        return Timestamp(minutes=minutes, seconds=seconds, hours=hours), m.end()
    m = _MS_RE.match(text, pos)
    if m:
        minutes, seconds = (int(g) for g in m.groups())
        return Timestamp(minutes=minutes, seconds=seconds), m.end()
    return None


def format_duration(seconds: int) -> str:
    """Format seconds as ``M:SS``.

    Minutes never wrap into hours, e.g. ``5400`` becomes ``"90:00"``.
    """
    minutes, secs = divmod(seconds, 60)
    return f"{minutes}:{secs:02d}"
