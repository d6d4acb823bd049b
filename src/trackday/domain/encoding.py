"""Storage encodings for schedules and colors, plus schedule display text."""

from __future__ import annotations

import re
from typing import Iterable, Optional

from ..dates import WeekDay
from ..errors import ValidationError
from ..logging_config import get_logger
from .entities import Color

logger = get_logger(__name__)

_HEX_RE = re.compile(r"^[0-9a-fA-F]{6}$")

EVERY_DAY_LABEL = "Every day"


def encode_schedule(days: Iterable[WeekDay]) -> str:
    """Serialize a schedule as sorted, comma-joined ordinals, e.g. ``"1,3,5"``."""

    return ",".join(str(int(day)) for day in sorted(set(days)))


def decode_schedule(text: Optional[str]) -> frozenset[WeekDay]:
    """Parse a stored schedule; unknown tokens are skipped with a warning."""

    if not text:
        return frozenset()

    days: set[WeekDay] = set()
    for token in text.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            days.add(WeekDay(int(token)))
        except ValueError:
            logger.warning("Skipping invalid schedule token", extra={"token": token, "schedule": text})
    return frozenset(days)


def color_to_hex(color: Color) -> str:
    """Serialize a color as lowercase ``#rrggbb``."""

    return f"#{color.value:06x}"


def hex_to_color(text: str) -> Color:
    """Parse ``#rrggbb`` (the ``#`` is optional, case-insensitive)."""

    cleaned = (text or "").strip().removeprefix("#")
    if not _HEX_RE.match(cleaned):
        raise ValidationError(f"Invalid color: {text!r}")
    return Color(int(cleaned, 16))


def format_schedule(days: Iterable[WeekDay]) -> str:
    """Human-readable schedule: "Every day" or short names like "Mon, Wed"."""

    ordered = sorted(set(days))
    if len(ordered) == len(WeekDay):
        return EVERY_DAY_LABEL
    return ", ".join(day.short_name for day in ordered)


__all__ = [
    "EVERY_DAY_LABEL",
    "color_to_hex",
    "decode_schedule",
    "encode_schedule",
    "format_schedule",
    "hex_to_color",
]
