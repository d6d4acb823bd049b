"""Domain values, encodings and repository protocols."""

from .drafts import TrackerDraft, TrackerKind
from .encoding import color_to_hex, decode_schedule, encode_schedule, format_schedule, hex_to_color
from .entities import Color, Tracker, TrackerCategory, TrackerFilter, TrackerRecord

__all__ = [
    "Color",
    "Tracker",
    "TrackerCategory",
    "TrackerDraft",
    "TrackerFilter",
    "TrackerKind",
    "TrackerRecord",
    "color_to_hex",
    "decode_schedule",
    "encode_schedule",
    "format_schedule",
    "hex_to_color",
]
