"""Exception types raised by the tracker engine and its repositories."""

from __future__ import annotations


class TrackdayError(Exception):
    """Base class for every error the tracker engine raises on purpose."""


class ValidationError(TrackdayError, ValueError):
    """Input was rejected before it reached storage."""


class NotFoundError(TrackdayError, LookupError):
    """A mutation referenced a tracker, category or record that does not exist."""

    def __init__(self, kind: str, identifier: object):
        super().__init__(f"{kind} not found: {identifier}")
        self.kind = kind
        self.identifier = identifier


class InvalidDateError(TrackdayError, ValueError):
    """A completion was requested for a day after today."""

    def __init__(self, day: object, today: object):
        super().__init__(f"Cannot complete a tracker on {day}: it is after {today}")
        self.day = day
        self.today = today


__all__ = ["InvalidDateError", "NotFoundError", "TrackdayError", "ValidationError"]
