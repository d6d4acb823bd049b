"""Tracker engine services: ledger, visibility filter, statistics and orchestration."""

from .ledger import CompletionLedger, MarkResult, ToggleResult
from .statistics import Statistics, compute_statistics, finished_trackers_count
from .trackers import TrackerService
from .visibility import Board, BoardQuery, EmptyState, build_board, has_trackers_on, visible_categories

__all__ = [
    "Board",
    "BoardQuery",
    "CompletionLedger",
    "EmptyState",
    "MarkResult",
    "Statistics",
    "ToggleResult",
    "TrackerService",
    "build_board",
    "compute_statistics",
    "finished_trackers_count",
    "has_trackers_on",
    "visible_categories",
]
