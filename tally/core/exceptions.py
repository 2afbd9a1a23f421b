"""
Custom exceptions for TALLY.

Provides meaningful error messages and suggestions for tracker misuse.
"""
from typing import Any, List, Optional


class TallyError(Exception):
    """Base exception for TALLY errors."""

    def __init__(self, message: str, suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.suggestions = suggestions or []


class InvalidWorkError(TallyError, ValueError):
    """A work amount that cannot be applied to a counter."""

    def __init__(self, operation: str, amount: Any):
        super().__init__(
            f"Invalid amount for {operation}: {amount!r}",
            suggestions=[
                "Work amounts must be non-negative numbers",
                "Set TALLY_STRICT=0 to apply negative deltas as given",
            ]
        )
        self.operation = operation
        self.amount = amount


class InvalidWeightError(TallyError, ValueError):
    """A unit weight that cannot be used for aggregation."""

    def __init__(self, weight: Any):
        super().__init__(
            f"Invalid unit weight: {weight!r}",
            suggestions=[
                "Weights must be non-negative numbers",
                "Use a weight of 0 to attach a unit that does not count",
            ]
        )
        self.weight = weight


class NotATrackerError(TallyError, TypeError):
    """Object added to a group does not implement the tracker interface."""

    def __init__(self, obj: Any):
        super().__init__(
            f"Expected a tracker, got {type(obj).__name__}",
            suggestions=[
                "Add a Counter, Group or StreamCounter",
                "Custom trackers need completed(), finish() and on_change()",
            ]
        )
        self.obj = obj


class CyclicGroupError(TallyError, ValueError):
    """Group added to a tree that already includes it."""

    def __init__(self, group_name: Optional[str], parent_name: Optional[str]):
        super().__init__(
            f"Attempted to add group {group_name!r} to a tree that already includes it "
            f"(parent {parent_name!r})",
            suggestions=["Create a new Group instead of reusing an ancestor"]
        )


class DestinationError(TallyError):
    """Copy destination cannot receive the given sources."""

    def __init__(self, dest: str, count: int):
        super().__init__(
            f"Destination is not a directory: {dest} ({count} sources given)",
            suggestions=[
                "Create the destination directory first",
                "Pass exactly one source to copy into a file path",
            ]
        )
