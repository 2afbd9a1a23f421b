"""
Shared tracker behaviour.

Every tracker reports a completion ratio, can be finished, and notifies
subscribers synchronously with ``(name, completed, tracker)`` on change.
"""
import math
import numbers
from typing import Any, Callable, List, Optional

from ..core.config import get_config
from ..core.exceptions import InvalidWorkError, InvalidWeightError


ChangeCallback = Callable[[Optional[str], float, "TrackerBase"], None]


class TrackerBase:
    """Base class for counters, groups and streams."""

    def __init__(self, name: Optional[str] = None):
        self.name = name
        self._listeners: List[ChangeCallback] = []

    def completed(self) -> float:
        """Ratio of completed work to work to be done, from 0 to 1."""
        raise NotImplementedError

    def finish(self) -> None:
        """Mark the tracker as completed."""
        raise NotImplementedError

    @property
    def percent(self) -> float:
        """Progress as percentage (0 - 100)."""
        return self.completed() * 100

    def on_change(self, callback: ChangeCallback) -> ChangeCallback:
        """
        Subscribe to change notifications.

        Args:
            callback: Called as callback(name, completed, tracker)

        Returns:
            The callback, so it can be passed to remove_listener later
        """
        self._listeners.append(callback)
        return callback

    def remove_listener(self, callback: ChangeCallback) -> None:
        """Unsubscribe one registration of callback, if present."""
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _emit_change(self, name: Optional[str], completed: float) -> None:
        # Listeners may unsubscribe while being notified
        for callback in list(self._listeners):
            callback(name, completed, self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, completed={self.completed():.3f})"


def is_tracker(obj: Any) -> bool:
    """Check whether obj implements the tracker interface."""
    return all(
        callable(getattr(obj, attr, None))
        for attr in ("completed", "finish", "on_change")
    )


def check_work(operation: str, amount: Any) -> None:
    """
    Validate a work delta.

    Non-numbers, NaN and infinities are always rejected; negative numbers
    only in strict mode.
    """
    if not isinstance(amount, numbers.Real) or not math.isfinite(amount):
        raise InvalidWorkError(operation, amount)
    if amount < 0 and get_config().tracking.strict:
        raise InvalidWorkError(operation, amount)


def check_weight(weight: Any) -> None:
    """Validate a unit weight (same rules as work deltas)."""
    if not isinstance(weight, numbers.Real) or not math.isfinite(weight):
        raise InvalidWeightError(weight)
    if weight < 0 and get_config().tracking.strict:
        raise InvalidWeightError(weight)
