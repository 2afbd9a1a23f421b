"""
Weighted aggregation of trackers.

A Group's completion is the weighted mean of its children's completion,
recomputed from the children on every call. Change notifications from any
child are re-emitted upward with the group as the source.
"""
from typing import Iterator, List, NamedTuple, Optional, TypeVar

from ..core.config import get_config
from ..core.exceptions import CyclicGroupError, NotATrackerError
from ..logging import get_logger
from .base import TrackerBase, check_weight, is_tracker
from .stream import StreamCounter
from .tracker import Counter

logger = get_logger("progress.group")

T = TypeVar("T")


class Unit(NamedTuple):
    """A child tracker and its share of the parent's work."""
    tracker: TrackerBase
    weight: float = 1


class Group(TrackerBase):
    """
    Tracker whose completion is determined by other trackers.

    Children are kept in insertion order. A child with weight 2 is expected
    to take twice as long as a child with weight 1, so it accounts for twice
    as much of the group's completion.
    """

    def __init__(self, name: Optional[str] = None):
        """
        Initialize an empty group.

        Args:
            name: Name used in change notifications when the updating
                component has none
        """
        super().__init__(name)
        self.units: List[Unit] = []

    @property
    def children(self) -> List[Unit]:
        """(tracker, weight) pairs in insertion order."""
        return list(self.units)

    @property
    def total_weight(self) -> float:
        return sum(unit.weight for unit in self.units)

    def __len__(self) -> int:
        return len(self.units)

    def __iter__(self) -> Iterator[Unit]:
        return iter(self.units)

    def add_unit(self, tracker: T, weight: float = 1) -> T:
        """
        Add a tracker to this group.

        Args:
            tracker: Counter, Group, StreamCounter or any object with the
                tracker interface
            weight: Share of this group's work, relative to the other units

        Returns:
            The added tracker
        """
        if not is_tracker(tracker):
            raise NotATrackerError(tracker)
        check_weight(weight)
        if tracker is self or (isinstance(tracker, Group) and tracker.contains(self)):
            raise CyclicGroupError(tracker.name, self.name)

        self.units.append(Unit(tracker, weight))
        tracker.on_change(self._bubble_change)
        name = getattr(tracker, "name", None)
        logger.debug(
            f"Added {type(tracker).__name__} {name!r} to {self.name!r} with weight {weight}",
            extra={"tracker": self.name, "completed": self.completed()},
        )
        return tracker

    def new_group(self, name: Optional[str] = None, weight: float = 1) -> "Group":
        """Create a sub-group and add it to this group."""
        return self.add_unit(Group(name), weight)

    def new_item(self, name: Optional[str] = None, todo: float = 0, weight: float = 1) -> Counter:
        """Create a counter and add it to this group."""
        return self.add_unit(Counter(name, todo), weight)

    def new_stream(
        self,
        name: Optional[str] = None,
        size: float = 0,
        weight: float = 1,
        **options,
    ) -> StreamCounter:
        """Create a stream counter and add it to this group."""
        return self.add_unit(StreamCounter(name, size, **options), weight)

    def contains(self, tracker: TrackerBase) -> bool:
        """Check whether tracker is anywhere below this group."""
        for unit in self.units:
            if unit.tracker is tracker:
                return True
            if isinstance(unit.tracker, Group) and unit.tracker.contains(tracker):
                return True
        return False

    def completed(self) -> float:
        """
        Weighted mean of the children's completion.

        Returns:
            Progress as fraction (0.0 - 1.0); 0 for an empty group or when
            every weight is zero
        """
        total_weight = self.total_weight
        if not self.units or total_weight <= 0:
            return 0.0

        weighted_sum = sum(unit.weight * unit.tracker.completed() for unit in self.units)
        return min(1.0, max(0.0, weighted_sum / total_weight))

    def finish(self) -> None:
        """Finish every child, in order. Each child emits its own change events."""
        logger.debug(
            f"Finishing group {self.name!r} ({len(self.units)} units)",
            extra={"tracker": self.name, "completed": self.completed()},
        )
        for unit in list(self.units):
            unit.tracker.finish()

    def _bubble_change(self, name: Optional[str], completed: float, tracker: TrackerBase):
        """Re-emit a child's change, falling back to this group's name."""
        self._emit_change(name or self.name, self.completed())

    def debug(self) -> str:
        """
        Render this group and all of its children as an indented tree.

        Each line is ``name: ratio``; nested groups are expanded beneath
        their own line.
        """
        return "\n".join(self._debug_lines(0)) + "\n"

    def _debug_lines(self, depth: int) -> List[str]:
        config = get_config().tracking
        indent = "  " * depth
        label = self.name or (config.root_label if depth == 0 else config.unnamed_label)
        lines = [f"{indent}{label}: {self.completed():.3f}"]

        for unit in self.units:
            if isinstance(unit.tracker, Group):
                lines.extend(unit.tracker._debug_lines(depth + 1))
            else:
                name = getattr(unit.tracker, "name", None) or config.unnamed_label
                lines.append(f"{indent}  {name}: {unit.tracker.completed():.3f}")

        return lines
