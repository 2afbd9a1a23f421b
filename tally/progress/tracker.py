"""
Leaf progress counter.

Tracks completed units out of units of work to do.
"""
from typing import Optional

from .base import TrackerBase, check_work


class Counter(TrackerBase):
    """
    Tracks ``done`` units out of ``todo`` units of work.

    Every mutation emits one change notification.
    """

    def __init__(self, name: Optional[str] = None, todo: Optional[float] = 0):
        """
        Initialize counter.

        Args:
            name: Name reported in change notifications
            todo: Amount of work to be done (None means unknown, treated as 0)
        """
        if todo is None:
            todo = 0
        check_work("todo", todo)
        super().__init__(name)
        self.todo = todo
        self.done = 0

    def completed(self) -> float:
        """Ratio of done to todo; 0 when there is nothing to do."""
        if self.todo <= 0:
            return 0.0
        return min(1.0, max(0.0, self.done / self.todo))

    def add_work(self, todo: float) -> None:
        """
        Increase the amount of work to be done.

        Lowers the completion ratio. Triggers a change event.
        """
        check_work("add_work", todo)
        self.todo += todo
        self._clamp()
        self._emit_change(self.name, self.completed())

    def complete_work(self, work: float) -> None:
        """
        Increase the amount of work done, never past todo.

        Triggers a change event.
        """
        check_work("complete_work", work)
        self.done += work
        self._clamp()
        self._emit_change(self.name, self.completed())

    def finish(self) -> None:
        """Mark all work as done. Triggers a change event."""
        self.done = self.todo
        self._clamp()
        self._emit_change(self.name, self.completed())

    def _clamp(self):
        # Only lenient mode can push done out of range
        self.done = max(0, min(self.todo, self.done))
