"""Progress tracking system."""
from .base import TrackerBase, is_tracker
from .tracker import Counter
from .group import Group, Unit
from .stream import StreamCounter, TrackedReader
from .reporter import ProgressReporter, SimpleReporter, create_reporter, render_tree

__all__ = [
    "TrackerBase", "is_tracker",
    "Counter", "Group", "Unit", "StreamCounter", "TrackedReader",
    "ProgressReporter", "SimpleReporter", "create_reporter", "render_tree",
]
