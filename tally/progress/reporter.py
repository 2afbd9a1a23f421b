"""
Progress reporting using Rich library.

Renders a tracker tree's overall completion as a console progress bar.
"""
import sys
import time
from typing import Optional, TextIO

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    BarColumn,
    TaskProgressColumn,
    TimeElapsedColumn,
)
from rich.tree import Tree

from ..core.config import get_config
from ..logging import console as default_console
from .base import TrackerBase
from .group import Group


class ProgressReporter:
    """
    Reports a tracker's progress to the console using Rich.

    Provides:
    - Overall progress bar for the root tracker
    - Name of the component that changed most recently
    - Time elapsed
    """

    def __init__(
        self,
        tracker: TrackerBase,
        description: Optional[str] = None,
        console: Optional[Console] = None,
    ):
        """
        Initialize progress reporter.

        Args:
            tracker: Root tracker to report on
            description: Bar label (defaults to the tracker's name)
            console: Console to render on (defaults to the logging console)
        """
        self.tracker = tracker
        self.description = description or tracker.name or "Progress"
        self.console = console or default_console
        self.progress: Optional[Progress] = None
        self.task_id = None
        self.last_name: Optional[str] = None
        self.start_time = time.time()

    def __enter__(self) -> "ProgressReporter":
        config = get_config()

        self.progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(bar_width=config.reporter.bar_width),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            console=self.console,
            transient=False,
        )
        self.progress.start()

        self.task_id = self.progress.add_task(
            self._describe(None),
            total=100,
            completed=self.tracker.percent,
        )
        self.tracker.on_change(self._on_change)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.tracker.remove_listener(self._on_change)
        if self.progress:
            self.progress.update(self.task_id, completed=self.tracker.percent)
            self.progress.stop()

    def _describe(self, name: Optional[str]) -> str:
        label = escape(self.description[:40])
        if name and name != self.description:
            return f"{label} [dim]{escape(name[:40])}[/dim]"
        return label

    def _on_change(self, name: Optional[str], completed: float, tracker: TrackerBase):
        """Handle change notifications from the tracker."""
        if not self.progress:
            return

        self.last_name = name
        self.progress.update(
            self.task_id,
            completed=completed * 100,
            description=self._describe(name),
        )

    def print_summary(self):
        """Print final summary."""
        elapsed = time.time() - self.start_time
        minutes = int(elapsed // 60)
        seconds = int(elapsed % 60)

        self.console.print()
        self.console.print(
            f"[green]{self.tracker.percent:.0f}% complete in {minutes}m {seconds}s[/green]"
        )


class SimpleReporter:
    """
    Simple text-based progress reporter for non-interactive output.
    """

    def __init__(self, tracker: TrackerBase, stream: Optional[TextIO] = None):
        self.tracker = tracker
        self.stream = stream
        self.last_percent = -1
        self.start_time = time.time()

    def __enter__(self) -> "SimpleReporter":
        self._write(f"Tracking: {self.tracker.name or 'progress'}")
        self.tracker.on_change(self._on_change)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.tracker.remove_listener(self._on_change)

    def _on_change(self, name: Optional[str], completed: float, tracker: TrackerBase):
        """Print a line whenever the whole percentage changes."""
        percent = int(completed * 100)
        if percent != self.last_percent:
            self.last_percent = percent
            self._write(f"[{percent:3d}%] {name or ''}".rstrip())

    def print_summary(self):
        elapsed = time.time() - self.start_time
        self._write(f"Completed in {elapsed:.1f}s")

    def _write(self, line: str):
        print(line, file=self.stream or sys.stdout, flush=True)


def create_reporter(tracker: TrackerBase, plain: bool = False):
    """Create a Rich reporter, or a plain-text one when requested."""
    if plain:
        return SimpleReporter(tracker)
    return ProgressReporter(tracker)


def render_tree(tracker: TrackerBase) -> Tree:
    """
    Build a Rich tree of a tracker and all of its children.

    Mirrors Group.debug() with weights and percentages.
    """
    config = get_config().tracking
    tree = Tree(_tree_label(tracker.name or config.root_label, tracker, None))
    if isinstance(tracker, Group):
        _add_branches(tree, tracker)
    return tree


def _add_branches(branch: Tree, group: Group):
    config = get_config().tracking
    for unit in group:
        name = getattr(unit.tracker, "name", None) or config.unnamed_label
        node = branch.add(_tree_label(name, unit.tracker, unit.weight))
        if isinstance(unit.tracker, Group):
            _add_branches(node, unit.tracker)


def _tree_label(name: str, tracker: TrackerBase, weight: Optional[float]) -> str:
    percent = tracker.completed() * 100
    color = "green" if percent >= 100 else "yellow" if percent > 0 else "dim"
    label = f"[bold]{escape(name)}[/bold] [{color}]{percent:5.1f}%[/{color}]"
    if weight is not None:
        label += f" [dim](weight {weight:g})[/dim]"
    return label
