"""
TALLY - Hierarchical Progress Aggregation

Compose counters, weighted groups and byte/object streams into a single
progress tree whose root reports one completion ratio.
"""

__version__ = "1.0.0"

from .progress import Counter, Group, StreamCounter, TrackedReader

__all__ = ["Counter", "Group", "StreamCounter", "TrackedReader", "__version__"]
