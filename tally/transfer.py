"""
Tracked file copying.

Copies files through StreamCounters attached to a Group, one stream per
file, weighted by file size.
"""
import shutil
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .core.config import get_config
from .core.exceptions import DestinationError
from .logging import get_logger
from .progress import Group, StreamCounter

logger = get_logger("transfer")


def plan_copy(sources: Sequence[Path], dest: Path) -> List[Tuple[Path, Path]]:
    """
    Resolve the target path for every source.

    Args:
        sources: Files to copy
        dest: Directory, or a file path when there is exactly one source

    Returns:
        (source, target) pairs in source order
    """
    dest = Path(dest)
    if dest.is_dir():
        return [(Path(src), dest / Path(src).name) for src in sources]
    if len(sources) == 1:
        return [(Path(sources[0]), dest)]
    raise DestinationError(str(dest), len(sources))


def attach_streams(
    group: Group, plan: Sequence[Tuple[Path, Path]]
) -> List[Tuple[Path, Path, StreamCounter]]:
    """Add one stream counter per planned copy, weighted by source size."""
    attached = []
    for src, target in plan:
        # Empty files count as one unit so reaching EOF reads as complete
        size = max(src.stat().st_size, 1)
        stream = group.new_stream(src.name, size, weight=size)
        attached.append((src, target, stream))
    return attached


def copy_tracked(
    group: Group,
    plan: Sequence[Tuple[Path, Path]],
    chunk_size: Optional[int] = None,
) -> int:
    """
    Copy every planned file, reporting bytes through the group.

    Returns:
        Total bytes copied
    """
    chunk_size = chunk_size or get_config().reporter.chunk_size
    total = 0

    for src, target, stream in attach_streams(group, plan):
        target.parent.mkdir(parents=True, exist_ok=True)
        with stream.reader(open(src, "rb")) as reader, open(target, "wb") as out:
            shutil.copyfileobj(reader, out, chunk_size)
        copied = target.stat().st_size
        total += copied
        logger.debug(f"Copied {src} -> {target} ({copied} bytes)")

    return total
