"""
Stream progress tracking.

A StreamCounter is a pass-through: data handed to it comes back unchanged,
while an internal Counter records how much has gone by. Chunks with a length
count as that many units, anything else as one unit, so for object streams
the size should be the number of objects.
"""
from typing import Any, BinaryIO, Iterable, Iterator, Optional

from ..logging import get_logger
from .base import TrackerBase
from .tracker import Counter

logger = get_logger("progress.stream")


class StreamCounter(TrackerBase):
    """
    Tracks data flowing through it.

    Use transform() per chunk, wrap() around an iterable, or reader() around
    a binary file object.
    """

    def __init__(self, name: Optional[str] = None, size: Optional[float] = 0, object_mode: bool = False):
        """
        Initialize stream counter.

        Args:
            name: Name reported in change notifications
            size: Expected number of bytes (or objects) to pass through;
                None or 0 when unknown
            object_mode: Count every chunk as one unit regardless of length
        """
        super().__init__(name)
        self.object_mode = object_mode
        self.counter = Counter(name, size)
        self.counter.on_change(self._relay_change)

    @property
    def size(self) -> float:
        return self.counter.todo

    @property
    def transferred(self) -> float:
        return self.counter.done

    def completed(self) -> float:
        return self.counter.completed()

    def add_work(self, todo: float) -> None:
        """Increase the expected overall size by todo units."""
        self.counter.add_work(todo)

    def finish(self) -> None:
        self.counter.finish()

    def measure(self, chunk: Any) -> int:
        """Units of work a chunk represents."""
        if self.object_mode:
            return 1
        try:
            return len(chunk) or 1
        except TypeError:
            return 1

    def transform(self, chunk: Any) -> Any:
        """Record a chunk and return it unchanged."""
        self.counter.complete_work(self.measure(chunk))
        return chunk

    def wrap(self, iterable: Iterable[Any]) -> Iterator[Any]:
        """
        Yield every chunk of iterable unchanged while tracking it.

        The tracker is finished once the iterable is exhausted.
        """
        for chunk in iterable:
            yield self.transform(chunk)
        logger.debug(
            f"Stream {self.name!r} ended after {self.transferred} units",
            extra={"tracker": self.name, "completed": self.completed()},
        )
        self.finish()

    def reader(self, fileobj: BinaryIO) -> "TrackedReader":
        """Wrap a readable file object so reads are tracked."""
        return TrackedReader(fileobj, self)

    def _relay_change(self, name: Optional[str], completed: float, tracker: TrackerBase):
        # Parents see the stream, not its internal counter, as the source
        self._emit_change(name, completed)


class TrackedReader:
    """
    File-like pass-through that reports reads to a StreamCounter.

    Reaching end of file finishes the tracker.
    """

    def __init__(self, fileobj: BinaryIO, tracker: StreamCounter):
        self._fileobj = fileobj
        self.tracker = tracker
        self._eof = False

    def read(self, size: int = -1) -> bytes:
        data = self._fileobj.read(size)
        if data:
            self.tracker.transform(data)
        elif size != 0:
            self._end()
        return data

    def readline(self, size: int = -1) -> bytes:
        data = self._fileobj.readline(size)
        if data:
            self.tracker.transform(data)
        elif size != 0:
            self._end()
        return data

    def __iter__(self) -> Iterator[bytes]:
        return self

    def __next__(self) -> bytes:
        line = self.readline()
        if not line:
            raise StopIteration
        return line

    def readable(self) -> bool:
        return True

    @property
    def closed(self) -> bool:
        return self._fileobj.closed

    def close(self) -> None:
        self._fileobj.close()

    def __enter__(self) -> "TrackedReader":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def _end(self):
        if not self._eof:
            self._eof = True
            logger.debug(
                f"Stream {self.tracker.name!r} reached EOF after {self.tracker.transferred} bytes",
                extra={"tracker": self.tracker.name, "completed": self.tracker.completed()},
            )
            self.tracker.finish()
