"""Tests for StreamCounter and TrackedReader pass-through."""

import io
import shutil

import pytest

from tally.progress import StreamCounter, TrackedReader


class TestStreamCounter:
    """Chunk accounting."""

    def test_bytes_count_by_length(self):
        stream = StreamCounter("bytes", 10)
        chunk = b"abcd"
        assert stream.transform(chunk) is chunk
        assert stream.transferred == 4
        assert stream.completed() == pytest.approx(0.4)

    def test_objects_without_length_count_one(self):
        stream = StreamCounter("objs", 4)
        stream.transform(object())
        stream.transform(42)
        assert stream.completed() == pytest.approx(0.5)

    def test_object_mode_counts_one_per_chunk(self):
        stream = StreamCounter("rows", 2, object_mode=True)
        stream.transform([1, 2, 3])
        assert stream.completed() == pytest.approx(0.5)

    def test_empty_chunk_counts_one(self):
        stream = StreamCounter("s", 4)
        stream.transform(b"")
        assert stream.transferred == 1

    def test_clamps_past_size(self):
        stream = StreamCounter("s", 3)
        stream.transform(b"0123456789")
        assert stream.completed() == 1

    def test_add_work_delegates(self):
        stream = StreamCounter("s", 10)
        stream.transform(b"12345")
        stream.add_work(10)
        assert stream.size == 20
        assert stream.completed() == pytest.approx(0.25)

    def test_finish(self):
        stream = StreamCounter("s", 10)
        stream.finish()
        assert stream.completed() == 1

    def test_unknown_size_reports_zero(self):
        stream = StreamCounter("s")
        stream.transform(b"data")
        assert stream.completed() == 0

    def test_none_size_is_unknown(self):
        stream = StreamCounter("s", None)
        assert stream.size == 0
        stream.transform(b"data")
        assert stream.transferred == 4
        assert stream.completed() == 0

        stream.add_work(8)
        assert stream.completed() == pytest.approx(0.5)

    def test_events_come_from_stream(self, events):
        stream = StreamCounter("s", 4)
        stream.on_change(events)
        stream.transform(b"ab")

        assert events.events == [("s", pytest.approx(0.5), stream)]


class TestWrap:
    """Iterator pass-through."""

    def test_yields_chunks_unchanged(self):
        chunks = [b"ab", b"cd", b"e"]
        stream = StreamCounter("s", 5)
        assert list(stream.wrap(iter(chunks))) == chunks
        assert stream.completed() == 1

    def test_tracks_lazily(self):
        stream = StreamCounter("s", 4)
        gen = stream.wrap([b"ab", b"cd"])
        assert stream.transferred == 0

        next(gen)
        assert stream.completed() == pytest.approx(0.5)

    def test_finishes_at_end(self, events):
        stream = StreamCounter("s", 100)
        stream.on_change(events)
        list(stream.wrap([b"x"]))

        assert len(events) == 2
        assert events.last[1] == 1


class TestTrackedReader:
    """File-object pass-through."""

    def test_read_passes_data_through(self):
        data = b"0123456789" * 10
        stream = StreamCounter("file", len(data))
        reader = stream.reader(io.BytesIO(data))
        assert isinstance(reader, TrackedReader)

        assert reader.read(30) == data[:30]
        assert stream.completed() == pytest.approx(0.3)
        assert reader.read() == data[30:]
        assert stream.completed() == 1

    def test_eof_finishes_once(self, events):
        stream = StreamCounter("file", 8)
        stream.on_change(events)
        reader = stream.reader(io.BytesIO(b"1234"))

        reader.read()
        reader.read()
        reader.read()

        assert len(events) == 2
        assert stream.completed() == 1

    def test_zero_size_read_is_not_eof(self):
        stream = StreamCounter("file", 4)
        reader = stream.reader(io.BytesIO(b"1234"))
        assert reader.read(0) == b""
        assert stream.completed() == 0

    def test_iterates_lines(self):
        data = b"one\ntwo\nthree\n"
        stream = StreamCounter("lines", len(data))
        with stream.reader(io.BytesIO(data)) as reader:
            assert list(reader) == [b"one\n", b"two\n", b"three\n"]
        assert stream.completed() == 1
        assert reader.closed

    def test_works_with_copyfileobj(self):
        data = bytes(range(256)) * 40
        stream = StreamCounter("copy", len(data))
        out = io.BytesIO()
        shutil.copyfileobj(stream.reader(io.BytesIO(data)), out, 1000)

        assert out.getvalue() == data
        assert stream.transferred == len(data)
        assert stream.completed() == 1
