from __future__ import annotations

import errno
import io

import pytest

from extract_spewer.spewer.tagged import TaggedWriter


class _FailingSink(io.RawIOBase):
    """Binary sink whose writes fail as a full disk would."""

    def __init__(self) -> None:
        super().__init__()
        self.error = OSError(errno.ENOSPC, "No space left on device")

    def writable(self) -> bool:
        return True

    def write(self, data) -> int:
        raise self.error


def test_writes_pass_through_to_sink() -> None:
    raw = io.BytesIO()
    tagged = TaggedWriter(raw)

    assert tagged.write(b"hello ") == 6
    tagged.write(b"world")
    tagged.flush()

    assert raw.getvalue() == b"hello world"


def test_sink_error_is_reraised_and_tagged() -> None:
    sink = _FailingSink()
    tagged = TaggedWriter(sink)

    with pytest.raises(OSError) as excinfo:
        tagged.write(b"data")

    assert excinfo.value is sink.error
    assert tagged.is_cause_of(excinfo.value)


def test_equal_but_distinct_error_is_not_attributed() -> None:
    sink = _FailingSink()
    tagged = TaggedWriter(sink)

    with pytest.raises(OSError):
        tagged.write(b"data")

    lookalike = OSError(errno.ENOSPC, "No space left on device")
    assert not tagged.is_cause_of(lookalike)


def test_error_from_another_writer_is_not_attributed() -> None:
    first = TaggedWriter(_FailingSink())
    second = TaggedWriter(io.BytesIO())

    with pytest.raises(OSError) as excinfo:
        first.write(b"data")

    assert first.is_cause_of(excinfo.value)
    assert not second.is_cause_of(excinfo.value)


def test_nothing_is_attributed_before_a_failure() -> None:
    tagged = TaggedWriter(io.BytesIO())
    tagged.write(b"data")

    assert not tagged.is_cause_of(OSError("stream reset"))


def test_context_manager_closes_sink() -> None:
    raw = io.BytesIO()

    with TaggedWriter(raw) as tagged:
        tagged.write(b"data")
        assert not tagged.closed

    assert raw.closed
    assert tagged.closed


def test_close_failure_is_tagged() -> None:
    error = OSError(errno.EIO, "Input/output error")

    class _BadClose:
        closed = False

        def close(self) -> None:
            raise error

    tagged = TaggedWriter(_BadClose())

    with pytest.raises(OSError):
        tagged.close()

    assert tagged.is_cause_of(error)
