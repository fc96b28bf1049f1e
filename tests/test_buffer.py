import pytest

from morphlattice.buffer import BufferOverflowError, OutputBuffer


def test_unbounded_write_and_chaining():
    buf = OutputBuffer()
    result = buf.write("abc").write("\t").write(12).write(True)
    assert result is buf
    assert buf.getvalue() == "abc\t121"
    assert len(buf) == len(buf.getvalue())


def test_float_matches_str():
    buf = OutputBuffer()
    buf.write(0.25)
    assert buf.getvalue() == str(0.25)


def test_clear():
    buf = OutputBuffer()
    buf.write("hello")
    buf.clear()
    assert buf.getvalue() == ""
    assert len(buf) == 0
    buf.write("x")
    assert buf.getvalue() == "x"


def test_unbounded_grows_without_limit():
    buf = OutputBuffer()
    text = "a" * 100000
    buf.write(text)
    assert buf.getvalue() == text


def test_bounded_fits_below_limit():
    buf = OutputBuffer(limit=5)
    buf.write("abcd")
    assert buf.getvalue() == "abcd"
    assert buf.failed is False


def test_bounded_overflow_at_limit():
    buf = OutputBuffer(limit=5)
    buf.write("abcde")
    assert buf.failed is True
    with pytest.raises(BufferOverflowError, match="output buffer overflow"):
        buf.getvalue()


def test_overflowing_write_is_dropped_then_recovered():
    buf = OutputBuffer(limit=5)
    buf.write("ab").write("cdef")
    assert buf.failed is True
    buf.write("c")
    assert buf.failed is False
    assert buf.getvalue() == "abc"


def test_clear_keeps_failure_state():
    buf = OutputBuffer(limit=3)
    buf.write("long text")
    buf.clear()
    with pytest.raises(BufferOverflowError):
        buf.getvalue()
    buf.write("ok")
    assert buf.getvalue() == "ok"