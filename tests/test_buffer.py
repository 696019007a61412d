import pytest

from echoctl.buffer import Buffer, OutOfBoundaryError


def test_default_capacity():
    buf = Buffer()
    assert buf.capacity() == 16
    assert len(buf) == 0


def test_capacity_rounded_to_multiple_of_four():
    for size in range(0, 20):
        cap = Buffer(capacity=size).capacity()
        assert cap % 4 == 0
        assert cap > size


def test_construct_from_bytes():
    buf = Buffer(b"hello")
    assert bytes(buf) == b"hello"
    assert len(buf) == 5
    assert buf.capacity() >= 5


def test_push_back_round_trip():
    buf = Buffer()
    payload = bytes(range(100))
    buf.push_back(payload[:1][0])
    buf.push_back(payload[1:])
    assert bytes(buf) == payload
    assert buf.capacity() >= len(buf)


def test_front_back_and_index():
    buf = Buffer(b"abcd")
    assert buf.front() == ord("a")
    assert buf.back() == ord("d")
    assert buf[1] == ord("b")
    assert buf[-1] == ord("d")
    assert buf[1:3] == b"bc"


def test_setitem():
    buf = Buffer(b"abc")
    buf[1] = ord("x")
    assert bytes(buf) == b"axc"


def test_index_out_of_range():
    buf = Buffer(b"ab")
    with pytest.raises(OutOfBoundaryError):
        buf[2]
    with pytest.raises(IndexError):
        buf[-3]
    assert buf[1] == ord("b")
    assert bytes(buf) == b"ab"


def test_empty_access_raises():
    buf = Buffer()
    for op in (buf.front, buf.back, buf.pop_front, buf.pop_back):
        with pytest.raises(OutOfBoundaryError):
            op()


def test_pop_single():
    buf = Buffer(b"xyz")
    assert buf.pop_front() == ord("x")
    assert buf.pop_back() == ord("z")
    assert bytes(buf) == b"y"
    assert buf.pop_front() == ord("y")
    assert len(buf) == 0


def test_pop_many():
    buf = Buffer(b"0123456789")
    assert buf.pop_front(3) == b"012"
    assert buf.pop_back(2) == b"89"
    assert bytes(buf) == b"34567"
    assert buf.pop_front(5) == b"34567"
    assert len(buf) == 0


def test_pop_too_many():
    buf = Buffer(b"ab")
    with pytest.raises(OutOfBoundaryError):
        buf.pop_front(3)
    with pytest.raises(OutOfBoundaryError):
        buf.pop_back(3)
    assert bytes(buf) == b"ab"


def test_queue_use_keeps_order():
    buf = Buffer()
    expected = bytearray()
    for i in range(50):
        chunk = bytes([i % 256] * (i % 7 + 1))
        buf.push_back(chunk)
        expected += chunk
        if i % 3 == 0:
            removed = buf.pop_front(min(4, len(buf)))
            assert removed == bytes(expected[: len(removed)])
            del expected[: len(removed)]
    assert bytes(buf) == bytes(expected)


def test_resize_grow_and_shrink():
    buf = Buffer(b"abc")
    buf.resize(6)
    assert bytes(buf) == b"abc\x00\x00\x00"
    buf.resize(2)
    assert bytes(buf) == b"ab"


def test_recapacity_truncates():
    buf = Buffer(b"abcdefgh")
    buf.pop_front(2)
    buf.recapacity(3)
    assert bytes(buf) == b"cde"
    assert buf.capacity() % 4 == 0


def test_recapacity_ignores_tiny_sizes():
    buf = Buffer(b"abc")
    cap = buf.capacity()
    buf.recapacity(1)
    assert buf.capacity() == cap
    assert bytes(buf) == b"abc"


def test_reserve_guarantees_room():
    buf = Buffer(b"abcdef")
    buf.pop_front(4)
    buf.reserve(30)
    assert bytes(buf) == b"ef"
    assert buf.capacity() - len(buf) >= 30


def test_swap():
    a = Buffer(b"first")
    b = Buffer(b"second!")
    a.swap(b)
    assert bytes(a) == b"second!"
    assert bytes(b) == b"first"


def test_clear():
    buf = Buffer(b"data")
    buf.clear()
    assert len(buf) == 0
    assert bytes(buf) == b""


def test_push_invalid_byte():
    with pytest.raises(ValueError):
        Buffer().push_back(300)