import pytest

from adc.window import WINDOW_SIZE, SlidingWindow


class TestSlidingWindow:
    def test_empty(self):
        window = SlidingWindow()
        assert len(window) == 0
        assert window.capacity == WINDOW_SIZE == 65536
        assert window.get(0) is None

    def test_get_by_back_distance(self):
        window = SlidingWindow()
        window.extend(b"abc")
        assert window.get(0) == ord("c")
        assert window.get(1) == ord("b")
        assert window.get(2) == ord("a")
        assert window.get(3) is None
        assert len(window) == 3

    def test_negative_offset(self):
        window = SlidingWindow()
        window.extend(b"abc")
        assert window.get(-1) is None

    def test_append(self):
        window = SlidingWindow()
        window.extend(b"ab")
        window.append(ord("c"))
        assert window.get(0) == ord("c")
        assert window.get(2) == ord("a")

    def test_extend_wraps_around(self):
        window = SlidingWindow(8)
        window.extend(b"012345")
        window.extend(b"6789")
        assert len(window) == 8
        assert bytes(window.get(i) for i in reversed(range(8))) == b"23456789"
        assert window.get(8) is None

    def test_append_evicts_oldest(self):
        window = SlidingWindow(4)
        for c in b"abcdef":
            window.append(c)
        assert len(window) == 4
        assert window.get(3) == ord("c")
        assert window.get(4) is None

    def test_extend_larger_than_capacity(self):
        window = SlidingWindow(4)
        window.extend(b"xy")
        window.extend(b"abcdefgh")
        assert len(window) == 4
        assert bytes(window.get(i) for i in reversed(range(4))) == b"efgh"
        window.extend(b"i")
        assert window.get(0) == ord("i")
        assert window.get(3) == ord("f")

    def test_extend_empty(self):
        window = SlidingWindow(4)
        window.extend(b"")
        assert len(window) == 0

    def test_extend_memoryview(self):
        window = SlidingWindow(4)
        window.extend(memoryview(b"abcdef")[1:4])
        assert bytes(window.get(i) for i in reversed(range(3))) == b"bcd"

    def test_full_capacity_lookup(self):
        window = SlidingWindow()
        window.extend(bytes(range(256)) * 300)
        assert len(window) == WINDOW_SIZE
        assert window.get(WINDOW_SIZE - 1) == (256 * 300 - WINDOW_SIZE) % 256
        assert window.get(WINDOW_SIZE) is None

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            SlidingWindow(0)
