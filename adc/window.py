"""Bounded history of decoded bytes used to resolve ADC back-references."""

WINDOW_SIZE = 65536  # one more than the largest encodable offset


class SlidingWindow:
    """Fixed-capacity ring buffer addressed by back-distance.

    The byte extended last lives at distance 0. Once more than `capacity`
    bytes have been extended, the oldest ones are dropped.
    """

    def __init__(self, capacity: int = WINDOW_SIZE) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive: %r" % capacity)
        self.capacity = capacity
        self._buf = bytearray(capacity)
        self._pos = 0  # index of the next write
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return "<SlidingWindow %d/%d>" % (self._count, self.capacity)

    def extend(self, data: bytes) -> None:
        n = len(data)
        if not n:
            return
        if n >= self.capacity:
            # only the trailing bytes can ever be referenced again
            self._buf[:] = data[n - self.capacity :]
            self._pos = 0
            self._count = self.capacity
            return
        end = self._pos + n
        if end <= self.capacity:
            self._buf[self._pos : end] = data
        else:
            split = self.capacity - self._pos
            self._buf[self._pos :] = data[:split]
            self._buf[: n - split] = data[split:]
        self._pos = end % self.capacity
        self._count = min(self._count + n, self.capacity)

    def append(self, b: int) -> None:
        self._buf[self._pos] = b
        self._pos = (self._pos + 1) % self.capacity
        if self._count < self.capacity:
            self._count += 1

    def get(self, offset: int) -> int | None:
        """Returns the byte at back-distance offset, or None if not held."""
        if offset < 0 or self._count <= offset:
            return None
        return self._buf[(self._pos - 1 - offset) % self.capacity]
