"""Incremental Apple Data Compression (ADC) decoder.

ADC is a basic run length compression scheme: plain chunks carry literal
bytes, run chunks copy bytes from the already decoded output. The decoder
pulls chunks from a binary stream on demand and only keeps the last 64KiB of
output, so arbitrarily long streams can be decoded in bounded memory.

    >>> from io import BytesIO
    >>> d = ADCDecoder(BytesIO(b"\\x83\\xfe\\xed\\xfa\\xce\\x00\\x00\\x40\\x00\\x06"))
    >>> d.read().hex()
    'feedfacecececefeedface'
"""

import io
import logging
from typing import BinaryIO

from adc.adcexceptions import (
    ADCBufferTooSmall,
    ADCException,
    ADCInvalidOffset,
    ADCTruncatedInput,
)
from adc.chunk import ADCChunk, parse_chunk, read_exact
from adc.window import SlidingWindow

log = logging.getLogger(__name__)

WritableBuffer = bytearray | memoryview


class ADCDecoder(io.RawIOBase):
    """Decodes ADC data read from fp.

    The decoder is a read-only raw stream: `read`, `readall` and `readinto`
    behave like any other binary file, returning b"" (or 0) once the input is
    exhausted. Any decoding error is fatal for the instance.

    Not safe for concurrent use; the window and the active chunk are
    mutated on every call.
    """

    def __init__(self, fp: BinaryIO) -> None:
        super().__init__()
        self.fp = fp
        self.window: SlidingWindow | None = SlidingWindow()
        self.chunk: ADCChunk | None = None
        self.eof = False
        self.nproduced = 0
        self._error: ADCException | None = None

    def __repr__(self) -> str:
        return "<ADCDecoder produced=%d chunk=%r eof=%r>" % (
            self.nproduced,
            self.chunk,
            self.eof,
        )

    def readable(self) -> bool:
        return True

    def close(self) -> None:
        # fp belongs to the caller and is left open
        self.window = None
        self.chunk = None
        super().close()

    def readinto(self, buf: WritableBuffer) -> int:  # type: ignore[override]
        return self.produce(buf)

    def produce(self, buf: WritableBuffer) -> int:
        """Decodes up to len(buf) bytes into buf and returns the count.

        At most the remainder of a single chunk is produced per call. 0 is
        returned once the input has ended cleanly, and on every later call.
        """
        chunk = self._next_chunk()
        if chunk is None:
            return 0
        try:
            return self._produce(chunk, memoryview(buf).cast("B"))
        except ADCException as e:
            self._error = e
            raise

    def _check_usable(self) -> None:
        if self.closed:
            raise ValueError("I/O operation on closed decoder")
        if self._error is not None:
            raise ADCException(
                "Decoder is unusable after a previous error"
            ) from self._error

    def _next_chunk(self) -> ADCChunk | None:
        """Returns the active chunk, parsing a new one if needed.

        None means the input has ended cleanly.
        """
        self._check_usable()
        if self.eof:
            return None
        if self.chunk is None:
            try:
                self.chunk = parse_chunk(self.fp)
            except ADCException as e:
                self._error = e
                raise
            if self.chunk is None:
                log.debug("end of stream after %d bytes", self.nproduced)
                self.eof = True
        return self.chunk

    def _produce(self, chunk: ADCChunk, out: memoryview) -> int:
        assert self.window is not None  # for the type checker
        n = min(chunk.size, len(out))
        if not chunk.is_run:
            data = read_exact(self.fp, n)
            if len(data) < n:
                raise ADCTruncatedInput(
                    "Unexpected end of stream in plain chunk: "
                    "wanted %d bytes, got %d" % (n, len(data))
                )
            out[:n] = data
            self.window.extend(data)
        else:
            window = self.window
            offset = chunk.offset
            for i in range(n):
                b = window.get(offset)
                if b is None:
                    raise ADCInvalidOffset(
                        "Offset %d reaches before the start of output "
                        "(%d bytes produced)" % (offset, self.nproduced + i)
                    )
                out[i] = b
                # the next byte of the run may be the one just written
                window.append(b)

        chunk.size -= n
        if chunk.size == 0:
            self.chunk = None
        self.nproduced += n
        return n

    def readexact(self, buf: WritableBuffer) -> int:
        """Fills buf completely.

        Raises ADCBufferTooSmall if the stream ends before buf is full.
        """
        out = memoryview(buf).cast("B")
        pos = 0
        while pos < len(out):
            n = self.produce(out[pos:])
            if n == 0:
                raise ADCBufferTooSmall(
                    "Stream ended after %d of %d bytes" % (pos, len(out))
                )
            pos += n
        return pos

    def decompress_into(self, output: WritableBuffer) -> int:
        """Decodes the rest of the stream into output.

        Returns the number of bytes written. Raises ADCBufferTooSmall, before
        writing any of it, as soon as a chunk does not fit in what is left of
        output.
        """
        out = memoryview(output).cast("B")
        pos = 0
        while True:
            chunk = self._next_chunk()
            if chunk is None:
                return pos
            if pos + chunk.size > len(out):
                raise ADCBufferTooSmall(
                    "Output buffer too small: %d bytes, chunk of %d at %d"
                    % (len(out), chunk.size, pos)
                )
            pos += self.produce(out[pos:])


def adcdecode(data: bytes) -> bytes:
    """Decodes a complete ADC buffer."""
    fp = io.BytesIO(data)
    return ADCDecoder(fp).readall()
