"""Chunk header parser for Apple Data Compression (ADC) streams.

Every chunk starts with a header byte whose two high bits select its type:

    1xxxxxxx                    plain: (x + 1) literal bytes follow
    01ssssss oooooooo oooooooo  three-byte run: (s + 4) bytes at offset o
    00ssssoo oooooooo           two-byte run: (s + 3) bytes at offset o

Offsets are back-distances, 0 being the byte written last.
"""

import logging
from enum import Enum
from struct import unpack
from typing import BinaryIO

from adc.adcexceptions import ADCTruncatedInput

log = logging.getLogger(__name__)

HEADER_FLAG_PLAIN = 0b10000000
HEADER_FLAG_THREE_BYTE = 0b01000000

PLAIN_SIZE_MASK = 0b01111111
RUN_SIZE_MASK = 0b00111111
TWO_BYTE_OFFSET_MASK = 0b00000011


class ChunkType(Enum):
    PLAIN = "Plain"
    TWO_BYTE_RUN = "TwoByteRun"
    THREE_BYTE_RUN = "ThreeByteRun"


class ADCChunk:
    """One decoded chunk header.

    `size` is the number of output bytes the chunk still owes; the decoder
    counts it down as bytes are produced. `offset` is only meaningful for
    run chunks.
    """

    def __init__(self, type: ChunkType, size: int, offset: int = 0) -> None:
        self.type = type
        self.size = size
        self.offset = offset

    def __repr__(self) -> str:
        return "<ADCChunk type=%s size=%d offset=%d>" % (
            self.type.value,
            self.size,
            self.offset,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ADCChunk):
            return NotImplemented
        return (self.type, self.size, self.offset) == (
            other.type,
            other.size,
            other.offset,
        )

    @property
    def is_run(self) -> bool:
        return self.type is not ChunkType.PLAIN


def read_exact(fp: BinaryIO, n: int) -> bytes:
    """Reads up to n bytes, retrying short reads until the source is exhausted.

    Fewer than n bytes are returned only when the stream has ended.
    """
    data = fp.read(n)
    if data is None:
        data = b""
    if len(data) == n:
        return data
    parts = [data]
    remaining = n - len(data)
    while remaining:
        x = fp.read(remaining)
        if not x:
            break
        parts.append(x)
        remaining -= len(x)
    return b"".join(parts)


def parse_chunk(fp: BinaryIO) -> ADCChunk | None:
    """Reads the next chunk header from fp.

    Returns None at a clean end of stream, that is when not even the first
    header byte is available. Raises ADCTruncatedInput if the stream ends in
    the middle of a two or three byte header.
    """
    x = read_exact(fp, 1)
    if not x:
        return None
    b = x[0]

    if b & HEADER_FLAG_PLAIN:
        chunk = ADCChunk(ChunkType.PLAIN, (b & PLAIN_SIZE_MASK) + 1)
    elif b & HEADER_FLAG_THREE_BYTE:
        x = read_exact(fp, 2)
        if len(x) < 2:
            raise ADCTruncatedInput(
                "Unexpected end of stream in three-byte chunk header %#04x" % b
            )
        (offset,) = unpack(">H", x)
        chunk = ADCChunk(ChunkType.THREE_BYTE_RUN, (b & RUN_SIZE_MASK) + 4, offset)
    else:
        x = read_exact(fp, 1)
        if not x:
            raise ADCTruncatedInput(
                "Unexpected end of stream in two-byte chunk header %#04x" % b
            )
        chunk = ADCChunk(
            ChunkType.TWO_BYTE_RUN,
            ((b & RUN_SIZE_MASK) >> 2) + 3,
            ((b & TWO_BYTE_OFFSET_MASK) << 8) | x[0],
        )

    log.debug("parse_chunk: header=%#04x, chunk=%r", b, chunk)
    return chunk
