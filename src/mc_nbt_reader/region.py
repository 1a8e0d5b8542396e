"""Region (.mca) files: up to 32x32 zlib-compressed NBT chunks behind a sector table.

Layout:
  bytes 0..4095     1024 location words, big-endian: sector offset in the
                    upper 3 bytes (0 = no chunk), sector count in the low byte
  bytes 4096..8191  1024 big-endian modification timestamps (0 = no chunk)
  chunk at offset   4-byte length L, 1-byte compression type, L-1 bytes of data

Slot index for chunk (x, z) is x + z*32.
"""

import logging
import struct
import zlib
from typing import Iterator, Optional, Tuple

from .constants import (
    CHUNK_COUNT, CHUNKS_PER_SIDE, COMPRESSION_ZLIB, REGION_HEADER_SIZE, SECTOR_SIZE,
)
from .errors import (
    ChunkNotFoundError, ChunkOutOfBoundsError, DecompressionError, InvalidLengthError,
    UnsupportedCompressionError,
)
from .reader import NBTReader, decode_root
from .tags import Tag

logger = logging.getLogger(__name__)


def _is_coordinate(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class RegionFile:
    """Chunk index of one region file.

    The header tables are read once here. Chunks are read lazily and never
    cached; ``load_chunk`` moves the read position of ``source``, so one
    instance must not be shared between threads without a lock.
    """

    def __init__(self, source):
        reader = NBTReader(source)
        self.source = reader.source
        self._owns_source = False

        header = reader.read(REGION_HEADER_SIZE)
        locations = struct.unpack(f'>{CHUNK_COUNT}I', header[:4 * CHUNK_COUNT])
        self.timestamps = struct.unpack(f'>{CHUNK_COUNT}I', header[4 * CHUNK_COUNT:])
        self.offsets = tuple((loc >> 8) * SECTOR_SIZE for loc in locations)
        self.sector_counts = tuple(loc & 0xFF for loc in locations)
        logger.debug('Region header read: %d chunks present',
                     sum(1 for offset in self.offsets if offset))

    @classmethod
    def open(cls, path) -> 'RegionFile':
        f = open(path, 'rb')
        try:
            region = cls(f)
        except BaseException:
            f.close()
            raise
        region._owns_source = True
        return region

    def close(self) -> None:
        if self._owns_source:
            self.source.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    @staticmethod
    def _slot(x: int, z: int) -> int:
        if not (_is_coordinate(x) and _is_coordinate(z)
                and 0 <= x < CHUNKS_PER_SIDE and 0 <= z < CHUNKS_PER_SIDE):
            raise ChunkOutOfBoundsError(x, z)
        return x + z * CHUNKS_PER_SIDE

    def chunk_offset(self, x: int, z: int) -> int:
        """Byte offset of the chunk from the start of the file; 0 when absent."""
        return self.offsets[self._slot(x, z)]

    def chunk_sectors(self, x: int, z: int) -> int:
        return self.sector_counts[self._slot(x, z)]

    def chunk_exists(self, x: int, z: int) -> bool:
        return self.offsets[self._slot(x, z)] != 0

    def chunk_timestamp(self, x: int, z: int) -> Optional[int]:
        """Unix time of the chunk's last modification, or None when not recorded."""
        timestamp = self.timestamps[self._slot(x, z)]
        return timestamp or None

    def iter_chunks(self) -> Iterator[Tuple[int, int]]:
        """Yield (x, z) of every present chunk in slot order."""
        for slot, offset in enumerate(self.offsets):
            if offset:
                z, x = divmod(slot, CHUNKS_PER_SIDE)
                yield x, z

    def load_chunk(self, x: int, z: int) -> Tag:
        """Read, inflate and decode the chunk at (x, z); the root name is dropped."""
        offset = self.chunk_offset(x, z)
        if offset == 0:
            raise ChunkNotFoundError(x, z)

        self.source.seek(offset)
        reader = NBTReader(self.source)
        length = reader.read_uint()
        if length < 1:
            raise InvalidLengthError(length, 'chunk')
        compression_type = reader.read_ubyte()
        if compression_type != COMPRESSION_ZLIB:
            raise UnsupportedCompressionError(compression_type)
        compressed = reader.read(length - 1)

        try:
            data = zlib.decompress(compressed)
        except zlib.error as exc:
            raise DecompressionError(f'Chunk ({x}, {z}) failed to decompress: {exc}') from exc
        logger.debug('Chunk (%d, %d): %d bytes at offset %d, %d bytes inflated',
                     x, z, len(compressed), offset, len(data))

        _, tag = decode_root(data)
        return tag
