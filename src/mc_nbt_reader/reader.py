"""NBT (Named Binary Tag) decoder."""

import gzip
import io
import logging
import struct
import zlib
from typing import Optional, Tuple

from .constants import GZIP_MAGIC, SCALAR_FORMATS, TagType
from .errors import (
    BadEncodingError, DecompressionError, InvalidLengthError, TruncatedDataError,
    UnexpectedTagError,
)
from .tags import Tag

logger = logging.getLogger(__name__)

# Length prefixes come from untrusted input; never hand one to read() whole
READ_CHUNK_SIZE = 1 << 20


def _tag_type(tag_id: int) -> TagType:
    try:
        return TagType(tag_id)
    except ValueError:
        raise UnexpectedTagError(tag_id) from None


class NBTReader:
    """Read NBT binary data sequentially from bytes or a binary file object."""

    def __init__(self, source):
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(source)
        self.source = source

    def read(self, n: int) -> bytes:
        """Read exactly n bytes, in pieces of at most READ_CHUNK_SIZE."""
        if n <= READ_CHUNK_SIZE:
            data = self.source.read(n)
            if len(data) != n:
                raise TruncatedDataError(n, len(data))
            return data

        pieces = []
        received = 0
        while received < n:
            wanted = min(n - received, READ_CHUNK_SIZE)
            piece = self.source.read(wanted)
            pieces.append(piece)
            received += len(piece)
            if len(piece) != wanted:
                raise TruncatedDataError(n, received)
        return b''.join(pieces)

    def _unpack(self, fmt: str):
        return struct.unpack(fmt, self.read(struct.calcsize(fmt)))[0]

    def read_ubyte(self) -> int:
        return self._unpack('>B')

    def read_ushort(self) -> int:
        return self._unpack('>H')

    def read_int(self) -> int:
        return self._unpack('>i')

    def read_uint(self) -> int:
        return self._unpack('>I')

    def read_string(self) -> str:
        length = self.read_ushort()
        raw = self.read(length)
        try:
            return raw.decode('utf-8')
        except UnicodeDecodeError as exc:
            raise BadEncodingError(f'String is not valid UTF-8: {raw!r}') from exc

    def read_tag_type(self) -> TagType:
        return _tag_type(self.read_ubyte())

    def read_payload(self, tag_type: Optional[int] = None) -> Tag:
        """Decode one value; the type id is read from the stream unless given."""
        if tag_type is None:
            tag_type = self.read_tag_type()
        else:
            tag_type = _tag_type(tag_type)

        if tag_type in SCALAR_FORMATS:
            return Tag(tag_type, self._unpack(SCALAR_FORMATS[tag_type]))
        elif tag_type == TagType.END:
            return Tag(TagType.END)
        elif tag_type == TagType.BYTE_ARRAY:
            length = self.read_int()
            if length < 0:
                raise InvalidLengthError(length, 'byte array')
            return Tag(tag_type, self.read(length))
        elif tag_type == TagType.STRING:
            return Tag(tag_type, self.read_string())
        elif tag_type == TagType.LIST:
            list_type = self.read_tag_type()
            count = self.read_uint()
            if list_type == TagType.END and count:
                raise InvalidLengthError(count, 'TAG_End list')
            items = [self.read_payload(list_type) for _ in range(count)]
            return Tag(tag_type, items, element_type=list_type)
        elif tag_type == TagType.COMPOUND:
            entries = {}
            while True:
                child_type = self.read_tag_type()
                if child_type == TagType.END:
                    break
                child_name = self.read_string()
                entries[child_name] = self.read_payload(child_type)
            return Tag(tag_type, entries)
        elif tag_type == TagType.INT_ARRAY:
            return Tag(tag_type, self._read_words('I'))
        else:
            return Tag(tag_type, self._read_words('Q'))

    def _read_words(self, code: str) -> tuple:
        count = self.read_uint()
        fmt = f'>{count}{code}'
        return struct.unpack(fmt, self.read(struct.calcsize(fmt)))

    def read_root(self) -> Tuple[str, Tag]:
        root_type = self.read_tag_type()
        root_name = self.read_string()
        return root_name, self.read_payload(root_type)


def decode_root(source) -> Tuple[str, Tag]:
    """Decode a named root tag; returns ``(name, tag)``."""
    return NBTReader(source).read_root()


def decode_value(source, tag_type: Optional[int] = None) -> Tag:
    """Decode one unnamed value, reading its type id first unless ``tag_type`` is given."""
    return NBTReader(source).read_payload(tag_type)


def read_file(path) -> Tuple[str, Tag]:
    """Decode a standalone NBT file such as level.dat, gunzipping it when needed."""
    with open(path, 'rb') as f:
        compressed = f.read(2) == GZIP_MAGIC
    if compressed:
        logger.debug('%s: gzip compressed', path)
        try:
            with gzip.open(path, 'rb') as f:
                data = f.read()
        except (EOFError, gzip.BadGzipFile, zlib.error) as exc:
            raise DecompressionError(f'{path}: bad gzip stream: {exc}') from exc
        return decode_root(data)
    with open(path, 'rb') as f:
        return decode_root(f)
