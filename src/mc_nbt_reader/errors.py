"""Exception hierarchy shared by the decoder, accessors and region reader."""


class NBTError(Exception):
    """Base class for every error raised by mc_nbt_reader."""


class NBTIOError(NBTError):
    """Reading the underlying byte source failed."""


class TruncatedDataError(NBTIOError, EOFError):
    """The byte source ended in the middle of a field."""

    def __init__(self, expected: int, received: int):
        super().__init__(f'Unexpected end of data: wanted {expected} bytes, got {received}')
        self.expected = expected
        self.received = received


class DecompressionError(NBTIOError):
    """A compressed chunk payload could not be inflated."""


class BadEncodingError(NBTError):
    """A string field is not valid UTF-8."""


class UnexpectedTagError(NBTError):
    def __init__(self, tag_id: int):
        super().__init__(f'Unknown NBT tag type: {tag_id}')
        self.tag_id = tag_id


class InvalidLengthError(NBTError):
    """A length prefix cannot describe a real payload."""

    def __init__(self, length: int, what: str):
        super().__init__(f'Invalid {what} length: {length}')
        self.length = length


class UnsupportedCompressionError(NBTError):
    def __init__(self, compression_type: int):
        super().__init__(f'Unsupported chunk compression type: {compression_type}')
        self.compression_type = compression_type


class WrongTypeError(NBTError, TypeError):
    """The tag does not have the shape the caller asked for."""

    def __init__(self, requested: str):
        super().__init__(f'Tag is not a {requested}')
        self.requested = requested


class MissingKeyError(NBTError, KeyError):
    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f'No such key: {self.key!r}'


class InvalidIndexError(NBTError, IndexError):
    def __init__(self, index, message: str = None):
        super().__init__(message or f'Index out of range: {index}')
        self.index = index


class ChunkOutOfBoundsError(InvalidIndexError):
    """Chunk coordinates outside the 32x32 grid of a region."""

    def __init__(self, x: int, z: int):
        super().__init__((x, z), f'Chunk coordinates out of range: ({x}, {z})')
        self.x = x
        self.z = z


class ChunkNotFoundError(NBTError):
    """The region has no chunk stored at the requested slot."""

    def __init__(self, x: int, z: int):
        super().__init__(f'No chunk stored at ({x}, {z})')
        self.x = x
        self.z = z
