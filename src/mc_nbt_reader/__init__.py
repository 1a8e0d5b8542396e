"""Reader for NBT documents and the region files that store them."""

from .access import TagResult, Taglike
from .constants import TAG_NAMES, TagType
from .dump import format_tree, pretty_print
from .errors import (
    BadEncodingError, ChunkNotFoundError, ChunkOutOfBoundsError, DecompressionError,
    InvalidIndexError, InvalidLengthError, MissingKeyError, NBTError, NBTIOError,
    TruncatedDataError, UnexpectedTagError, UnsupportedCompressionError, WrongTypeError,
)
from .reader import NBTReader, decode_root, decode_value, read_file
from .region import RegionFile
from .tags import Tag

__version__ = '0.1.0'
