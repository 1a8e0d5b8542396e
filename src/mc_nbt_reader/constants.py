"""Binary layout constants for NBT documents and region files."""

from enum import IntEnum


class TagType(IntEnum):
    END = 0
    BYTE = 1
    SHORT = 2
    INT = 3
    LONG = 4
    FLOAT = 5
    DOUBLE = 6
    BYTE_ARRAY = 7
    STRING = 8
    LIST = 9
    COMPOUND = 10
    INT_ARRAY = 11
    LONG_ARRAY = 12


TAG_NAMES = {
    TagType.END: 'TAG_End',
    TagType.BYTE: 'TAG_Byte',
    TagType.SHORT: 'TAG_Short',
    TagType.INT: 'TAG_Int',
    TagType.LONG: 'TAG_Long',
    TagType.FLOAT: 'TAG_Float',
    TagType.DOUBLE: 'TAG_Double',
    TagType.BYTE_ARRAY: 'TAG_Byte_Array',
    TagType.STRING: 'TAG_String',
    TagType.LIST: 'TAG_List',
    TagType.COMPOUND: 'TAG_Compound',
    TagType.INT_ARRAY: 'TAG_Int_Array',
    TagType.LONG_ARRAY: 'TAG_Long_Array',
}

# Fixed-width payloads: struct format per scalar tag type
SCALAR_FORMATS = {
    TagType.BYTE: '>b',
    TagType.SHORT: '>h',
    TagType.INT: '>i',
    TagType.LONG: '>q',
    TagType.FLOAT: '>f',
    TagType.DOUBLE: '>d',
}

SCALAR_TYPES = frozenset(SCALAR_FORMATS)
CONTAINER_TYPES = frozenset({TagType.LIST, TagType.COMPOUND})

GZIP_MAGIC = b'\x1f\x8b'

# Region (.mca) layout
CHUNKS_PER_SIDE = 32
CHUNK_COUNT = CHUNKS_PER_SIDE * CHUNKS_PER_SIDE
SECTOR_SIZE = 4096
REGION_HEADER_SIZE = 2 * 4 * CHUNK_COUNT
COMPRESSION_ZLIB = 2
