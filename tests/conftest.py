from __future__ import annotations

import struct

import pytest

from nbt_fixtures import compound, named, nbt_string


@pytest.fixture
def level_chunk() -> bytes:
    level = compound(
        named(4, 'LastUpdate', struct.pack('>q', 137577)),
        named(3, 'xPos', struct.pack('>i', 0)),
        named(3, 'zPos', struct.pack('>i', 0)),
        named(8, 'Status', nbt_string('full')),
    )
    return named(10, '', compound(named(10, 'Level', level)))
