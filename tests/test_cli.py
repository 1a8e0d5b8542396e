"""Command line runs of ``python -m mc_nbt_reader``."""

from __future__ import annotations

import gzip
import struct

import pytest

from mc_nbt_reader.__main__ import build_parser, main
from nbt_fixtures import build_region, compound, named, nbt_string


def test_dump_gzip_file(tmp_path, capsys) -> None:
    path = tmp_path / 'level.dat'
    path.write_bytes(gzip.compress(named(10, '', compound(named(3, 'Version', struct.pack('>i', 2))))))

    assert main(['dump', str(path)]) == 0

    out = capsys.readouterr().out
    assert f'Dumping... {path}' in out
    assert 'TAG_Int("Version") : 2' in out


def test_dump_reports_broken_file(tmp_path, capsys) -> None:
    good = tmp_path / 'good.nbt'
    good.write_bytes(named(8, 'greeting', nbt_string('hi')))
    bad = tmp_path / 'bad.nbt'
    bad.write_bytes(b'\x63')

    assert main(['dump', str(bad), str(good)]) == 1

    captured = capsys.readouterr()
    assert 'Unknown NBT tag type: 99' in captured.err
    assert 'TAG_String("greeting") : hi' in captured.out


def test_dump_reports_truncated_gzip(tmp_path, capsys) -> None:
    path = tmp_path / 'level.dat'
    path.write_bytes(gzip.compress(named(10, '', compound(named(3, 'Version', struct.pack('>i', 2)))))[:-12])

    assert main(['dump', str(path)]) == 1

    assert 'bad gzip stream' in capsys.readouterr().err


def test_region_listing(tmp_path, capsys, level_chunk: bytes) -> None:
    path = tmp_path / 'r.0.0.mca'
    path.write_bytes(build_region({(1, 2): level_chunk}, timestamps={(1, 2): 86400}))

    assert main(['region', str(path)]) == 0

    out = capsys.readouterr().out
    assert '( 1,  2)  offset=8192  sectors=1  modified=1970-01-02T00:00:00+00:00' in out
    assert '1 chunks' in out


def test_region_chunk_dump(tmp_path, capsys, level_chunk: bytes) -> None:
    path = tmp_path / 'r.0.0.mca'
    path.write_bytes(build_region({(1, 2): level_chunk}))

    assert main(['region', str(path), '--chunk', '1', '2']) == 0

    out = capsys.readouterr().out
    assert out.startswith('TAG_Compound("1,2") : 1 entries')
    assert '        TAG_Long("LastUpdate") : 137577' in out


def test_region_missing_chunk(tmp_path, capsys) -> None:
    path = tmp_path / 'r.0.0.mca'
    path.write_bytes(build_region({}))

    assert main(['region', str(path), '--chunk', '3', '4']) == 1
    assert 'No chunk stored at (3, 4)' in capsys.readouterr().err


def test_command_is_required() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
