"""CLI entry point: python -m mc_nbt_reader {dump,region} ..."""

import argparse
import datetime
import logging
import sys

from .dump import pretty_print
from .errors import NBTError
from .reader import read_file
from .region import RegionFile

logger = logging.getLogger('mc_nbt_reader')


def _dump_files(paths) -> bool:
    ok = True
    for path in paths:
        print(f'Dumping... {path}')
        try:
            name, tag = read_file(path)
        except (NBTError, OSError) as e:
            print(f'{path}: {e}', file=sys.stderr)
            ok = False
            continue
        pretty_print(tag, name)
    return ok


def _list_chunks(region: RegionFile) -> None:
    count = 0
    for x, z in region.iter_chunks():
        count += 1
        timestamp = region.chunk_timestamp(x, z)
        when = datetime.datetime.fromtimestamp(timestamp, datetime.timezone.utc).isoformat() if timestamp else '-'
        print(f'({x:2}, {z:2})  offset={region.chunk_offset(x, z)}  '
              f'sectors={region.chunk_sectors(x, z)}  modified={when}')
    print(f'{count} chunks')


def _region(path: str, chunk) -> bool:
    try:
        with RegionFile.open(path) as region:
            if chunk is None:
                _list_chunks(region)
            else:
                x, z = chunk
                pretty_print(region.load_chunk(x, z), f'{x},{z}')
    except (NBTError, OSError) as e:
        print(f'{path}: {e}', file=sys.stderr)
        return False
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='mc-nbt-dump',
        description='Dump NBT files and region file chunks.',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    commands = parser.add_subparsers(dest='command', required=True)

    dump = commands.add_parser('dump', help='dump standalone NBT files (gzip or raw)')
    dump.add_argument('files', nargs='+')

    region = commands.add_parser('region', help='list chunks of a region file or dump one')
    region.add_argument('file')
    region.add_argument('--chunk', nargs=2, type=int, metavar=('X', 'Z'))
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    logger.debug('Arguments: %s', args)

    if args.command == 'dump':
        ok = _dump_files(args.files)
    else:
        ok = _region(args.file, args.chunk)
    return 0 if ok else 1


if __name__ == '__main__':
    sys.exit(main())
