"""Human-readable rendering of decoded NBT trees."""

import sys
from typing import List, Optional

from .constants import TAG_NAMES, TagType
from .tags import Tag

INDENT = '    '


def format_tree(tag: Tag, name: Optional[str] = None, indent: int = 0) -> List[str]:
    """Render ``tag`` and its children as lines of text.

    Compounds and lists open a brace block with children indented one
    level; arrays show their length only.
    """
    pad = INDENT * indent
    label = tag.type_name() + (f'("{name}")' if name is not None else '')

    if tag.type == TagType.COMPOUND:
        lines = [f'{pad}{label} : {len(tag.value)} entries', f'{pad}{{']
        for child_name, child in tag.value.items():
            lines.extend(format_tree(child, child_name, indent + 1))
        lines.append(f'{pad}}}')
        return lines
    if tag.type == TagType.LIST:
        element = TAG_NAMES[tag.element_type]
        lines = [f'{pad}{label} : {len(tag.value)} entries of type {element}', f'{pad}{{']
        for child in tag.value:
            lines.extend(format_tree(child, None, indent + 1))
        lines.append(f'{pad}}}')
        return lines
    if tag.type in (TagType.BYTE_ARRAY, TagType.INT_ARRAY, TagType.LONG_ARRAY):
        return [f'{pad}{label} : Length of {len(tag.value)}']
    if tag.type == TagType.END:
        return [f'{pad}{label}']
    return [f'{pad}{label} : {tag.value}']


def pretty_print(tag: Tag, name: Optional[str] = None, file=None) -> None:
    out = file if file is not None else sys.stdout
    for line in format_tree(tag, name):
        print(line, file=out)
