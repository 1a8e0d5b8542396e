"""In-memory NBT values."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Optional

from .access import Taglike
from .constants import CONTAINER_TYPES, SCALAR_TYPES, TAG_NAMES, TagType


@dataclass(frozen=True)
class Tag(Taglike):
    """One node of a decoded tree.

    ``value`` depends on ``type``: an int for BYTE..LONG, a float for
    FLOAT/DOUBLE, bytes for BYTE_ARRAY, str for STRING, a tuple of Tag for
    LIST, a read-only mapping of name -> Tag for COMPOUND, a tuple of ints for
    INT_ARRAY/LONG_ARRAY and None for END. Lists also record the
    ``element_type`` shared by every element, even when empty.
    """

    type: TagType
    value: Any = None
    element_type: Optional[TagType] = None

    def __post_init__(self):
        object.__setattr__(self, 'type', TagType(self.type))
        if self.type == TagType.LIST:
            if self.element_type is None:
                raise ValueError('List tags need an element type')
            object.__setattr__(self, 'element_type', TagType(self.element_type))
            object.__setattr__(self, 'value', tuple(self.value))
            return
        if self.element_type is not None:
            raise ValueError(f'{self.type_name()} tags have no element type')
        if self.type == TagType.COMPOUND:
            object.__setattr__(self, 'value', MappingProxyType(dict(self.value)))

    def __hash__(self):
        value = self.value
        if self.type == TagType.COMPOUND:
            value = frozenset(value.items())
        return hash((self.type, value, self.element_type))

    def _resolve(self) -> 'Tag':
        return self

    def type_name(self) -> str:
        return TAG_NAMES[self.type]

    def is_type(self, tag_type: TagType) -> bool:
        return self.type == tag_type

    def is_scalar(self) -> bool:
        return self.type in SCALAR_TYPES

    def is_container(self) -> bool:
        return self.type in CONTAINER_TYPES


END = Tag(TagType.END)
