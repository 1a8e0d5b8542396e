"""Typed, chainable navigation over decoded NBT trees.

Everything here is built on one capability, ``_resolve()``: hand back the
underlying Tag or raise the failure that stopped the chain. ``Tag`` resolves
to itself; ``TagResult`` resolves to the tag it wraps or re-raises the error
it captured. A lookup chain therefore reads::

    level = root.key('Level')
    z_pos = level.key('zPos').as_i32()
    name = root.key('Data').key('Player').key('Name').as_str()

``key()`` and ``index()`` never raise; they return a TagResult. The terminal
``as_*`` readers raise the first error met along the chain, or
WrongTypeError when the value has a different shape.
"""

from typing import Mapping

from .constants import TagType
from .errors import InvalidIndexError, MissingKeyError, NBTError, WrongTypeError


def _is_position(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class Taglike:
    """Accessors shared by Tag and TagResult."""

    __slots__ = ()

    def _resolve(self):
        raise NotImplementedError

    def _payload(self, tag_type: TagType, requested: str):
        tag = self._resolve()
        if tag.type != tag_type:
            raise WrongTypeError(requested)
        return tag.value

    def as_i8(self) -> int:
        return self._payload(TagType.BYTE, 'byte')

    def as_i16(self) -> int:
        return self._payload(TagType.SHORT, 'short')

    def as_i32(self) -> int:
        return self._payload(TagType.INT, 'int')

    def as_i64(self) -> int:
        return self._payload(TagType.LONG, 'long')

    def as_f32(self) -> float:
        return self._payload(TagType.FLOAT, 'float')

    def as_f64(self) -> float:
        return self._payload(TagType.DOUBLE, 'double')

    def as_bytes(self) -> bytes:
        return self._payload(TagType.BYTE_ARRAY, 'byte array')

    def as_str(self) -> str:
        return self._payload(TagType.STRING, 'string')

    def as_list(self) -> tuple:
        return self._payload(TagType.LIST, 'list')

    def as_map(self) -> Mapping:
        return self._payload(TagType.COMPOUND, 'compound')

    def as_int_array(self) -> tuple:
        return self._payload(TagType.INT_ARRAY, 'int array')

    def as_long_array(self) -> tuple:
        return self._payload(TagType.LONG_ARRAY, 'long array')

    def key(self, name: str) -> 'TagResult':
        """Look up ``name`` in a compound."""
        try:
            entries = self.as_map()
        except NBTError as exc:
            return TagResult.failure(exc)
        if not isinstance(name, str) or name not in entries:
            return TagResult.failure(MissingKeyError(name))
        return TagResult(entries[name])

    def index(self, position: int) -> 'TagResult':
        """Pick the element at ``position`` of a list. Negative positions are invalid."""
        try:
            items = self.as_list()
        except NBTError as exc:
            return TagResult.failure(exc)
        if not _is_position(position) or not 0 <= position < len(items):
            return TagResult.failure(InvalidIndexError(position))
        return TagResult(items[position])

    def __getitem__(self, item):
        if isinstance(item, str):
            return self.key(item).unwrap()
        return self.index(item).unwrap()


class TagResult(Taglike):
    """Outcome of one navigation step: a tag, or the error that stopped the chain."""

    __slots__ = ('_tag', '_error')

    def __init__(self, tag=None, error: NBTError = None):
        self._tag = tag
        self._error = error

    @classmethod
    def failure(cls, error: NBTError) -> 'TagResult':
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self._error is None

    @property
    def error(self):
        return self._error

    def _resolve(self):
        if self._error is not None:
            raise self._error
        return self._tag

    def key(self, name: str) -> 'TagResult':
        if self._error is not None:
            return self
        return super().key(name)

    def index(self, position: int) -> 'TagResult':
        if self._error is not None:
            return self
        return super().index(position)

    def unwrap(self):
        """Return the tag, or raise the captured error."""
        return self._resolve()

    def unwrap_or(self, default=None):
        if self._error is not None:
            return default
        return self._tag

    def __bool__(self) -> bool:
        return self.ok

    def __repr__(self) -> str:
        if self._error is not None:
            return f'TagResult(error={self._error!r})'
        return f'TagResult({self._tag!r})'
