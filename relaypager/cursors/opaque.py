from __future__ import annotations

from typing import TypeVar

from .base import CursorType
from .encode import encode_opaque_cursor, decode_opaque_cursor


T = TypeVar('T')


class OpaqueCursor(CursorType[T]):
    """ Opaque cursor: hides the cursor value from the client

    Wraps another cursor type and encodes its text as "<prefix>:<base85 data>".

    Example:
        OpaqueCursor(IntCursor(), 'user')
        # 42 -> 'user:<base85 data>'
    """
    __slots__ = 'inner', 'prefix'

    def __init__(self, inner: CursorType[T], prefix: str = 'c'):
        assert ':' not in prefix, 'Cursor prefix must not contain ":"'
        self.inner = inner
        self.prefix = prefix

    def to_text(self, value: T) -> str:
        return encode_opaque_cursor(self.prefix, self.inner.to_text(value))

    def parse_value(self, text: str) -> T:
        data = decode_opaque_cursor(self.prefix, text)
        if not isinstance(data, str):
            raise ValueError('cursor data must be a string')
        return self.inner.parse_value(data)

    def __repr__(self):
        return f'{self.__class__.__name__}({self.inner!r}, {self.prefix!r})'
