from __future__ import annotations

from .base import CursorType
from .encode import encode_opaque_cursor, decode_opaque_cursor


class KeysetCursor(CursorType[tuple]):
    """ Keyset cursor: a composite key, e.g. (created_at, id)

    Every component has its own cursor type. The whole tuple is encoded as an opaque cursor.
    The final component should be unique, otherwise rows sharing a key would be lost between pages.

    Example:
        KeysetCursor(DateTimeCursor(), IntCursor())
    """
    __slots__ = 'types',

    # Cursor prefix
    prefix = 'keys'

    def __init__(self, *types: CursorType):
        assert types, 'KeysetCursor needs at least one component'
        self.types = types

    def to_text(self, value: tuple) -> str:
        assert len(value) == len(self.types), f'Expected a {len(self.types)}-tuple, got {value!r}'
        return encode_opaque_cursor(self.prefix, [
            type.to_text(component)
            for type, component in zip(self.types, value)
        ])

    def parse_value(self, text: str) -> tuple:
        data = decode_opaque_cursor(self.prefix, text)

        # Check the shape
        if not isinstance(data, list) or not all(isinstance(component, str) for component in data):
            raise ValueError('cursor data must be a list of strings')
        if len(data) != len(self.types):
            raise ValueError(f'expected {len(self.types)} cursor components, got {len(data)}')

        return tuple(
            type.parse_value(component)
            for type, component in zip(self.types, data)
        )

    def __repr__(self):
        return f'{self.__class__.__name__}({", ".join(map(repr, self.types))})'
