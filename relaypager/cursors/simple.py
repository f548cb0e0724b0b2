""" Cursor types for plain values """

from __future__ import annotations

import uuid
from datetime import datetime

from .base import CursorType


class IntCursor(CursorType[int]):
    """ Integer cursor: a row id, a sequence number, etc """
    __slots__ = ()

    def to_text(self, value: int) -> str:
        return str(value)

    def parse_value(self, text: str) -> int:
        # int() is too forgiving: it accepts " 42", "4_2", "+42"
        if not text.lstrip('-').isdigit() or not text.isascii():
            raise ValueError(f'invalid integer cursor: {text!r}')
        return int(text)


class StrCursor(CursorType[str]):
    """ String cursor: any text key """
    __slots__ = ()

    def to_text(self, value: str) -> str:
        return value

    def parse_value(self, text: str) -> str:
        return text


class DateTimeCursor(CursorType[datetime]):
    """ Timestamp cursor, in ISO 8601 format """
    __slots__ = ()

    def to_text(self, value: datetime) -> str:
        return value.isoformat()

    def parse_value(self, text: str) -> datetime:
        return datetime.fromisoformat(text)


class UUIDCursor(CursorType[uuid.UUID]):
    """ UUID cursor """
    __slots__ = ()

    def to_text(self, value: uuid.UUID) -> str:
        return str(value)

    def parse_value(self, text: str) -> uuid.UUID:
        value = uuid.UUID(text)

        # UUID() accepts braces, urn: prefixes, upper case. Only accept the canonical form.
        if str(value) != text:
            raise ValueError('badly formed hexadecimal UUID string')
        return value
