""" Cursor types

A cursor uniquely identifies a node and its position in an ordered collection.
A cursor type converts cursor values to strings and back, so that they can travel through an API.
"""

from .base import CursorType, CursorT
from .simple import IntCursor, StrCursor, DateTimeCursor, UUIDCursor
from .opaque import OpaqueCursor
from .keyset import KeysetCursor
from .encode import encode_opaque_cursor, decode_opaque_cursor
