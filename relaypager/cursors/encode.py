from __future__ import annotations

import base64
import binascii
import json


def encode_opaque_cursor(prefix: str, data) -> str:
    """ Encode jsonable data as an opaque cursor. Give it a nice prefix so that the user sees what's up """
    return prefix + ':' + base64.b85encode(json.dumps(data).encode()).decode()


def decode_opaque_cursor(prefix: str, cursor: str):
    """ Decode an opaque cursor with the given prefix and return its data

    Raises:
        ValueError: all sorts of errors related to a bad cursor
    """
    cursor_prefix, data_encoded = cursor.split(':', 1) if ':' in cursor else (None, cursor)
    if cursor_prefix != prefix:
        raise ValueError(f'expected a cursor with the "{prefix}:" prefix')

    try:
        return json.loads(base64.b85decode(data_encoded))
    except (binascii.Error, UnicodeDecodeError) as e:  # json.JSONDecodeError is a ValueError already
        raise ValueError(f'cannot decode cursor data: {e}') from e
    except RecursionError as e:  # deeply nested JSON
        raise ValueError('cursor data is nested too deeply') from e
