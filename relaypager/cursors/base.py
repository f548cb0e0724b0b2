from __future__ import annotations

from typing import Generic, TypeVar

from relaypager import exc


# A cursor value type: int, str, tuple, ...
CursorT = TypeVar('CursorT')


class CursorType(Generic[CursorT]):
    """ Cursor type: converts cursor values to text and back

    Implementations must obey the round-trip law: `parse(to_text(c)) == c`.
    """
    __slots__ = ()

    def to_text(self, value: CursorT) -> str:
        """ Convert a cursor value into a string """
        raise NotImplementedError

    def parse(self, text: str) -> CursorT:
        """ Parse a cursor string into a cursor value, or fail

        Raises:
            exc.CursorFormatError
        """
        if not isinstance(text, str):
            raise exc.CursorFormatError(text, f'cursor must be a string, got {type(text).__name__}')

        try:
            return self.parse_value(text)
        except exc.CursorFormatError:
            raise
        except (ValueError, TypeError, KeyError) as e:
            raise exc.CursorFormatError(text, str(e) or e.__class__.__name__) from e

    def parse_value(self, text: str) -> CursorT:
        """ Parse a cursor string. Raise any ValueError on failure """
        raise NotImplementedError

    def __repr__(self):
        return f'{self.__class__.__name__}()'
