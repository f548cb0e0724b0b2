from typing import Any


class BaseRelayPagerException(AssertionError):  # `AssertionError`, same as other query errors in GraphQL resolvers
    pass


class InvalidArgumentError(BaseRelayPagerException, ValueError):
    """ Invalid pagination argument provided by the User

    Reported when `first` or `last` is negative or not an integer.
    The loader is never called.
    """

    def __init__(self, argument_name: str, err: str):
        self.argument_name = argument_name
        super().__init__(f'Invalid `{argument_name}`: {err}')


class CursorFormatError(BaseRelayPagerException, ValueError):
    """ The cursor string could not be parsed

    Reported when `after` or `before` is not a valid cursor for the node's cursor type.
    The loader is never called.
    """

    def __init__(self, cursor: Any, error: str):
        self.cursor = cursor
        self.error = error
        super().__init__(f'Invalid cursor {cursor!r}: {error}')


class ConversionOverflowError(BaseRelayPagerException, OverflowError):
    """ A count does not fit the integer range used for pagination

    Reported instead of silently wrapping the value
    """

    def __init__(self, what: str, value: int, bits: int):
        self.what = what
        self.value = value
        self.bits = bits
        super().__init__(f'{what} does not fit a signed {bits}-bit integer: {value}')


class LoaderFailure(BaseRelayPagerException):
    """ Failure reported by a loader

    Raise it from your loader function when you want a typed error.
    Pagination never catches it: it reaches the caller as it is, like any other error your loader raises.
    """
