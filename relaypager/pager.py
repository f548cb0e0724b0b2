""" Relay pagination: the pagination window builder

To return a connection from your resolver, call `relay_connection()` and provide a function to load the nodes.

Example:
    relay_connection(User, load_users, first=10, after='42')

    def load_users(after: Optional[int], before: Optional[int], limit: Optional[int]) -> list[User]:
        # SELECT ... FROM users WHERE id > :after AND id < :before ORDER BY id LIMIT :limit
        ...

The loader must return nodes sorted by cursor, strictly between `after` and `before`.
The `limit` argument is purely an optimization: ignoring it costs performance, never correctness.
"""

from __future__ import annotations

import logging
from collections import abc
from typing import Any, Optional, NamedTuple, TypeVar

from relaypager import exc
from .connection import Connection, Edge, PageInfo
from .node import RelayConnectionNode
from .settings import PagerSettings

logger = logging.getLogger(__name__)


NodeT = TypeVar('NodeT', bound=RelayConnectionNode)

# Loader function: (after, before, limit) -> nodes
Loader = abc.Callable[[Any, Any, Optional[int]], abc.Iterable[NodeT]]
AsyncLoader = abc.Callable[[Any, Any, Optional[int]], abc.Awaitable[abc.Iterable[NodeT]]]

# Integer ranges for pagination arithmetic.
# Arguments come from GraphQL `Int`: 32 bits; counts are 64 bits.
ARGUMENT_BITS = 32
COUNT_BITS = 64


class LoaderArguments(NamedTuple):
    """ Arguments for the loader function """
    # Parsed cursor: load nodes strictly after it
    after: Any

    # Parsed cursor: load nodes strictly before it
    before: Any

    # Load at most this many nodes. Advisory.
    limit: Optional[int]


def relay_connection(Node: type[NodeT], load: Loader, *,
                     first: Optional[int] = None, after: Optional[str] = None,
                     last: Optional[int] = None, before: Optional[str] = None,
                     settings: Optional[PagerSettings] = None,
                     ) -> Connection[NodeT]:
    """ Build a Relay paginated list of nodes

    Args:
        Node: the node class. Provides the cursor type.
        load: function (after, before, limit) that loads the nodes from some backing store.
            It corresponds to: SELECT ... FROM table WHERE cursor > $after AND cursor < $before ORDER BY cursor LIMIT $limit
        first, after, last, before: Relay pagination arguments
        settings: default and max page sizes

    Raises:
        exc.InvalidArgumentError: negative `first` or `last`
        exc.CursorFormatError: invalid `after` or `before`
        exc.ConversionOverflowError: a value too large to paginate with
        Exception: whatever the loader raises, as it is
    """
    first, last = validate_arguments(first, last, settings)
    args = loader_arguments(Node, first, after, before)
    logger.debug(f'Loading {Node.__name__} nodes: after={args.after!r} before={args.before!r} limit={args.limit!r}')
    nodes = load(*args)
    return build_connection(first, last, nodes)


async def relay_connection_async(Node: type[NodeT], load: AsyncLoader, *,
                                 first: Optional[int] = None, after: Optional[str] = None,
                                 last: Optional[int] = None, before: Optional[str] = None,
                                 settings: Optional[PagerSettings] = None,
                                 ) -> Connection[NodeT]:
    """ The same as `relay_connection()`, but with an async loader """
    first, last = validate_arguments(first, last, settings)
    args = loader_arguments(Node, first, after, before)
    logger.debug(f'Loading {Node.__name__} nodes: after={args.after!r} before={args.before!r} limit={args.limit!r}')
    nodes = await load(*args)
    return build_connection(first, last, nodes)


def validate_arguments(first: Optional[int], last: Optional[int], settings: Optional[PagerSettings] = None) -> tuple[Optional[int], Optional[int]]:
    """ Validate `first` and `last`, apply settings

    Raises:
        exc.InvalidArgumentError
        exc.ConversionOverflowError
    """
    first = validate_page_size('first', first)
    last = validate_page_size('last', last)

    # Settings may bring their own values: check them the same way
    if settings is not None:
        first, last = settings.get_final_page_size(first, last)
        first = validate_page_size('first', first)
        last = validate_page_size('last', last)

    return first, last


def validate_page_size(name: str, value: Optional[int]) -> Optional[int]:
    """ Check that `first` or `last` is a non-negative integer

    Raises:
        exc.InvalidArgumentError
        exc.ConversionOverflowError
    """
    if value is None:
        return None

    # Check types. `bool` is an `int`, but True is not a page size.
    if not isinstance(value, int) or isinstance(value, bool):
        raise exc.InvalidArgumentError(name, 'Pagination argument must be an integer')

    if value < 0:
        raise exc.InvalidArgumentError(name, 'Pagination argument must be positive')

    return checked_int(f'`{name}`', value, ARGUMENT_BITS)


def loader_arguments(Node: type[RelayConnectionNode], first: Optional[int], after: Optional[str], before: Optional[str]) -> LoaderArguments:
    """ Prepare arguments for the loader: parse cursors, derive the limit

    Raises:
        exc.CursorFormatError
    """
    after_cursor = Node.parse_cursor(after) if after is not None else None
    before_cursor = Node.parse_cursor(before) if before is not None else None

    # Load one more node to see whether there is a next page.
    # `last` can't be pushed down without a COUNT: it gives no limit.
    limit = first + 1 if first is not None else None

    return LoaderArguments(after=after_cursor, before=before_cursor, limit=limit)


def build_connection(first: Optional[int], last: Optional[int], nodes: abc.Iterable[NodeT]) -> Connection[NodeT]:
    """ Cut the page out of loaded nodes and compute the page info

    `nodes` are all the nodes between `after` and `before`, or at least `first + 1` of them.

    With both `first` and `last`, the list is cut to `first` nodes, and then `last` nodes are taken from its tail.
    Flags are computed against the number of loaded nodes: before the list is cut.

    Raises:
        exc.ConversionOverflowError
    """
    node_list = list(nodes)
    n = checked_int('Number of nodes', len(node_list), COUNT_BITS)

    # Are there more nodes than fit the page?
    has_previous_page = last is not None and n > last
    has_next_page = first is not None and n > first

    # Window: take `first`, then skip to keep `last`
    take = min(n, first if first is not None else n)
    skip = max(0, take - (last if last is not None else n))

    edges = tuple(
        Edge(node=node, cursor=node.cursor_text())
        for node in node_list[skip:take]
    )
    logger.debug(f'Paginated {n} nodes: edges [{skip}:{take}], has_previous_page={has_previous_page} has_next_page={has_next_page}')

    return Connection(
        edges=edges,
        page_info=PageInfo(
            has_previous_page=has_previous_page,
            has_next_page=has_next_page,
            start_cursor=edges[0].cursor if edges else None,
            end_cursor=edges[-1].cursor if edges else None,
        ),
    )


def checked_int(what: str, value: int, bits: int) -> int:
    """ Make sure that `value` fits a signed integer of `bits` bits

    Raises:
        exc.ConversionOverflowError
    """
    if not -(1 << (bits - 1)) <= value < (1 << (bits - 1)):
        raise exc.ConversionOverflowError(what, value, bits)
    return value
