from __future__ import annotations

from typing import NamedTuple, Optional

import fastapi

from relaypager.connection import Connection
from relaypager.pager import relay_connection, relay_connection_async, Loader, AsyncLoader, NodeT
from relaypager.settings import PagerSettings


class RelayArguments(NamedTuple):
    """ Relay pagination arguments """
    first: Optional[int] = None
    after: Optional[str] = None
    last: Optional[int] = None
    before: Optional[str] = None

    def paginate(self, Node: type[NodeT], load: Loader, *, settings: Optional[PagerSettings] = None) -> Connection[NodeT]:
        """ Build a connection using these arguments

        Raises:
            exc.InvalidArgumentError, exc.CursorFormatError, exc.ConversionOverflowError
        """
        return relay_connection(Node, load, **self._asdict(), settings=settings)

    async def paginate_async(self, Node: type[NodeT], load: AsyncLoader, *, settings: Optional[PagerSettings] = None) -> Connection[NodeT]:
        """ Build a connection using these arguments, with an async loader """
        return await relay_connection_async(Node, load, **self._asdict(), settings=settings)


def relay_arguments(*,
        first: Optional[int] = fastapi.Query(
            None,
            title='Pagination. The number of items to return from the beginning of the list.',
        ),
        after: Optional[str] = fastapi.Query(
            None,
            title='Pagination. Return items after this cursor.',
        ),
        last: Optional[int] = fastapi.Query(
            None,
            title='Pagination. The number of items to return from the end of the list.',
        ),
        before: Optional[str] = fastapi.Query(
            None,
            title='Pagination. Return items before this cursor.',
        ),
) -> RelayArguments:
    """ Get Relay pagination arguments from the request parameters

    Example:
        /api/users?first=10&after=42

    The values are not validated here: pagination itself does it.
    """
    return RelayArguments(first=first, after=after, last=last, before=before)
