""" Relay pagination for GraphQL resolvers """

from __future__ import annotations

import functools
import inspect
from typing import Optional

import graphql

from relaypager.connection import ConnectionDict
from relaypager.node import RelayConnectionNode
from relaypager.pager import relay_connection, relay_connection_async
from relaypager.settings import PagerSettings


def relay_resolver(Node: type[RelayConnectionNode], *, settings: Optional[PagerSettings] = None, is_async: Optional[bool] = None):
    """ Turn a loader into a resolver for a field that returns a connection

    The loader gets the resolver's `root` and `info`, the parsed cursors, and the limit.
    Field arguments other than Relay arguments are passed as keyword arguments.
    An `async` loader makes an `async` resolver. Detection sees `async def` functions, partials of them,
    and objects with an `async def __call__`; for anything else that returns an awaitable, set `is_async=True`.

    Example:
        @resolves(schema, 'Query.users')
        @relay_resolver(User)
        def resolve_users(root, info: graphql.GraphQLResolveInfo, after: Optional[int], before: Optional[int], limit: Optional[int]):
            return load_users(after, before, limit)
    """
    def decorator(load):
        if is_async is None:
            load_is_async = is_async_callable(load)
        else:
            load_is_async = is_async

        if load_is_async:
            @functools.wraps(load)
            async def resolver_async(root, info: graphql.GraphQLResolveInfo, *,
                                     first: Optional[int] = None, after: Optional[str] = None, last: Optional[int] = None, before: Optional[str] = None,
                                     **kwargs) -> ConnectionDict:
                async def loader(after_cursor, before_cursor, limit):
                    return await load(root, info, after_cursor, before_cursor, limit, **kwargs)

                connection = await relay_connection_async(
                    Node, loader,
                    first=first, after=after, last=last, before=before,
                    settings=settings,
                )
                return connection.dict()
            return resolver_async
        else:
            @functools.wraps(load)
            def resolver(root, info: graphql.GraphQLResolveInfo, *,
                         first: Optional[int] = None, after: Optional[str] = None, last: Optional[int] = None, before: Optional[str] = None,
                         **kwargs) -> ConnectionDict:
                connection = relay_connection(
                    Node, lambda after_cursor, before_cursor, limit: load(root, info, after_cursor, before_cursor, limit, **kwargs),
                    first=first, after=after, last=last, before=before,
                    settings=settings,
                )
                return connection.dict()
            return resolver
    return decorator


def is_async_callable(func) -> bool:
    """ Check whether calling `func` gives a coroutine """
    while isinstance(func, functools.partial):
        func = func.func

    return inspect.iscoroutinefunction(func) or (
        not inspect.isfunction(func) and not inspect.ismethod(func) and
        inspect.iscoroutinefunction(getattr(func, '__call__', None))
    )
