""" Relay connection: a paginated list of nodes """

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar, TypedDict, Union


# Node type
NodeT = TypeVar('NodeT')


@dataclass(frozen=True)
class Edge(Generic[NodeT]):
    """ Relay Edge: a node and its cursor """
    node: NodeT
    cursor: str

    def dict(self) -> EdgeDict:
        return {'node': self.node, 'cursor': self.cursor}


@dataclass(frozen=True)
class PageInfo:
    """ Relay Page Info: boundaries of the current page """
    # Are there any nodes before the first edge?
    has_previous_page: bool = False

    # Are there any nodes after the last edge?
    has_next_page: bool = False

    # Cursors of the first and the last edges. `None` when there are no edges.
    start_cursor: Optional[str] = None
    end_cursor: Optional[str] = None

    def dict(self) -> PageInfoDict:
        return {
            'hasPreviousPage': self.has_previous_page,
            'hasNextPage': self.has_next_page,
            'startCursor': self.start_cursor,
            'endCursor': self.end_cursor,
        }

    def dict_snake(self) -> PageInfoSnakeDict:
        return {
            'has_previous_page': self.has_previous_page,
            'has_next_page': self.has_next_page,
            'start_cursor': self.start_cursor,
            'end_cursor': self.end_cursor,
        }


@dataclass(frozen=True)
class Connection(Generic[NodeT]):
    """ Relay Connection: a page of edges and the page info

    See: https://relay.dev/graphql/connections.htm
    """
    edges: tuple[Edge[NodeT], ...] = ()
    page_info: PageInfo = field(default_factory=PageInfo)

    @classmethod
    def empty(cls) -> Connection:
        """ A connection with no elements

        Use it when you know in advance that nothing can match, and there's no need to call the loader
        """
        return cls(edges=(), page_info=PageInfo())

    @property
    def nodes(self) -> list[NodeT]:
        """ Nodes from every edge, in order """
        return [edge.node for edge in self.edges]

    def __len__(self):
        return len(self.edges)

    def dict(self) -> ConnectionDict:
        """ Export as a Relay Connection object, camelCase: ready for a GraphQL response """
        return {
            'edges': [edge.dict() for edge in self.edges],
            'pageInfo': self.page_info.dict(),
        }

    def dict_snake(self) -> ConnectionSnakeDict:
        """ Export as a Relay Connection object, snake_case """
        return {
            'edges': [edge.dict() for edge in self.edges],
            'page_info': self.page_info.dict_snake(),
        }


class ConnectionDict(TypedDict):
    """ Relay Connection type: paginated list """
    edges: list[EdgeDict]
    pageInfo: PageInfoDict


class ConnectionSnakeDict(TypedDict):
    """ Relay Connection type, snake case """
    edges: list[EdgeDict]
    page_info: PageInfoSnakeDict


class EdgeDict(TypedDict):
    """ Relay Edge type: paginated item """
    node: Union[object, dict]
    cursor: str


class PageInfoDict(TypedDict):
    """ Relay Page Info """
    hasPreviousPage: bool
    hasNextPage: bool
    startCursor: Optional[str]
    endCursor: Optional[str]


class PageInfoSnakeDict(TypedDict):
    """ Relay page info, snake case """
    has_previous_page: bool
    has_next_page: bool
    start_cursor: Optional[str]
    end_cursor: Optional[str]
