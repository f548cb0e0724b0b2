""" Node contract: objects that can be paginated """

from __future__ import annotations

from typing import Any, ClassVar

from .cursors import CursorType


class RelayConnectionNode:
    """ To return objects inside a connection, they must implement this interface

    Example:
        @dataclass
        class User(RelayConnectionNode):
            cursor_type = IntCursor()
            connection_type_name = 'UserConnection'
            edge_type_name = 'UserConnectionEdge'

            id: int
            login: str

            def cursor(self) -> int:
                return self.id
    """
    # The cursor type used for pagination.
    # A cursor should uniquely identify a given node.
    cursor_type: ClassVar[CursorType]

    # Type names that connections and edges over these nodes should have in the API.
    # Default: "<Name>Connection", "<Name>ConnectionEdge"
    connection_type_name: ClassVar[str]
    edge_type_name: ClassVar[str]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        # Default type names
        if 'connection_type_name' not in cls.__dict__:
            cls.connection_type_name = f'{cls.__name__}Connection'
        if 'edge_type_name' not in cls.__dict__:
            cls.edge_type_name = f'{cls.connection_type_name}Edge'

    def cursor(self) -> Any:
        """ Get the cursor value for this node """
        raise NotImplementedError

    def cursor_text(self) -> str:
        """ Get the cursor for this node, as a string """
        return self.cursor_type.to_text(self.cursor())

    @classmethod
    def parse_cursor(cls, text: str) -> Any:
        """ Parse a cursor string into a cursor value

        Raises:
            exc.CursorFormatError
        """
        return cls.cursor_type.parse(text)
