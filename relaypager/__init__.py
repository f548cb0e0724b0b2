__version__ = __import__('importlib.metadata').metadata.version('relaypager')

from .node import RelayConnectionNode
from .connection import Connection, Edge, PageInfo
from .pager import relay_connection, relay_connection_async, LoaderArguments
from .settings import PagerSettings
from .cursors import CursorType, IntCursor, StrCursor, DateTimeCursor, UUIDCursor, OpaqueCursor, KeysetCursor

from . import cursors
from . import exc
