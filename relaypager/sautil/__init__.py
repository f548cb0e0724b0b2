""" SqlAlchemy tools: load connection nodes from a database """

from .loader import apply_cursor_range, sa_loader
