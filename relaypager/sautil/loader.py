from __future__ import annotations

from collections import abc
from typing import Any, Optional, Union, cast

import sqlalchemy as sa
import sqlalchemy.orm


# A column to paginate by: a model attribute or a column expression.
# A tuple of them for keyset pagination.
CursorColumn = Union[sa.sql.ColumnElement, sa.orm.InstrumentedAttribute]
CursorColumns = Union[CursorColumn, abc.Sequence[CursorColumn]]


def apply_cursor_range(stmt: sa.sql.Select, column: CursorColumns, after: Any, before: Any, limit: Optional[int]) -> sa.sql.Select:
    """ Modify the SQL Select statement so that it loads one page of nodes

    Adds:
        WHERE column > :after AND column < :before
        ORDER BY column ASC
        LIMIT :limit

    With a tuple of columns, compares row values: (a, b) > (:a, :b). Cursor values must be tuples then.
    """
    # Columns
    columns: tuple[CursorColumn, ...]
    expr: Any
    if isinstance(column, (tuple, list)):
        columns = tuple(column)
        expr = sa.tuple_(*columns)
    else:
        columns = (cast(CursorColumn, column),)
        expr = column

    # Filter
    if after is not None:
        stmt = stmt.where(expr > _cursor_value(after, columns))
    if before is not None:
        stmt = stmt.where(expr < _cursor_value(before, columns))

    # Sort, limit
    stmt = stmt.order_by(*(c.asc() for c in columns))
    if limit is not None:
        stmt = stmt.limit(limit)

    return stmt


def _cursor_value(value: Any, columns: tuple[CursorColumn, ...]):
    """ Get a value to compare the cursor columns to """
    if len(columns) == 1:
        return value

    assert isinstance(value, tuple) and len(value) == len(columns), f'Expected a {len(columns)}-tuple cursor, got {value!r}'
    return sa.tuple_(*(sa.literal(v, c.type) for v, c in zip(value, columns)))


def sa_loader(ssn: Union[sa.orm.Session, sa.engine.Connection], stmt: sa.sql.Select, column: CursorColumns, *, scalars: bool = True):
    """ Make a loader function that executes `stmt` with the cursor range applied

    Args:
        ssn: the Session (or Connection) to execute the statement with
        stmt: the statement to load nodes with. It may have its own filters; it should not have ORDER BY or LIMIT.
        column: the column (or columns) the cursor corresponds to
        scalars: return the first column of every row (e.g. ORM instances). Otherwise, return rows.

    Example:
        relay_connection(
            User,
            sa_loader(ssn, sa.select(User).where(User.is_active), User.id),
            first=10, after='42',
        )
    """
    def load(after: Any, before: Any, limit: Optional[int]) -> list:
        res = ssn.execute(apply_cursor_range(stmt, column, after, before, limit))
        return list(res.scalars().all() if scalars else res.all())
    return load
