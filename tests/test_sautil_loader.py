import re
from datetime import datetime
from typing import Optional

import pytest
import sqlalchemy as sa
import sqlalchemy.orm
from sqlalchemy.dialects import sqlite

from relaypager import RelayConnectionNode, IntCursor, DateTimeCursor, KeysetCursor, PageInfo
from relaypager import relay_connection
from relaypager.sautil import apply_cursor_range, sa_loader


Base = sa.orm.declarative_base()


class Article(RelayConnectionNode, Base):
    __tablename__ = 'articles'

    cursor_type = IntCursor()

    id = sa.Column(sa.Integer, primary_key=True)
    title = sa.Column(sa.String)
    published = sa.Column(sa.Boolean, default=True)
    ctime = sa.Column(sa.DateTime)

    def cursor(self) -> int:
        return self.id


class ArticleByTime(RelayConnectionNode):
    """ Articles sorted by (ctime, id) """
    cursor_type = KeysetCursor(DateTimeCursor(), IntCursor())

    def __init__(self, ctime: datetime, id: int):
        self.ctime = ctime
        self.id = id

    def cursor(self) -> tuple:
        return (self.ctime, self.id)


@pytest.mark.parametrize(('after', 'before', 'limit', 'expected_sql'), [
    (None, None, None, 'SELECT articles.id FROM articles ORDER BY articles.id ASC'),
    (1, None, None, 'SELECT articles.id FROM articles WHERE articles.id > 1 ORDER BY articles.id ASC'),
    (None, 9, None, 'SELECT articles.id FROM articles WHERE articles.id < 9 ORDER BY articles.id ASC'),
    (1, 9, 3, 'SELECT articles.id FROM articles WHERE articles.id > 1 AND articles.id < 9 ORDER BY articles.id ASC LIMIT 3'),
])
def test_apply_cursor_range_sql(after: Optional[int], before: Optional[int], limit: Optional[int], expected_sql: str):
    """ Generated SQL: WHERE, ORDER BY, LIMIT """
    stmt = apply_cursor_range(sa.select(Article.id), Article.id, after, before, limit)
    assert stmt2sql(stmt) == expected_sql


def test_apply_cursor_range_keyset_sql():
    """ Generated SQL: tuple comparison """
    stmt = apply_cursor_range(sa.select(Article.id), (Article.title, Article.id), ('abc', 5), None, 2)
    assert stmt2sql(stmt) == (
        "SELECT articles.id FROM articles "
        "WHERE (articles.title, articles.id) > ('abc', 5) "
        "ORDER BY articles.title ASC, articles.id ASC LIMIT 2"
    )


def test_sa_loader(connection: sa.engine.Connection, ssn: sa.orm.Session):
    """ Paginate real rows """
    Base.metadata.create_all(connection)
    ssn.add_all([
        Article(id=id, title=f'Article #{id}', published=id != 4)
        for id in range(1, 7)
    ])
    ssn.flush()

    # Published articles: 1 2 3 5 6
    stmt = sa.select(Article).where(Article.published)

    # Forward: first page
    connection_ = relay_connection(Article, sa_loader(ssn, stmt, Article.id), first=2)
    assert [a.id for a in connection_.nodes] == [1, 2]
    assert connection_.page_info == PageInfo(has_previous_page=False, has_next_page=True, start_cursor='1', end_cursor='2')

    # Forward: next page, skipping the unpublished article
    connection_ = relay_connection(Article, sa_loader(ssn, stmt, Article.id), first=2, after='3')
    assert [a.id for a in connection_.nodes] == [5, 6]
    assert connection_.page_info == PageInfo(has_previous_page=False, has_next_page=False, start_cursor='5', end_cursor='6')

    # Backward
    connection_ = relay_connection(Article, sa_loader(ssn, stmt, Article.id), last=2, before='6')
    assert [a.id for a in connection_.nodes] == [3, 5]
    assert connection_.page_info == PageInfo(has_previous_page=True, has_next_page=False, start_cursor='3', end_cursor='5')

    # Rows
    load = sa_loader(ssn, sa.select(Article.id, Article.title), Article.id, scalars=False)
    assert [tuple(row) for row in load(4, None, 1)] == [(5, 'Article #5')]


def test_sa_loader_keyset(connection: sa.engine.Connection, ssn: sa.orm.Session):
    """ Paginate real rows with a composite key """
    Base.metadata.create_all(connection)
    ssn.add_all([
        Article(id=1, ctime=datetime(2020, 1, 2)),
        Article(id=2, ctime=datetime(2020, 1, 1)),
        Article(id=3, ctime=datetime(2020, 1, 2)),
        Article(id=4, ctime=datetime(2020, 1, 3)),
    ])
    ssn.flush()

    def load(after, before, limit):
        rows = sa_loader(ssn, sa.select(Article.ctime, Article.id), (Article.ctime, Article.id), scalars=False)(after, before, limit)
        return [ArticleByTime(ctime, id) for ctime, id in rows]

    connection_ = relay_connection(ArticleByTime, load, first=2)
    assert [a.id for a in connection_.nodes] == [2, 1]
    assert connection_.page_info.has_next_page

    connection_ = relay_connection(ArticleByTime, load, first=2, after=connection_.page_info.end_cursor)
    assert [a.id for a in connection_.nodes] == [3, 4]
    assert not connection_.page_info.has_next_page


def stmt2sql(stmt: sa.sql.Select) -> str:
    """ Compile a statement into one line of SQL with literal values """
    sql = str(stmt.compile(dialect=sqlite.dialect(), compile_kwargs={'literal_binds': True}))
    sql = ' '.join(sql.split())

    # Some SqlAlchemy versions render "LIMIT n OFFSET 0" on SQLite
    return re.sub(r' OFFSET 0$', '', sql)
