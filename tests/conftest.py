import os
import pytest
import sqlalchemy as sa
import sqlalchemy.orm


@pytest.fixture(scope='function')
def engine() -> sa.engine.Engine:
    return sa.create_engine(DATABASE_URL)


@pytest.fixture(scope='function')
def connection(engine: sa.engine.Engine) -> sa.engine.Connection:
    with engine.connect() as conn:
        yield conn


@pytest.fixture(scope='function')
def ssn(connection: sa.engine.Connection) -> sa.orm.Session:
    with sa.orm.Session(bind=connection) as ssn:
        yield ssn


# URL of the database to connect to
DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite://')
