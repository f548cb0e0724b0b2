import dataclasses

import pytest

from relaypager import Connection, Edge, PageInfo, PagerSettings, relay_connection

from tests.util.nodes import FakeNode, RecordingLoader, nodes


def test_connection_dict():
    """ Export to Relay format: camelCase and snake_case """
    connection = relay_connection(FakeNode, RecordingLoader(nodes(1, 2, 3)), first=2)

    assert connection.dict() == {
        'edges': [
            {'node': FakeNode(1), 'cursor': '1'},
            {'node': FakeNode(2), 'cursor': '2'},
        ],
        'pageInfo': {
            'hasPreviousPage': False,
            'hasNextPage': True,
            'startCursor': '1',
            'endCursor': '2',
        },
    }

    assert connection.dict_snake() == {
        'edges': [
            {'node': FakeNode(1), 'cursor': '1'},
            {'node': FakeNode(2), 'cursor': '2'},
        ],
        'page_info': {
            'has_previous_page': False,
            'has_next_page': True,
            'start_cursor': '1',
            'end_cursor': '2',
        },
    }


def test_connection_empty_dict():
    """ Empty connection export """
    assert Connection.empty().dict() == {
        'edges': [],
        'pageInfo': {
            'hasPreviousPage': False,
            'hasNextPage': False,
            'startCursor': None,
            'endCursor': None,
        },
    }


def test_connection_immutable():
    """ Connections, edges, page infos are frozen """
    connection = relay_connection(FakeNode, RecordingLoader(nodes(1, 2)))

    assert isinstance(connection.edges, tuple)
    assert connection.edges[0] == Edge(node=FakeNode(1), cursor='1')
    assert len(connection) == 2

    with pytest.raises(dataclasses.FrozenInstanceError):
        connection.page_info = PageInfo()  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        connection.edges[0].cursor = '100'  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        connection.page_info.has_next_page = True  # type: ignore[misc]


@pytest.mark.parametrize(('settings', 'kwargs', 'expected_limit', 'expected_ids'), [
    # Default page size: only when neither `first` nor `last` is given
    (PagerSettings(default_page_size=2), dict(), 3, [1, 2]),
    (PagerSettings(default_page_size=2), dict(first=3), 4, [1, 2, 3]),
    (PagerSettings(default_page_size=2), dict(last=1), None, [5]),
    (PagerSettings(default_page_size=2), dict(first=0), 1, []),
    # Max page size: caps both
    (PagerSettings(max_page_size=2), dict(first=10), 3, [1, 2]),
    (PagerSettings(max_page_size=2), dict(last=10), None, [4, 5]),
    (PagerSettings(max_page_size=2), dict(first=1), 2, [1]),
    (PagerSettings(max_page_size=2), dict(), None, [1, 2, 3, 4, 5]),
    # Both
    (PagerSettings(default_page_size=10, max_page_size=3), dict(), 4, [1, 2, 3]),
    # No settings
    (PagerSettings(), dict(first=4), 5, [1, 2, 3, 4]),
])
def test_pager_settings(settings: PagerSettings, kwargs: dict, expected_limit, expected_ids: list[int]):
    """ Default and max page sizes """
    loader = RecordingLoader(nodes(1, 2, 3, 4, 5))
    connection = relay_connection(FakeNode, loader, **kwargs, settings=settings)

    assert loader.calls == [(None, None, expected_limit)]
    assert [node.id for node in connection.nodes] == expected_ids


def test_pager_settings_invalid():
    """ Negative page sizes in settings """
    with pytest.raises(AssertionError):
        PagerSettings(default_page_size=-1)
    with pytest.raises(AssertionError):
        PagerSettings(max_page_size=-1)
