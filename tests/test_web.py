"""
tests/test_web.py

Тесты Flask API.
"""

import pytest

from peg_io.parser import PRESETS
from web.app import app


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


def test_boards(client):
    response = client.get('/api/boards')
    data = response.get_json()

    assert response.status_code == 200
    assert data['boards'] == PRESETS
    assert data['memo'] == ['none', 'hashmap', 'bitfield']
    assert data['default_memo'] == 'hashmap'


def test_validate(client):
    data = client.post('/api/validate', json={'layout': " 1 \n101\n 1 "}).get_json()
    assert data['valid'] is True
    assert data['active_positions'] == 5
    assert data['pegs'] == 4
    assert data['rows'] == 3

    data = client.post('/api/validate', json={'layout': "111\n11"}).get_json()
    assert data['valid'] is False
    assert 'одной длины' in data['error']


def test_solve_layout(client):
    response = client.post('/api/solve', json={'layout': "11010101010", 'memo': 'bitfield'})
    data = response.get_json()

    assert response.status_code == 200
    assert data['success'] is True
    assert data['solved'] is True
    assert data['memo'] == 'bitfield'
    assert data['final_board'] == "00000000001"
    assert [(mv['row'], mv['col'], mv['direction']) for mv in data['moves']] == [
        (0, 0, 'right'), (0, 2, 'right'), (0, 4, 'right'), (0, 6, 'right'), (0, 8, 'right'),
    ]
    assert data['moves'][0]['text'] == "A1 →"
    assert data['stats']['max_depth'] == 5


def test_solve_preset_unsolvable(client):
    data = client.post('/api/solve', json={'layout': "01010101010", 'memo': 'none'}).get_json()

    assert data['solved'] is False
    assert data['moves'] == []
    assert data['final_board'] == "01010101010"


def test_solve_named_board(client):
    data = client.post('/api/solve', json={'board': 'square'}).get_json()
    assert data['solved'] is True
    assert len(data['moves']) == 1


@pytest.mark.parametrize("payload", [
    {'layout': "12"},
    {'layout': 42},
    {'board': 'missing'},
    {'layout': "110", 'memo': 'bogus'},
])
def test_solve_bad_request(client, payload):
    response = client.post('/api/solve', json=payload)

    assert response.status_code == 400
    assert response.get_json()['success'] is False


def test_solve_unknown_memo_message(client):
    data = client.post('/api/solve', json={'layout': "110", 'memo': 'bogus'}).get_json()
    assert 'bogus' in data['error']
