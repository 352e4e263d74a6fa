import pytest

from wordle_engine import create_app
from wordle_engine.config import TestingConfig
from wordle_engine.services.dictionary import Dictionary
from wordle_engine.services.game_service import get_game_service

WORDS = ["SWORD", "DOORS", "WORDS", "STONE", "APPLE", "HOUSE", "PIANO", "TIGER", "CRANE", "GOOSE"]


@pytest.fixture
def dictionary():
    return Dictionary(WORDS)


@pytest.fixture
def app_and_socketio():
    return create_app(TestingConfig)


@pytest.fixture
def app(app_and_socketio):
    return app_and_socketio[0]


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def game_service(app):
    return get_game_service()


@pytest.fixture
def sword_game_id(game_service):
    return game_service.create_new_game(secret_word="SWORD")


@pytest.fixture
def socket_client(app_and_socketio):
    app, socketio = app_and_socketio
    client = socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()


@pytest.fixture
def watcher_client(app_and_socketio):
    app, socketio = app_and_socketio
    client = socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
