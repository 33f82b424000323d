import os
import random
import tempfile

# Keep test logs out of the working tree; must run before the package is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='greek_wordle_logs_'))

import pytest

from greek_wordle import create_app
from greek_wordle.config import TestingConfig
from greek_wordle.services import game_service as game_service_module
from greek_wordle.services.game_service import initialize_game_service


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def game_service(clock):
    """Global game service whose only secret is ΚΑΛΟΣ."""
    service = initialize_game_service(word_list=["ΚΑΛΟΣ"], clock=clock)
    yield service
    game_service_module._game_service = None


@pytest.fixture
def app(game_service):
    app, socketio = create_app(TestingConfig)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    client = app.socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
