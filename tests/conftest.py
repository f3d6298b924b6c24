import os
import random
import tempfile

import pytest

# Keep test logs out of the working tree; read when the logger is created
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='word_learner_logs_'))

from word_learner import create_app  # noqa: E402
from word_learner.config import TestingConfig  # noqa: E402
from word_learner.services.game_service import initialize_game_service  # noqa: E402


@pytest.fixture
def game_service():
    return initialize_game_service(max_rows=TestingConfig.MAX_ROWS, rng=random.Random(1234))


@pytest.fixture
def app(game_service):
    app, _ = create_app(TestingConfig)
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
