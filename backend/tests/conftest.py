import os
import sys
import pytest

# Ensure the backend root (containing the `scorecard` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from scorecard import create_app, db, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    GAME_EXPIRY_HOURS = 5
    CLEANUP_INTERVAL_SEC = 3600
    ENABLE_CLEANUP_SCHEDULER = False
    MAX_STROKES = 15
    MAX_NAME_LENGTH = 50
    BCRYPT_LOG_ROUNDS = 4


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import scorecard.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass


@pytest.fixture()
def new_game(client):
    """Factory: create a game over HTTP and return its JSON (includes hostPlayerId)."""
    def _create(host_name='Hank', course_type='front9'):
        res = client.post('/api/games', json={'hostName': host_name, 'courseType': course_type})
        assert res.status_code == 201
        return res.get_json()
    return _create
