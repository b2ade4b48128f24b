import time
from datetime import timedelta

from scorecard import create_app, db
from scorecard.models import Game, Player, Score, Photo, utcnow
from scorecard.services.games import progression
from scorecard.services.games.janitor import (
    _scheduler_state, delete_expired_games, run_cleanup, start_cleanup_scheduler, stop_cleanup_scheduler,
)


def _game(status, age_hours):
    game = progression.create_game('Hank', 'front9')
    game.status = status
    game.created_at = utcnow() - timedelta(hours=age_hours)
    db.session.commit()
    return game.id


def test_deletes_only_stale_unfinished_games(flask_app):
    stale_waiting = _game('waiting', 6)
    stale_playing = _game('playing', 5.5)
    stale_completed = _game('completed', 48)
    fresh_waiting = _game('waiting', 1)
    fresh_playing = _game('playing', 4.9)

    assert delete_expired_games(max_age_hours=5) == 2

    remaining = {g.id for g in Game.query.all()}
    assert remaining == {stale_completed, fresh_waiting, fresh_playing}
    assert stale_waiting not in remaining and stale_playing not in remaining


def test_sweep_cascades(flask_app):
    game = progression.create_game('Hank', 'front9')
    progression.join_game(game.code, 'Bob')
    host = game.host_player
    progression.start_game(game.id, player_id=host.id)
    progression.enter_score(game.id, host.id, 1, 3)
    db.session.add(Photo(game=game, player=host, hole=1, file_name='a.jpg',
                         original_name='a.jpg', file_size=10, mime_type='image/jpeg'))
    game.created_at = utcnow() - timedelta(hours=6)
    db.session.commit()
    gid = game.id

    assert delete_expired_games() == 1
    assert Player.query.filter_by(game_id=gid).count() == 0
    assert Score.query.filter_by(game_id=gid).count() == 0
    assert Photo.query.filter_by(game_id=gid).count() == 0


def test_sweep_with_nothing_to_do(flask_app):
    _game('completed', 10)
    assert delete_expired_games() == 0
    assert delete_expired_games() == 0
    assert Game.query.count() == 1


def test_many_games(flask_app):
    for _ in range(25):
        _game('playing', 8)
    for _ in range(5):
        _game('completed', 8)
    assert delete_expired_games() == 25
    assert Game.query.count() == 5


def test_run_cleanup_uses_configured_age(flask_app):
    _game('waiting', 2)
    assert run_cleanup(flask_app) == 0
    flask_app.config['GAME_EXPIRY_HOURS'] = 1
    assert run_cleanup(flask_app) == 1


def test_cleanup_endpoint(client, flask_app):
    _game('waiting', 6)
    _game('waiting', 1)
    res = client.post('/api/games/cleanup')
    assert res.status_code == 200
    assert res.get_json()['deletedGames'] == 1
    assert client.post('/api/games/cleanup').get_json()['deletedGames'] == 0


def test_scheduler_not_started_in_tests(flask_app):
    assert start_cleanup_scheduler(flask_app) is False


def test_cli_command(flask_app):
    _game('playing', 7)
    result = flask_app.test_cli_runner().invoke(args=['cleanup-games'])
    assert 'Deleted 1 expired games' in result.output


def _wait_for(predicate, timeout=5):
    deadline = time.time() + timeout
    while time.time() < deadline:
        if predicate():
            return True
        time.sleep(0.05)
    return False


def test_scheduler_loop_sweeps_and_stops(tmp_path):
    class LoopConfig:
        TESTING = False
        SECRET_KEY = 'loop-secret'
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'loop.db'}"
        SQLALCHEMY_TRACK_MODIFICATIONS = False
        GAME_EXPIRY_HOURS = 5
        CLEANUP_INTERVAL_SEC = 1
        ENABLE_CLEANUP_SCHEDULER = True
        BCRYPT_LOG_ROUNDS = 4

    app = create_app(LoopConfig)
    with app.app_context():
        db.create_all()
        stale = _game('waiting', 6)
        fresh = _game('waiting', 1)

    def remaining():
        with app.app_context():
            return {g.id for g in Game.query.all()}

    try:
        assert start_cleanup_scheduler(app) is True
        assert start_cleanup_scheduler(app) is False
        assert _wait_for(lambda: remaining() == {fresh})
        assert stale not in remaining()
    finally:
        stop_cleanup_scheduler()
        stopped = _wait_for(lambda: not _scheduler_state['running'])
        _scheduler_state.update(running=False, stop=False)
        with app.app_context():
            db.drop_all()
    assert stopped
