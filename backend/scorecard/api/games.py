from flask import Blueprint, jsonify, current_app
from flask_login import current_user
from scorecard.course import hole_info
from scorecard.services.games import progression
from scorecard.services.games.janitor import delete_expired_games
from scorecard.services.games.leaderboard import build_leaderboard
from scorecard.socketio_events import notify_game_update
from scorecard.validation import clean_course_type, clean_name, json_body, optional_int


games = Blueprint('games', __name__)


def _current_user_id():
    return current_user.id if current_user.is_authenticated else None


def _acting_player_id(data):
    return optional_int(data, 'playerId')


@games.route('', methods=['POST'])
def create_game():
    data = json_body()
    host_name = clean_name(data.get('hostName'), label='Host name')
    course_type = clean_course_type(data.get('courseType'))
    game = progression.create_game(host_name, course_type, user_id=_current_user_id())
    payload = game.to_dict()
    payload['hostPlayerId'] = game.host_player.id
    return jsonify(payload), 201


@games.route('/join', methods=['POST'])
def join_game():
    data = json_body()
    code = data.get('code')
    if not isinstance(code, str) or not code.strip():
        return jsonify({'error': 'Game code is required'}), 400
    name = clean_name(data.get('name'))
    game, player = progression.join_game(code, name, user_id=_current_user_id())
    notify_game_update(game.code)
    return jsonify({'game': game.to_dict(include_players=False), 'player': player.to_dict()}), 201


@games.route('/all', methods=['GET'])
def list_all_games():
    return jsonify([g.to_dict() for g in progression.list_games()])


@games.route('/completed', methods=['GET'])
def list_completed_games():
    return jsonify([g.to_dict() for g in progression.list_games(status='completed')])


@games.route('/cleanup', methods=['POST'])
def cleanup_games():
    hours = float(current_app.config.get('GAME_EXPIRY_HOURS', 5))
    deleted = delete_expired_games(max_age_hours=hours)
    current_app.logger.info(f"[cleanup] manual sweep deleted={deleted}")
    return jsonify({'message': 'Cleanup completed successfully', 'deletedGames': deleted})


@games.route('/code/<string:code>', methods=['GET'])
def get_game_by_code(code):
    game = progression.get_game_by_code(code)
    return jsonify(game.to_dict(include_players=False))


@games.route('/<int:game_id>', methods=['GET'])
def get_game(game_id):
    """Polled by clients every few seconds; the full picture of one game."""
    game = progression.get_game(game_id)
    payload = game.to_dict()
    payload['currentHoleInfo'] = hole_info(game.course_type, game.current_hole)
    return jsonify(payload)


@games.route('/<int:game_id>/start', methods=['PATCH'])
def start_game(game_id):
    data = json_body()
    game = progression.start_game(game_id, _acting_player_id(data), current_user)
    notify_game_update(game.code)
    return jsonify({'success': True, 'message': 'Game started'})


@games.route('/<int:game_id>/next-hole', methods=['POST'])
def next_hole(game_id):
    data = json_body()
    result = progression.advance_hole(game_id, _acting_player_id(data), current_user)
    notify_game_update(progression.get_game(game_id).code)
    return jsonify(result)


@games.route('/<int:game_id>/leaderboard', methods=['GET'])
def leaderboard(game_id):
    game = progression.get_game(game_id)
    return jsonify(build_leaderboard(game))


@games.route('/<int:game_id>/cancel', methods=['DELETE'])
def cancel_game(game_id):
    data = json_body()
    code = progression.cancel_game(game_id, _acting_player_id(data), current_user)
    notify_game_update(code, event='game_cancelled')
    return jsonify({'message': 'Game cancelled successfully'})


@games.route('/<int:game_id>/players/local', methods=['POST'])
def add_local_player(game_id):
    data = json_body()
    name = clean_name(data.get('name'))
    player = progression.add_local_player(game_id, name, _acting_player_id(data), current_user)
    notify_game_update(player.game.code)
    return jsonify(player.to_dict()), 201

