from flask import Blueprint, jsonify
from flask_login import current_user
from scorecard import db
from scorecard.models import Game
from scorecard.services.games import progression
from scorecard.socketio_events import notify_game_update
from scorecard.validation import clean_name, json_body, optional_int


players = Blueprint('players', __name__)


@players.route('/<int:target_id>/name', methods=['PATCH'])
def rename_player(target_id):
    """Host renames one of their local players."""
    data = json_body()
    name = clean_name(data.get('name'), label='Name')
    player = progression.rename_local_player(target_id, name, optional_int(data, 'playerId'), current_user)
    notify_game_update(player.game.code)
    return jsonify({'message': 'Player name updated successfully', 'player': player.to_dict()})


@players.route('/<int:target_id>', methods=['DELETE'])
def remove_player(target_id):
    data = json_body()
    removed = progression.remove_player(target_id, optional_int(data, 'playerId'), current_user)
    game = db.session.get(Game, removed['gameId'])
    if game:
        notify_game_update(game.code)
    return jsonify({'message': 'Player removed successfully', 'removedPlayer': removed})
