from flask import Blueprint, jsonify
from scorecard.services.games import progression
from scorecard.socketio_events import notify_game_update
from scorecard.validation import json_body, require_int


scores = Blueprint('scores', __name__)


@scores.route('', methods=['POST'])
def enter_score():
    """Enter or overwrite a player's strokes for one hole."""
    data = json_body()
    game_id = require_int(data, 'gameId')
    player_id = require_int(data, 'playerId')
    hole = require_int(data, 'hole')
    strokes = require_int(data, 'strokes')
    score = progression.enter_score(game_id, player_id, hole, strokes)
    notify_game_update(score.game.code)
    return jsonify(score.to_dict())


@scores.route('/<int:score_id>/confirm', methods=['PATCH'])
def confirm_score(score_id):
    score = progression.confirm_score(score_id)
    notify_game_update(score.game.code)
    return jsonify({'success': True})
