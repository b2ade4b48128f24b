"""Game lifecycle: waiting -> playing -> completed.

A game is created in ``waiting`` with the host as its only player, picks
up players until the host starts it, then advances one hole at a time
once every player has a score for the current hole. Advancing past the
last hole completes the game; ``current_hole`` never goes beyond the
course's hole count. Cancelling deletes the game and everything hanging
off it.
"""

from typing import Optional, Tuple

from flask import current_app
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from scorecard import db
from scorecard.models import Game, Player, Score, GAME_CODE_LENGTH
from .errors import ConflictError, ForbiddenError, NotFoundError, ValidationError


def get_game(game_id: int, for_update: bool = False) -> Game:
    query = Game.query.filter_by(id=game_id)
    if for_update:
        # re-read the row even if this session already holds it
        query = query.with_for_update().populate_existing()
    game = query.first()
    if not game:
        raise NotFoundError('Game not found')
    return game


def get_game_by_code(code: str) -> Game:
    game = Game.query.filter_by(code=(code or '').strip().upper()).first()
    if not game:
        raise NotFoundError('Game not found')
    return game


def list_games(status: Optional[str] = None, user_id: Optional[int] = None):
    """Games newest first, optionally narrowed by status and participating user."""
    query = Game.query
    if status:
        query = query.filter(Game.status == status)
    if user_id is not None:
        query = query.filter(Game.players.any(Player.user_id == user_id))
    return query.order_by(Game.created_at.desc(), Game.id.desc()).all()


def require_host(game: Game, player_id: Optional[int] = None, user=None, action: str = 'manage this game') -> Player:
    """Return the host player if the caller is the host, otherwise raise.

    The caller is the host when ``player_id`` names the host player, or
    when ``user`` is an authenticated account that owns the host player.
    """
    host = game.host_player
    if host is not None:
        if player_id is not None and host.id == player_id:
            return host
        if user is not None and getattr(user, 'is_authenticated', False) and host.user_id == user.id:
            return host
    raise ForbiddenError(f'Only the host can {action}')


def create_game(host_name: str, course_type: str, user_id: Optional[int] = None) -> Game:
    game = Game(host_name=host_name, course_type=course_type)
    Player(game=game, name=host_name, user_id=user_id, is_host=True)
    db.session.add(game)
    db.session.commit()
    current_app.logger.info(f"[game-create] game={game.id} code={game.code} course={course_type} host={host_name!r}")
    return game


def join_game(code: str, name: str, user_id: Optional[int] = None) -> Tuple[Game, Player]:
    code = (code or '').strip().upper()
    if len(code) != GAME_CODE_LENGTH:
        raise ValidationError(f'Game code must be {GAME_CODE_LENGTH} characters')
    game = get_game_by_code(code)
    if game.status != 'waiting':
        raise ConflictError('Game has already started. Players can only join in the waiting room.')
    if game.has_player_named(name):
        raise ConflictError('Player name already exists in this game')

    player = Player(game=game, name=name, user_id=user_id, is_host=False)
    db.session.add(player)
    db.session.commit()
    current_app.logger.info(f"[game-join] game={game.id} player={player.id} name={name!r}")
    return game, player


def add_local_player(game_id: int, name: str, player_id: Optional[int] = None, user=None) -> Player:
    game = get_game(game_id)
    require_host(game, player_id, user, action='add local players')
    if game.status != 'waiting':
        raise ConflictError('Can only add players in the waiting room')
    if game.has_player_named(name):
        raise ConflictError('Player name already exists in this game')

    player = Player(game=game, name=name, is_local=True)
    db.session.add(player)
    db.session.commit()
    current_app.logger.info(f"[game-join] game={game.id} player={player.id} name={name!r} local=True")
    return player


def rename_local_player(target_id: int, name: str, player_id: Optional[int] = None, user=None) -> Player:
    target = db.session.get(Player, target_id)
    if not target or not target.is_local:
        raise NotFoundError('Local player not found')
    game = target.game
    require_host(game, player_id, user, action='update local player names')
    if game.has_player_named(name, exclude_id=target.id):
        raise ConflictError('Player name already exists in this game')
    target.name = name
    db.session.commit()
    return target


def remove_player(target_id: int, player_id: Optional[int] = None, user=None) -> dict:
    """Remove a non-host player (and their scores) from a waiting game."""
    target = db.session.get(Player, target_id)
    if not target:
        raise NotFoundError('Player not found')
    game = target.game
    require_host(game, player_id, user, action='remove players')
    if game.status != 'waiting':
        raise ConflictError('Can only remove players in the waiting room')
    if target.is_host:
        raise ConflictError('Cannot remove the host from the game')

    removed = target.to_dict()
    db.session.delete(target)
    db.session.commit()
    current_app.logger.info(f"[player-remove] game={game.id} player={removed['id']}")
    return removed


def start_game(game_id: int, player_id: Optional[int] = None, user=None) -> Game:
    game = get_game(game_id, for_update=True)
    require_host(game, player_id, user, action='start the game')
    if game.status != 'waiting':
        raise ConflictError('Game has already started')
    game.status = 'playing'
    game.current_hole = 1
    db.session.commit()
    current_app.logger.info(f"[game-start] game={game.id} players={len(game.players)}")
    return game


def enter_score(game_id: int, player_id: int, hole: int, strokes: int) -> Score:
    """Insert or overwrite the score for (player, hole); every write is confirmed."""
    max_strokes = int(current_app.config.get('MAX_STROKES', 15))
    if strokes < 0 or strokes > max_strokes:
        raise ValidationError(f'Strokes must be between 0 and {max_strokes}')

    player = db.session.get(Player, player_id)
    if not player or player.game_id != game_id:
        raise NotFoundError('Player not found in this game')
    game = player.game
    if hole < 1 or hole > game.total_holes:
        raise ValidationError('Invalid hole number')
    if game.status == 'waiting':
        raise ConflictError('Game has not started yet')

    score = Score.query.filter_by(player_id=player.id, hole=hole).first()
    if score:
        score.strokes = strokes
        score.confirmed = True
    else:
        score = Score(game=game, player=player, hole=hole, strokes=strokes, confirmed=True)
        db.session.add(score)
    try:
        db.session.commit()
    except IntegrityError:
        # Lost an insert race on (player_id, hole); overwrite the winner
        db.session.rollback()
        score = Score.query.filter_by(player_id=player_id, hole=hole).one()
        score.strokes = strokes
        score.confirmed = True
        db.session.commit()
    current_app.logger.info(f"[score] game={game_id} player={player_id} hole={hole} strokes={strokes}")
    return score


def confirm_score(score_id: int) -> Score:
    score = db.session.get(Score, score_id)
    if not score:
        raise NotFoundError('Score not found')
    if not score.confirmed:
        score.confirmed = True
        db.session.commit()
    return score


def players_missing_score(game: Game, hole: int) -> int:
    """Count players without a score row for ``hole``, read fresh from the database."""
    player_count = Player.query.filter_by(game_id=game.id).count()
    scored = (
        db.session.query(func.count(func.distinct(Score.player_id)))
        .join(Player, Player.id == Score.player_id)
        .filter(Score.game_id == game.id, Score.hole == hole, Player.game_id == game.id)
        .scalar()
    )
    return player_count - int(scored or 0)


def advance_hole(game_id: int, player_id: Optional[int] = None, user=None) -> dict:
    """Move to the next hole, or complete the game after the last one.

    Returns ``{'nextHole': n}`` or ``{'gameCompleted': True}``.
    """
    game = get_game(game_id, for_update=True)
    require_host(game, player_id, user, action='advance the hole')
    if game.status == 'completed':
        raise ConflictError('Game is already completed')
    if game.status != 'playing':
        raise ConflictError('Game has not started yet')

    if players_missing_score(game, game.current_hole) > 0:
        raise ConflictError('All players must enter their scores before advancing')

    prev_hole = game.current_hole
    if prev_hole >= game.total_holes:
        game.status = 'completed'
        db.session.commit()
        current_app.logger.info(f"[game-complete] game={game.id} finished at hole={prev_hole}")
        return {'gameCompleted': True}

    game.current_hole = prev_hole + 1
    game.status = 'playing'
    db.session.commit()
    current_app.logger.info(f"[next-hole] game={game.id} advance hole {prev_hole} -> {game.current_hole}")
    return {'nextHole': game.current_hole}


def cancel_game(game_id: int, player_id: Optional[int] = None, user=None) -> str:
    """Delete a game that has not completed. Returns its join code."""
    game = get_game(game_id, for_update=True)
    require_host(game, player_id, user, action='cancel the game')
    if game.status == 'completed':
        raise ConflictError('Cannot cancel completed games')
    code = game.code
    db.session.delete(game)
    db.session.commit()
    current_app.logger.info(f"[game-cancel] game={game_id} code={code}")
    return code
