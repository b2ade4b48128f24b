from flask_socketio import join_room, leave_room, emit
from scorecard import socketio

# Clients still poll GET /api/games/<id>; these events only tell them to poll now.

def game_room(game_code: str) -> str:
    return f"game:{game_code.upper()}"


def notify_game_update(game_code: str, event: str = 'state_update') -> None:
    socketio.emit(event, {'gameCode': game_code}, to=game_room(game_code), namespace='/ws')


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_join_game(data):
    game_code = (data or {}).get('gameCode')
    if not game_code:
        emit('error', {'message': 'gameCode is required'})
        return
    room = game_room(game_code)
    join_room(room)
    emit('joined', {'room': room})


def handle_leave_game(data):
    game_code = (data or {}).get('gameCode')
    if not game_code:
        emit('error', {'message': 'gameCode is required'})
        return
    room = game_room(game_code)
    leave_room(room)
    emit('left', {'room': room})


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    for namespace in (['/ws', '/'] if testing else ['/ws']):
        socketio.on_event('connect', handle_connect, namespace=namespace)
        socketio.on_event('join_game', handle_join_game, namespace=namespace)
        socketio.on_event('leave_game', handle_leave_game, namespace=namespace)
        socketio.on_event('ping', handle_ping, namespace=namespace)
