from scorecard import create_app, socketio
from scorecard.services.games.janitor import start_cleanup_scheduler

app = create_app()

if __name__ == '__main__':
    start_cleanup_scheduler(app)
    # Use SocketIO server to enable websockets in dev
    socketio.run(app, debug=True)
