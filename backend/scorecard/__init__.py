from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_bcrypt import Bcrypt
from flask_login import LoginManager
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
bcrypt = Bcrypt()
login_manager = LoginManager()
migrate = Migrate()
allowed_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:5000",
    "http://127.0.0.1:5000",
]
socketio = SocketIO(cors_allowed_origins=allowed_origins, async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    db.init_app(flask_app)
    bcrypt.init_app(flask_app)
    login_manager.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, supports_credentials=True, origins=allowed_origins)

    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from scorecard.routes import auth
    flask_app.register_blueprint(auth, url_prefix='/api/auth')

    from scorecard.api.games import games
    flask_app.register_blueprint(games, url_prefix='/api/games')

    from scorecard.api.players import players
    flask_app.register_blueprint(players, url_prefix='/api/players')

    from scorecard.api.scores import scores
    flask_app.register_blueprint(scores, url_prefix='/api/scores')

    from scorecard.api.course import course
    flask_app.register_blueprint(course, url_prefix='/api/course')

    from scorecard.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    from scorecard.services.games.errors import GameError

    @flask_app.errorhandler(GameError)
    def handle_game_error(exc):
        db.session.rollback()
        return jsonify({'error': exc.message}), exc.status_code

    from scorecard.models import User

    @login_manager.user_loader
    def load_user(user_id):
        return db.session.get(User, int(user_id))

    @click.command('db-reset')
    def db_reset_command():
        """Drops and recreates every table."""
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            print('Database has been reset!')

    @click.command('cleanup-games')
    def cleanup_games_command():
        """Runs one expired-game sweep (for cron or another external scheduler)."""
        from scorecard.services.games.janitor import run_cleanup
        deleted = run_cleanup(flask_app)
        print(f'Deleted {deleted} expired games')

    flask_app.cli.add_command(db_reset_command)
    flask_app.cli.add_command(cleanup_games_command)

    return flask_app
