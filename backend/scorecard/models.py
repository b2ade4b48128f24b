from scorecard import db, bcrypt
from scorecard.course import course_holes
from flask_login import UserMixin
from datetime import datetime, timezone
import json
import string
import random

GAME_CODE_LENGTH = 6

def utcnow():
    """Naive UTC timestamp (columns are stored without a zone)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)

def _iso(value):
    return value.isoformat() if value else None

class User(UserMixin, db.Model):
    __tablename__ = 'users'
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(64), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(256), nullable=False)
    role = db.Column(db.String(32), nullable=False, default='player') # player, admin
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    def set_password(self, password):
        self.password_hash = bcrypt.generate_password_hash(password).decode('utf-8')

    def check_password(self, password):
        return bcrypt.check_password_hash(self.password_hash, password)

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
            'role': self.role,
        }

def generate_game_code(length=GAME_CODE_LENGTH):
    """Generate a unique join code."""
    while True:
        code = ''.join(random.choices(string.ascii_uppercase + string.digits, k=length))
        if not Game.query.filter_by(code=code).first():
            return code

class Game(db.Model):
    __tablename__ = 'games'
    id = db.Column(db.Integer, primary_key=True)
    code = db.Column(db.String(GAME_CODE_LENGTH), unique=True, nullable=False, index=True)
    host_name = db.Column(db.String(64), nullable=False)
    course_type = db.Column(db.String(16), nullable=False) # front9, back9, full18
    current_hole = db.Column(db.Integer, nullable=False, default=1)
    status = db.Column(db.String(16), nullable=False, default='waiting') # waiting, playing, completed
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)
    players = db.relationship('Player', back_populates='game', cascade='all, delete-orphan', order_by='Player.id')
    scores = db.relationship('Score', back_populates='game', cascade='all, delete-orphan', order_by='Score.id')
    photos = db.relationship('Photo', back_populates='game', cascade='all, delete-orphan', order_by='Photo.id')

    def __init__(self, **kwargs):
        super(Game, self).__init__(**kwargs)
        if not self.code:
            self.code = generate_game_code()
        if self.current_hole is None:
            self.current_hole = 1
        if self.status is None:
            self.status = 'waiting'
        if self.created_at is None:
            self.created_at = utcnow()

    @property
    def total_holes(self):
        return course_holes(self.course_type)

    @property
    def host_player(self):
        return next((p for p in self.players if p.is_host), None)

    def has_player_named(self, name, exclude_id=None):
        lowered = name.lower()
        return any(p.name.lower() == lowered and p.id != exclude_id for p in self.players)

    def to_dict(self, include_players=True):
        data = {
            'id': self.id,
            'code': self.code,
            'hostName': self.host_name,
            'courseType': self.course_type,
            'currentHole': self.current_hole,
            'totalHoles': self.total_holes,
            'status': self.status,
            'createdAt': _iso(self.created_at),
        }
        if include_players:
            data['players'] = [p.to_dict() for p in self.players]
            data['scores'] = [s.to_dict() for s in self.scores]
            data['photos'] = [ph.to_dict() for ph in self.photos]
        return data

class Player(db.Model):
    __tablename__ = 'players'
    id = db.Column(db.Integer, primary_key=True)
    game_id = db.Column(db.Integer, db.ForeignKey('games.id', ondelete='CASCADE'), nullable=False, index=True)
    name = db.Column(db.String(64), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='SET NULL'), nullable=True)
    is_host = db.Column(db.Boolean, nullable=False, default=False)
    is_local = db.Column(db.Boolean, nullable=False, default=False)
    joined_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    game = db.relationship('Game', back_populates='players')
    user = db.relationship('User')
    scores = db.relationship('Score', back_populates='player', cascade='all, delete')
    photos = db.relationship('Photo', back_populates='player', cascade='all, delete')

    def to_dict(self):
        return {
            'id': self.id,
            'gameId': self.game_id,
            'name': self.name,
            'userId': self.user_id,
            'isHost': bool(self.is_host),
            'isLocal': bool(self.is_local),
            'joinedAt': _iso(self.joined_at),
        }

class Score(db.Model):
    __tablename__ = 'scores'
    __table_args__ = (
        db.UniqueConstraint('player_id', 'hole', name='uq_scores_player_hole'),
    )
    id = db.Column(db.Integer, primary_key=True)
    game_id = db.Column(db.Integer, db.ForeignKey('games.id', ondelete='CASCADE'), nullable=False, index=True)
    player_id = db.Column(db.Integer, db.ForeignKey('players.id', ondelete='CASCADE'), nullable=False)
    hole = db.Column(db.Integer, nullable=False)
    strokes = db.Column(db.Integer, nullable=False)
    confirmed = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    game = db.relationship('Game', back_populates='scores')
    player = db.relationship('Player', back_populates='scores')

    def to_dict(self):
        return {
            'id': self.id,
            'gameId': self.game_id,
            'playerId': self.player_id,
            'hole': self.hole,
            'strokes': self.strokes,
            'confirmed': bool(self.confirmed),
            'createdAt': _iso(self.created_at),
        }

class Photo(db.Model):
    __tablename__ = 'photos'
    id = db.Column(db.Integer, primary_key=True)
    game_id = db.Column(db.Integer, db.ForeignKey('games.id', ondelete='CASCADE'), nullable=False, index=True)
    player_id = db.Column(db.Integer, db.ForeignKey('players.id', ondelete='CASCADE'), nullable=False)
    hole = db.Column(db.Integer, nullable=True) # null when taken in the waiting room
    file_name = db.Column(db.String(255), nullable=False)
    original_name = db.Column(db.String(255), nullable=False)
    file_size = db.Column(db.Integer, nullable=False)
    mime_type = db.Column(db.String(64), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    game = db.relationship('Game', back_populates='photos')
    player = db.relationship('Player', back_populates='photos')

    def to_dict(self):
        return {
            'id': self.id,
            'gameId': self.game_id,
            'playerId': self.player_id,
            'hole': self.hole,
            'fileName': self.file_name,
            'originalName': self.original_name,
            'fileSize': self.file_size,
            'mimeType': self.mime_type,
            'createdAt': _iso(self.created_at),
        }

class CourseSetting(db.Model):
    """Per-course settings that must survive restarts (satellite imagery, hole pins)."""
    __tablename__ = 'course_settings'
    course_type = db.Column(db.String(16), primary_key=True)
    satellite_image_path = db.Column(db.String(255), nullable=True)
    satellite_thumbnail_path = db.Column(db.String(255), nullable=True)
    hole_coordinates = db.Column(db.Text, nullable=True) # JSON-encoded list
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    def to_dict(self):
        return {
            'courseType': self.course_type,
            'satelliteImagePath': self.satellite_image_path,
            'satelliteThumbnailPath': self.satellite_thumbnail_path,
            'holeCoordinates': json.loads(self.hole_coordinates) if self.hole_coordinates else [],
            'updatedAt': _iso(self.updated_at),
        }
