from flask import Blueprint, jsonify
from flask_login import login_user, logout_user, login_required, current_user
from scorecard import db
from scorecard.models import User
from scorecard.services.games.progression import list_games
from scorecard.validation import json_body

auth = Blueprint('auth', __name__)

@auth.route('/register', methods=['POST'])
def register():
    data = json_body()
    if not data.get('username') or not data.get('password'):
        return jsonify({'error': 'Missing username or password'}), 400

    if User.query.filter_by(username=data['username']).first():
        return jsonify({'error': 'Username already exists'}), 400

    user = User(username=data['username'])
    user.set_password(data['password'])
    db.session.add(user)
    db.session.commit()
    login_user(user, remember=True)

    return jsonify({'message': 'User created successfully', 'user': user.to_dict()}), 201

@auth.route('/login', methods=['POST'])
def login():
    data = json_body()
    user = User.query.filter_by(username=data.get('username')).first()
    if user and user.check_password(data.get('password') or ''):
        login_user(user, remember=True)
        return jsonify({'message': 'Logged in successfully.', 'user': user.to_dict()})
    return jsonify({'error': 'Invalid username or password'}), 401

@auth.route('/logout', methods=['POST'])
@login_required
def logout():
    logout_user()
    return jsonify({'message': 'Logged out successfully.'})

@auth.route('/user', methods=['GET'])
def get_user():
    if not current_user.is_authenticated:
        return jsonify({'error': 'Not authenticated'}), 401
    return jsonify(current_user.to_dict())

@auth.route('/games', methods=['GET'])
@login_required
def my_games():
    """Every game the logged-in user has played in, newest first."""
    return jsonify([g.to_dict() for g in list_games(user_id=current_user.id)])

@auth.route('/games/completed', methods=['GET'])
@login_required
def my_completed_games():
    return jsonify([g.to_dict() for g in list_games(status='completed', user_id=current_user.id)])
