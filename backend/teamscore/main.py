from flask import Blueprint, request, jsonify, current_app
from flask_login import login_user, logout_user, login_required

from teamscore.errors import InternalError, TeamScoreError
from teamscore.schemas import LoginRequest, parse_request
from teamscore.services.scoring import access, ledger

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the team scoreboard server!'})

@main.route('/login', methods=['POST'])
def login():
    data = parse_request(LoginRequest, request.get_json(silent=True))
    try:
        session = access.authenticate(data.teacherId, data.password)
        login_user(ledger.get_teacher(session.teacher_id))
    except TeamScoreError:
        raise
    except Exception as exc:
        current_app.logger.exception("[login] unexpected failure")
        raise InternalError('Erreur de connexion') from exc
    return jsonify({
        'message': 'Connexion réussie',
        'teacher': session.to_dict(),
    })

@main.route('/logout', methods=['POST'])
@login_required
def logout():
    logout_user()
    return jsonify({'message': 'Déconnexion réussie'})
