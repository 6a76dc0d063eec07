from flask import Blueprint, jsonify, request, current_app
from flask_login import current_user

from teamscore.errors import InternalError, NotFoundError, TeamScoreError
from teamscore.schemas import ScoreEntryCreate, parse_request
from teamscore.services.scoring import access, aggregation, ledger
from teamscore.services.scoring.access import AuthSession


scores = Blueprint('scores', __name__)


def _current_session():
    """AuthSession for the logged-in teacher, or None for anonymous callers."""
    if current_user and current_user.is_authenticated:
        return AuthSession.for_teacher(current_user)
    return None


@scores.route('/teams', methods=['GET'])
def list_teams():
    try:
        teams = aggregation.teams_with_weekly_change()
    except Exception as exc:
        current_app.logger.exception("[teams] failed to build team listing")
        raise InternalError('Erreur lors de la récupération des équipes') from exc
    return jsonify(teams)


@scores.route('/recent-activities', methods=['GET'])
def recent_activities():
    try:
        limit = int(current_app.config.get('RECENT_ACTIVITY_LIMIT', aggregation.DEFAULT_FEED_LIMIT))
    except (TypeError, ValueError):
        limit = aggregation.DEFAULT_FEED_LIMIT
    limit = min(limit, aggregation.DEFAULT_FEED_LIMIT)
    try:
        activities = aggregation.recent_activity_feed(limit)
    except Exception as exc:
        current_app.logger.exception("[activities] failed to build activity feed")
        raise InternalError('Erreur lors de la récupération des activités') from exc
    return jsonify(activities)


@scores.route('/score-entries', methods=['POST'])
def create_score_entry():
    # Reject malformed bodies before touching the store
    data = parse_request(ScoreEntryCreate, request.get_json(silent=True))
    try:
        if ledger.get_team(data.teamId) is None:
            raise NotFoundError('Équipe non trouvée')
        teacher = access.authorize_entry(
            data.teacherId,
            session=_current_session(),
            require_session=bool(current_app.config.get('REQUIRE_TEACHER_SESSION')),
        )
        entry = ledger.append_score_entry(data.teamId, teacher.id, data.action, data.points)
    except TeamScoreError:
        raise
    except Exception as exc:
        current_app.logger.exception("[score-entry] unexpected failure")
        raise InternalError('Erreur lors de la saisie du score') from exc
    return jsonify({
        'message': 'Score bien saisi !',
        'scoreEntry': entry.to_dict(),
    })
