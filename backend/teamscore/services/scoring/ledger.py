from datetime import datetime
from typing import Iterable, List, Mapping, Optional

from flask import current_app
from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import contains_eager

from teamscore import db
from teamscore.errors import InternalError, NotFoundError
from teamscore.models import ScoreEntry, Teacher, Team


def get_teacher(teacher_pk: int) -> Optional[Teacher]:
    return db.session.get(Teacher, teacher_pk)


def get_teacher_by_login_id(login_id: str) -> Optional[Teacher]:
    return Teacher.query.filter_by(teacher_id=login_id).first()


def get_team(team_pk: int) -> Optional[Team]:
    return db.session.get(Team, team_pk)


def list_teams() -> List[Team]:
    return Team.query.order_by(Team.id).all()


def _increment_team_total(team_pk: int, points: int) -> None:
    # Increment happens inside the database so concurrent appends serialize on the row.
    db.session.execute(
        update(Team)
        .where(Team.id == team_pk)
        .values(total_score=Team.total_score + points)
    )


def append_score_entry(
    team_pk: int,
    teacher_pk: int,
    action: str,
    points: int,
    timestamp: Optional[datetime] = None,
) -> ScoreEntry:
    """Append a score entry and bump the team's total in one transaction.

    Raises NotFoundError when the team or teacher does not exist, and
    InternalError when the database rejects the write. In both cases
    nothing is persisted.
    """
    if get_team(team_pk) is None:
        raise NotFoundError('Équipe non trouvée')
    if get_teacher(teacher_pk) is None:
        raise NotFoundError('Enseignant non trouvé')

    entry = ScoreEntry(team_id=team_pk, teacher_id=teacher_pk, action=action, points=points)
    if timestamp is not None:
        entry.timestamp = timestamp
    try:
        db.session.add(entry)
        db.session.flush()
        _increment_team_total(team_pk, points)
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.exception(f"[score-entry] append failed team={team_pk} teacher={teacher_pk}")
        raise InternalError('Erreur lors de la saisie du score') from exc

    current_app.logger.info(
        f"[score-entry] id={entry.id} team={team_pk} teacher={teacher_pk} points={points}"
    )
    return entry


def list_recent_entries(limit: int) -> List[ScoreEntry]:
    """Newest entries first, each with its team loaded."""
    return (
        ScoreEntry.query
        .join(ScoreEntry.team)
        .options(contains_eager(ScoreEntry.team))
        .order_by(ScoreEntry.timestamp.desc(), ScoreEntry.id.desc())
        .limit(limit)
        .all()
    )


def list_entries_for_team_since(team_pk: int, cutoff: datetime) -> List[ScoreEntry]:
    return (
        ScoreEntry.query
        .filter(ScoreEntry.team_id == team_pk, ScoreEntry.timestamp >= cutoff)
        .order_by(ScoreEntry.timestamp.desc(), ScoreEntry.id.desc())
        .all()
    )


def initialize_if_empty(seed_teams: Iterable[Mapping], seed_teacher: Mapping) -> bool:
    """Insert the fixed roster and one teacher unless any team already exists.

    Returns True when the seed was written.
    """
    if Team.query.first() is not None:
        return False

    for row in seed_teams:
        team = Team(name=row['name'], icon=row['icon'], color=row['color'], total_score=0)
        team.member_names = row.get('members', [])
        db.session.add(team)

    teacher = Teacher(teacher_id=seed_teacher['teacherId'])
    teacher.set_password(seed_teacher['password'])
    db.session.add(teacher)
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise
    current_app.logger.info(f"[seed] created default teams and teacher {seed_teacher['teacherId']}")
    return True
