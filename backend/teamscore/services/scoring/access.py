from dataclasses import dataclass
from typing import Optional

from flask import current_app

from teamscore.errors import AuthError, NotFoundError
from teamscore.models import Teacher
from . import ledger

INVALID_CREDENTIALS = 'Identifiant ou mot de passe incorrect'


@dataclass(frozen=True)
class AuthSession:
    """The authenticated teacher acting on a request."""
    teacher_id: int
    login_id: str

    @classmethod
    def for_teacher(cls, teacher: Teacher) -> 'AuthSession':
        return cls(teacher_id=teacher.id, login_id=teacher.teacher_id)

    def to_dict(self):
        return {'id': self.teacher_id, 'teacherId': self.login_id}


def authenticate(login_id: str, password: str) -> AuthSession:
    """Check a login/password pair.

    Unknown login and wrong password raise the same AuthError so callers
    cannot tell which one failed.
    """
    teacher = ledger.get_teacher_by_login_id(login_id)
    if teacher is None or not teacher.check_password(password):
        current_app.logger.info(f"[login] rejected login_id={login_id!r}")
        raise AuthError(INVALID_CREDENTIALS)
    current_app.logger.info(f"[login] teacher={teacher.id} login_id={login_id!r}")
    return AuthSession.for_teacher(teacher)


def authorize_entry(
    teacher_pk: int,
    session: Optional[AuthSession] = None,
    require_session: bool = False,
) -> Teacher:
    """Resolve the teacher a score entry will be recorded for."""
    if session is None and require_session:
        raise AuthError('Authentification requise')
    if session is not None and session.teacher_id != teacher_pk:
        current_app.logger.warning(
            f"[score-entry] session teacher={session.teacher_id} does not match payload teacher={teacher_pk}"
        )
        raise AuthError('La session ne correspond pas à cet enseignant')
    teacher = ledger.get_teacher(teacher_pk)
    if teacher is None:
        raise NotFoundError('Enseignant non trouvé')
    return teacher
