import pytest

from teamscore.errors import AuthError, NotFoundError
from teamscore.services.scoring import access
from teamscore.services.scoring.access import AuthSession


def test_authenticate_returns_session(seeded, teacher_pk):
    session = access.authenticate('ENS001', 'password123')
    assert session == AuthSession(teacher_id=teacher_pk, login_id='ENS001')
    assert session.to_dict() == {'id': teacher_pk, 'teacherId': 'ENS001'}


def test_unknown_login_and_wrong_password_fail_identically(seeded):
    with pytest.raises(AuthError) as unknown:
        access.authenticate('ENS999', 'password123')
    with pytest.raises(AuthError) as wrong:
        access.authenticate('ENS001', 'not-the-password')
    assert unknown.value.message == wrong.value.message == access.INVALID_CREDENTIALS
    assert unknown.value.status_code == wrong.value.status_code == 401


def test_authorize_entry_without_session(seeded, teacher_pk):
    teacher = access.authorize_entry(teacher_pk)
    assert teacher.teacher_id == 'ENS001'


def test_authorize_entry_unknown_teacher(seeded):
    with pytest.raises(NotFoundError):
        access.authorize_entry(4242)


def test_authorize_entry_rejects_mismatched_session(seeded, teacher_pk):
    other = AuthSession(teacher_id=teacher_pk + 1, login_id='ENS002')
    with pytest.raises(AuthError):
        access.authorize_entry(teacher_pk, session=other)


def test_authorize_entry_can_require_session(seeded, teacher_pk):
    with pytest.raises(AuthError):
        access.authorize_entry(teacher_pk, require_session=True)
    session = AuthSession(teacher_id=teacher_pk, login_id='ENS001')
    assert access.authorize_entry(teacher_pk, session=session, require_session=True).id == teacher_pk
