import os
import sys
import pytest

# Ensure the backend root (containing the `teamscore` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from teamscore import create_app, db


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    AUTO_SEED = False
    SEED_TEACHER_ID = 'ENS001'
    SEED_TEACHER_PASSWORD = 'password123'
    WEEKLY_WINDOW_DAYS = 7
    RECENT_ACTIVITY_LIMIT = 10
    REQUIRE_TEACHER_SESSION = False
    BCRYPT_LOG_ROUNDS = 4


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import teamscore.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def seeded(flask_app):
    from teamscore.seed import seed_default_data
    seed_default_data(flask_app.config)
    return flask_app


@pytest.fixture()
def teams(seeded):
    from teamscore.models import Team
    return {t.name: t.id for t in Team.query.all()}


@pytest.fixture()
def teacher_pk(seeded):
    from teamscore.models import Teacher
    return Teacher.query.filter_by(teacher_id='ENS001').first().id
