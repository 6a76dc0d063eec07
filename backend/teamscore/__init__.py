from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_bcrypt import Bcrypt
from flask_login import LoginManager
from flask_cors import CORS
from flask_migrate import Migrate
import click
import sqlalchemy as sa
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

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(flask_app)
    bcrypt.init_app(flask_app)
    login_manager.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, supports_credentials=True, origins=allowed_origins)

    # Import and register blueprints here
    from teamscore.main import main
    flask_app.register_blueprint(main, url_prefix='/api')

    from teamscore.api.scores import scores
    flask_app.register_blueprint(scores, url_prefix='/api')

    from teamscore.errors import TeamScoreError

    @flask_app.errorhandler(TeamScoreError)
    def handle_team_score_error(exc):
        return jsonify({'message': exc.message}), exc.status_code

    # Flask-Login user loader
    from teamscore.models import Teacher, Team

    @login_manager.user_loader
    def load_user(user_id):
        return db.session.get(Teacher, int(user_id))

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({'message': 'Authentification requise'}), 401

    from teamscore.seed import seed_default_data

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            seed_default_data(flask_app.config)
            print('Database has been reset and seeded!')

    @click.command('seed')
    def seed_command():
        """Seeds the team roster and default teacher if the database is empty."""
        with flask_app.app_context():
            if seed_default_data(flask_app.config):
                print('Default teams and teacher created.')
            else:
                print('Teams already present, nothing to seed.')

    flask_app.cli.add_command(db_reset_command)
    flask_app.cli.add_command(seed_command)

    if flask_app.config.get('AUTO_SEED'):
        with flask_app.app_context():
            if sa.inspect(db.engine).has_table(Team.__tablename__):
                seed_default_data(flask_app.config)
            else:
                flask_app.logger.warning("[seed] team table missing, run 'flask db upgrade' first")

    return flask_app
