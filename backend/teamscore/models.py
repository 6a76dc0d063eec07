from teamscore import db, bcrypt
from flask_login import UserMixin
from datetime import datetime, timezone
import json


def utcnow():
    """Naive UTC timestamp, the form score entries are stored in."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Teacher(UserMixin, db.Model):
    __tablename__ = 'teacher'
    id = db.Column(db.Integer, primary_key=True)
    teacher_id = db.Column(db.String(64), unique=True, nullable=False, index=True)  # login handle
    password_hash = db.Column(db.String(256), nullable=False)
    score_entries = db.relationship('ScoreEntry', back_populates='teacher', lazy='dynamic')

    def set_password(self, password):
        self.password_hash = bcrypt.generate_password_hash(password).decode('utf-8')

    def check_password(self, password):
        return bcrypt.check_password_hash(self.password_hash, password)

    def to_dict(self):
        return {
            'id': self.id,
            'teacherId': self.teacher_id,
        }


class Team(db.Model):
    __tablename__ = 'team'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(128), nullable=False)
    members = db.Column(db.Text, nullable=False, default='[]')  # JSON-encoded list of names
    icon = db.Column(db.String(64), nullable=False)
    color = db.Column(db.String(32), nullable=False)
    total_score = db.Column(db.Integer, nullable=False, default=0)
    score_entries = db.relationship('ScoreEntry', back_populates='team', lazy='dynamic')

    @property
    def member_names(self):
        try:
            return json.loads(self.members) if self.members else []
        except ValueError:
            return []

    @member_names.setter
    def member_names(self, names):
        self.members = json.dumps(list(names))

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'members': self.member_names,
            'icon': self.icon,
            'color': self.color,
            'totalScore': self.total_score,
        }


class ScoreEntry(db.Model):
    __tablename__ = 'score_entry'
    id = db.Column(db.Integer, primary_key=True)
    team_id = db.Column(db.Integer, db.ForeignKey('team.id'), nullable=False, index=True)
    teacher_id = db.Column(db.Integer, db.ForeignKey('teacher.id'), nullable=False)
    action = db.Column(db.Text, nullable=False)
    points = db.Column(db.Integer, nullable=False)
    timestamp = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)

    team = db.relationship('Team', back_populates='score_entries')
    teacher = db.relationship('Teacher', back_populates='score_entries')

    def to_dict(self, include_team=False):
        data = {
            'id': self.id,
            'teamId': self.team_id,
            'teacherId': self.teacher_id,
            'action': self.action,
            'points': self.points,
            'timestamp': self.timestamp.replace(tzinfo=timezone.utc).isoformat() if self.timestamp else None,
        }
        if include_team:
            data['team'] = self.team.to_dict() if self.team else None
        return data
