from taskboard import db
from taskboard.models.timestamps import utcnow, isoformat

# Association rows keep an autoincrement id so participants list in insertion order
task_participants = db.Table(
    'task_participants',
    db.Column('id', db.Integer, primary_key=True, autoincrement=True),
    db.Column('task_id', db.Integer, db.ForeignKey('tasks.id', ondelete='CASCADE'), nullable=False, index=True),
    db.Column('participant_id', db.Integer, db.ForeignKey('participants.id', ondelete='CASCADE'), nullable=False),
    db.UniqueConstraint('task_id', 'participant_id', name='uq_task_participant')
)

class Task(db.Model):
    """Unit of work inside a project, optionally time-boxed and assigned to participants."""
    __tablename__ = 'tasks'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    start = db.Column(db.DateTime, nullable=True)
    end = db.Column(db.DateTime, nullable=True)
    creator_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    project_id = db.Column(db.Integer, db.ForeignKey('projects.id'), nullable=False, index=True)
    version = db.Column(db.Integer, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False, index=True)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    creator = db.relationship('User', foreign_keys=[creator_id])
    project = db.relationship('Project', foreign_keys=[project_id])
    participants = db.relationship(
        'Participant',
        secondary=task_participants,
        order_by=task_participants.c.id,
        lazy='select'
    )

    # Every UPDATE/DELETE is qualified by the version the row was read at
    __mapper_args__ = {'version_id_col': version}

    def __init__(self, title, creator_id, project_id, **kwargs):
        self.title = title
        self.creator_id = creator_id
        self.project_id = project_id

        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def has_dates(self):
        return self.start is not None and self.end is not None

    def has_participant(self, participant):
        return any(existing.id == participant.id for existing in self.participants)

    def to_dict(self):
        """Convert task to dictionary with creator and participant users expanded."""
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'start': isoformat(self.start),
            'end': isoformat(self.end),
            'project_id': self.project_id,
            'creator_id': self.creator_id,
            'creator': self.creator.to_dict() if self.creator else None,
            'participants': [participant.to_dict(include_user=True) for participant in self.participants],
            'created_at': isoformat(self.created_at),
            'updated_at': isoformat(self.updated_at),
            'version': self.version
        }

    def __repr__(self):
        return f'<Task {self.id}: {self.title}>'
