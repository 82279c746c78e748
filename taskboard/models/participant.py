from taskboard import db
from taskboard.models.timestamps import utcnow, isoformat

class Participant(db.Model):
    """Membership record linking a user to a project."""
    __tablename__ = 'participants'
    __table_args__ = (
        db.UniqueConstraint('project_id', 'user_id', name='uq_participant_project_user'),
    )

    id = db.Column(db.Integer, primary_key=True)
    project_id = db.Column(db.Integer, db.ForeignKey('projects.id'), nullable=False, index=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    project = db.relationship('Project', back_populates='participants')
    user = db.relationship('User')

    def to_dict(self, include_user=False):
        """Convert participant to dictionary."""
        data = {
            'id': self.id,
            'project_id': self.project_id,
            'user_id': self.user_id,
            'active': self.active,
            'created_at': isoformat(self.created_at)
        }

        if include_user:
            data['user'] = self.user.to_dict() if self.user else None

        return data

    def __repr__(self):
        return f'<Participant {self.id}: user={self.user_id} project={self.project_id}>'
