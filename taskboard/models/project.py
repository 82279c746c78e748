from taskboard import db
from taskboard.models.timestamps import utcnow, isoformat

class Project(db.Model):
    """Top-level container that scopes tasks and participants."""
    __tablename__ = 'projects'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    participants = db.relationship('Participant', back_populates='project')

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'created_at': isoformat(self.created_at)
        }

    def __repr__(self):
        return f'<Project {self.id}: {self.name}>'
