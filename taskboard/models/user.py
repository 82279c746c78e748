from taskboard import db
from taskboard.models.timestamps import utcnow, isoformat

class User(db.Model):
    """Registered account. Owned by the identity service, read here to resolve JWT identities."""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    first_name = db.Column(db.String(100), nullable=True)
    last_name = db.Column(db.String(100), nullable=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    @property
    def full_name(self):
        name = f"{self.first_name or ''} {self.last_name or ''}".strip()
        return name or self.email.split('@')[0]

    def to_dict(self):
        """Convert user to dictionary."""
        return {
            'id': self.id,
            'email': self.email,
            'first_name': self.first_name,
            'last_name': self.last_name,
            'full_name': self.full_name,
            'created_at': isoformat(self.created_at)
        }

    def __repr__(self):
        return f'<User {self.id}: {self.email}>'
