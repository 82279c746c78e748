"""
Pytest configuration and fixtures
"""
import itertools

import pytest
from flask_jwt_extended import create_access_token

from taskboard import create_app, db as _db
from taskboard.events import api_action
from taskboard.models import User, Project, Participant, Task

_emails = itertools.count(1)


@pytest.fixture
def app():
    """Create application with a fresh in-memory database for each test."""
    app = create_app('testing')

    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def db(app):
    return _db


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def make_user(db):
    def _make_user(first_name='Test', last_name='User'):
        user = User(email=f'user{next(_emails)}@example.com', first_name=first_name, last_name=last_name)
        db.session.add(user)
        db.session.commit()
        return user
    return _make_user


@pytest.fixture
def make_project(db):
    def _make_project(name='Project'):
        project = Project(name=name)
        db.session.add(project)
        db.session.commit()
        return project
    return _make_project


@pytest.fixture
def make_participant(db):
    def _make_participant(project, user, active=True):
        participant = Participant(project_id=project.id, user_id=user.id, active=active)
        db.session.add(participant)
        db.session.commit()
        return participant
    return _make_participant


@pytest.fixture
def make_task(db):
    def _make_task(project, creator, title='Existing task', **kwargs):
        task = Task(title=title, creator_id=creator.id, project_id=project.id, **kwargs)
        db.session.add(task)
        db.session.commit()
        return task
    return _make_task


@pytest.fixture
def user(make_user):
    return make_user('Ada', 'Lovelace')


@pytest.fixture
def project(make_project):
    return make_project('Apollo')


@pytest.fixture
def participant(make_participant, project, user):
    return make_participant(project, user)


def bearer_headers(user_identity):
    token = create_access_token(identity=str(user_identity))
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def headers_for(app):
    """Build Authorization headers for any JWT identity."""
    return bearer_headers


@pytest.fixture
def auth_headers(user, participant):
    """Authorization headers for an active participant of `project`."""
    return bearer_headers(user.id)


@pytest.fixture
def tasks_url(project):
    return f'/api/projects/{project.id}/tasks'


@pytest.fixture
def emitted(app):
    """Collect every api-action notification sent while the test runs."""
    events = []

    def receiver(sender, **kwargs):
        events.append(kwargs)

    api_action.connect(receiver, sender=app)
    yield events
    api_action.disconnect(receiver, sender=app)
