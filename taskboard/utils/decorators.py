"""
Request guards for project-scoped endpoints.

A guard receives the view's URL arguments and returns None to let the request
through, or a response tuple that ends it. Guards run in the order given and
the first rejection wins.
"""
from functools import wraps
from flask import g
from flask_jwt_extended import verify_jwt_in_request, get_jwt_identity
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from taskboard import db
from taskboard.models import User, Participant
from taskboard.utils.logging_helpers import log_project_access_attempt
from taskboard.utils.response_helpers import unauthorized, forbidden


def ensure_authenticated(**view_args):
    """Require a valid bearer access token."""
    try:
        verify_jwt_in_request()
    except (JWTExtendedException, PyJWTError) as e:
        log_project_access_attempt(None, view_args.get('project_id'), 'ensure_authenticated', success=False)
        return unauthorized(f'Authentication required: {str(e)}')
    return None


def ensure_user(**view_args):
    """Resolve the token identity to a registered user and keep it on g."""
    try:
        user_id = int(get_jwt_identity())
    except (TypeError, ValueError):
        user_id = None

    user = db.session.get(User, user_id) if user_id is not None else None
    if not user:
        log_project_access_attempt(user_id, view_args.get('project_id'), 'ensure_user', success=False)
        return unauthorized('User not found', error_code='unknown_user')

    g.current_user = user
    return None


def ensure_active_project_participant(**view_args):
    """Require an active participant record linking the user to the path project."""
    project_id = view_args.get('project_id')
    participant = Participant.query.filter_by(
        project_id=project_id,
        user_id=g.current_user.id,
        active=True
    ).first()

    if not participant:
        log_project_access_attempt(g.current_user.id, project_id, 'ensure_active_project_participant', success=False)
        return forbidden('You are not an active participant of this project', error_code='not_a_project_participant')

    g.current_participant = participant
    return None


PROJECT_PARTICIPANT_GUARDS = (
    ensure_authenticated,
    ensure_user,
    ensure_active_project_participant,
)


def guarded(*guards):
    """
    Decorator running guards before the view; the view receives the current user first.

    Usage:
        @tasks_bp.route('', methods=['GET'])
        @guarded(*PROJECT_PARTICIPANT_GUARDS)
        def list_tasks(current_user, project_id):
            ...
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            for guard in guards:
                rejection = guard(**kwargs)
                if rejection is not None:
                    return rejection
            return f(g.get('current_user'), *args, **kwargs)
        return decorated_function
    return decorator


project_participant_required = guarded(*PROJECT_PARTICIPANT_GUARDS)
