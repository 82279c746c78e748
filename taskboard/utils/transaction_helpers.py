"""
Database transaction management utilities
"""
from contextlib import contextmanager
from flask import current_app
from taskboard import db


@contextmanager
def db_transaction(operation='transaction'):
    """
    Commit the session on exit, or roll back, log and re-raise on error.

    Args:
        operation: Short label used in the failure log, e.g. 'save task 12'

    Usage:
        with db_transaction('remove task 12') as session:
            session.delete(task)
    """
    try:
        yield db.session
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f'{operation} failed, rolled back: {str(e)}', exc_info=True)
        raise
