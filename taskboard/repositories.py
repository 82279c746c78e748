"""
Repositories over the SQLAlchemy session, injected into services.
"""
from typing import List, Optional

from sqlalchemy.orm import selectinload

from taskboard import db
from taskboard.models import Task, Participant
from taskboard.utils.transaction_helpers import db_transaction

# Relations expanded on every task returned to a client
TASK_POPULATE_OPTIONS = (
    selectinload(Task.creator),
    selectinload(Task.participants).selectinload(Participant.user),
)


class TaskRepository:
    """Persistence for Task rows."""

    def list_for_project(self, project_id: int) -> List[Task]:
        return (
            Task.query
            .options(*TASK_POPULATE_OPTIONS)
            .filter(Task.project_id == project_id)
            .order_by(Task.created_at.asc(), Task.id.asc())
            .all()
        )

    def get(self, task_id: int) -> Optional[Task]:
        return db.session.get(Task, task_id)

    def populate(self, task: Task) -> Task:
        """Reload the task with creator and participant users expanded."""
        return (
            Task.query
            .options(*TASK_POPULATE_OPTIONS)
            .populate_existing()
            .filter(Task.id == task.id)
            .one()
        )

    def add(self, task: Task) -> Task:
        with db_transaction(f'create task in project {task.project_id}') as session:
            session.add(task)
        return task

    def save(self, task: Task) -> Task:
        with db_transaction(f'save task {task.id}') as session:
            session.add(task)
        return task

    def remove(self, task: Task) -> None:
        with db_transaction(f'remove task {task.id}') as session:
            session.delete(task)


class ParticipantRepository:
    """Read access to project participants."""

    def get_in_project(self, project_id: int, participant_id: int) -> Optional[Participant]:
        return Participant.query.filter_by(project_id=project_id, id=participant_id).first()
