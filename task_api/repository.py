import logging
from contextlib import contextmanager
from typing import List, Optional

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from task_api.database import close_store
from task_api.errors import StorageError
from task_api.models.task import Task

logger = logging.getLogger(__name__)


class TaskRepository:
    """Single-statement access to the tasks table.

    Every operation runs in its own short session. Store failures surface as
    StorageError; a missing row is reported by find_by_id returning None.
    Update and delete do not report whether a row matched.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._closed = False
        # rows stay readable after the session that loaded them is closed
        self._sessions = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    @contextmanager
    def _session(self, op: str):
        db: Session = self._sessions()
        try:
            yield db
        except SQLAlchemyError as e:
            logger.exception("Task store failure during %s", op)
            raise StorageError(f"{op} failed: {e}") from e
        finally:
            db.close()

    def insert(self, title: str, description: str, due_date: str, status: str) -> Task:
        with self._session("insert") as db:
            task = Task(title=title, description=description, due_date=due_date, status=status)
            db.add(task)
            db.commit()
            logger.debug("Inserted task %s", task.id)
            return task

    def find_by_id(self, task_id: int) -> Optional[Task]:
        with self._session("find_by_id") as db:
            return db.query(Task).filter(Task.id == task_id).first()

    def update(self, task_id: int, title: str, description: str, due_date: str, status: str) -> None:
        with self._session("update") as db:
            count = db.query(Task).filter(Task.id == task_id).update(
                {
                    Task.title: title,
                    Task.description: description,
                    Task.due_date: due_date,
                    Task.status: status,
                },
                synchronize_session=False,
            )
            db.commit()
            logger.debug("Updated task %s (%d row(s))", task_id, count)

    def delete(self, task_id: int) -> None:
        with self._session("delete") as db:
            count = db.query(Task).filter(Task.id == task_id).delete(synchronize_session=False)
            db.commit()
            logger.debug("Deleted task %s (%d row(s))", task_id, count)

    def list_all(self) -> List[Task]:
        with self._session("list_all") as db:
            return db.query(Task).order_by(Task.id).all()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        close_store(self.engine)


def get_repository(request: Request) -> TaskRepository:
    return request.app.state.tasks
