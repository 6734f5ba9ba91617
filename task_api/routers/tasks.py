from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path

from task_api.repository import TaskRepository, get_repository
from task_api.schemas.task import TaskIn, TaskOut

router = APIRouter(prefix="/tasks", tags=["tasks"])

# SQLite INTEGER is 64-bit; larger ids cannot be bound
MIN_ID, MAX_ID = -2**63, 2**63 - 1


@router.post("", response_model=TaskOut)
def create_task(task: TaskIn, repo: TaskRepository = Depends(get_repository)):
    return repo.insert(task.title, task.description, task.due_date, task.status)


@router.get("/{task_id}", response_model=TaskOut)
def get_task(task_id: int = Path(ge=MIN_ID, le=MAX_ID), repo: TaskRepository = Depends(get_repository)):
    task = repo.find_by_id(task_id)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@router.put("/{task_id}", response_model=TaskOut)
def update_task(
    task: TaskIn,
    task_id: int = Path(ge=MIN_ID, le=MAX_ID),
    repo: TaskRepository = Depends(get_repository),
):
    """Replace every field of the task. Unknown ids are accepted silently."""
    repo.update(task_id, task.title, task.description, task.due_date, task.status)
    return TaskOut(id=task_id, **task.model_dump())


@router.delete("/{task_id}")
def delete_task(task_id: int = Path(ge=MIN_ID, le=MAX_ID), repo: TaskRepository = Depends(get_repository)):
    repo.delete(task_id)
    return {"message": "Task deleted successfully"}


@router.get("", response_model=List[TaskOut])
def list_tasks(repo: TaskRepository = Depends(get_repository)):
    return repo.list_all()
