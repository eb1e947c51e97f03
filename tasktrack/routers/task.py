# tasktrack/routers/task.py
from fastapi import APIRouter, Depends, status

from tasktrack.dependencies.auth import CurrentUser, get_current_user, get_task_service
from tasktrack.schemas.common import success_response
from tasktrack.schemas.task import TaskCreate, TaskRead, TaskUpdate
from tasktrack.services.task_service import TaskService

router = APIRouter(prefix="/api/tasks", tags=["Tasks"])


@router.get("")
def get_all_tasks(
    user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    tasks = service.list_tasks(user.user_id)
    return success_response([TaskRead.model_validate(t) for t in tasks])


@router.get("/{task_id}")
def get_task(
    task_id: str,
    user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    return success_response(TaskRead.model_validate(service.get_task(user.user_id, task_id)))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_task(
    body: TaskCreate,
    user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    task = service.create_task(user.user_id, body)
    return success_response(TaskRead.model_validate(task), "Task created successfully")


@router.put("/{task_id}")
def update_task(
    task_id: str,
    body: TaskUpdate,
    user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    task = service.update_task(user.user_id, task_id, body)
    return success_response(TaskRead.model_validate(task), "Task updated successfully")


@router.delete("/{task_id}")
def delete_task(
    task_id: str,
    user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    service.delete_task(user.user_id, task_id)
    return success_response(None, "Task deleted successfully")
