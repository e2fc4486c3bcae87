from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Query
from .. import services
from ..deps import CurrentUser, Session
from ..exceptions import server_errors
from ..schemas import (
    ErrorResponse,
    MessageResponse,
    Pagination,
    TaskCreate,
    TaskDetailResponse,
    TaskListResponse,
    TaskMutationResponse,
    TaskResponse,
    TaskUpdate,
)

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.get("", response_model=TaskListResponse)
async def list_tasks(
    user: CurrentUser,
    db: Session,
    completed: Optional[str] = Query(None, description="'true' or 'false'"),
    priority: Optional[str] = Query(None, description="low, medium or high"),
    sort: Optional[str] = Query(None, description="Field name, '-' prefix for descending (default -createdAt)"),
    limit: Optional[str] = Query(None, description="Page size (default 10, max 100)"),
    skip: Optional[str] = Query(None, description="Number of tasks to skip"),
):
    """List the caller's tasks with filtering, sorting and pagination"""
    params = {"completed": completed, "priority": priority, "sort": sort, "limit": limit, "skip": skip}
    with server_errors("fetching tasks"):
        page = await services.list_tasks(db, user.id, params)
    return TaskListResponse(
        tasks=[TaskResponse.from_db(task) for task in page.tasks],
        pagination=Pagination(total=page.total, limit=page.limit, skip=page.skip, has_more=page.has_more),
    )


@router.post("", response_model=TaskMutationResponse, status_code=201)
async def create_task(task: TaskCreate, user: CurrentUser, db: Session):
    """Create a new task"""
    with server_errors("creating task"):
        db_task = await services.create_task(db, user.id, task)
    return TaskMutationResponse(message="Task created successfully", task=TaskResponse.from_db(db_task))


@router.get("/{task_id}", response_model=TaskDetailResponse, responses={404: {"model": ErrorResponse}})
async def get_task(task_id: UUID, user: CurrentUser, db: Session):
    """Get a specific task by ID"""
    with server_errors("fetching task"):
        db_task = await services.get_task(db, user.id, task_id)
    return TaskDetailResponse(task=TaskResponse.from_db(db_task))


@router.put("/{task_id}", response_model=TaskMutationResponse, responses={404: {"model": ErrorResponse}})
async def update_task(task_id: UUID, user: CurrentUser, db: Session, task_update: Optional[TaskUpdate] = None):
    """Update a specific task"""
    with server_errors("updating task"):
        db_task = await services.update_task(db, user.id, task_id, task_update or TaskUpdate())
    return TaskMutationResponse(message="Task updated successfully", task=TaskResponse.from_db(db_task))


@router.delete("/{task_id}", response_model=MessageResponse, responses={404: {"model": ErrorResponse}})
async def delete_task(task_id: UUID, user: CurrentUser, db: Session):
    """Delete a specific task"""
    with server_errors("deleting task"):
        await services.delete_task(db, user.id, task_id)
    return MessageResponse(message="Task deleted successfully")
