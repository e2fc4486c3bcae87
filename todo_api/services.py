"""
Task query and mutation services.

Every operation is scoped to the requesting user's id. A task owned by
someone else is treated exactly like a task that does not exist.
"""

import logging
from dataclasses import dataclass
from typing import List, Mapping, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from . import crud
from .exceptions import TaskNotFoundException
from .models import Task
from .query import build_task_query
from .schemas import TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)


@dataclass
class TaskPage:
    tasks: List[Task]
    total: int
    limit: int
    skip: int

    @property
    def has_more(self) -> bool:
        return self.total > self.skip + self.limit


async def list_tasks(
    db: AsyncSession,
    owner_id: UUID,
    params: Mapping[str, Optional[str]]
) -> TaskPage:
    query = build_task_query(owner_id, params)
    total = await crud.count_tasks(db, query.filters)
    tasks = await crud.get_tasks(db, query)
    return TaskPage(tasks=tasks, total=total, limit=query.limit, skip=query.skip)


async def get_task(db: AsyncSession, owner_id: UUID, task_id: UUID) -> Task:
    task = await crud.get_owned_task(db, owner_id, task_id)
    if task is None:
        raise TaskNotFoundException()
    return task


async def create_task(db: AsyncSession, owner_id: UUID, data: TaskCreate) -> Task:
    task = await crud.create_task(db, owner_id, data)
    logger.info("Task %s created by user %s", task.id, owner_id)
    return task


async def update_task(db: AsyncSession, owner_id: UUID, task_id: UUID, data: TaskUpdate) -> Task:
    """Partial update: only fields present in the request body change"""
    update_data = data.model_dump(exclude_unset=True)
    task = await crud.update_task(db, owner_id, task_id, update_data)
    if task is None:
        raise TaskNotFoundException()
    logger.info("Task %s updated by user %s fields=%s", task_id, owner_id, sorted(update_data))
    return task


async def delete_task(db: AsyncSession, owner_id: UUID, task_id: UUID) -> None:
    if not await crud.delete_task(db, owner_id, task_id):
        raise TaskNotFoundException()
    logger.info("Task %s deleted by user %s", task_id, owner_id)
