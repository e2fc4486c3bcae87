from typing import Any, Dict, List, Optional
from uuid import UUID
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from .models import Task, User, utcnow
from .query import TaskQuery
from .schemas import TaskCreate


def _apply_filters(statement, filters: Dict[str, Any]):
    for field, value in filters.items():
        statement = statement.where(getattr(Task, field) == value)
    return statement


async def create_task(db: AsyncSession, owner_id: UUID, task: TaskCreate) -> Task:
    """Create a new task owned by ``owner_id``"""
    db_task = Task(owner_id=owner_id, **task.model_dump())
    db.add(db_task)
    await db.commit()
    await db.refresh(db_task)
    return db_task


async def get_owned_task(db: AsyncSession, owner_id: UUID, task_id: UUID) -> Optional[Task]:
    """Get a task by ID, only if it belongs to ``owner_id``"""
    result = await db.execute(
        select(Task).where(Task.id == task_id, Task.owner_id == owner_id)
    )
    return result.scalar_one_or_none()


async def get_tasks(db: AsyncSession, query: TaskQuery) -> List[Task]:
    """Get one page of tasks matching the query filters"""
    statement = _apply_filters(select(Task), query.filters)

    if query.sort.field:
        column = getattr(Task, query.sort.field)
        statement = statement.order_by(column.desc() if query.sort.descending else column.asc())

    statement = statement.offset(query.skip).limit(query.limit)
    result = await db.execute(statement)
    return list(result.scalars().all())


async def count_tasks(db: AsyncSession, filters: Dict[str, Any]) -> int:
    """Get total count of tasks matching the filters, ignoring pagination"""
    statement = _apply_filters(select(func.count(Task.id)), filters)
    result = await db.execute(statement)
    return result.scalar_one()


async def update_task(
    db: AsyncSession,
    owner_id: UUID,
    task_id: UUID,
    update_data: Dict[str, Any]
) -> Optional[Task]:
    """Apply the supplied fields to an owned task"""
    db_task = await get_owned_task(db, owner_id, task_id)
    if not db_task:
        return None

    for field, value in update_data.items():
        setattr(db_task, field, value)
    db_task.updated_at = utcnow()

    await db.commit()
    await db.refresh(db_task)
    return db_task


async def delete_task(db: AsyncSession, owner_id: UUID, task_id: UUID) -> bool:
    """Delete an owned task"""
    db_task = await get_owned_task(db, owner_id, task_id)
    if not db_task:
        return False

    await db.delete(db_task)
    await db.commit()
    return True


async def get_user(db: AsyncSession, user_id: UUID) -> Optional[User]:
    return await db.get(User, user_id)


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def get_user_by_username(db: AsyncSession, username: str) -> Optional[User]:
    result = await db.execute(select(User).where(func.lower(User.username) == username.lower()))
    return result.scalar_one_or_none()


async def create_user(db: AsyncSession, username: str, email: str, password_hash: str) -> User:
    db_user = User(username=username, email=email, password_hash=password_hash)
    db.add(db_user)
    await db.commit()
    await db.refresh(db_user)
    return db_user
