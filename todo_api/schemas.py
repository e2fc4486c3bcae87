from datetime import datetime
from typing import List, Literal, Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from .models import Task, User

Priority = Literal["low", "medium", "high"]

EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class TaskCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    priority: Priority = "medium"
    due_date: Optional[datetime] = None


class TaskUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    completed: Optional[bool] = None
    priority: Optional[Priority] = None
    due_date: Optional[datetime] = None

    @field_validator("title", "completed", "priority", mode="before")
    @classmethod
    def reject_null(cls, value):
        # Columns behind these fields are NOT NULL; omit the field to leave it unchanged
        if value is None:
            raise ValueError("may not be null")
        return value


class TaskResponse(CamelModel):
    id: UUID
    title: str
    description: Optional[str] = None
    completed: bool
    priority: str
    due_date: Optional[datetime] = None
    owner: UUID
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_db(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            completed=task.completed,
            priority=task.priority,
            due_date=task.due_date,
            owner=task.owner_id,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


class Pagination(CamelModel):
    total: int
    limit: int
    skip: int
    has_more: bool


class TaskListResponse(CamelModel):
    success: bool = True
    tasks: List[TaskResponse]
    pagination: Pagination


class TaskDetailResponse(CamelModel):
    success: bool = True
    task: TaskResponse


class TaskMutationResponse(CamelModel):
    success: bool = True
    message: str
    task: TaskResponse


class MessageResponse(CamelModel):
    success: bool = True
    message: str


class FieldError(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    errors: Optional[List[FieldError]] = None


# Auth related schemas
class CredentialsModel(CamelModel):
    # Passwords are taken verbatim
    model_config = ConfigDict(str_strip_whitespace=False)

    @field_validator("email", mode="before", check_fields=False)
    @classmethod
    def normalize_email(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value


class UserRegister(CredentialsModel):
    username: str = Field(..., min_length=3, max_length=30, pattern=r"^[A-Za-z0-9_.-]+$")
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=6, max_length=128)


class UserLogin(CredentialsModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserResponse(CamelModel):
    id: UUID
    username: str
    email: str
    created_at: datetime

    @classmethod
    def from_db(cls, user: User) -> "UserResponse":
        return cls(id=user.id, username=user.username, email=user.email, created_at=user.created_at)


class AuthResponse(CamelModel):
    success: bool = True
    message: str
    token: str
    user: UserResponse


class MeResponse(CamelModel):
    success: bool = True
    user: UserResponse
