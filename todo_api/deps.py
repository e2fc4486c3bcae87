from typing import Annotated, Optional
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession
from . import crud
from .db import get_db
from .exceptions import AccessTokenDamagedException, AccessTokenDoesNotExistException
from .models import User
from .security import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db)
) -> User:
    """Resolve the bearer token to a stored user"""
    if credentials is None:
        raise AccessTokenDoesNotExistException()
    user_id = decode_access_token(credentials.credentials)
    user = await crud.get_user(db, user_id)
    if user is None:
        raise AccessTokenDamagedException()
    return user


Session = Annotated[AsyncSession, Depends(get_db)]
CurrentUser = Annotated[User, Depends(get_current_user)]
