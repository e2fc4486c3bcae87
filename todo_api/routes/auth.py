import logging
from fastapi import APIRouter
from sqlalchemy.exc import IntegrityError
from .. import crud
from ..deps import CurrentUser, Session
from ..exceptions import InvalidCredentialsException, UserAlreadyExistsException, server_errors
from ..schemas import AuthResponse, ErrorResponse, MeResponse, UserLogin, UserRegister, UserResponse
from ..security import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(data: UserRegister, db: Session):
    """Register a new user and return an access token"""
    with server_errors("registering user"):
        errors = []
        if await crud.get_user_by_username(db, data.username) is not None:
            errors.append({"field": "username", "message": "Username is already taken"})
        if await crud.get_user_by_email(db, data.email) is not None:
            errors.append({"field": "email", "message": "Email is already registered"})
        if errors:
            raise UserAlreadyExistsException(errors)
        try:
            user = await crud.create_user(db, data.username, data.email, hash_password(data.password))
        except IntegrityError:
            # Lost a race against a concurrent registration
            await db.rollback()
            raise UserAlreadyExistsException([{"field": "email", "message": "Email or username is already registered"}])
    logger.info("User %s registered", user.id)
    return AuthResponse(
        message="User registered successfully",
        token=create_access_token(user.id),
        user=UserResponse.from_db(user),
    )


@router.post("/login", response_model=AuthResponse)
async def login(credentials: UserLogin, db: Session):
    """Exchange email and password for an access token"""
    with server_errors("logging in"):
        user = await crud.get_user_by_email(db, credentials.email)
    if user is None or not verify_password(credentials.password, user.password_hash):
        raise InvalidCredentialsException()
    return AuthResponse(
        message="Login successful",
        token=create_access_token(user.id),
        user=UserResponse.from_db(user),
    )


@router.get("/me", response_model=MeResponse)
async def me(user: CurrentUser):
    """Return the authenticated user"""
    return MeResponse(user=UserResponse.from_db(user))
