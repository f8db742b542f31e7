# app/api/v1/routes/auth.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user_id, require_auth
from app.core import auth as auth_service
from app.core.database import get_async_session
from app.core.exceptions import AuthorizationRequiredError, NotFoundError
from app.crud.user import get_user_by_id
from app.schemas.user import LoginRequest, LoginResponse, UserCreate, UserRead

router = APIRouter(tags=["Authentication"])

@router.post("/user", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def signup(
    user_in: UserCreate,
    db: AsyncSession = Depends(get_async_session),
):
    """Register a new user (public)"""
    return await auth_service.register(user_in.name, user_in.email, user_in.password, db)

@router.post("/auth/login", response_model=LoginResponse)
async def login(
    credentials: LoginRequest,
    db: AsyncSession = Depends(get_async_session),
):
    """Exchange email and password for a bearer token"""
    token, user = await auth_service.login(credentials.email, credentials.password, db)
    return {"access_token": token, "user": user}

@router.get("/auth/me", response_model=UserRead, dependencies=[Depends(require_auth)])
async def read_own_profile(
    db: AsyncSession = Depends(get_async_session),
    user_id=Depends(get_current_user_id),
):
    """Get the user the bearer token belongs to"""
    if user_id is None:
        raise AuthorizationRequiredError()
    user = await get_user_by_id(user_id, db)
    if not user:
        raise NotFoundError("User not found")
    return user
