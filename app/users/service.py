# app/users/service.py
from __future__ import annotations
from sqlalchemy.ext.asyncio import AsyncSession
from app.users.repository import get_by_email, create_user
from app.core.security import hash_password, create_access_token, verify_password, gravatar_url
from app.users.schemas import UserCreate

async def register_user(db: AsyncSession, data: UserCreate) -> str:
    if await get_by_email(db, data.email):
        raise ValueError("user already exists")

    user = await create_user(
        db,
        data.name,
        data.email,
        hash_password(data.password),
        avatar=gravatar_url(data.email),
    )
    # El commit lo hace el router
    return create_access_token(sub=str(user.id))

async def authenticate_user(db: AsyncSession, email: str, password: str):
    user = await get_by_email(db, email)
    if not user:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user

async def login_user(db: AsyncSession, email: str, password: str) -> str:
    user = await authenticate_user(db, email, password)
    if not user:
        raise ValueError("invalid credentials")
    return create_access_token(sub=str(user.id))
