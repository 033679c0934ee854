# app/users/repository.py
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from app.users.models import User

async def get_by_email(db: AsyncSession, email: str) -> User | None:
    res = await db.execute(select(User).where(User.email == email))
    return res.scalar_one_or_none()

async def get_by_id(db: AsyncSession, user_id: int) -> User | None:
    res = await db.execute(select(User).where(User.id == user_id))
    return res.scalar_one_or_none()

async def create_user(
    db: AsyncSession, name: str, email: str, hashed_password: str, avatar: str | None = None
) -> User:
    user = User(name=name, email=email, hashed_password=hashed_password, avatar=avatar)
    db.add(user)
    await db.flush()
    await db.refresh(user)
    return user

async def delete_by_id(db: AsyncSession, user_id: int) -> int:
    # no-op si no existe
    res = await db.execute(delete(User).where(User.id == user_id))
    return res.rowcount or 0
