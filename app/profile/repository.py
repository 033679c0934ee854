# app/profile/repository.py
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from app.profile.models import Profile
from app.users.models import User

async def get_by_user_id(db: AsyncSession, user_id: int) -> Profile | None:
    res = await db.execute(select(Profile).where(Profile.user_id == user_id))
    return res.scalar_one_or_none()

async def get_with_owner(db: AsyncSession, user_id: int) -> tuple[Profile, User | None] | None:
    res = await db.execute(
        select(Profile, User)
        .outerjoin(User, User.id == Profile.user_id)
        .where(Profile.user_id == user_id)
    )
    row = res.first()
    if row is None:
        return None
    return row[0], row[1]

async def list_with_owners(db: AsyncSession) -> list[tuple[Profile, User | None]]:
    res = await db.execute(
        select(Profile, User)
        .outerjoin(User, User.id == Profile.user_id)
        .order_by(Profile.id.asc())
    )
    return [(p, u) for p, u in res.all()]

async def create_profile(db: AsyncSession, user_id: int, **fields) -> Profile:
    prof = Profile(user_id=user_id, **fields)
    db.add(prof)
    await db.flush()
    await db.refresh(prof)
    return prof

async def delete_by_user_id(db: AsyncSession, user_id: int) -> int:
    res = await db.execute(delete(Profile).where(Profile.user_id == user_id))
    return res.rowcount or 0
