# app/profile/service.py
from __future__ import annotations

from typing import Any, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from app.profile import engine
from app.profile.models import Profile
from app.profile.repository import (
    get_by_user_id,
    get_with_owner,
    create_profile,
    delete_by_user_id,
)
from app.users.models import User
from app.users.repository import get_by_id, delete_by_id


class ProfileNotFound(LookupError):
    pass


def owner_to_dict(user: User | None) -> dict | None:
    if user is None:
        return None
    return {"id": user.id, "name": user.name, "avatar": user.avatar}


def profile_to_dict(prof: Profile, owner: User | None = None) -> dict:
    return {
        "id": prof.id,
        "user": owner_to_dict(owner),
        "company": prof.company,
        "website": prof.website,
        "location": prof.location,
        "bio": prof.bio,
        "status": prof.status,
        "githubusername": prof.githubusername,
        "skills": list(prof.skills or []),
        "social": dict(prof.social or {}),
        "experience": list(prof.experience or []),
        "education": list(prof.education or []),
        "created_at": prof.created_at,
    }


async def get_profile(db: AsyncSession, user_id: int) -> dict:
    found = await get_with_owner(db, user_id)
    if not found:
        raise ProfileNotFound(user_id)
    return profile_to_dict(*found)


async def upsert_profile(db: AsyncSession, user_id: int, data: Mapping[str, Any]) -> dict:
    """
    Crea o actualiza el perfil del usuario.
    Escalares: merge disperso. skills/social: reemplazo completo.
    No hace commit (lo hace el caller).
    """
    fields = engine.build_profile_fields(data)

    prof = await get_by_user_id(db, user_id)
    if prof:
        engine.apply_profile_fields(prof, fields)
        await db.flush()
        await db.refresh(prof)
    else:
        prof = await create_profile(db, user_id, **fields)

    return profile_to_dict(prof, await get_by_id(db, user_id))


async def _load_for_entries(db: AsyncSession, user_id: int, kind: str) -> Profile:
    if kind not in engine.ENTRY_KINDS:
        raise ValueError(f"unknown entry kind: {kind}")
    prof = await get_by_user_id(db, user_id)
    if not prof:
        # una sublista nunca crea el perfil
        raise ProfileNotFound(user_id)
    return prof


async def _save_entries(db: AsyncSession, prof: Profile, kind: str, entries: list[dict]) -> dict:
    setattr(prof, kind, entries)
    await db.flush()
    await db.refresh(prof)
    return profile_to_dict(prof, await get_by_id(db, prof.user_id))


async def add_entry(db: AsyncSession, user_id: int, kind: str, fields: Mapping[str, Any]) -> dict:
    prof = await _load_for_entries(db, user_id, kind)
    entries, _ = engine.insert_entry(getattr(prof, kind), fields)
    return await _save_entries(db, prof, kind, entries)


async def update_entry(
    db: AsyncSession, user_id: int, kind: str, entry_id: str, fields: Mapping[str, Any]
) -> dict:
    prof = await _load_for_entries(db, user_id, kind)
    entries = engine.replace_entry(getattr(prof, kind), entry_id, fields)
    return await _save_entries(db, prof, kind, entries)


async def remove_entry(db: AsyncSession, user_id: int, kind: str, entry_id: str) -> dict:
    prof = await _load_for_entries(db, user_id, kind)
    entries = engine.remove_entry(getattr(prof, kind), entry_id)
    return await _save_entries(db, prof, kind, entries)


async def delete_profile_and_user(db: AsyncSession, user_id: int) -> None:
    """
    Borra perfil + usuario en la misma transacción. Si alguno no existe
    es no-op. TODO: borrar también los posts del usuario cuando exista el módulo.
    """
    await delete_by_user_id(db, user_id)
    await delete_by_id(db, user_id)
