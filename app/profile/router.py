# app/profile/router.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_session
from app.core.deps import get_current_user_id
from app.core.errors import FieldErrors
from app.github import service as gh_svc
from app.profile import service as svc
from app.profile.repository import list_with_owners
from app.profile.schemas import (
    ProfileIn,
    ProfileOut,
    ExperienceIn,
    EducationIn,
    PROFILE_REQUIRED,
    EXPERIENCE_REQUIRED,
    EDUCATION_REQUIRED,
    missing_fields,
    entry_fields,
)

log = logging.getLogger("uvicorn")

router = APIRouter(prefix="/api/profile", tags=["profile"])

NO_PROFILE = "There is no profile for this user."
NOT_FOUND = "Profile not found."
MAX_DB_ID = 2**31 - 1  # columna Integer


def _validate(payload, required) -> None:
    errors = missing_fields(payload, required)
    if errors:
        raise FieldErrors(errors)


async def _fail(db: AsyncSession, where: str, e: Exception):
    await db.rollback()
    log.error(f"❌ {where}: {e!r}")
    raise HTTPException(status_code=500, detail="internal error")


# ---------------------------
# GET /api/profile/me
# ---------------------------
@router.get("/me", response_model=ProfileOut)
async def my_profile(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
):
    try:
        return await svc.get_profile(db, user_id)
    except svc.ProfileNotFound:
        raise HTTPException(status_code=400, detail=NO_PROFILE)
    except Exception as e:
        await _fail(db, "get /me", e)


# ---------------------------
# POST /api/profile/  (crea o actualiza)
# ---------------------------
@router.post("/", response_model=ProfileOut)
async def upsert_my_profile(
    payload: ProfileIn,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
):
    _validate(payload, PROFILE_REQUIRED)
    try:
        data = await svc.upsert_profile(db, user_id, payload.model_dump())
        await db.commit()
        return data
    except Exception as e:
        await _fail(db, "upsert profile", e)


# ---------------------------
# GET /api/profile/  (público, sin paginar)
# ---------------------------
@router.get("/", response_model=List[ProfileOut])
async def all_profiles(db: AsyncSession = Depends(get_session)):
    try:
        rows = await list_with_owners(db)
        return [svc.profile_to_dict(p, u) for p, u in rows]
    except Exception as e:
        await _fail(db, "list profiles", e)


# ---------------------------
# GET /api/profile/user/{user_id}
# ---------------------------
@router.get("/user/{user_id}", response_model=ProfileOut)
async def profile_by_user(user_id: str, db: AsyncSession = Depends(get_session)):
    # un id mal formado es "no encontrado", no un 422/500
    try:
        uid = int(user_id)
    except ValueError:
        raise HTTPException(status_code=400, detail=NOT_FOUND)
    if not (0 < uid <= MAX_DB_ID):
        raise HTTPException(status_code=400, detail=NOT_FOUND)

    try:
        return await svc.get_profile(db, uid)
    except svc.ProfileNotFound:
        raise HTTPException(status_code=400, detail=NOT_FOUND)
    except Exception as e:
        await _fail(db, f"get profile {uid}", e)


# ---------------------------
# DELETE /api/profile/  (perfil + usuario)
# ---------------------------
@router.delete("/")
async def delete_me(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
):
    try:
        await svc.delete_profile_and_user(db, user_id)
        await db.commit()
        return {"msg": "User deleted"}
    except Exception as e:
        await _fail(db, "delete user", e)


# ---------------------------
# experience / education
# ---------------------------
async def _add(db, user_id, kind, fields):
    try:
        data = await svc.add_entry(db, user_id, kind, fields)
        await db.commit()
        return data
    except svc.ProfileNotFound:
        raise HTTPException(status_code=400, detail=NO_PROFILE)
    except Exception as e:
        await _fail(db, f"add {kind}", e)


async def _update(db, user_id, kind, entry_id, fields):
    try:
        data = await svc.update_entry(db, user_id, kind, entry_id, fields)
        await db.commit()
        return data
    except svc.ProfileNotFound:
        raise HTTPException(status_code=400, detail=NO_PROFILE)
    except Exception as e:
        await _fail(db, f"update {kind} {entry_id}", e)


async def _remove(db, user_id, kind, entry_id):
    try:
        data = await svc.remove_entry(db, user_id, kind, entry_id)
        await db.commit()
        return data
    except svc.ProfileNotFound:
        raise HTTPException(status_code=400, detail=NO_PROFILE)
    except Exception as e:
        await _fail(db, f"remove {kind} {entry_id}", e)


@router.put("/experience", response_model=ProfileOut)
async def add_experience(
    payload: ExperienceIn,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
):
    _validate(payload, EXPERIENCE_REQUIRED)
    return await _add(db, user_id, "experience", entry_fields(payload))


@router.put("/experience/{exp_id}", response_model=ProfileOut)
async def update_experience(
    exp_id: str,
    payload: ExperienceIn,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
):
    _validate(payload, EXPERIENCE_REQUIRED)
    return await _update(db, user_id, "experience", exp_id, entry_fields(payload))


@router.delete("/experience/{exp_id}", response_model=ProfileOut)
async def delete_experience(
    exp_id: str,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
):
    return await _remove(db, user_id, "experience", exp_id)


@router.put("/education", response_model=ProfileOut)
async def add_education(
    payload: EducationIn,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
):
    _validate(payload, EDUCATION_REQUIRED)
    return await _add(db, user_id, "education", entry_fields(payload))


@router.put("/education/{edu_id}", response_model=ProfileOut)
async def update_education(
    edu_id: str,
    payload: EducationIn,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
):
    _validate(payload, EDUCATION_REQUIRED)
    return await _update(db, user_id, "education", edu_id, entry_fields(payload))


@router.delete("/education/{edu_id}", response_model=ProfileOut)
async def delete_education(
    edu_id: str,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
):
    return await _remove(db, user_id, "education", edu_id)


# ---------------------------
# GET /api/profile/github/{username}
# ---------------------------
@router.get("/github/{username}")
async def github_repos(username: str):
    repos = await gh_svc.fetch_recent_repos(username)
    if repos is None:
        raise HTTPException(status_code=404, detail="No Github profile found")
    return repos
