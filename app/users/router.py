# app/users/router.py
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_session
from app.core.deps import get_current_user_id
from app.users.schemas import UserCreate, UserOut
from app.users import service as svc
from app.users.repository import get_by_id

log = logging.getLogger("uvicorn")

router = APIRouter(prefix="/api/users", tags=["users"])

@router.post("/register/")
async def register(payload: UserCreate, db: AsyncSession = Depends(get_session)):
    try:
        token = await svc.register_user(db, payload)
        await db.commit()
        return {"access_token": token, "token_type": "bearer"}
    except ValueError as e:
        await db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        await db.rollback()
        log.error(f"register falló: {e!r}")
        raise HTTPException(status_code=500, detail="internal error")

@router.post("/login/")
async def login(
    form: OAuth2PasswordRequestForm = Depends(),
    db: AsyncSession = Depends(get_session),
):
    """
    Acepta x-www-form-urlencoded con:
    - username (el email)
    - password
    """
    try:
        token = await svc.login_user(db, form.username, form.password)
        return {"access_token": token, "token_type": "bearer"}
    except ValueError:
        raise HTTPException(status_code=401, detail="invalid credentials")
    except Exception as e:
        log.error(f"login falló: {e!r}")
        raise HTTPException(status_code=500, detail="internal error")

@router.get("/me/", response_model=UserOut)
async def me(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
):
    user = await get_by_id(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="user not found")
    return user
