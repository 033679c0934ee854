# app/users/schemas.py
from pydantic import BaseModel, EmailStr, Field

class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)

class UserOut(BaseModel):
    id: int
    name: str
    email: EmailStr
    avatar: str | None = None

    class Config:
        from_attributes = True

class UserPublic(BaseModel):
    """Lo que se expone del dueño junto a un perfil."""
    id: int
    name: str
    avatar: str | None = None

    class Config:
        from_attributes = True
