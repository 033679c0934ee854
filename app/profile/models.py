# app/profile/models.py
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Integer, Text, DateTime, func, ForeignKey
from app.db.base import Base, JSONType

class Profile(Base):
    __tablename__ = "profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    # un perfil por usuario: unique=True en user_id
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
    )
    company: Mapped[str | None] = mapped_column(String(255), nullable=True)
    website: Mapped[str | None] = mapped_column(String(255), nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str | None] = mapped_column(String(255), nullable=True)
    githubusername: Mapped[str | None] = mapped_column(String(100), nullable=True)

    skills: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)
    social: Mapped[dict] = mapped_column(JSONType, nullable=False, default=dict)

    # sublistas embebidas, la más reciente primero: [{"id": ..., ...}, ...]
    # se reasignan enteras (no hay mutation tracking sobre JSON)
    experience: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)
    education: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)

    created_at: Mapped["DateTime"] = mapped_column(DateTime(timezone=True), server_default=func.now())
