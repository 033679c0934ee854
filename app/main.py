# app/main.py
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.db.init_db import init_models

# routers
from app.users.router import router as users_router
from app.profile.router import router as profile_router

log = logging.getLogger("uvicorn")

app = FastAPI(title="DevConnector API")

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allow_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.on_event("startup")
async def on_startup():
    log.info("🚀 Iniciando servicio…")
    await init_models()
    log.info("✅ Startup listo.")


@app.get("/api/health/")
async def health():
    return {"ok": True, "service": "fastapi", "msg": "healthy"}


# routers
app.include_router(users_router)     # /api/users/...
app.include_router(profile_router)   # /api/profile/...
