# app/core/errors.py
"""
Handlers de errores compartidos.

Validación → 400 {"errors": [{"field", "message"}, ...]}, tanto para los
obligatorios que chequean los routers como para lo que rechaza FastAPI/pydantic
(JSON roto, fechas inválidas...). El detalle de un 500 nunca sale al cliente.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse

log = logging.getLogger("uvicorn")


class FieldErrors(Exception):
    def __init__(self, errors: list[dict]):
        super().__init__(errors)
        self.errors = errors


def _field_name(loc) -> str:
    # ("body", "from") -> "from"; ("body",) -> "body"
    parts = [str(p) for p in loc if p != "body"]
    return parts[-1] if parts else "body"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(FieldErrors)
    async def field_errors_handler(request: Request, exc: FieldErrors):
        return JSONResponse(status_code=400, content={"errors": exc.errors})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = [
            {"field": _field_name(err.get("loc", ())), "message": err.get("msg", "invalid value")}
            for err in exc.errors()
        ]
        return JSONResponse(status_code=400, content={"errors": errors})

    @app.exception_handler(Exception)
    async def unhandled_handler(request: Request, exc: Exception):
        log.error(f"💥 {request.method} {request.url.path} falló: {exc!r}")
        return JSONResponse(status_code=500, content={"detail": "internal error"})
