import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core import db
from core.errors import AirPropError
from properties import router as properties_router
from tenants import router as tenants_router

logger = logging.getLogger(__name__)


def cors_allow_origins() -> list[str]:
    raw = os.environ.get("CORS_ALLOW_ORIGINS", "*")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One store connection per process, shared by every request.
    store = db.Store(db.database_path())
    await store.open()
    app.state.store = store
    try:
        yield
    finally:
        await store.close()
        app.state.store = None


app = FastAPI(title="AirProp API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allow_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AirPropError)
async def handle_airprop_error(_: Request, exc: AirPropError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p not in ("body", "path", "query"))
        msg = str(err.get("msg") or "Invalid request")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request."


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": _describe_validation_error(exc)})


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    # The server logs the traceback when the exception is re-raised after this.
    logger.error(
        "request_failed method=%s path=%s error_type=%s error=%s",
        request.method,
        request.url.path,
        type(exc).__name__,
        exc,
    )
    return JSONResponse(status_code=500, content={"error": str(exc) or "Internal server error"})


app.include_router(properties_router.router, prefix="/api", tags=["properties"])
app.include_router(tenants_router.router, prefix="/api", tags=["tenants"])


@app.get("/api/health")
def health() -> dict:
    return {"status": "OK", "message": "AirProp Database API is running"}


if __name__ == "__main__":
    uvicorn.run(
        app,
        host=os.environ.get("HOST", "0.0.0.0"),
        port=_env_int("PORT", 3000),
        log_level=os.environ.get("LOG_LEVEL", "info").strip().lower() or "info",
    )
