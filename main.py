import logging

import uvicorn
from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import settings
from database import check_connection, init_db
from errors import register_error_handlers
from routers import accommodations_router
from services.access_service import AccessGate

# --- Logging configuration ---
_level = logging.DEBUG if settings.DEBUG else logging.INFO
logging.basicConfig(
    level=_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
# Align uvicorn loggers with our level
for _name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
    logging.getLogger(_name).setLevel(_level)
logger = logging.getLogger("app.startup")
logger.info("Starting %s (ENVIRONMENT=%s, DEBUG=%s)", settings.APP_NAME, settings.ENVIRONMENT, settings.DEBUG)

# App instance
app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    description=(
        "Accommodation listings owned by users with role OWNER.\n\n"
        "Mutations are guarded by a capability check against the authorization "
        "service, an ownership check and a lease-state check."
    ),
)

# Capability checks; mode is fixed here for the lifetime of the process
app.state.access_gate = AccessGate.from_settings(settings)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials="*" not in settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(accommodations_router, prefix=settings.API_PREFIX)


@app.on_event("startup")
def startup_event():
    """Create tables for local SQLite databases; other databases are migrated with Alembic."""
    if settings.DATABASE_URL.startswith("sqlite"):
        init_db()
        logger.info("SQLite tables ensured.")


@app.get("/healthz", tags=["health"])
def healthz():
    if not check_connection():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "degraded", "database": "unavailable"},
        )
    return {"status": "ok", "database": "ok"}


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=settings.PORT, reload=settings.DEBUG)
