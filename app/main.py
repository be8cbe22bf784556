import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.achievements.router import router as achievements_router
from app.auth.router import router as auth_router
from app.common.exceptions import StorageException
from app.config import get_settings
from app.store import create_store

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: a store placed on app.state beforehand (tests) is reused
    store = getattr(app.state, "store", None)
    if store is None:
        store = create_store(settings.database_url)
        app.state.store = store
    store.init_db()
    yield
    # Shutdown
    store.dispose()


app = FastAPI(
    title="Achievements API",
    description="Accounts and unlockable achievements for the portfolio site",
    version="1.0.0",
    lifespan=lifespan,
)


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Storage failure on {request.method} {request.url.path}", exc_info=exc)
    error = StorageException()
    return JSONResponse(status_code=error.status_code, content={"detail": error.detail})


app.include_router(auth_router, prefix="/api", tags=["auth"])
app.include_router(achievements_router, prefix="/api", tags=["achievements"])


@app.get("/health")
def health_check():
    return {"status": "healthy"}
