import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import api_router
from .config import load_settings
from .database import open_database, close_database, is_database_open, get_session
from .logging_config import configure_logging
from .services import NotFoundError, ConflictError, seed_demo_data

settings = load_settings()
configure_logging(settings.log_level)

logger = logging.getLogger(__name__)


def _seed_demo_data() -> None:
    session = get_session()
    try:
        seed_demo_data(session)
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown events."""
    opened_here = False
    if not is_database_open():
        open_database(settings.database_url)
        opened_here = True
    if settings.seed_demo_data:
        _seed_demo_data()
    yield
    # Cleanup on shutdown
    if opened_here:
        close_database()


app = FastAPI(
    title="Finance Tracker",
    description="Personal income and expense tracking API",
    version="0.1.0",
    lifespan=lifespan
)

# CORS for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return Response(status_code=404)


@app.exception_handler(ConflictError)
async def conflict_handler(request: Request, exc: ConflictError):
    return Response(status_code=409)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Log unhandled exceptions with full traceback."""
    logger.error(
        "Unhandled exception in API request %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


# API routes
app.include_router(api_router, prefix="/api")


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}
