"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from flashdeck import __version__
from flashdeck.config import configure_logging, get_settings
from flashdeck.database import dispose_engine, initialize_database
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.rate_limit import limiter
from flashdeck.infrastructure.common.routers import settings as settings_router
from flashdeck.infrastructure.learning.routers import cards, decks, study

settings = get_settings()
configure_logging(settings.ENVIRONMENT)
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Initialize the database on startup and dispose it on shutdown."""
    initialize_database(settings)
    logger.info(
        "application_started",
        environment=settings.ENVIRONMENT,
        ai_enabled=settings.ai_enabled,
    )
    yield
    dispose_engine()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=__version__,
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FlashdeckError)
async def flashdeck_exception_handler(_request: Request, exc: FlashdeckError) -> JSONResponse:
    """Render application errors raised by read endpoints."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error_code": exc.code},
    )


@app.exception_handler(DomainError)
async def domain_exception_handler(_request: Request, exc: DomainError) -> JSONResponse:
    """Render domain invariant violations that escape a use case."""
    logger.warning("domain_error", error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": exc.message},
    )


app.include_router(decks.router, prefix=settings.API_V1_PREFIX)
app.include_router(cards.deck_cards_router, prefix=settings.API_V1_PREFIX)
app.include_router(cards.router, prefix=settings.API_V1_PREFIX)
app.include_router(study.router, prefix=settings.API_V1_PREFIX)
app.include_router(settings_router.router, prefix=settings.API_V1_PREFIX)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": f"Welcome to {settings.PROJECT_NAME}", "version": __version__}


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get(settings.API_V1_PREFIX + "/")
async def api_root() -> dict[str, str]:
    """API information endpoint."""
    return {"name": settings.PROJECT_NAME, "version": __version__}
