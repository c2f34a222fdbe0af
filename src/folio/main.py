"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from folio.config.settings import get_settings
from folio.config.logging_config import setup_logging
from folio.repositories.sqlalchemy.database import init_db
from folio.api.deps import close_market_stack, get_market_stack
from folio.api.routers import auth_router, holdings_router, market_router, portfolio_router
from folio.core.exceptions import AppError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    init_db()
    yield
    # Shutdown
    close_market_stack()


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Personal investment portfolio tracker with live multi-provider quotes",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers; static /api/portfolio paths must precede /api/portfolio/{user_id}
app.include_router(auth_router)
app.include_router(market_router)
app.include_router(holdings_router)
app.include_router(portfolio_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/api/health")
def health_check() -> dict:
    """Health check endpoint."""
    return {"ok": True, "cached_quotes": len(get_market_stack().cache)}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
