"""Main web application - FastAPI server for the campus security dashboard API."""

from datetime import datetime, timezone
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import config
from .. import __version__
from ..shared.db.database import init_db, close_db
from ..shared.redis.client import ping_redis, close_redis
from ..shared.schemas.system import HealthResponse
from .api.v1 import router as api_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown events."""
    print("=" * 60)
    print("  ELI Campus Security Platform - API Service")
    print("=" * 60)

    # Validate configuration
    warnings = config.validate()
    for warning in warnings:
        print(f"[WARN] {warning}")

    # Initialize database
    print("\n[SETUP] Initializing database connection...")
    if await init_db():
        print("[SETUP] Database engine ready")
    else:
        print("[WARN] No database configured - running in demo mode")

    # Check Redis
    print("[SETUP] Checking Redis connection...")
    if await ping_redis():
        print("[SETUP] Redis connected")
    else:
        print("[WARN] Live updates will fall back to heartbeats")

    print(f"\n[SERVER] Starting on port {config.PORT}...")
    print(f"[SERVER] Production mode: {config.is_production()}")
    print("=" * 60)

    yield  # Application runs here

    # Shutdown
    print("\n[SHUTDOWN] Closing connections...")
    await close_db()
    await close_redis()
    print("[SHUTDOWN] Complete")


# Create FastAPI app
app = FastAPI(
    title="ELI Campus Security API",
    description="Buildings, cameras, tracked entities, alerts and incidents for the campus security dashboard",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if not config.is_production() else None,
    redoc_url="/redoc" if not config.is_production() else None,
)

# CORS middleware
if config.CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Include API router
app.include_router(api_router)


@app.get("/api/health", response_model=HealthResponse)
async def api_health():
    """REST health check next to the typed API."""
    return HealthResponse(status="ok", timestamp=datetime.now(timezone.utc))


@app.get("/health")
async def health_check():
    """Liveness check for the hosting platform."""
    return {
        "status": "healthy",
        "service": "api",
        "version": __version__,
    }


def main():
    """Main entry point."""
    import uvicorn

    uvicorn.run(
        "eli.web.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=not config.is_production(),
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
