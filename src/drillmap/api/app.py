"""FastAPI application factory."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse
from pathlib import Path

from .. import __version__
from ..config import settings
from ..wizard import WizardSession
from .routes import router

# Global wizard session
_session: Optional[WizardSession] = None


def get_session() -> WizardSession:
    """Get the global wizard session."""
    global _session
    if _session is None:
        _session = WizardSession()
    return _session


def reset_session():
    """Drop the global wizard session, cancelling any pending processing."""
    global _session
    if _session is not None:
        _session.close()
    _session = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    get_session()
    yield
    reset_session()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="DrillMap",
        description="Drilling data intake and channel mapping wizard",
        version=__version__,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # API routes
    app.include_router(router, prefix="/api")

    # Serve static files (frontend)
    static_dir = Path(__file__).parent.parent.parent.parent / "static"
    if static_dir.exists():
        app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

        @app.get("/")
        async def serve_frontend():
            """Serve the frontend."""
            return FileResponse(str(static_dir / "index.html"))

    return app
