"""
MEC Canteen ordering system - FastAPI backend
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from canteen import __version__
from canteen.api import auth, live, menu, notifications, orders, reports, session, users
from canteen.core.config import Settings, settings as default_settings
from canteen.core.exceptions import AccountDeactivated, CanteenError, InvalidCredentials
from canteen.services import CanteenServices
from canteen.storage import StorageBackend

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    InvalidCredentials: status.HTTP_401_UNAUTHORIZED,
    AccountDeactivated: status.HTTP_403_FORBIDDEN,
}


def create_app(settings: Optional[Settings] = None, backend: Optional[StorageBackend] = None) -> FastAPI:
    """Build the API. ``backend`` overrides the configured storage backend."""
    settings = settings or default_settings
    logging.basicConfig(level=settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.services = CanteenServices(settings, backend=backend)
        logger.info("Canteen API started with %s storage", settings.STORAGE_BACKEND)
        try:
            yield
        finally:
            app.state.services.close()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Menu, ordering, order tracking and sales reports for the MEC canteen",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(CanteenError)
    async def canteen_error_handler(request: Request, exc: CanteenError):
        return JSONResponse(
            status_code=ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST),
            content={"detail": exc.message},
        )

    api_router = APIRouter(prefix=settings.API_V1_STR)
    for module in (auth, session, menu, orders, notifications, users, reports, live):
        api_router.include_router(module.router)
    app.include_router(api_router)

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": "mec-canteen-api", "storage": settings.STORAGE_BACKEND}

    # API version info
    @app.get("/")
    async def root():
        """API root endpoint"""
        return {
            "message": "MEC Canteen Ordering System API",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("canteen.main:app", host="0.0.0.0", port=8000)
