"""FastAPI application factory for the category manager."""
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config import settings
from config.database import create_tables, get_db
from config.logging_config import setup_logging
from controllers.base_controller_impl import error_status_code
from controllers.category_controller import CategoryController
from controllers.category_view_controller import CategoryViewController
from exceptions import CategoryAppError
from middleware.request_logger import RequestLoggerMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler for startup and shutdown."""
    create_tables()
    logger.info("[Startup] %s ready", settings.APP_TITLE)
    yield
    logger.info("[Shutdown] Bye!")


def _register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(CategoryAppError)
    async def category_error_handler(request: Request, exc: CategoryAppError):
        status_code = error_status_code(exc)
        logger.warning(f"{request.method} {request.url.path} failed with {status_code}: {exc}")
        return JSONResponse(status_code=status_code, content={"detail": exc.message})

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.exception(f"Database error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "A database error occurred"},
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "An unexpected error occurred"},
        )


def create_fastapi_app(configure_logging: bool = True) -> FastAPI:
    """
    Build the application.

    Args:
        configure_logging: Install the console/file log handlers. Tests pass
            False to keep pytest's own log capture.
    """
    if configure_logging:
        setup_logging()

    app = FastAPI(title=settings.APP_TITLE, lifespan=lifespan)
    app.add_middleware(RequestLoggerMiddleware)
    _register_exception_handlers(app)

    app.include_router(CategoryController().router)
    app.include_router(CategoryViewController().router)

    @app.get("/health_check", tags=["Health"])
    async def health_check(db: Session = Depends(get_db)):
        """Report whether the API and its database are reachable."""
        try:
            db.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.error(f"Health check failed: {e}")
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "error", "database": "unreachable"},
            )
        return {"status": "ok", "database": "ok"}

    return app
