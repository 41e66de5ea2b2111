"""
Production server runner for the category manager.

Applies Alembic migrations, then runs Uvicorn with several workers.
"""
import logging
import multiprocessing
import os
import subprocess
import sys

import uvicorn

from config import settings
from config.logging_config import setup_logging

logger = logging.getLogger(__name__)

# Formula: (2 x $num_cores) + 1, kept between 2 and 4 for a small CRUD service
CPU_COUNT = multiprocessing.cpu_count()
DEFAULT_WORKERS = min(max(2 * CPU_COUNT + 1, 2), 4)

WORKERS = int(os.getenv('UVICORN_WORKERS', DEFAULT_WORKERS))
TIMEOUT_KEEP_ALIVE = int(os.getenv('TIMEOUT_KEEP_ALIVE', '5'))


def run_migrations() -> None:
    """Run `alembic upgrade head` with the current interpreter."""
    logger.info("Running database migrations...")
    subprocess.run([sys.executable, "-m", "alembic", "upgrade", "head"], check=True)
    logger.info("Database migrations applied successfully")


if __name__ == "__main__":
    setup_logging()
    try:
        run_migrations()
    except subprocess.CalledProcessError as e:
        logger.error(f"Error applying database migrations: {e}")
        sys.exit(1)

    logger.info(
        f"Starting {settings.APP_TITLE} on {settings.API_HOST}:{settings.API_PORT} "
        f"with {WORKERS} workers (CPU cores: {CPU_COUNT})"
    )

    uvicorn.run(
        "main:create_fastapi_app",
        factory=True,
        host=settings.API_HOST,
        port=settings.API_PORT,
        workers=WORKERS,
        reload=settings.RELOAD,
        timeout_keep_alive=TIMEOUT_KEEP_ALIVE,
        log_level=settings.LOG_LEVEL.lower(),
        access_log=True,
    )
