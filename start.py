#!/usr/bin/env python3
"""
Apply Alembic migrations, then serve the API with uvicorn.
Startup is refused when the schema cannot be brought up to date.
"""
import sys

import uvicorn
from alembic import command
from alembic.config import Config

from core.config import settings
from core.logging import logger

ALEMBIC_INI = "alembic.ini"


def run_migrations(config_path: str = ALEMBIC_INI) -> bool:
    logger.info("Applying database migrations...")
    try:
        command.upgrade(Config(config_path), "head")
    except Exception as e:
        logger.error(f"Migrations failed: {e}")
        return False
    logger.info("Database schema is up to date")
    return True


def start_server():
    logger.info(f"Serving on {settings.host}:{settings.port} ({settings.environment})")
    uvicorn.run("main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


def main() -> int:
    if not run_migrations():
        return 1
    start_server()
    return 0


if __name__ == "__main__":
    sys.exit(main())
