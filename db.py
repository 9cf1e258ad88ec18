from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from core.config import settings
from core.logging import logger

DATABASE_URL = settings.database_url


def _engine_options(url: str) -> dict:
    """Driver-specific engine arguments."""
    if url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        # In-memory databases live as long as their single connection
        if url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return options

    connect_args = {"connect_timeout": 10}
    if settings.db_sslmode:
        connect_args["sslmode"] = settings.db_sslmode
    return {
        "pool_size": 10,
        "max_overflow": 20,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
        "connect_args": connect_args,
    }


engine = create_engine(DATABASE_URL, echo=settings.debug, **_engine_options(DATABASE_URL))

Base = declarative_base()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def check_connection() -> bool:
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database connection check failed: {e}")
        return False


if __name__ == "__main__":
    print("Database connected" if check_connection() else "Database unavailable")
