import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base

from task_api.errors import StorageError

logger = logging.getLogger(__name__)

Base = declarative_base()


def open_store(database_url: str) -> Engine:
    """Open the task store and make sure the tasks table exists.

    Raises StorageError if the store cannot be opened or initialized; the
    engine is disposed before the error propagates.
    """
    # registers the tasks table on Base.metadata
    from task_api.models.task import Task  # noqa: F401

    # Only apply sqlite-specific connect_args when using sqlite
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}

    try:
        engine = create_engine(database_url, connect_args=connect_args)
    except (SQLAlchemyError, ValueError) as e:
        raise StorageError(f"cannot open store {database_url!r}: {e}") from e

    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        engine.dispose()
        raise StorageError(f"cannot initialize store {database_url!r}: {e}") from e

    logger.info("Opened task store at %s", engine.url)
    return engine


def close_store(engine: Engine) -> None:
    engine.dispose()
    logger.info("Closed task store at %s", engine.url)
