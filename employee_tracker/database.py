"""
Database configuration for the Employee Tracker.

Reads the connection settings from the environment (optionally populated from a
.env file), and builds the SQLAlchemy engine and the single session used by the CLI.
"""

import os

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from employee_tracker.models import Base

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
DOTENV_PATH = os.path.join(PROJECT_ROOT, ".env")

DEFAULT_PG_PORT = "5432"


def load_environment(dotenv_path: str = DOTENV_PATH) -> bool:
    """Loads the .env file into os.environ. Returns True if a file was found."""
    return load_dotenv(dotenv_path)


def get_database_url() -> str:
    """
    Builds the database URL.
    DATABASE_URL wins if set, otherwise the PG_* variables are combined
    into a PostgreSQL URL.
    """
    database_url = os.environ.get("DATABASE_URL")
    if database_url:
        return database_url

    pg_user = os.environ.get("PG_USER")
    pg_password = os.environ.get("PG_PASSWORD")
    pg_host = os.environ.get("PG_HOST")
    pg_database = os.environ.get("PG_DATABASE")
    pg_port = os.environ.get("PG_PORT") or DEFAULT_PG_PORT

    if not all([pg_user, pg_password, pg_host, pg_database]):
        raise ValueError(
            "Database environment variables are not set. "
            "Set DATABASE_URL or PG_USER, PG_PASSWORD, PG_HOST and PG_DATABASE "
            "in your .env file."
        )

    return f"postgresql://{pg_user}:{pg_password}@{pg_host}:{pg_port}/{pg_database}"


def create_db_engine(database_url: str | None = None) -> Engine:
    """Creates the engine and makes sure the three tables exist."""
    engine = create_engine(database_url or get_database_url())
    Base.metadata.create_all(engine)
    return engine


def get_session(engine: Engine) -> Session:
    """
    Opens the session shared by every menu action.
    It lives until the user chooses Exit.
    """
    SessionFactory = sessionmaker(bind=engine)
    return SessionFactory()
