# infra/db/base.py
from __future__ import annotations
import logging
import os

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from infra.path import default_db_path

logger = logging.getLogger(__name__)

DB_URL_ENV = "QUOTE_PLANNER_DB_URL"

Base = declarative_base()


def database_url() -> str:
    override = os.getenv(DB_URL_ENV)
    if override:
        return override
    return f"sqlite:///{default_db_path().as_posix()}"


def make_engine(db_url: str | None = None):
    url = db_url or database_url()
    logger.info("Using database at: %s", url)
    return create_engine(url, echo=False, future=True)


def make_session_factory(db_url: str | None = None) -> sessionmaker:
    return sessionmaker(bind=make_engine(db_url), autoflush=False, autocommit=False, future=True)
