# Standard library imports
import logging

# External package imports
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Local application imports
from .tables import Base

logger = logging.getLogger(__name__)


def create_db_engine(database_url: str) -> Engine:
    """
    Create the SQLAlchemy engine for the configured database
    
    SQLite connections are shared across worker threads; an in-memory SQLite
    database is pinned to a single connection so every session sees it.
    
    Args:
        database_url: SQLAlchemy database URL
        
    Returns:
        Engine instance
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, pool_pre_ping=True)
    
    connect_args = {"check_same_thread": False}
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(database_url, connect_args=connect_args, poolclass=StaticPool)
    return create_engine(database_url, connect_args=connect_args)


def create_session_factory(engine: Engine) -> sessionmaker:
    """Session factory used by every repository"""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    """Create the users, products and tarefas tables if they do not exist"""
    logger.info(f"Creating tables: {', '.join(Base.metadata.tables.keys())}")
    Base.metadata.create_all(bind=engine)
