"""
Database configuration and connection management for the local key-value store
"""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()

def build_engine(database_url: str) -> Engine:
    """Create the SQLAlchemy engine for the given URL"""
    kwargs = {"pool_pre_ping": True, "echo": False}  # Set echo=True for SQL query logging
    if database_url.startswith("sqlite"):
        # Requests are served from a worker thread
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url or database_url == "sqlite://":
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)

def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)

def create_tables(engine: Engine):
    """Create all database tables"""
    Base.metadata.create_all(bind=engine)

def drop_tables(engine: Engine):
    """Drop all database tables (for testing/reset)"""
    Base.metadata.drop_all(bind=engine)
