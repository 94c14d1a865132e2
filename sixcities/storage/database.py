"""
Database initialization and connection management.
"""

import logging
from pathlib import Path
from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker

from sixcities.config.settings import Settings
from sixcities.storage.schema import Base, City, Offer, CITIES

logger = logging.getLogger("sixcities.storage")


def get_engine(database_url=None):
    """Get SQLAlchemy engine for database connection."""
    if database_url is None:
        database_url = Settings.DATABASE_URL

    url = make_url(database_url)
    if not url.drivername.startswith("sqlite"):
        return create_engine(database_url, echo=False)

    # Ensure directory exists
    if url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(
        database_url,
        connect_args={'check_same_thread': False},
        echo=False  # Set to True for SQL debugging
    )

    # Enable foreign key constraints
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def get_session_factory(engine=None):
    """
    Get a session factory bound to the engine.

    Instances stay readable after commit so they can be projected
    once the session is closed.
    """
    if engine is None:
        engine = get_engine()

    return sessionmaker(bind=engine, expire_on_commit=False)


def get_session(engine=None):
    """Get SQLAlchemy session."""
    return get_session_factory(engine)()


def seed_cities(engine):
    """Insert the fixed set of cities that are not yet present."""
    session = get_session(engine)
    try:
        added = 0
        for city_id, name, latitude, longitude in CITIES:
            if session.get(City, city_id) is None:
                session.add(City(city_id=city_id, name=name, latitude=latitude, longitude=longitude))
                added += 1
        session.commit()
        return added
    finally:
        session.close()


def init_database(database_url=None, drop_existing=False, engine=None):
    """
    Initialize database schema.

    Args:
        database_url: SQLAlchemy URL (uses Settings.DATABASE_URL if None)
        drop_existing: If True, drop all tables before creating
        engine: Existing engine to use instead of building one from the URL

    Returns:
        SQLAlchemy engine
    """
    if engine is None:
        engine = get_engine(database_url)

    if drop_existing:
        logger.warning("Dropping existing tables")
        Base.metadata.drop_all(engine)

    # Tables and their indexes
    Base.metadata.create_all(engine)
    added = seed_cities(engine)

    logger.info("Database initialized at %s (%d cities added)", engine.url, added)

    return engine

