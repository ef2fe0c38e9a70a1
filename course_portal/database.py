import logging

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from course_portal.core import config


logger = logging.getLogger(__name__)


def _connect_args(database_url: str) -> dict:
    if database_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(config.DATABASE_URL, connect_args=_connect_args(config.DATABASE_URL))

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def connect(bind=None) -> bool:
    """Create the tables on startup.

    Connection problems are logged rather than raised so the API can still
    boot; requests will then fail with a generic 500 until the database is
    reachable.
    """
    # Registers every model on Base.metadata.
    from course_portal.models import course_class, order, user  # noqa: F401

    try:
        Base.metadata.create_all(bind=bind or engine)
    except SQLAlchemyError:
        logger.exception("Database connection failed. Check DATABASE_URL.")
        return False

    logger.info("Database connected")
    return True
