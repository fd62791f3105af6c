import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from employee_api.core.config import settings

logger = logging.getLogger(__name__)


def build_engine(url=None):
    url = make_url(url) if url is not None else settings.database_url
    kwargs = {"pool_pre_ping": True}
    # SQLite pools do not take size/overflow arguments
    if url.get_backend_name() != "sqlite":
        kwargs.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=0,
            pool_recycle=settings.DB_POOL_RECYCLE,
        )
    return create_engine(url, **kwargs)


engine = build_engine()

SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
)

def get_db():
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def check_connection(bind=None) -> bool:
    """
    Check out one pooled connection and ping the database.
    Logs the outcome; never raises.
    """
    bind = bind if bind is not None else engine
    try:
        with bind.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Database connection failed")
        return False
    logger.info("Connected to database.")
    return True
