import logging

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from fashion_shop.config import Settings

log = logging.getLogger(__name__)

Base = declarative_base()


def create_db_engine(settings: Settings) -> Engine:
    connect_args = {}
    if settings.DATABASE_URL.startswith("sqlite"):
        # route functions run in the threadpool, so one connection may cross threads
        connect_args["check_same_thread"] = False
    return create_engine(
        settings.DATABASE_URL,
        future=True,
        echo=settings.SQL_ECHO,
        connect_args=connect_args,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def ping(engine: Engine) -> bool:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception:
        log.warning("database ping failed", exc_info=True)
        return False


def init_db(engine: Engine):
    """
    Initialize DB schema.

    Creates the product table and its unique index on product name if they are
    missing, then checks the store answers. Errors propagate so a service that
    cannot reach its database does not start.
    """
    # register the model on Base.metadata
    from fashion_shop.models import product  # noqa: F401

    log.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    log.info("Database initialized.")


def get_db(request: Request):
    db: Session = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
