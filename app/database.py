from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from app.config.settings import settings


def build_engine(url: str, echo: bool = False):
    # SQLite connections are shared across the threadpool; PostgreSQL on Render or similar needs sslmode=require
    if url.lower().startswith("sqlite"):
        connect_args = {"check_same_thread": False}
    elif url.lower().startswith("postgres"):
        connect_args = {"sslmode": "require"}
    else:
        connect_args = {}
    return create_engine(url, connect_args=connect_args, echo=echo)


engine = build_engine(settings.DATABASE["url"], echo=settings.DATABASE["echo"])

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db(bind=None) -> None:
    """Create all tables that do not exist yet"""
    # Models must be imported so they register on Base.metadata
    from app.models import task, user  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


# This is required to be imported wherever DB session is needed
def get_db():
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
