"""
Engine and session wiring for the portal's store.

Users, jobs, resumes, applications, shortlist entries and notifications all
live in one relational database. SQLite is the default; any SQLAlchemy URL
in DATABASE_URL works.
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from portal.core.config import settings

DATABASE_URL = settings.database_url

if DATABASE_URL.startswith("sqlite"):
    # Request handlers run in a threadpool and may reuse a connection across threads
    engine = create_engine(DATABASE_URL, connect_args={"check_same_thread": False})
else:
    engine = create_engine(DATABASE_URL, pool_pre_ping=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    """
    One session per request. Services decide when to commit; the apply
    flow commits its application and shortlist rows together.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db():
    """Create any missing portal tables. Called from the app lifespan and the seed script."""
    import portal.models  # noqa: F401  registers every table on Base.metadata
    Base.metadata.create_all(bind=engine)
