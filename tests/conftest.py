import pytest
import os
import tempfile
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set env before importing app components
os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["SEED_DEMO_DATA"] = "false"
os.environ["TEXT_EXTRACTOR"] = "canned"
os.environ["RATE_LIMIT_UPLOADS"] = "1000/minute"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="portal-uploads-")
os.environ.pop("SMTP_USER", None)
os.environ.pop("SMTP_PASS", None)

import portal.models  # noqa: F401
from portal.database import Base, get_db
from portal.main import app
from portal.models.job import Job
from portal.models.resume import Resume
from portal.models.user import User, UserRole
from portal.services.auth import AuthService
from fastapi.testclient import TestClient

# SQLite in-memory database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# pysqlite does not emit BEGIN itself, so SAVEPOINTs would escape the test transaction
@event.listens_for(engine, "connect")
def _disable_pysqlite_transactions(dbapi_connection, connection_record):
    dbapi_connection.isolation_level = None

@event.listens_for(engine, "begin")
def _emit_begin(conn):
    conn.exec_driver_sql("BEGIN")

# Service commits and rollbacks act on a savepoint inside the per-test transaction
TestingSessionLocal = sessionmaker(
    autocommit=False, autoflush=False, join_transaction_mode="create_savepoint"
)

@pytest.fixture(scope="session", autouse=True)
def setup_database():
    """Create tables once for the whole test session."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture(scope="function")
def db_session():
    """Get a clean database session for each test function with rollback safety."""
    connection = engine.connect()
    transaction = connection.begin()
    session = TestingSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()

@pytest.fixture(scope="function")
def hr_user(db_session):
    user = User(email="hr@example.com", name="HR Manager", role=UserRole.HR)
    db_session.add(user)
    db_session.commit()
    return user

@pytest.fixture(scope="function")
def student_user(db_session):
    user = User(email="student@example.com", name="Student User", role=UserRole.STUDENT)
    db_session.add(user)
    db_session.commit()
    return user

@pytest.fixture(scope="function")
def job(db_session, hr_user):
    job = Job(
        title="Frontend Developer",
        description="Looking for a React TypeScript frontend developer with experience.",
        skills=["React", "TypeScript"],
        location="Remote",
        posted_by=hr_user.id,
    )
    db_session.add(job)
    db_session.commit()
    return job

@pytest.fixture(scope="function")
def resume(db_session, student_user):
    resume = Resume(
        file_name="cv.txt",
        file_url="/api/resumes/cv.txt",
        text="React TypeScript frontend developer experience",
        user_id=student_user.id,
    )
    db_session.add(resume)
    db_session.commit()
    return resume

@pytest.fixture(scope="function")
def auth_headers():
    """Helper fixture building bearer headers for a user."""
    def _auth_headers(user):
        return {"Authorization": f"Bearer {AuthService.issue_token(user)}"}
    return _auth_headers

@pytest.fixture(scope="function")
def client(db_session):
    """Get a TestClient that uses the test database session via dependency override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
