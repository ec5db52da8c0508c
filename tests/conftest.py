import os

# Settings are read at import time; point them at a throwaway database first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["SEED_ON_STARTUP"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from gradebook.api.deps import get_db
from gradebook.core.database import build_engine, create_database_tables
from gradebook.core.security import hash_password
from gradebook.main import app
from gradebook.services.storage import DatabaseStorage

ADMIN_USERNAME = "principal"
ADMIN_PASSWORD = "s3cret"


@pytest.fixture
def engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'gradebook.db'}")
    create_database_tables(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def storage(db):
    return DatabaseStorage(db)


@pytest.fixture
def admin(storage):
    return storage.create_admin(
        name="Principal",
        email=ADMIN_USERNAME,
        password_hash=hash_password(ADMIN_PASSWORD),
        is_super_admin=True
    )


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_client(client, admin):
    response = client.post("/api/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return client


@pytest.fixture
def school_class(storage):
    """A session with one class, returned as the class row."""
    from gradebook.schemas.school_class import ClassCreate
    from gradebook.schemas.session import SessionCreate

    session = storage.create_session(SessionCreate(name="2024-25", is_active=True))
    return storage.create_class(ClassCreate(name="10th", session_id=session.id))
