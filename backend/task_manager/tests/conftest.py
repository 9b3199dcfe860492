import os
import tempfile
from pathlib import Path
from uuid import uuid4

import pytest

TEST_DB_FILE = Path(tempfile.gettempdir()) / f"test_task_manager_{uuid4().hex}.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_FILE.as_posix()}"
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ALGORITHM", "HS256")
os.environ.setdefault("ACCESS_TOKEN_EXPIRE_MINUTES", "60")
os.environ["BASE_URL"] = "/api"
os.environ["DB_BOOTSTRAP_MODE"] = "off"

from fastapi.testclient import TestClient  # noqa: E402

from task_manager.core.security import get_password_hash  # noqa: E402
from task_manager.database.base import Base  # noqa: E402
from task_manager.database.session import SessionLocal, engine  # noqa: E402
from task_manager.main import app  # noqa: E402
from task_manager.models.label import Label  # noqa: E402
from task_manager.models.task import Task  # noqa: E402
from task_manager.models.task_status import TaskStatus  # noqa: E402
from task_manager.models.user import User  # noqa: E402

TEST_PASSWORD = "secret123"


@pytest.fixture(autouse=True)
def reset_database():
    engine.dispose()
    if TEST_DB_FILE.exists():
        TEST_DB_FILE.unlink()
    Base.metadata.create_all(bind=engine)
    try:
        yield
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()
        if TEST_DB_FILE.exists():
            TEST_DB_FILE.unlink()


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


def create_user(db, email: str = None, password: str = TEST_PASSWORD) -> User:
    user = User(
        first_name="Test",
        last_name="User",
        email=email or f"user.{uuid4().hex[:8]}@test.local",
        password_digest=get_password_hash(password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def create_task_status(db, slug: str = None) -> TaskStatus:
    slug = slug or f"status_{uuid4().hex[:8]}"
    task_status = TaskStatus(name=slug.capitalize(), slug=slug)
    db.add(task_status)
    db.commit()
    db.refresh(task_status)
    return task_status


def create_label(db, name: str = None) -> Label:
    label = Label(name=name or f"label-{uuid4().hex[:8]}")
    db.add(label)
    db.commit()
    db.refresh(label)
    return label


def create_task(db, task_status: TaskStatus, name: str = "Task", assignee: User = None, labels=()) -> Task:
    task = Task(name=name, description="Description", task_status=task_status, assignee=assignee)
    db.add(task)
    for label in labels:
        label.add_task(task)
    db.commit()
    db.refresh(task)
    return task


@pytest.fixture
def current_user(db_session) -> User:
    return create_user(db_session, email="current.user@test.local")


@pytest.fixture
def auth_headers(client, current_user) -> dict[str, str]:
    response = client.post(
        "/api/login",
        json={"username": current_user.email, "password": TEST_PASSWORD},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.text}"}
