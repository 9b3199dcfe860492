from task_manager.core.config import DEFAULT_USER_EMAIL, DEFAULT_USER_PASSWORD
from task_manager.core.security import verify_password
from task_manager.models.label import Label
from task_manager.models.task_status import TaskStatus
from task_manager.models.user import User
from task_manager.services.seed import ensure_default_data, ensure_task_statuses


def test_seed_creates_defaults(db_session):
    ensure_default_data(db_session)

    user = db_session.query(User).filter(User.email == DEFAULT_USER_EMAIL).first()
    assert user is not None
    assert verify_password(DEFAULT_USER_PASSWORD, user.password_digest)

    slugs = [row.slug for row in db_session.query(TaskStatus).order_by(TaskStatus.id).all()]
    assert slugs == ["draft", "to_review", "to_be_fixed", "to_publish", "published"]
    assert db_session.query(TaskStatus).filter(TaskStatus.slug == "to_review").first().name == "To_review"
    assert sorted(row.name for row in db_session.query(Label).all()) == ["bug", "feature"]


def test_seed_is_idempotent(db_session):
    ensure_default_data(db_session)
    ensure_default_data(db_session)

    assert db_session.query(User).count() == 1
    assert db_session.query(TaskStatus).count() == 5
    assert db_session.query(Label).count() == 2


def test_seed_keeps_existing_rows(db_session):
    db_session.add(TaskStatus(name="Custom draft", slug="draft"))
    db_session.commit()

    ensure_task_statuses(db_session, ["draft", "archived"])
    db_session.commit()

    assert db_session.query(TaskStatus).filter(TaskStatus.slug == "draft").first().name == "Custom draft"
    assert db_session.query(TaskStatus).filter(TaskStatus.slug == "archived").first().name == "Archived"


def test_seeded_user_can_log_in(client, db_session):
    ensure_default_data(db_session)
    response = client.post("/api/login", json={"username": DEFAULT_USER_EMAIL, "password": DEFAULT_USER_PASSWORD})
    assert response.status_code == 200
    assert response.text
