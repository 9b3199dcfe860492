from task_manager.core.security import verify_password
from task_manager.mappers import task as task_mapper
from task_manager.mappers import user as user_mapper
from task_manager.models.task import Task
from task_manager.models.task_status import TaskStatus
from task_manager.models.user import User
from task_manager.schemas.task import TaskCreate, TaskUpdate
from task_manager.schemas.user import UserCreate, UserUpdate


def test_user_to_entity_hashes_password():
    user = user_mapper.to_entity(UserCreate(email="map@test.local", password="plain"))
    assert user.password_digest != "plain"
    assert verify_password("plain", user.password_digest)


def test_user_apply_update_only_touches_sent_fields():
    user = User(first_name="Ada", last_name="Lovelace", email="ada@test.local", password_digest="digest")
    payload = UserUpdate.model_validate({"lastName": None})
    user_mapper.apply_update(payload.model_dump(exclude_unset=True), user)
    assert user.first_name == "Ada"
    assert user.last_name is None
    assert user.email == "ada@test.local"
    assert user.password_digest == "digest"


def test_user_to_dto_omits_password():
    user = User(id=1, email="ada@test.local", password_digest="digest")
    dumped = user_mapper.to_dto(user).model_dump(by_alias=True)
    assert "password" not in dumped
    assert "passwordDigest" not in dumped
    assert dumped["email"] == "ada@test.local"


def test_task_mapping():
    task_status = TaskStatus(id=3, name="Draft", slug="draft")
    assignee = User(id=5, email="a@test.local", password_digest="x")
    task = task_mapper.to_entity(TaskCreate(name="Write", task_status="draft"), task_status, assignee)
    task.id = 10

    dto = task_mapper.to_dto(task)
    assert dto.task_status == "draft"
    assert dto.assignee_id == 5
    assert dto.labels_ids == []


def test_task_apply_update_tri_state():
    task_status = TaskStatus(id=3, name="Draft", slug="draft")
    assignee = User(id=5, email="a@test.local", password_digest="x")
    task = Task(name="A", description="B", index=2, task_status=task_status, assignee=assignee)

    data = TaskUpdate.model_validate({"description": "C"}).model_dump(exclude_unset=True)
    task_mapper.apply_update(data, task)
    assert (task.name, task.description, task.index) == ("A", "C", 2)
    assert task.assignee is assignee

    data = TaskUpdate.model_validate({"index": None, "assigneeId": None}).model_dump(exclude_unset=True)
    task_mapper.apply_update(data, task, assignee=None)
    assert task.index is None
    assert task.assignee is None
    assert task.task_status is task_status
