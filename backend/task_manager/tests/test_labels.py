from conftest import create_label, create_task, create_task_status

from task_manager.models.label import Label


def test_create_and_get_label(client, auth_headers):
    response = client.post("/api/labels", json={"name": "feature"}, headers=auth_headers)
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "feature"

    response = client.get(f"/api/labels/{data['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["name"] == "feature"


def test_label_name_length(client, auth_headers):
    response = client.post("/api/labels", json={"name": "ab"}, headers=auth_headers)
    assert response.status_code == 400
    response = client.post("/api/labels", json={"name": "x" * 1001}, headers=auth_headers)
    assert response.status_code == 400


def test_duplicate_label_name_conflicts(client, auth_headers, db_session):
    create_label(db_session, name="bug")
    response = client.post("/api/labels", json={"name": "bug"}, headers=auth_headers)
    assert response.status_code == 409


def test_update_label_to_duplicate_name_conflicts(client, auth_headers, db_session):
    create_label(db_session, name="bug")
    label = create_label(db_session, name="feature")
    response = client.put(f"/api/labels/{label.id}", json={"name": "bug"}, headers=auth_headers)
    assert response.status_code == 409

    db_session.expire_all()
    assert db_session.get(Label, label.id).name == "feature"


def test_update_label(client, auth_headers, db_session):
    label = create_label(db_session, name="bug")
    response = client.put(f"/api/labels/{label.id}", json={"name": "defect"}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["name"] == "defect"

    response = client.put(f"/api/labels/{label.id}", json={"name": None}, headers=auth_headers)
    assert response.status_code == 400

    response = client.put("/api/labels/999999", json={"name": "defect"}, headers=auth_headers)
    assert response.status_code == 404


def test_list_labels(client, auth_headers, db_session):
    create_label(db_session, name="bug")
    create_label(db_session, name="feature")
    response = client.get("/api/labels", headers=auth_headers)
    assert response.status_code == 200
    assert [item["name"] for item in response.json()] == ["bug", "feature"]


def test_delete_unused_label(client, auth_headers, db_session):
    label = create_label(db_session)
    response = client.delete(f"/api/labels/{label.id}", headers=auth_headers)
    assert response.status_code == 204
    response = client.get(f"/api/labels/{label.id}", headers=auth_headers)
    assert response.status_code == 404


def test_delete_label_in_use_conflicts(client, auth_headers, db_session):
    label = create_label(db_session, name="bug")
    task = create_task(db_session, create_task_status(db_session), labels=[label])

    response = client.delete(f"/api/labels/{label.id}", headers=auth_headers)
    assert response.status_code == 409
    assert f"Label with id {label.id}" in response.json()["detail"]

    db_session.expire_all()
    stored = db_session.query(Label).filter(Label.id == label.id).first()
    assert stored is not None
    assert task in stored.tasks


def test_label_add_and_remove_task_keep_both_sides(db_session):
    label = create_label(db_session)
    task = create_task(db_session, create_task_status(db_session))

    label.add_task(task)
    label.add_task(task)
    assert label.tasks == [task]
    assert task.labels == [label]

    label.remove_task(task)
    assert label.tasks == []
    assert task.labels == []
