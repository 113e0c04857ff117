"""Task API tests."""

from datetime import UTC, datetime


def create_task(client, headers, title="Write report", **overrides):
    """Create a task and return the response."""
    payload = {
        "title": title,
        "description": "Quarterly numbers",
        "status": "pending",
        "dueDate": "2026-11-01T12:00:00",
    }
    payload.update(overrides)
    return client.post("/tasks", headers=headers, json=payload)


def test_create_task(client, auth_headers):
    """Test creating a task."""
    response = create_task(client, auth_headers)
    assert response.status_code == 201
    data = response.json()
    assert data["title"] == "Write report"
    assert data["description"] == "Quarterly numbers"
    assert data["status"] == "pending"
    assert data["dueDate"].startswith("2026-11-01T12:00:00")
    assert data["userId"] == auth_headers.user_id


def test_create_task_requires_status(client, auth_headers):
    """Test status must be supplied on create."""
    response = client.post(
        "/tasks",
        headers=auth_headers,
        json={"title": "No status", "description": "", "dueDate": "2026-11-01T12:00:00"},
    )
    assert response.status_code == 422
    fields = [error["loc"][-1] for error in response.json()["detail"]]
    assert "status" in fields


def test_due_dates_normalized_to_utc(client, auth_headers):
    """Test due dates with different offsets are stored, ordered and returned in UTC."""
    create_task(client, auth_headers, title="Later instant", dueDate="2026-11-01T10:00:00Z")
    create_task(
        client, auth_headers, title="Earlier instant", dueDate="2026-11-01T12:00:00+05:00"
    )
    create_task(client, auth_headers, title="Naive", dueDate="2026-11-01T08:00:00")

    response = client.get("/tasks", headers=auth_headers)
    tasks = response.json()
    assert [task["title"] for task in tasks] == ["Earlier instant", "Naive", "Later instant"]
    assert [datetime.fromisoformat(task["dueDate"]) for task in tasks] == [
        datetime(2026, 11, 1, 7, 0, tzinfo=UTC),
        datetime(2026, 11, 1, 8, 0, tzinfo=UTC),
        datetime(2026, 11, 1, 10, 0, tzinfo=UTC),
    ]


def test_update_due_date_normalized_to_utc(client, auth_headers):
    """Test an updated due date with an offset is returned in UTC."""
    task_id = create_task(client, auth_headers).json()["id"]

    response = client.put(
        f"/tasks/{task_id}", headers=auth_headers, json={"dueDate": "2026-12-01T09:00:00-03:00"}
    )
    assert response.status_code == 200
    assert datetime.fromisoformat(response.json()["dueDate"]) == datetime(
        2026, 12, 1, 12, 0, tzinfo=UTC
    )


def test_create_task_invalid_status(client, auth_headers):
    """Test an unknown status is rejected."""
    response = create_task(client, auth_headers, status="done")
    assert response.status_code == 422


def test_create_task_requires_auth(client):
    """Test creating a task without a token fails."""
    response = create_task(client, {})
    assert response.status_code == 401


def test_duplicate_title_same_owner(client, auth_headers):
    """Test a user cannot reuse one of their own task titles."""
    assert create_task(client, auth_headers, title="T").status_code == 201

    response = create_task(client, auth_headers, title="T")
    assert response.status_code == 409
    assert response.json()["code"] == "conflict"
    assert response.json()["detail"] == 'Task with title "T" already exists'


def test_same_title_different_owners(client, auth_headers, other_auth_headers):
    """Test title uniqueness is per owner."""
    assert create_task(client, auth_headers, title="T").status_code == 201
    assert create_task(client, other_auth_headers, title="T").status_code == 201


def test_get_tasks_ordered_by_due_date(client, auth_headers):
    """Test tasks are returned by due date ascending."""
    create_task(client, auth_headers, title="Later", dueDate="2026-12-01T00:00:00")
    create_task(client, auth_headers, title="Soonest", dueDate="2026-10-20T00:00:00")
    create_task(client, auth_headers, title="Middle", dueDate="2026-11-15T00:00:00")

    response = client.get("/tasks", headers=auth_headers)
    assert response.status_code == 200
    assert [task["title"] for task in response.json()] == ["Soonest", "Middle", "Later"]


def test_get_tasks_filtered_by_status(client, auth_headers, other_auth_headers):
    """Test status filter returns only the caller's matching tasks."""
    create_task(
        client, auth_headers, title="Done late", status="completed", dueDate="2026-12-01T00:00:00"
    )
    create_task(client, auth_headers, title="Open", status="pending")
    create_task(
        client, auth_headers, title="Done early", status="completed", dueDate="2026-10-21T00:00:00"
    )
    create_task(client, other_auth_headers, title="Other done", status="completed")
    create_task(client, other_auth_headers, title="Other open", status="in_progress")

    response = client.get("/tasks", headers=auth_headers, params={"status": "completed"})
    assert response.status_code == 200
    tasks = response.json()
    assert [task["title"] for task in tasks] == ["Done early", "Done late"]
    assert all(task["userId"] == auth_headers.user_id for task in tasks)


def test_get_tasks_excludes_other_users(client, auth_headers, other_auth_headers):
    """Test listing never includes another user's tasks."""
    create_task(client, auth_headers, title="Mine")
    create_task(client, other_auth_headers, title="Theirs")

    response = client.get("/tasks", headers=auth_headers)
    assert [task["title"] for task in response.json()] == ["Mine"]


def test_get_tasks_invalid_status(client, auth_headers):
    """Test an unknown status filter is rejected."""
    response = client.get("/tasks", headers=auth_headers, params={"status": "archived"})
    assert response.status_code == 422


def test_get_task(client, auth_headers):
    """Test getting a specific task."""
    task_id = create_task(client, auth_headers).json()["id"]

    response = client.get(f"/tasks/{task_id}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["id"] == task_id


def test_get_task_not_found(client, auth_headers):
    """Test a nonexistent task id returns 404."""
    response = client.get("/tasks/99999", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["code"] == "not_found"


def test_get_task_of_other_user_forbidden(client, auth_headers, other_auth_headers):
    """Test reading someone else's task returns 403."""
    task_id = create_task(client, auth_headers).json()["id"]

    response = client.get(f"/tasks/{task_id}", headers=other_auth_headers)
    assert response.status_code == 403
    assert response.json()["code"] == "forbidden"


def test_update_task(client, auth_headers):
    """Test a partial update leaves omitted fields unchanged."""
    task_id = create_task(client, auth_headers).json()["id"]

    response = client.put(
        f"/tasks/{task_id}", headers=auth_headers, json={"status": "in_progress"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "in_progress"
    assert data["title"] == "Write report"
    assert data["description"] == "Quarterly numbers"


def test_update_task_fields(client, auth_headers):
    """Test updating title, description and due date."""
    task_id = create_task(client, auth_headers).json()["id"]

    response = client.put(
        f"/tasks/{task_id}",
        headers=auth_headers,
        json={
            "title": "Write final report",
            "description": "Annual numbers",
            "dueDate": "2027-01-15T09:30:00",
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Write final report"
    assert data["description"] == "Annual numbers"
    assert data["dueDate"].startswith("2027-01-15T09:30:00")


def test_update_task_to_existing_title(client, auth_headers):
    """Test renaming a task onto another of the owner's titles conflicts."""
    create_task(client, auth_headers, title="First")
    task_id = create_task(client, auth_headers, title="Second").json()["id"]

    response = client.put(f"/tasks/{task_id}", headers=auth_headers, json={"title": "First"})
    assert response.status_code == 409


def test_update_task_keeping_own_title(client, auth_headers):
    """Test resubmitting a task's own title is not a conflict."""
    task_id = create_task(client, auth_headers, title="Same").json()["id"]

    response = client.put(f"/tasks/{task_id}", headers=auth_headers, json={"title": "Same"})
    assert response.status_code == 200


def test_update_task_not_found(client, auth_headers):
    """Test updating a nonexistent task returns 404."""
    response = client.put("/tasks/99999", headers=auth_headers, json={"title": "Nope"})
    assert response.status_code == 404


def test_update_task_of_other_user_forbidden(client, auth_headers, other_auth_headers):
    """Test updating someone else's task returns 403 and changes nothing."""
    task_id = create_task(client, auth_headers).json()["id"]

    response = client.put(
        f"/tasks/{task_id}", headers=other_auth_headers, json={"title": "Hijacked"}
    )
    assert response.status_code == 403

    response = client.get(f"/tasks/{task_id}", headers=auth_headers)
    assert response.json()["title"] == "Write report"


def test_delete_task(client, auth_headers):
    """Test deleting a task."""
    task_id = create_task(client, auth_headers).json()["id"]

    response = client.delete(f"/tasks/{task_id}", headers=auth_headers)
    assert response.status_code == 204

    response = client.get(f"/tasks/{task_id}", headers=auth_headers)
    assert response.status_code == 404


def test_delete_task_frees_title(client, auth_headers):
    """Test a deleted task's title can be reused."""
    task_id = create_task(client, auth_headers, title="T").json()["id"]
    client.delete(f"/tasks/{task_id}", headers=auth_headers)

    assert create_task(client, auth_headers, title="T").status_code == 201


def test_delete_task_not_found(client, auth_headers):
    """Test deleting a nonexistent task returns 404."""
    response = client.delete("/tasks/99999", headers=auth_headers)
    assert response.status_code == 404


def test_delete_task_of_other_user_forbidden(client, auth_headers, other_auth_headers):
    """Test deleting someone else's task returns 403."""
    task_id = create_task(client, auth_headers).json()["id"]

    response = client.delete(f"/tasks/{task_id}", headers=other_auth_headers)
    assert response.status_code == 403

    response = client.get(f"/tasks/{task_id}", headers=auth_headers)
    assert response.status_code == 200
