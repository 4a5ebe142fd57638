"""Tests for learning plan API endpoints."""

from collections.abc import Callable
from typing import Any
from uuid import uuid4

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from skillshare import models

BASE_URL = "/api/v1/learning-plans"


def plan_payload(**overrides: Any) -> dict[str, Any]:
    """Two modules: M1 with tasks of 60 and 90 minutes, M2 with one 30 minute task."""
    payload: dict[str, Any] = {
        "title": "Python Mastery",
        "description": "From scripts to packages",
        "category": "Programming",
        "estimated_hours": 10,
        "modules": [
            {
                "title": "Basics",
                "estimated_hours": 3,
                "tasks": [
                    {
                        "title": "Syntax",
                        "estimated_minutes": 60,
                        "resources": [
                            {
                                "title": "Tutorial",
                                "type": "article",
                                "url": "https://docs.python.org/3/tutorial/",
                            }
                        ],
                    },
                    {"title": "Control flow", "estimated_minutes": 90},
                ],
            },
            {
                "title": "Packaging",
                "estimated_hours": 1,
                "tasks": [{"title": "pyproject", "estimated_minutes": 30}],
            },
        ],
    }
    payload.update(overrides)
    return payload


def create_plan(client: TestClient, **overrides: Any) -> dict[str, Any]:
    response = client.post(BASE_URL, json=plan_payload(**overrides))
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


def complete(client: TestClient, plan: dict[str, Any], module: int, task: int) -> Any:
    module_data = plan["modules"][module]
    return client.put(
        f"{BASE_URL}/{plan['id']}/progress",
        json={"module_id": module_data["id"], "task_id": module_data["tasks"][task]["id"]},
    )


class TestCreateLearningPlan:
    """Test suite for POST /learning-plans endpoint."""

    def test_create_plan_success(
        self, client: TestClient, db_session: Session, test_user: models.User
    ) -> None:
        """Test that the whole tree is stored with fresh ids and no progress."""
        data = create_plan(client)

        assert data["title"] == "Python Mastery"
        assert data["user_id"] == test_user.id
        assert data["is_template"] is False
        assert data["completed_hours"] == 0
        assert data["status"] == "NOT_STARTED"
        assert [m["title"] for m in data["modules"]] == ["Basics", "Packaging"]
        assert [t["title"] for t in data["modules"][0]["tasks"]] == ["Syntax", "Control flow"]
        assert data["modules"][0]["tasks"][0]["resources"][0]["type"] == "article"

        ids = [m["id"] for m in data["modules"]]
        ids += [t["id"] for m in data["modules"] for t in m["tasks"]]
        assert len(set(ids)) == len(ids) == 5

        db_plan = db_session.get(models.LearningPlan, data["id"])
        assert db_plan is not None
        assert len(db_plan.modules) == 2

    def test_create_plan_ignores_template_flag(self, client: TestClient) -> None:
        """Test that users cannot create templates."""
        data = create_plan(client, is_template=True)

        assert data["is_template"] is False

    def test_create_plan_empty_title(self, client: TestClient) -> None:
        response = client.post(BASE_URL, json=plan_payload(title=""))

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_create_plan_negative_minutes(self, client: TestClient) -> None:
        payload = plan_payload()
        payload["modules"][0]["tasks"][0]["estimated_minutes"] = -5

        response = client.post(BASE_URL, json=payload)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_create_plan_unknown_resource_type(self, client: TestClient) -> None:
        payload = plan_payload()
        payload["modules"][0]["tasks"][0]["resources"][0]["type"] = "podcast"

        response = client.post(BASE_URL, json=payload)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_create_plan_without_modules(self, client: TestClient) -> None:
        data = create_plan(client, modules=[])

        assert data["modules"] == []
        assert data["completed_hours"] == 0
        assert data["status"] == "NOT_STARTED"


class TestUpdatePlanProgress:
    """Test suite for PUT /learning-plans/:id/progress endpoint."""

    def test_progress_rolls_up_with_truncation(self, client: TestClient) -> None:
        """Test 60 + 90 minutes completing in steps: 1 hour, then 2 hours (150 // 60)."""
        plan = create_plan(client)

        response = complete(client, plan, 0, 0)
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["modules"][0]["completed_hours"] == 1
        assert data["completed_hours"] == 1
        assert data["status"] == "IN_PROGRESS"
        assert data["modules"][0]["tasks"][0]["completed_at"] is not None

        data = complete(client, plan, 0, 1).json()
        assert data["modules"][0]["completed_hours"] == 2
        assert data["modules"][1]["completed_hours"] == 0
        assert data["completed_hours"] == 2

    def test_short_task_does_not_add_an_hour(self, client: TestClient) -> None:
        plan = create_plan(client)

        data = complete(client, plan, 1, 0).json()

        assert data["modules"][1]["completed_hours"] == 0
        assert data["completed_hours"] == 0
        assert data["status"] == "IN_PROGRESS"

    def test_all_tasks_completed(self, client: TestClient) -> None:
        plan = create_plan(client)
        complete(client, plan, 0, 0)
        complete(client, plan, 0, 1)

        data = complete(client, plan, 1, 0).json()

        assert data["completed_hours"] == 2
        assert data["status"] == "COMPLETED"

    def test_remarking_completed_task_is_noop(self, client: TestClient) -> None:
        """Test that the original completion time and hours are kept."""
        plan = create_plan(client)
        first = complete(client, plan, 0, 0).json()

        response = complete(client, plan, 0, 0)

        assert response.status_code == status.HTTP_200_OK
        second = response.json()
        assert second["completed_hours"] == first["completed_hours"] == 1
        assert (
            second["modules"][0]["tasks"][0]["completed_at"]
            == first["modules"][0]["tasks"][0]["completed_at"]
        )

    def test_progress_persisted(self, client: TestClient) -> None:
        plan = create_plan(client)
        complete(client, plan, 0, 1)

        data = client.get(f"{BASE_URL}/{plan['id']}").json()

        assert data["modules"][0]["completed_hours"] == 1
        assert data["completed_hours"] == 1

    def test_unknown_module(self, client: TestClient) -> None:
        plan = create_plan(client)

        response = client.put(
            f"{BASE_URL}/{plan['id']}/progress",
            json={"module_id": str(uuid4()), "task_id": plan["modules"][0]["tasks"][0]["id"]},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "Module" in response.json()["detail"]

    def test_task_of_other_module(self, client: TestClient) -> None:
        """Test that a task is only found inside the module that owns it."""
        plan = create_plan(client)

        response = client.put(
            f"{BASE_URL}/{plan['id']}/progress",
            json={
                "module_id": plan["modules"][1]["id"],
                "task_id": plan["modules"][0]["tasks"][0]["id"],
            },
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "Task" in response.json()["detail"]

    def test_unknown_plan(self, client: TestClient) -> None:
        response = client.put(
            f"{BASE_URL}/99999/progress",
            json={"module_id": str(uuid4()), "task_id": str(uuid4())},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_invalid_ids(self, client: TestClient) -> None:
        plan = create_plan(client)

        response = client.put(
            f"{BASE_URL}/{plan['id']}/progress", json={"module_id": "abc", "task_id": "def"}
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT


class TestOwnershipIsolation:
    """Test that users cannot touch each other's plans."""

    def test_other_user_cannot_read(
        self,
        client: TestClient,
        other_user: models.User,
        act_as: Callable[[models.User], None],
    ) -> None:
        plan = create_plan(client)
        act_as(other_user)

        response = client.get(f"{BASE_URL}/{plan['id']}")

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_other_user_cannot_update_progress(
        self,
        client: TestClient,
        other_user: models.User,
        act_as: Callable[[models.User], None],
    ) -> None:
        plan = create_plan(client)
        act_as(other_user)

        response = complete(client, plan, 0, 0)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_not_found_before_not_authorized(
        self,
        client: TestClient,
        other_user: models.User,
        act_as: Callable[[models.User], None],
    ) -> None:
        """Test that existence and ownership stay distinct."""
        act_as(other_user)

        response = client.get(f"{BASE_URL}/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_other_user_cannot_update_or_delete(
        self,
        client: TestClient,
        test_user: models.User,
        other_user: models.User,
        act_as: Callable[[models.User], None],
    ) -> None:
        plan = create_plan(client)
        act_as(other_user)

        update = client.put(f"{BASE_URL}/{plan['id']}", json={"title": "Mine now"})
        delete = client.delete(f"{BASE_URL}/{plan['id']}")

        assert update.status_code == status.HTTP_403_FORBIDDEN
        assert delete.status_code == status.HTTP_403_FORBIDDEN

        act_as(test_user)
        data = client.get(f"{BASE_URL}/{plan['id']}").json()
        assert data["title"] == "Python Mastery"

    def test_list_only_own_plans(
        self,
        client: TestClient,
        other_user: models.User,
        act_as: Callable[[models.User], None],
    ) -> None:
        create_plan(client)
        act_as(other_user)
        create_plan(client, title="Rust")

        data = client.get(BASE_URL).json()

        assert [p["title"] for p in data["learning_plans"]] == ["Rust"]


class TestUpdateLearningPlan:
    """Test suite for PUT /learning-plans/:id endpoint."""

    def test_update_metadata_keeps_tree_and_progress(self, client: TestClient) -> None:
        plan = create_plan(client)
        complete(client, plan, 0, 0)

        response = client.put(
            f"{BASE_URL}/{plan['id']}",
            json={"title": "Python Deep Dive", "category": "Backend", "estimated_hours": 20},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["title"] == "Python Deep Dive"
        assert data["category"] == "Backend"
        assert data["estimated_hours"] == 20
        assert data["completed_hours"] == 1
        assert [m["id"] for m in data["modules"]] == [m["id"] for m in plan["modules"]]

    def test_update_not_found(self, client: TestClient) -> None:
        response = client.put(f"{BASE_URL}/99999", json={"title": "Nothing"})

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestDeleteLearningPlan:
    """Test suite for DELETE /learning-plans/:id endpoint."""

    def test_delete_cascades_to_subtree(self, client: TestClient, db_session: Session) -> None:
        plan = create_plan(client)

        response = client.delete(f"{BASE_URL}/{plan['id']}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"{BASE_URL}/{plan['id']}").status_code == status.HTTP_404_NOT_FOUND
        assert db_session.query(models.LearningModule).count() == 0
        assert db_session.query(models.LearningTask).count() == 0
        assert db_session.query(models.LearningResource).count() == 0

    def test_delete_not_found(self, client: TestClient) -> None:
        response = client.delete(f"{BASE_URL}/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_out_of_range_ids_not_found(self, client: TestClient) -> None:
        progress = {"module_id": str(uuid4()), "task_id": str(uuid4())}

        assert client.get(f"{BASE_URL}/-1").status_code == status.HTTP_404_NOT_FOUND
        assert client.get(f"{BASE_URL}/0").status_code == status.HTTP_404_NOT_FOUND
        assert client.delete(f"{BASE_URL}/-1").status_code == status.HTTP_404_NOT_FOUND
        response = client.put(f"{BASE_URL}/-1", json={"title": "Nothing"})
        assert response.status_code == status.HTTP_404_NOT_FOUND
        response = client.put(f"{BASE_URL}/-1/progress", json=progress)
        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestListLearningPlanQueries:
    """Test suite for the status, category and time-range listings."""

    def test_list_by_status(self, client: TestClient) -> None:
        started = create_plan(client, title="Started")
        create_plan(client, title="Fresh")
        complete(client, started, 0, 0)

        in_progress = client.get(f"{BASE_URL}/status/IN_PROGRESS").json()
        not_started = client.get(f"{BASE_URL}/status/not_started").json()
        completed = client.get(f"{BASE_URL}/status/COMPLETED").json()

        assert [p["title"] for p in in_progress["learning_plans"]] == ["Started"]
        assert [p["title"] for p in not_started["learning_plans"]] == ["Fresh"]
        assert completed["learning_plans"] == []

    def test_list_by_unknown_status(self, client: TestClient) -> None:
        response = client.get(f"{BASE_URL}/status/PAUSED")

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_list_by_category_case_insensitive(self, client: TestClient) -> None:
        create_plan(client, title="Python", category="Programming")
        create_plan(client, title="Sketching", category="Art")

        data = client.get(f"{BASE_URL}/category/programming").json()

        assert [p["title"] for p in data["learning_plans"]] == ["Python"]

    def test_list_by_time_range(self, client: TestClient) -> None:
        create_plan(client, title="Short", estimated_hours=5)
        create_plan(client, title="Medium", estimated_hours=20)
        create_plan(client, title="Long", estimated_hours=100)

        data = client.get(f"{BASE_URL}/time-range", params={"min_hours": 5, "max_hours": 20}).json()

        assert sorted(p["title"] for p in data["learning_plans"]) == ["Medium", "Short"]

    def test_list_by_inverted_time_range(self, client: TestClient) -> None:
        response = client.get(f"{BASE_URL}/time-range", params={"min_hours": 10, "max_hours": 1})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
