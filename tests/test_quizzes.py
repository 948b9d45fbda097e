import pytest

from conftest import login, register

pytestmark = pytest.mark.asyncio


@pytest.fixture
async def other_headers(client):
    await register(client, "intruder@test.com", "intruder")
    response = await login(client, "intruder@test.com")
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


async def create_quiz(client, headers, question="What is 2 + 2?"):
    response = await client.post("/api/v1/quizzes/", headers=headers, json={
        "question": question,
        "quiz_type": "single_choice",
        "selections": [
            {"selection_text": "3", "is_correct": False},
            {"selection_text": "4", "is_correct": True},
        ],
    })
    assert response.status_code == 201, response.text
    return response.json()


async def create_suite(client, headers, title="Arithmetic"):
    response = await client.post("/api/v1/quiz-suites/", headers=headers, json={
        "title": title,
        "description": "Basic sums",
    })
    assert response.status_code == 201, response.text
    return response.json()


# ──────────────────────────────────────────────
# Quizzes
# ──────────────────────────────────────────────

async def test_create_quiz(client, auth_headers):
    quiz = await create_quiz(client, auth_headers)
    assert quiz["question"] == "What is 2 + 2?"
    assert quiz["quiz_type"] == "single_choice"
    assert [s["selection_text"] for s in quiz["selections"]] == ["3", "4"]
    assert [s["is_correct"] for s in quiz["selections"]] == [False, True]


async def test_create_quiz_requires_auth(client):
    response = await client.post("/api/v1/quizzes/", json={"question": "Anyone?"})
    assert response.status_code == 401


async def test_create_quiz_rejects_unknown_type(client, auth_headers):
    response = await client.post("/api/v1/quizzes/", headers=auth_headers, json={
        "question": "Pick one",
        "quiz_type": "essay",
    })
    assert response.status_code == 422


async def test_get_quiz(client, auth_headers):
    quiz = await create_quiz(client, auth_headers)
    response = await client.get(f"/api/v1/quizzes/{quiz['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["id"] == quiz["id"]
    assert len(response.json()["selections"]) == 2


async def test_get_missing_quiz(client, auth_headers):
    response = await client.get("/api/v1/quizzes/99999", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["detail"] == "Quiz not found"


async def test_list_quizzes_is_paginated_and_scoped_to_owner(client, auth_headers, other_headers):
    for i in range(3):
        await create_quiz(client, auth_headers, question=f"Question {i}")
    await create_quiz(client, other_headers, question="Not mine")

    response = await client.get("/api/v1/quizzes/?page=1&size=2", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 3
    assert data["pages"] == 2
    assert [q["question"] for q in data["items"]] == ["Question 0", "Question 1"]

    response = await client.get("/api/v1/quizzes/?page=2&size=2", headers=auth_headers)
    assert [q["question"] for q in response.json()["items"]] == ["Question 2"]


@pytest.mark.parametrize("query", ["page=0", "size=0", "size=101"])
async def test_list_quizzes_rejects_bad_paging(client, auth_headers, query):
    response = await client.get(f"/api/v1/quizzes/?{query}", headers=auth_headers)
    assert response.status_code == 422


async def test_list_quizzes_empty(client, auth_headers):
    response = await client.get("/api/v1/quizzes/", headers=auth_headers)
    assert response.json() == {"items": [], "total": 0, "page": 1, "size": 20, "pages": 0}


async def test_update_quiz(client, auth_headers):
    quiz = await create_quiz(client, auth_headers)
    response = await client.put(f"/api/v1/quizzes/{quiz['id']}", headers=auth_headers, json={
        "question": "What is 3 + 3?",
        "quiz_type": "multi_choice",
    })
    assert response.status_code == 200
    assert response.json()["question"] == "What is 3 + 3?"
    assert response.json()["quiz_type"] == "multi_choice"


async def test_non_owner_cannot_modify_quiz(client, auth_headers, other_headers):
    quiz = await create_quiz(client, auth_headers)

    response = await client.put(f"/api/v1/quizzes/{quiz['id']}", headers=other_headers, json={"question": "Mine now"})
    assert response.status_code == 403
    response = await client.delete(f"/api/v1/quizzes/{quiz['id']}", headers=other_headers)
    assert response.status_code == 403
    response = await client.post(
        f"/api/v1/quizzes/{quiz['id']}/selections",
        headers=other_headers,
        json={"selection_text": "5"},
    )
    assert response.status_code == 403


async def test_delete_quiz(client, auth_headers):
    quiz = await create_quiz(client, auth_headers)
    response = await client.delete(f"/api/v1/quizzes/{quiz['id']}", headers=auth_headers)
    assert response.status_code == 204
    response = await client.get(f"/api/v1/quizzes/{quiz['id']}", headers=auth_headers)
    assert response.status_code == 404


async def test_add_and_remove_selection(client, auth_headers):
    quiz = await create_quiz(client, auth_headers)

    response = await client.post(
        f"/api/v1/quizzes/{quiz['id']}/selections",
        headers=auth_headers,
        json={"selection_text": "22", "is_correct": False},
    )
    assert response.status_code == 201
    selections = response.json()["selections"]
    assert [s["selection_text"] for s in selections] == ["3", "4", "22"]

    removed_id = selections[0]["id"]
    response = await client.delete(f"/api/v1/quizzes/{quiz['id']}/selections/{removed_id}", headers=auth_headers)
    assert response.status_code == 200
    assert [s["selection_text"] for s in response.json()["selections"]] == ["4", "22"]

    response = await client.delete(f"/api/v1/quizzes/{quiz['id']}/selections/{removed_id}", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["detail"] == "Selection not found"


# ──────────────────────────────────────────────
# Quiz suites
# ──────────────────────────────────────────────

async def test_suite_crud(client, auth_headers):
    suite = await create_suite(client, auth_headers)
    assert suite["title"] == "Arithmetic"

    response = await client.get(f"/api/v1/quiz-suites/{suite['id']}", headers=auth_headers)
    assert response.status_code == 200

    response = await client.put(f"/api/v1/quiz-suites/{suite['id']}", headers=auth_headers, json={"title": "Algebra"})
    assert response.status_code == 200
    assert response.json()["title"] == "Algebra"
    assert response.json()["description"] == "Basic sums"

    response = await client.get("/api/v1/quiz-suites/", headers=auth_headers)
    assert response.json()["total"] == 1

    response = await client.delete(f"/api/v1/quiz-suites/{suite['id']}", headers=auth_headers)
    assert response.status_code == 204
    response = await client.get(f"/api/v1/quiz-suites/{suite['id']}", headers=auth_headers)
    assert response.status_code == 404


async def test_non_owner_cannot_modify_suite(client, auth_headers, other_headers):
    suite = await create_suite(client, auth_headers)
    response = await client.put(f"/api/v1/quiz-suites/{suite['id']}", headers=other_headers, json={"title": "Taken"})
    assert response.status_code == 403
    response = await client.delete(f"/api/v1/quiz-suites/{suite['id']}", headers=other_headers)
    assert response.status_code == 403


# ──────────────────────────────────────────────
# Attempts
# ──────────────────────────────────────────────

async def test_attempt_lifecycle(client, auth_headers):
    suite = await create_suite(client, auth_headers)
    base = f"/api/v1/quiz-suites/{suite['id']}/attempts"

    response = await client.post(base, headers=auth_headers, json={"score": 40})
    assert response.status_code == 201
    attempt = response.json()
    assert attempt["completed"] is False
    assert attempt["completed_at"] is None
    assert attempt["started_at"]

    response = await client.get(base, headers=auth_headers)
    assert [a["id"] for a in response.json()] == [attempt["id"]]

    response = await client.put(f"{base}/{attempt['id']}", headers=auth_headers, json={"score": 90, "completed": True})
    assert response.status_code == 200
    assert response.json()["score"] == 90
    assert response.json()["completed"] is True
    assert response.json()["completed_at"] is not None

    response = await client.get(f"{base}/{attempt['id']}", headers=auth_headers)
    assert response.status_code == 200

    response = await client.delete(f"{base}/{attempt['id']}", headers=auth_headers)
    assert response.status_code == 204
    response = await client.get(f"{base}/{attempt['id']}", headers=auth_headers)
    assert response.status_code == 404


async def test_completed_attempt_gets_completion_time(client, auth_headers):
    suite = await create_suite(client, auth_headers)
    response = await client.post(
        f"/api/v1/quiz-suites/{suite['id']}/attempts",
        headers=auth_headers,
        json={"score": 100, "completed": True},
    )
    assert response.status_code == 201
    assert response.json()["completed_at"] is not None


async def test_attempt_score_is_bounded(client, auth_headers):
    suite = await create_suite(client, auth_headers)
    response = await client.post(f"/api/v1/quiz-suites/{suite['id']}/attempts", headers=auth_headers, json={"score": 101})
    assert response.status_code == 422


async def test_attempt_on_missing_suite(client, auth_headers):
    response = await client.post("/api/v1/quiz-suites/99999/attempts", headers=auth_headers, json={"score": 10})
    assert response.status_code == 404
    assert response.json()["detail"] == "Quiz suite not found"


async def test_attempts_are_private(client, auth_headers, other_headers):
    suite = await create_suite(client, auth_headers)
    base = f"/api/v1/quiz-suites/{suite['id']}/attempts"
    attempt = (await client.post(base, headers=auth_headers, json={"score": 50})).json()

    response = await client.get(f"{base}/{attempt['id']}", headers=other_headers)
    assert response.status_code == 403
    response = await client.get(base, headers=other_headers)
    assert response.json() == []
