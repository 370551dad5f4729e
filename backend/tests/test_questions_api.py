"""
API tests for questions and lookups routers.
Uses FastAPI TestClient with get_db overridden to the per-test in-memory database.
Requires: fastapi, httpx.
"""
import pytest
from fastapi.testclient import TestClient

from app.database import get_db
from app.main import app


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.pop(get_db, None)


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "message": "Trivia Question Browser API"}


def test_list_questions_default_paging(client, make_questions):
    make_questions(30)
    r = client.get("/questions")
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["page"] == 1
    assert data["page_size"] == 25
    assert data["total_count"] == 30
    assert data["total_pages"] == 2
    assert len(data["items"]) == 25
    first = data["items"][0]
    assert first["id"] == "q0000"
    assert first["text"] == "Question q0000?"
    assert first["correct_answer"] == {"id": "a-q0000-c", "text": "Correct answer for q0000"}
    assert set(first) >= {"category", "difficulty", "type"}
    assert "incorrect_answers" not in first


def test_list_questions_second_page(client, make_questions):
    make_questions(30)
    data = client.get("/questions", params={"page": 2, "page_size": 25}).json()
    assert [q["id"] for q in data["items"]] == [f"q{i:04d}" for i in range(25, 30)]
    assert data["total_pages"] == 2


@pytest.mark.parametrize(
    "params,expected",
    [
        ({"page": 0, "page_size": 0}, (1, 25)),
        ({"page": -7, "page_size": 101}, (1, 25)),
        ({"page": 3, "page_size": 100}, (3, 100)),
    ],
)
def test_out_of_range_paging_is_normalized(client, make_questions, params, expected):
    make_questions(2)
    r = client.get("/questions", params=params)
    assert r.status_code == 200
    data = r.json()
    assert (data["page"], data["page_size"]) == expected


def test_empty_database(client, lookups):
    data = client.get("/questions").json()
    assert data == {"items": [], "total_count": 0, "page": 1, "page_size": 25, "total_pages": 0}


def test_question_detail(client, make_questions):
    make_questions(3)
    r = client.get("/questions/q0002")
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["id"] == "q0002"
    assert [a["id"] for a in data["incorrect_answers"]] == ["a-q0002-w0", "a-q0002-w1", "a-q0002-w2"]
    assert data["correct_answer"]["id"] == "a-q0002-c"


def test_question_detail_not_found(client, make_questions):
    make_questions(1)
    r = client.get("/questions/nope")
    assert r.status_code == 404
    assert "not found" in r.json()["detail"].lower()


def test_lookup_lists_with_counts(client, make_questions):
    make_questions(9)
    cats = client.get("/categories").json()["items"]
    assert [c["label"] for c in cats] == ["History", "Science: Computers"]
    assert sum(c["question_count"] for c in cats) == 9
    diffs = {d["label"]: d["question_count"] for d in client.get("/difficulties").json()["items"]}
    assert diffs == {"easy": 3, "hard": 3, "medium": 3}
    types = {t["label"]: t["question_count"] for t in client.get("/types").json()["items"]}
    assert types == {"boolean": 4, "multiple": 5}


def test_lookup_without_questions_counts_zero(client, lookups):
    diffs = client.get("/difficulties").json()["items"]
    assert [d["label"] for d in diffs] == ["easy", "hard", "medium"]
    assert all(d["question_count"] == 0 for d in diffs)


def test_huge_page_number_is_empty_not_error(client, make_questions):
    make_questions(3)
    r = client.get("/questions", params={"page": 10**18})
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["items"] == []
    assert data["total_count"] == 3
    assert data["page"] == 10**18
