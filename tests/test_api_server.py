from __future__ import annotations

import json

from fastapi.testclient import TestClient
import pytest

from conftest import StaticQuizSource, make_question
from quiz_player.core.errors import QuizLoadError
from quiz_player.core.quiz_session import QuizSession
from quiz_player.server.api_server import create_api_app


@pytest.fixture
def sources(two_question_payload):
    return {
        "good.json": StaticQuizSource(two_question_payload),
        "invalid.json": StaticQuizSource({"questions": [make_question("q1", [False, False])]}),
        "offline.json": StaticQuizSource(error=QuizLoadError("connection refused")),
    }


@pytest.fixture
def client(sources):
    session = QuizSession()
    app = create_api_app(session, source_factory=sources.__getitem__, default_location="good.json")
    return TestClient(app)


def test_player_page_is_served(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "QuizPlayer" in response.text


def test_state_before_load(client):
    state = client.get("/state").json()

    assert state["loaded"] is False
    assert state["question"] is None
    assert state["total"] == 0


def test_load_uses_default_location(client, sources):
    state = client.post("/load", json={}).json()

    assert sources["good.json"].requested == ["good.json"]
    assert state["loaded"] is True
    assert state["total"] == 2
    assert state["progress"] == "Question 1 / 2"
    assert state["question"]["id"] == "q1"
    assert "<p>First question</p>" in state["question"]["html"]


def test_state_never_reveals_correctness(client):
    state = client.post("/load", json={}).json()

    for answer in state["question"]["answers"]:
        assert set(answer) == {"id", "text", "selected"}


def test_validation_failure_maps_to_422(client):
    response = client.post("/load", json={"location": "invalid.json"})

    assert response.status_code == 422
    assert "Question #1" in response.json()["detail"]


def test_transport_failure_maps_to_502(client):
    response = client.post("/load", json={"location": "offline.json"})

    assert response.status_code == 502
    assert response.json()["detail"] == "connection refused"


def test_full_play_through(client):
    client.post("/load", json={})

    state = client.post("/answers/a/toggle").json()
    assert state["has_selection"] is True
    assert [a["selected"] for a in state["question"]["answers"]] == [True, False]

    state = client.post("/advance").json()
    assert state["current_index"] == 1
    assert state["finished"] is True

    client.post("/answers/d/toggle")
    result = client.get("/result").json()

    assert result["score"] == 2
    assert result["total"] == 2
    assert [e["is_correct"] for e in result["evaluations"]] == [True, True]


def test_wrong_answer_breakdown(client):
    client.post("/load", json={})
    client.post("/answers/b/toggle")

    result = client.get("/result").json()
    first = result["evaluations"][0]

    assert result["score"] == 0
    assert first["selected_answers"] == [{"id": "b", "text": "Beta"}]
    assert first["correct_answers"] == [{"id": "a", "text": "Alpha"}]
    assert first["is_correct"] is False


def test_restart_clears_progress(client):
    client.post("/load", json={})
    client.post("/answers/a/toggle")
    client.post("/advance")

    state = client.post("/restart").json()

    assert state["current_index"] == 0
    assert state["has_selection"] is False
    assert state["total"] == 2


def test_result_requires_a_loaded_quiz(client):
    assert client.get("/result").status_code == 409
    assert client.get("/result/report").status_code == 409


def test_html_report(client):
    client.post("/load", json={})

    response = client.get("/result/report")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "0 of 2 correct" in response.text


@pytest.fixture
def quiz_directory(tmp_path, two_question_payload):
    directory = tmp_path / "quizzes"
    (directory / "extra").mkdir(parents=True)
    (directory / "main.json").write_text(json.dumps(two_question_payload), encoding="utf-8")
    (directory / "extra" / "short.txt").write_text(
        "Q: Ready?\nA: Yes\nB: No\nCORRECT: A\n", encoding="utf-8"
    )
    secret = {"questions": [{"id": "q", "text": {"api_key": "TOPSECRET"}, "answers": []}]}
    (tmp_path / "secret.json").write_text(json.dumps(secret), encoding="utf-8")
    return directory


@pytest.fixture
def file_client(quiz_directory):
    app = create_api_app(QuizSession(), default_location=str(quiz_directory / "main.json"))
    return TestClient(app)


def test_named_quiz_in_the_quiz_directory_loads(file_client):
    state = file_client.post("/load", json={"location": "extra/short.txt"}).json()

    assert state["loaded"] is True
    assert state["total"] == 1


@pytest.mark.parametrize(
    "location",
    [
        "../secret.json",
        "extra/../../secret.json",
        "http://169.254.169.254/latest/meta-data",
        "file:///etc/passwd",
    ],
)
def test_locations_outside_the_quiz_directory_are_refused(file_client, location):
    response = file_client.post("/load", json={"location": location})

    assert response.status_code == 403
    assert "TOPSECRET" not in response.text
    assert file_client.get("/state").json()["loaded"] is False


def test_absolute_paths_are_refused(file_client, tmp_path):
    response = file_client.post("/load", json={"location": str(tmp_path / "secret.json")})

    assert response.status_code == 403
    assert "TOPSECRET" not in response.text


def test_remote_default_allows_no_other_location(sources):
    sources["https://quiz.example/main.json"] = sources["good.json"]
    app = create_api_app(
        QuizSession(),
        source_factory=sources.__getitem__,
        default_location="https://quiz.example/main.json",
    )
    client = TestClient(app)

    assert client.post("/load", json={"location": "good.json"}).status_code == 403
    assert client.post("/load", json={}).json()["loaded"] is True
