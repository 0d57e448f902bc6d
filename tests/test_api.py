"""Tests for the HTTP layer."""

import pytest
from fastapi.testclient import TestClient

from reposcope.interface.app import create_app
from reposcope.interface.dependencies import get_use_case


@pytest.fixture
def client_for(make_use_case):
    """Factory: a TestClient whose use case clones the given files."""

    def _client(files=None, error=None):
        use_case, _ = make_use_case(files, error)
        app = create_app()
        app.dependency_overrides[get_use_case] = lambda: use_case
        return TestClient(app)

    return _client


class TestAnalyzeEndpoint:
    def test_success_payload_shape(self, client_for):
        client = client_for(
            {"A.java": "abstract class A { void f(){ while(true){ g(); } if (ok) h(); } }"}
        )

        resp = client.get("/api/repo/analyze", params={"repoUrl": "https://host/x"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "success"
        assert "message" not in body
        data = body["data"]
        assert data["repositoryInfo"] == {"repoName": "x", "totalClasses": 1, "totalMethods": 1}
        assert data["classDetails"] == [
            {
                "className": "A",
                "type": "Abstract Class",
                "methods": [
                    {"name": "f", "containsLoops": True, "containsConditionals": True}
                ],
            }
        ]
        assert data["methodCalls"] == [
            {"caller": "f", "calledMethod": "g"},
            {"caller": "f", "calledMethod": "h"},
        ]
        loop, conditional = data["loopsAndConditionals"]
        assert set(loop) == {"method", "loopType"}
        assert set(conditional) == {"method", "conditionalType"}
        assert data["summary"] == {
            "abstractClasses": 1,
            "interfaces": 0,
            "methodWithLoops": 1,
            "methodWithConditionals": 1,
        }

    def test_empty_repository(self, client_for):
        client = client_for({})

        body = client.get("/api/repo/analyze", params={"repoUrl": "https://host/x"}).json()

        assert body["data"]["classDetails"] == []
        assert body["data"]["methodCalls"] == []
        assert body["data"]["loopsAndConditionals"] == []

    def test_analysis_error_is_reported_in_body(self, client_for):
        client = client_for(error=RuntimeError("authentication required"))

        resp = client.get("/api/repo/analyze", params={"repoUrl": "https://host/private"})

        assert resp.status_code == 200
        assert resp.json() == {
            "status": "error",
            "message": "Error cloning repository: authentication required",
        }

    def test_missing_repo_url_is_rejected(self, client_for):
        resp = client_for().get("/api/repo/analyze")

        assert resp.status_code == 422
        assert resp.json()["status"] == "error"
        assert "repoUrl" in resp.json()["message"]

    def test_empty_repo_url_is_rejected(self, client_for):
        resp = client_for().get("/api/repo/analyze", params={"repoUrl": ""})

        assert resp.status_code == 422


def test_health(client_for):
    assert client_for().get("/health").json() == {"status": "ok"}
