"""
Integration Tests for the Learning Commons HTTP API.

Drives the FastAPI app through its lifespan (graph load on startup) with
TestClient:
1. Health and status endpoints
2. Component search and progressions
3. Skill mapping by free text and by standard code
4. Content evaluation, including when the graph is unavailable
"""

import pytest
from fastapi.testclient import TestClient

from config import Settings, get_settings
from learning_commons.api.main import app
from learning_commons.api.routers.learning_commons_router import get_store
from learning_commons.graph.loader import GraphLoader
from learning_commons.graph.store import GraphStore, reset_default_store

pytestmark = pytest.mark.integration

PREFIX = "/api/learning-commons"


@pytest.fixture
def client():
    """Client with a freshly loaded default graph."""
    reset_default_store()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    reset_default_store()


def _ids(components):
    return [c["uuid"] for c in components]


class TestHealth:
    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["service"] == "learning-commons"

    def test_health_reports_loaded_graph(self, client):
        body = client.get("/health").json()

        assert body["status"] == "healthy"
        assert body["components"]["knowledge_graph"] == "loaded"
        assert body["graph"] == {"components": 22, "relationships": 29}


class TestSearch:
    def test_listing_without_filters(self, client):
        body = client.get(f"{PREFIX}/search").json()
        assert body["count"] == 22

    def test_keyword_search(self, client):
        body = client.get(f"{PREFIX}/search", params={"q": "equal groups"}).json()
        assert _ids(body["components"]) == ["lc-mult-001", "lc-div-002"]

    def test_grade_filter(self, client):
        body = client.get(f"{PREFIX}/search", params={"grade": "4"}).json()

        assert body["count"] == 2
        assert all(c["gradeLevel"] == ["4"] for c in body["components"])

    def test_cluster_filter(self, client):
        body = client.get(f"{PREFIX}/search", params={"cluster": "Fractions"}).json()
        assert body["count"] == 4


class TestProgression:
    def test_progression_payload(self, client):
        response = client.get(f"{PREFIX}/progression", params={"componentId": "lc-sub-002"})

        assert response.status_code == 200
        body = response.json()
        assert body["component"]["uuid"] == "lc-sub-002"
        assert body["progression"]["pathway"] == [
            "lc-pv-001", "lc-add-001", "lc-sub-001", "lc-sub-002", "lc-sub-003",
        ]
        assert _ids(body["prerequisites"]) == ["lc-sub-001", "lc-pv-001"]
        assert _ids(body["dependents"]) == ["lc-sub-003"]

    def test_depth_is_clamped_to_one(self, client):
        body = client.get(
            f"{PREFIX}/progression", params={"componentId": "lc-sub-002", "depth": 0}
        ).json()
        assert len(body["progression"]["pathway"]) == 4

    def test_default_depth_comes_from_settings(self, client):
        app.dependency_overrides[get_settings] = lambda: Settings(progression_default_depth=1)

        body = client.get(f"{PREFIX}/progression", params={"componentId": "lc-sub-002"}).json()
        assert body["progression"]["pathway"] == [
            "lc-pv-001", "lc-sub-001", "lc-sub-002", "lc-sub-003",
        ]

    def test_missing_component_id(self, client):
        response = client.get(f"{PREFIX}/progression")

        assert response.status_code == 400
        assert response.json()["detail"] == "Missing required parameter: componentId"

    def test_unknown_component(self, client):
        response = client.get(f"{PREFIX}/progression", params={"componentId": "lc-nope"})

        assert response.status_code == 404
        assert response.json()["detail"] == "Learning component not found"


class TestMapSkill:
    def test_free_text_skill(self, client):
        response = client.post(f"{PREFIX}/map-skill", json={"skill": "unit fractions", "gradeLevel": "3"})

        body = response.json()
        assert response.status_code == 200
        assert body["source"] == "skill-search"
        assert _ids(body["mapping"]["learningComponents"]) == [
            "lc-frac-001", "lc-frac-002", "lc-frac-003",
        ]

    def test_standard_code(self, client):
        body = client.post(f"{PREFIX}/map-skill", json={"standardCode": "3.NF.1"}).json()

        assert body["source"] == "standard"
        assert body["analysis"]["standard"]["standard"] == "3.NF.1"
        assert len(body["analysis"]["relatedComponents"]) == 4

    def test_unknown_standard(self, client):
        response = client.post(f"{PREFIX}/map-skill", json={"standardCode": "9.XX.9"})

        assert response.status_code == 404
        assert response.json()["detail"] == "Standard not found"

    def test_missing_fields(self, client):
        response = client.post(f"{PREFIX}/map-skill", json={})

        assert response.status_code == 400
        assert response.json()["detail"] == "Missing required field: skill or standardCode"


class TestEvaluate:
    def test_full_evaluation(self, client, sample_text):
        response = client.post(f"{PREFIX}/evaluate", json={"text": sample_text, "targetGradeLevel": "3"})

        body = response.json()
        assert response.status_code == 200
        assert body["type"] == "full"
        assert {"literacy", "motivation"} <= set(body["evaluation"])
        assert isinstance(body["suggestions"], list)

    def test_complexity_evaluation(self, client):
        body = client.post(
            f"{PREFIX}/evaluate",
            json={"text": "The cat sat. It ran.", "evaluationType": "complexity"},
        ).json()

        assert body["type"] == "complexity"
        assert body["evaluation"]["overallLevel"] == "accessible"
        assert body["evaluation"]["gradeLevel"] == "-3"

    def test_missing_text(self, client):
        response = client.post(f"{PREFIX}/evaluate", json={"evaluationType": "literacy"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Missing required field: text"


class TestGraphUnavailable:
    @pytest.fixture
    def empty_graph_client(self, client):
        app.dependency_overrides[get_store] = GraphStore
        return client

    def test_graph_endpoints_return_503(self, empty_graph_client):
        assert empty_graph_client.get(f"{PREFIX}/search").status_code == 503
        response = empty_graph_client.get(f"{PREFIX}/progression", params={"componentId": "lc-sub-002"})
        assert response.status_code == 503

    def test_evaluation_still_works(self, empty_graph_client):
        response = empty_graph_client.post(f"{PREFIX}/evaluate", json={"text": "You can choose."})
        assert response.status_code == 200


class TestStartupLoadFailure:
    @pytest.fixture
    def failed_load_client(self, monkeypatch):
        """App started while the graph load raises."""
        def broken_populate(self):
            raise RuntimeError("sample data unavailable")

        monkeypatch.setattr(GraphLoader, "_populate", broken_populate)
        reset_default_store()
        with TestClient(app) as test_client:
            yield test_client
        reset_default_store()

    def test_health_is_degraded(self, failed_load_client):
        body = failed_load_client.get("/health").json()

        assert body["status"] == "degraded"
        assert body["components"]["knowledge_graph"] == "not_loaded"

    def test_graph_endpoints_return_503(self, failed_load_client):
        assert failed_load_client.get(f"{PREFIX}/search").status_code == 503

    def test_evaluation_still_works(self, failed_load_client):
        response = failed_load_client.post(f"{PREFIX}/evaluate", json={"text": "You can choose."})

        assert response.status_code == 200
        assert response.json()["type"] == "full"
