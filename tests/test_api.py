"""HTTP contract of /ask and /health."""
import pytest
from fastapi.testclient import TestClient

from conftest import FakeEmbedder, FakeGenerator, FakeStore, make_hit
from ragqa.config import get_settings
from ragqa.container import build_container
from ragqa.core.errors import GenerationError
from ragqa.main import create_app


@pytest.fixture
def parts():
    return {
        "embedder": FakeEmbedder(),
        "store": FakeStore(hits=[make_hit(text="Paris is the capital.", title="Geo", author="Ann",
                                          date="2020", score=0.83)]),
        "generator": FakeGenerator("Paris."),
    }


@pytest.fixture
def client(settings, parts):
    return TestClient(create_app(build_container(settings, **parts)))


class TestAsk:
    def test_success(self, client):
        response = client.post("/ask", json={"question": "What is the capital of France?"})
        assert response.status_code == 200
        assert response.json() == {
            "answer": "Paris.",
            "sources": [{"title": "Geo", "author": "Ann", "date": "2020", "score": 83}],
            "found": True,
        }

    @pytest.mark.parametrize("body", [{"question": ""}, {}, {"question": "x" * 1001}])
    def test_invalid_question_rejected_before_pipeline(self, client, parts, body):
        response = client.post("/ask", json=body)
        assert response.status_code == 400
        assert parts["embedder"].calls == []
        assert parts["store"].searches == []

    def test_max_length_accepted(self, client):
        assert client.post("/ask", json={"question": "x" * 1000}).status_code == 200

    def test_greeting(self, client, parts):
        response = client.post("/ask", json={"question": "Coucou"})
        assert response.json()["sources"] == []
        assert response.json()["found"] is True
        assert parts["store"].searches == []

    def test_no_hits(self, settings):
        app = create_app(build_container(settings, store=FakeStore(hits=[]),
                                         embedder=FakeEmbedder(), generator=FakeGenerator()))
        body = TestClient(app).post("/ask", json={"question": "unknown topic"}).json()
        assert body["found"] is False
        assert body["sources"] == []

    def test_pipeline_failure_is_500(self, settings, parts):
        parts["generator"] = FakeGenerator(error=GenerationError("quota"))
        app = create_app(build_container(settings, **parts))
        response = TestClient(app).post("/ask", json={"question": "capital?"})
        assert response.status_code == 500
        assert response.json() == {"detail": "Erreur serveur"}


class TestHealth:
    def test_health_ok(self, client):
        assert client.get("/health").json() == {"status": "ok", "vector_store": True, "points": 1}

    def test_health_degraded(self, settings):
        app = create_app(build_container(settings, store=FakeStore(reachable=False),
                                         embedder=FakeEmbedder(), generator=FakeGenerator()))
        assert TestClient(app).get("/health").json()["status"] == "degraded"

    def test_lifespan_with_injected_container(self, settings, parts):
        with TestClient(create_app(build_container(settings, **parts))) as c:
            assert c.get("/").status_code == 200


class TestStartup:
    def test_unreachable_store_exits(self, settings, parts):
        parts["store"] = FakeStore(reachable=False)
        app = create_app(build_container(settings, **parts))
        with pytest.raises(SystemExit):
            with TestClient(app):
                pass

    def test_missing_api_key_exits(self, monkeypatch):
        monkeypatch.setenv("HF_API_KEY", "")
        get_settings.cache_clear()
        try:
            with pytest.raises(SystemExit):
                with TestClient(create_app()):
                    pass
        finally:
            get_settings.cache_clear()
