"""Tests for the HTTP API."""

from tranzio.core.translation.languages import SUPPORTED_LANGUAGES
from tranzio.core.translation.models import TokenUsage

from tests.fakes import text_response


class TestMeta:

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "version" in response.json()

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_deep_health_reports_model(self, client):
        body = client.get("/health", params={"deep": "true"}).json()

        assert body["status"] == "healthy"
        assert body["model"] == {"provider": "fake", "name": "fake-model", "reachable": True}

    def test_deep_health_degraded_when_model_unreachable(self, client, fake_gateway, monkeypatch):
        async def unreachable():
            return False

        monkeypatch.setattr(fake_gateway, "health_check", unreachable)
        body = client.get("/health", params={"deep": "true"}).json()

        assert body["status"] == "degraded"
        assert body["model"]["reachable"] is False

    def test_languages(self, client):
        response = client.get("/api/v1/languages")

        assert response.status_code == 200
        assert response.json() == list(SUPPORTED_LANGUAGES)
        assert len(response.json()) == 24


class TestTranslate:

    def test_glossary_hit(self, client, fake_gateway):
        response = client.post(
            "/api/v1/translate", json={"text": "hello", "target_language": "Spanish"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["translated_text"] == "hola"
        assert body["status"] == "success"
        assert body["confidence"] == 1.0
        assert body["origin"] == "glossary"
        assert fake_gateway.calls == []

    def test_model_translation(self, client, fake_gateway):
        fake_gateway.queue(text_response("plugh xyzzy"))

        response = client.post(
            "/api/v1/translate",
            json={"text": "xyzzy plugh", "target_language": "Spanish"},
        )

        body = response.json()
        assert body["translated_text"] == "plugh xyzzy"
        assert body["strategy"] == "minimal"

    def test_upstream_failure_is_200_with_error_status(self, client, fake_gateway):
        fake_gateway.queue(TimeoutError("model timed out"))

        response = client.post(
            "/api/v1/translate",
            json={"text": "xyzzy plugh", "target_language": "Spanish"},
        )

        assert response.status_code == 200
        assert response.json()["status"] == "error"
        assert response.json()["error"] == "model timed out"

    def test_strategy_override(self, client, fake_gateway):
        fake_gateway.queue(text_response("x"))

        client.post(
            "/api/v1/translate",
            json={"text": "xyzzy", "target_language": "Spanish", "strategy": "multi_example"},
        )

        assert fake_gateway.calls[0].strategy == "multi_example"

    def test_unknown_strategy_rejected(self, client):
        response = client.post(
            "/api/v1/translate",
            json={"text": "xyzzy", "target_language": "Spanish", "strategy": "telepathy"},
        )
        assert response.status_code == 422

    def test_empty_text_rejected(self, client, fake_gateway):
        response = client.post(
            "/api/v1/translate", json={"text": "  ", "target_language": "Spanish"}
        )

        assert response.status_code == 422
        assert fake_gateway.calls == []

    def test_preview(self, client, fake_gateway):
        response = client.post(
            "/api/v1/translate/preview",
            json={"text": "xyzzy plugh", "target_language": "Spanish"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["strategy"] == "minimal"
        assert body["bundle"]["function_calling"] is True
        assert fake_gateway.calls == []


class TestGlossary:

    def test_stats(self, client):
        body = client.get("/api/v1/glossary/stats").json()

        assert body["total_entries"] == 5
        assert "Spanish" in body["languages"]

    def test_lookup(self, client):
        response = client.get(
            "/api/v1/glossary/lookup", params={"phrase": "Thank You", "target_language": "French"}
        )

        assert response.status_code == 200
        assert response.json()["translation"] == "merci"

    def test_lookup_miss(self, client):
        response = client.get(
            "/api/v1/glossary/lookup", params={"phrase": "xyzzy", "target_language": "French"}
        )
        assert response.status_code == 404

    def test_lookup_blank_phrase(self, client):
        response = client.get(
            "/api/v1/glossary/lookup", params={"phrase": " ", "target_language": "French"}
        )
        assert response.status_code == 400

    def test_add_entry_then_translate(self, client, fake_gateway):
        response = client.post(
            "/api/v1/glossary/entries",
            json={"phrase": "Good Night", "translation": "bonne nuit", "target_language": "French"},
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "phrase": "good night"}

        body = client.post(
            "/api/v1/translate", json={"text": "good night", "target_language": "French"}
        ).json()
        assert body["translated_text"] == "bonne nuit"
        assert fake_gateway.calls == []

    def test_add_blank_entry_rejected(self, client):
        response = client.post(
            "/api/v1/glossary/entries",
            json={"phrase": "cat", "translation": " ", "target_language": "French"},
        )
        assert response.status_code == 400

    def test_add_entry_blank_target_language_rejected(self, client, glossary_path):
        response = client.post(
            "/api/v1/glossary/entries",
            json={"phrase": "cat", "translation": "chat", "target_language": "  "},
        )

        assert response.status_code == 400
        assert not glossary_path.exists()


class TestUsage:

    def test_usage_summary(self, client, fake_gateway):
        fake_gateway.queue(
            text_response("x", usage=TokenUsage(prompt_tokens=80, completion_tokens=20))
        )
        client.post("/api/v1/translate", json={"text": "xyzzy", "target_language": "Spanish"})

        body = client.get("/api/v1/usage").json()
        assert body["total_requests"] == 1
        assert body["total_tokens"] == 100
