import httpx
import pytest

from youtube_seo.main import app
from youtube_seo.orchestration import SessionRegistry

from tests.conftest import FakeProvider


@pytest.fixture
async def registry(monkeypatch):
    sessions = SessionRegistry(FakeProvider(), interstitial_seconds=0, copy_reset_seconds=0.2)
    monkeypatch.setattr(app.state, "sessions", sessions, raising=False)
    yield sessions
    await sessions.shutdown()


@pytest.fixture
async def client(registry):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


async def generate(client, registry, topic="How to bake a sourdough bread", session_id=None):
    payload = {"topic": topic}
    if session_id:
        payload["session_id"] = session_id
    resp = await client.post("/content/generate", json=payload)
    assert resp.status_code == 202
    session_id = resp.json()["session_id"]
    await registry.wait(session_id)
    return session_id


@pytest.mark.anyio
async def test_index_serves_form(client):
    resp = await client.get("/")

    assert resp.status_code == 200
    assert "text/html" in resp.headers["content-type"]
    assert 'id="topic"' in resp.text


@pytest.mark.anyio
async def test_health(client):
    resp = await client.get("/health")

    assert resp.json() == {"status": "healthy"}


@pytest.mark.anyio
async def test_generate_happy_path(client, registry):
    resp = await client.post("/content/generate", json={"topic": "How to bake a sourdough bread"})

    assert resp.status_code == 202
    data = resp.json()
    assert data["state"]["kind"] == "loading"
    assert data["state"]["message"] == "Generating content, please wait..."
    assert data["result"] is None

    await registry.wait(data["session_id"])
    resp = await client.get(f"/content/sessions/{data['session_id']}")

    assert resp.status_code == 200
    view = resp.json()
    assert view["state"]["kind"] == "displaying"
    assert view["topic"] == "How to bake a sourdough bread"
    result = view["result"]
    assert set(result["content"]) == {
        "titles",
        "description",
        "tags",
        "seoScore",
        "scoreJustification",
        "keywordAnalysis",
    }
    assert result["score"]["band"] == "high"
    assert [t["filename"] for t in result["thumbnails"]] == [
        "thumbnail-How-to-bake-a-sourdough-bread-1.png",
        "thumbnail-How-to-bake-a-sourdough-bread-2.png",
        "thumbnail-How-to-bake-a-sourdough-bread-3.png",
    ]


@pytest.mark.anyio
async def test_blank_topic_is_rejected_without_provider_call(client, registry):
    resp = await client.post("/content/generate", json={"topic": "   "})

    assert resp.status_code == 400
    detail = resp.json()["detail"]
    assert detail["error"] == "Invalid topic"
    assert detail["detail"] == "Please enter a video topic."
    assert detail["session_id"] is None
    assert registry.provider.call_count == 0
    assert len(registry) == 0


@pytest.mark.anyio
async def test_blank_topic_on_new_named_session_shows_message(client, registry):
    resp = await client.post("/content/generate", json={"topic": "", "session_id": "page-1"})

    assert resp.status_code == 400
    assert resp.json()["detail"]["session_id"] == "page-1"

    view = (await client.get("/content/sessions/page-1")).json()
    assert view["state"] == {"kind": "idle", "message": "Please enter a video topic."}


@pytest.mark.anyio
async def test_blank_topic_keeps_displayed_result(client, registry):
    session_id = await generate(client, registry)

    resp = await client.post("/content/generate", json={"topic": "  ", "session_id": session_id})
    assert resp.status_code == 400

    view = (await client.get(f"/content/sessions/{session_id}")).json()
    assert view["state"] == {"kind": "displaying", "message": "Please enter a video topic."}
    assert view["result"]["content"]["seoScore"] == 82
    assert view["topic"] == "How to bake a sourdough bread"


@pytest.mark.anyio
async def test_long_topic_is_accepted(client, registry):
    topic = "sourdough " * 200
    session_id = await generate(client, registry, topic=topic)

    view = (await client.get(f"/content/sessions/{session_id}")).json()

    assert view["state"]["kind"] == "displaying"
    assert registry.provider.text_calls == [topic.strip()]


@pytest.mark.anyio
async def test_generate_requires_topic(client):
    resp = await client.post("/content/generate", json={})

    assert resp.status_code == 422
    body = resp.json()
    assert body["detail"] == "Invalid request payload"
    assert body["errors"][0]["field"] == "topic"


@pytest.mark.anyio
async def test_failure_exposes_message_only(client, registry):
    registry.provider.fail_thumbnail_at = 2

    session_id = await generate(client, registry)
    view = (await client.get(f"/content/sessions/{session_id}")).json()

    assert view["state"] == {
        "kind": "failed",
        "message": "Failed to generate thumbnail image. Please try again.",
    }
    assert view["result"] is None


@pytest.mark.anyio
async def test_resubmission_while_generating_conflicts(client, registry):
    registry.provider.delay = 0.05
    resp = await client.post("/content/generate", json={"topic": "First"})
    session_id = resp.json()["session_id"]

    resp = await client.post(
        "/content/generate", json={"topic": "Second", "session_id": session_id}
    )

    assert resp.status_code == 409
    assert resp.json()["detail"]["error"] == "Generation in progress"
    await registry.wait(session_id)


@pytest.mark.anyio
async def test_resubmission_after_failure_recovers(client, registry):
    registry.provider.fail_text = True
    session_id = await generate(client, registry)

    registry.provider.fail_text = False
    await generate(client, registry, topic="Second try", session_id=session_id)
    view = (await client.get(f"/content/sessions/{session_id}")).json()

    assert view["state"]["kind"] == "displaying"
    assert view["topic"] == "Second try"


@pytest.mark.anyio
async def test_unknown_session_is_404(client):
    resp = await client.get("/content/sessions/missing")

    assert resp.status_code == 404
    assert resp.json()["detail"]["error"] == "Session not found"


@pytest.mark.anyio
async def test_copy_returns_text_and_marks_confirmation(client, registry):
    session_id = await generate(client, registry)

    resp = await client.post(f"/content/sessions/{session_id}/copy", json={"field": "tags"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["key"] == "tags"
    assert body["text"] == ", ".join(registry.provider.content.tags)
    assert body["copied"] == ["tags"]

    resp = await client.post(
        f"/content/sessions/{session_id}/copy", json={"field": "titles", "index": 2}
    )
    assert resp.json()["text"] == registry.provider.content.titles[2]

    view = (await client.get(f"/content/sessions/{session_id}")).json()
    assert view["copied"] == ["tags", "titles:2"]


@pytest.mark.anyio
async def test_copy_bad_title_index(client, registry):
    session_id = await generate(client, registry)

    resp = await client.post(
        f"/content/sessions/{session_id}/copy", json={"field": "titles", "index": 7}
    )

    assert resp.status_code == 400


@pytest.mark.anyio
async def test_copy_before_results_conflicts(client, registry):
    resp = await client.post("/content/generate", json={"topic": " "})
    session_id = resp.json()["detail"]["session_id"]

    resp = await client.post(f"/content/sessions/{session_id}/copy", json={"field": "description"})

    assert resp.status_code == 409
