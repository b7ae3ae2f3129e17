import pytest
import httpx

from satset_gateway.config import GatewayConfig
from satset_gateway.contracts import CompletionResult
from satset_gateway.server import create_app


def _fake_caller(text: str = "ok"):
    class FakeCaller:
        def __init__(self):
            self.requests = []

        async def complete(self, request):
            self.requests.append(request)
            return CompletionResult(text=text)

        async def close(self):
            return None

    return FakeCaller()


def _cfg(**overrides) -> GatewayConfig:
    return GatewayConfig(gemini_api_key="k", enable_metrics=False, log_format="console", **overrides)


@pytest.mark.asyncio
async def test_server_echoes_request_id_and_sets_security_headers():
    app = create_app(cfg=_cfg(), caller=_fake_caller())
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.post(
            "/api/copywriting",
            headers={"X-Request-Id": "req_12345678"},
            json={"userPrompt": "brief"},
        )
    assert resp.status_code == 200
    assert resp.text == "ok"
    assert resp.headers.get("X-Request-Id") == "req_12345678"
    assert resp.headers.get("X-Content-Type-Options") == "nosniff"
    assert resp.headers.get("Referrer-Policy") == "no-referrer"
    assert resp.headers.get("Cache-Control") == "no-store"


@pytest.mark.asyncio
async def test_server_generates_request_id_for_invalid_header():
    app = create_app(cfg=_cfg(), caller=_fake_caller())
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/api", headers={"X-Request-Id": "bad id!"})
    request_id = resp.headers.get("X-Request-Id")
    assert request_id and request_id != "bad id!"
    assert len(request_id) == 32


@pytest.mark.asyncio
async def test_server_enforces_max_body_size_413():
    caller = _fake_caller()
    app = create_app(cfg=_cfg(max_request_body_bytes=60), caller=caller)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        payload = b'{"userPrompt":"' + (b"x" * 200) + b'"}'
        resp = await client.post(
            "/api/copywriting",
            content=payload,
            headers={"Content-Type": "application/json"},
        )
    assert resp.status_code == 413
    assert resp.json() == {"message": "Request body too large."}
    assert caller.requests == []


@pytest.mark.asyncio
async def test_server_cors_is_open_by_default():
    app = create_app(cfg=_cfg(cors_allow_origins=["*"]), caller=_fake_caller())
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.options(
            "/api/analyze",
            headers={
                "Origin": "https://frontend.example",
                "Access-Control-Request-Method": "POST",
            },
        )
    assert resp.status_code in (200, 204)
    assert resp.headers.get("access-control-allow-origin") == "*"


@pytest.mark.asyncio
async def test_server_cors_allowlist_applies():
    app = create_app(cfg=_cfg(cors_allow_origins=["https://satset.example"]), caller=_fake_caller())
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.options(
            "/api/analyze",
            headers={
                "Origin": "https://satset.example",
                "Access-Control-Request-Method": "POST",
            },
        )
    assert resp.status_code in (200, 204)
    assert resp.headers.get("access-control-allow-origin") == "https://satset.example"


@pytest.mark.asyncio
async def test_handlers_pick_speech_model_for_audio_route():
    caller = _fake_caller()
    app = create_app(cfg=_cfg(text_model="text-m", tts_model="tts-m"), caller=caller)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        await client.post("/api/summarize", json={"prompt": "p"})
        await client.post("/api/tts-generator", json={"promptText": "Halo", "voice": "Puck"})
    assert [r.target_model for r in caller.requests] == ["text-m", "tts-m"]
    assert caller.requests[1].voice_name == "Puck"
