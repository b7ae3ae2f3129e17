from satset_gateway.logging import make_redaction_processor, redact_text


def test_redact_text_scrubs_key_query_parameter():
    url = "https://generativelanguage.googleapis.com/v1beta/models/m:generateContent?key=AIzaSecret&alt=json"
    assert redact_text(url, secrets=[]) == (
        "https://generativelanguage.googleapis.com/v1beta/models/m:generateContent?key=[REDACTED]&alt=json"
    )


def test_redaction_processor_scrubs_known_secret_and_sensitive_fields():
    processor = make_redaction_processor(secrets=["AIzaSecret"])
    out = processor(None, "info", {"event": "route_failed", "error": "bad AIzaSecret", "api_key": "x", "route": "/api/analyze"})
    assert out["error"] == "bad [REDACTED]"
    assert out["api_key"] == "[REDACTED]"
    assert out["route"] == "/api/analyze"
