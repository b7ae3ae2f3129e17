from satset_gateway.contracts import CompletionRequest, RetryPolicy


def test_payload_carries_user_text_and_system_instruction():
    req = CompletionRequest(target_model="m", user_text="Kopi Senja", system_instructions="Anda adalah asisten.")
    payload = req.to_payload()
    assert payload == {
        "contents": [{"parts": [{"text": "Kopi Senja"}]}],
        "systemInstruction": {"parts": [{"text": "Anda adalah asisten."}]},
    }


def test_payload_with_schema_requests_json_output():
    schema = {"type": "OBJECT", "properties": {"usp": {"type": "STRING"}}, "required": ["usp"]}
    payload = CompletionRequest(target_model="m", user_text="x", output_schema=schema).to_payload()
    assert payload["generationConfig"] == {"responseMimeType": "application/json", "responseSchema": schema}
    assert "tools" not in payload


def test_payload_with_search_tool():
    payload = CompletionRequest(target_model="m", user_text="x", tools=("google_search",)).to_payload()
    assert payload["tools"] == [{"google_search": {}}]


def test_payload_with_voice_requests_audio_modality():
    payload = CompletionRequest(target_model="tts", user_text="Halo", voice_name="Kore").to_payload()
    assert "systemInstruction" not in payload
    assert payload["generationConfig"]["responseModalities"] == ["AUDIO"]
    assert payload["generationConfig"]["speechConfig"]["voiceConfig"]["prebuiltVoiceConfig"] == {"voiceName": "Kore"}


def test_retry_policy_delay_doubles_without_cap():
    policy = RetryPolicy(max_attempts=10, backoff_base_seconds=1.0, jitter_max_seconds=1.0)
    assert [policy.delay_for(i, 0.0) for i in range(6)] == [1.0, 2.0, 4.0, 8.0, 16.0, 32.0]
    assert policy.delay_for(2, 0.25) == 4.25
