from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int = 3
    backoff_base_seconds: float = 1.0
    jitter_max_seconds: float = 1.0

    def delay_for(self, attempt_index: int, jitter: float) -> float:
        # attempt_index: 0-based index of the attempt that just failed; no upper cap
        return self.backoff_base_seconds * (2**attempt_index) + jitter


@dataclass(frozen=True)
class Citation:
    uri: str
    title: str


@dataclass(frozen=True)
class AudioPayload:
    data: str
    mime_type: str


@dataclass(frozen=True)
class CompletionRequest:
    target_model: str
    user_text: str
    system_instructions: str | None = None
    output_schema: dict[str, Any] | None = None
    tools: tuple[str, ...] = ()
    voice_name: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"contents": [{"parts": [{"text": self.user_text}]}]}

        if self.system_instructions:
            payload["systemInstruction"] = {"parts": [{"text": self.system_instructions}]}

        if self.output_schema is not None:
            payload["generationConfig"] = {
                "responseMimeType": "application/json",
                "responseSchema": self.output_schema,
            }
        elif self.voice_name is not None:
            payload["generationConfig"] = {
                "responseModalities": ["AUDIO"],
                "speechConfig": {"voiceConfig": {"prebuiltVoiceConfig": {"voiceName": self.voice_name}}},
            }

        if self.tools:
            payload["tools"] = [{tool: {}} for tool in self.tools]
        return payload


@dataclass(frozen=True)
class CompletionResult:
    text: str | None = None
    structured_payload: Any = None
    audio: AudioPayload | None = None
    citations: tuple[Citation, ...] = field(default_factory=tuple)
