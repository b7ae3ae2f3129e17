from __future__ import annotations

import os

from pydantic import BaseModel, Field

from .contracts import RetryPolicy

GEMINI_DEV_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_TEXT_MODEL = "gemini-2.5-flash-preview-09-2025"
DEFAULT_TTS_MODEL = "gemini-2.5-flash-preview-tts"


def _parse_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [v.strip() for v in value.split(",") if v.strip()]


class GatewayConfig(BaseModel):
    # Upstream API
    gemini_api_key: str | None = Field(default_factory=lambda: os.getenv("GEMINI_API_KEY"))
    gemini_api_base: str = Field(default_factory=lambda: os.getenv("GEMINI_API_BASE", GEMINI_DEV_API_BASE))
    text_model: str = Field(default_factory=lambda: os.getenv("GEMINI_TEXT_MODEL", DEFAULT_TEXT_MODEL))
    tts_model: str = Field(default_factory=lambda: os.getenv("GEMINI_TTS_MODEL", DEFAULT_TTS_MODEL))

    # Retry behavior
    upstream_timeout_seconds: float = Field(
        default_factory=lambda: float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "60"))
    )
    upstream_max_attempts: int = Field(default_factory=lambda: int(os.getenv("UPSTREAM_MAX_ATTEMPTS", "3")))
    upstream_backoff_base_seconds: float = Field(
        default_factory=lambda: float(os.getenv("UPSTREAM_BACKOFF_BASE_SECONDS", "1.0"))
    )
    upstream_jitter_max_seconds: float = Field(
        default_factory=lambda: float(os.getenv("UPSTREAM_JITTER_MAX_SECONDS", "1.0"))
    )

    # Observability
    enable_metrics: bool = Field(
        default_factory=lambda: os.getenv("ENABLE_METRICS", "false").lower() == "true"
    )
    metrics_bind: str = Field(default_factory=lambda: os.getenv("METRICS_BIND", "127.0.0.1"))
    metrics_port: int = Field(default_factory=lambda: int(os.getenv("METRICS_PORT", "9109")))
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_format: str = Field(default_factory=lambda: os.getenv("LOG_FORMAT", "json"))

    # Server
    enable_api_docs: bool = Field(
        default_factory=lambda: os.getenv("ENABLE_API_DOCS", "false").lower() == "true"
    )
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: _parse_csv(os.getenv("CORS_ALLOW_ORIGINS", "*"))
    )
    max_request_body_bytes: int = Field(
        default_factory=lambda: int(os.getenv("MAX_REQUEST_BODY_BYTES", str(10 * 1024 * 1024)))
    )

    def retry_policy(self) -> RetryPolicy:
        return RetryPolicy(
            max_attempts=max(1, self.upstream_max_attempts),
            backoff_base_seconds=max(0.0, self.upstream_backoff_base_seconds),
            jitter_max_seconds=max(0.0, self.upstream_jitter_max_seconds),
        )
