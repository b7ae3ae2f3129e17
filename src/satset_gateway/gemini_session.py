from __future__ import annotations

import asyncio
import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, cast

import httpx
import structlog

from .config import GEMINI_DEV_API_BASE
from .contracts import CompletionRequest, CompletionResult, RetryPolicy
from .errors import (
    ConfigurationError,
    GatewayError,
    InvalidRequestError,
    NoCandidateError,
    UpstreamStatusError,
    UpstreamTransportError,
)
from .metrics import upstream_attempts_total
from .shaping import build_result

log = structlog.get_logger()

MISSING_KEY_MESSAGE = "Server configuration error: API Key is missing."


class AttemptState(str, Enum):
    ATTEMPTING = "attempting"
    WAITING = "waiting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class AttemptOutcome:
    candidate: dict[str, Any] | None = None
    error: GatewayError | None = None
    transient: bool = False
    label: str = "ok"


class GeminiCaller:
    """
    Bounded-retry caller for the Gemini `generateContent` endpoint.

    Each call walks ATTEMPTING -> WAITING -> ATTEMPTING ... until it ends in
    SUCCEEDED (first usable candidate) or FAILED. Transient outcomes are
    transport errors, 5xx, 429 and 2xx bodies without a candidate; every other
    non-2xx status fails on the spot. No state survives between calls.
    """

    def __init__(
        self,
        api_key: str | None,
        *,
        client: httpx.AsyncClient | None = None,
        base_url: str = GEMINI_DEV_API_BASE,
        timeout_seconds: float = 60,
        policy: RetryPolicy | None = None,
        sleeper: Callable[[float], Awaitable[None]] | None = None,
        jitter: Callable[[], float] | None = None,
    ):
        self.api_key = api_key
        self.policy = policy or RetryPolicy()
        self._client = client or httpx.AsyncClient(timeout=timeout_seconds)
        self._base_url = base_url.rstrip("/")
        self._sleep: Callable[[float], Awaitable[None]] = sleeper or asyncio.sleep
        self._jitter: Callable[[], float] = jitter or self._random_jitter

    async def close(self) -> None:
        await self._client.aclose()

    def _random_jitter(self) -> float:
        return random.random() * self.policy.jitter_max_seconds

    async def _attempt(self, url: str, params: dict[str, str], payload: dict[str, Any]) -> AttemptOutcome:
        try:
            resp = await self._client.post(url, params=params, json=payload)
        except UnicodeEncodeError as e:
            error = InvalidRequestError(f"Request text cannot be encoded as UTF-8 ({e.reason}).")
            return AttemptOutcome(error=error, transient=False, label="encode_error")
        except httpx.HTTPError as e:
            error = UpstreamTransportError(f"Upstream request failed ({type(e).__name__}).")
            return AttemptOutcome(error=error, transient=True, label="transport_error")

        if not resp.is_success:
            status_error = UpstreamStatusError(resp.status_code, resp.text)
            return AttemptOutcome(error=status_error, transient=status_error.transient, label="http_error")

        try:
            data = resp.json()
        except ValueError:
            return AttemptOutcome(error=NoCandidateError(), transient=True, label="no_candidate")

        candidates = data.get("candidates") if isinstance(data, dict) else None
        if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
            return AttemptOutcome(error=NoCandidateError(), transient=True, label="no_candidate")

        return AttemptOutcome(candidate=candidates[0])

    @staticmethod
    def _next_state(outcome: AttemptOutcome, attempt: int, max_attempts: int) -> AttemptState:
        if outcome.candidate is not None:
            return AttemptState.SUCCEEDED
        if outcome.transient and attempt < max_attempts - 1:
            return AttemptState.WAITING
        return AttemptState.FAILED

    async def generate(
        self,
        model: str,
        payload: dict[str, Any],
        *,
        max_attempts: int | None = None,
    ) -> dict[str, Any]:
        if not self.api_key:
            log.error("gemini_api_key_missing", env_var="GEMINI_API_KEY")
            raise ConfigurationError(MISSING_KEY_MESSAGE)

        budget = max(1, max_attempts if max_attempts is not None else self.policy.max_attempts)
        url = f"{self._base_url}/models/{model}:generateContent"
        params = {"key": self.api_key}

        state = AttemptState.ATTEMPTING
        attempt = 0
        outcome = AttemptOutcome()
        while True:
            if state is AttemptState.ATTEMPTING:
                outcome = await self._attempt(url, params, payload)
                upstream_attempts_total.labels(model=model, outcome=outcome.label).inc()
                state = self._next_state(outcome, attempt, budget)
            elif state is AttemptState.WAITING:
                delay = self.policy.delay_for(attempt, self._jitter())
                log.warning(
                    "gemini_retry",
                    model=model,
                    attempt=attempt + 1,
                    delay_seconds=round(delay, 3),
                    reason=str(outcome.error),
                )
                await self._sleep(delay)
                attempt += 1
                state = AttemptState.ATTEMPTING
            elif state is AttemptState.SUCCEEDED:
                return cast(dict[str, Any], outcome.candidate)
            else:
                log.warning("gemini_call_failed", model=model, attempts=attempt + 1, error=str(outcome.error))
                raise outcome.error or UpstreamTransportError("Upstream request failed after retries.")

    async def complete(self, request: CompletionRequest) -> CompletionResult:
        candidate = await self.generate(request.target_model, request.to_payload())
        result = build_result(candidate, structured=request.output_schema is not None)
        log.debug("gemini_generate_ok", model=request.target_model, prompt_chars=len(request.user_text))
        return result
