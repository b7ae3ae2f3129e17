from __future__ import annotations

import json
import time
from typing import Any, Protocol, cast

import structlog
from fastapi import Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response

from .catalog import EndpointSpec, ResponseShape
from .config import GatewayConfig
from .contracts import CompletionRequest, CompletionResult
from .errors import GatewayError, InvalidRequestError
from .metrics import route_latency_seconds, route_requests_total
from .schemas import make_audio_response, make_grounded_response, parse_body
from .shaping import project_fields, require_audio, require_text, table_fragment

log = structlog.get_logger()


class CompletionCaller(Protocol):
    async def complete(self, request: CompletionRequest) -> CompletionResult: ...


class EndpointHandler:
    """Binds one catalog entry to the shared caller and reshapes its result."""

    def __init__(self, spec: EndpointSpec, caller: CompletionCaller, cfg: GatewayConfig):
        self.spec = spec
        self.caller = caller
        self.cfg = cfg

    @property
    def model(self) -> str:
        if self.spec.shape is ResponseShape.AUDIO:
            return self.cfg.tts_model
        return self.cfg.text_model

    def build_request(self, body: dict[str, str]) -> CompletionRequest:
        return CompletionRequest(
            target_model=self.model,
            user_text=self.spec.user_text(body),
            system_instructions=self.spec.system_instructions,
            output_schema=self.spec.output_schema,
            tools=self.spec.tools,
            voice_name=body[self.spec.voice_field] if self.spec.voice_field else None,
        )

    def shape(self, result: CompletionResult) -> Response:
        shape = self.spec.shape
        if shape is ResponseShape.TEXT:
            return PlainTextResponse(require_text(result))
        if shape is ResponseShape.TABLE:
            return HTMLResponse(table_fragment(require_text(result)))
        if shape is ResponseShape.STRUCTURED:
            schema = cast(dict[str, Any], self.spec.output_schema)
            return JSONResponse(project_fields(result.structured_payload, schema))
        if shape is ResponseShape.GROUNDED:
            return JSONResponse(make_grounded_response(require_text(result), result.citations).model_dump())
        return JSONResponse(make_audio_response(require_audio(result)).model_dump())

    async def _read_json(self, request: Request) -> Any:
        try:
            return await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidRequestError("Request body must be a JSON object.") from e

    async def handle(self, request: Request) -> Response:
        route = self.spec.route
        started_at = time.monotonic()
        log.info("route_hit", route=route)
        try:
            body = parse_body(self.spec, await self._read_json(request))
            result = await self.caller.complete(self.build_request(body))
            response = self.shape(result)
        except GatewayError as e:
            route_requests_total.labels(route=route, status="error").inc()
            log.error("route_failed", route=route, error=str(e))
            raise
        except Exception as e:
            route_requests_total.labels(route=route, status="error").inc()
            log.exception("route_failed", route=route, error=str(e) or type(e).__name__)
            raise GatewayError(f"Unexpected error while handling {route}: {type(e).__name__}.") from e
        finally:
            route_latency_seconds.labels(route=route).observe(max(0.0, time.monotonic() - started_at))

        route_requests_total.labels(route=route, status="success").inc()
        return response
