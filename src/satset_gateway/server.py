from __future__ import annotations

import os
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .catalog import ENDPOINTS
from .config import GatewayConfig
from .errors import GatewayError
from .gemini_session import GeminiCaller
from .handlers import CompletionCaller, EndpointHandler
from .http_security import install_middlewares
from .logging import configure_logging
from .metrics import maybe_start_metrics
from .schemas import ErrorResponse, StatusResponse

log = structlog.get_logger()

STATUS_MESSAGE = "Selamat datang di API Backend AI SATSET! Semua sistem berjalan."


def _register(app: FastAPI, handler: EndpointHandler) -> None:
    async def endpoint(request: Request):
        return await handler.handle(request)

    app.add_api_route(
        handler.spec.route,
        endpoint,
        methods=["POST"],
        name=handler.spec.route.rsplit("/", 1)[-1],
        response_model=None,
    )


def create_app(cfg: GatewayConfig | None = None, caller: CompletionCaller | None = None) -> FastAPI:
    cfg = cfg or GatewayConfig()
    configure_logging(
        level=cfg.log_level,
        fmt=cfg.log_format,
        secrets=[cfg.gemini_api_key] if cfg.gemini_api_key else [],
    )
    if not cfg.gemini_api_key:
        log.warning("gemini_api_key_not_set", env_var="GEMINI_API_KEY")

    caller = caller or GeminiCaller(
        api_key=cfg.gemini_api_key,
        base_url=cfg.gemini_api_base,
        timeout_seconds=cfg.upstream_timeout_seconds,
        policy=cfg.retry_policy(),
    )

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        maybe_start_metrics(enable=cfg.enable_metrics, bind=cfg.metrics_bind, port=cfg.metrics_port)
        try:
            yield
        finally:
            close = getattr(caller, "close", None)
            if close is not None:
                await close()

    app = FastAPI(
        title="satset-gateway",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if cfg.enable_api_docs else None,
        redoc_url="/redoc" if cfg.enable_api_docs else None,
        openapi_url="/openapi.json" if cfg.enable_api_docs else None,
    )
    install_middlewares(app, cfg=cfg)

    @app.exception_handler(GatewayError)
    async def _gateway_error_handler(_request, exc: GatewayError):
        return JSONResponse(status_code=500, content=ErrorResponse(message=str(exc)).model_dump())

    @app.get("/api", response_model=StatusResponse)
    async def status() -> StatusResponse:
        log.info("route_hit", route="/api")
        return StatusResponse(message=STATUS_MESSAGE)

    for spec in ENDPOINTS:
        _register(app, EndpointHandler(spec, caller, cfg))

    return app


app = create_app()


def main() -> None:  # pragma: no cover
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "3000"))
    uvicorn.run("satset_gateway.server:app", host=host, port=port)


if __name__ == "__main__":  # pragma: no cover
    main()
