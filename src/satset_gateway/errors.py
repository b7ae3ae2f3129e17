from __future__ import annotations


class GatewayError(Exception):
    """Base error for gateway failures."""


class ConfigurationError(GatewayError):
    pass


class InvalidRequestError(GatewayError):
    """Inbound body is not JSON or lacks the endpoint's fields."""


class UpstreamStatusError(GatewayError):
    def __init__(self, status_code: int, body: str = ""):
        super().__init__(f"API error {status_code}: {body}")
        self.status_code = status_code
        self.body = body

    @property
    def transient(self) -> bool:
        return self.status_code >= 500 or self.status_code == 429


class UpstreamTransportError(GatewayError):
    """Network-level failure talking to the upstream API."""


class NoCandidateError(GatewayError):
    def __init__(self, message: str = "No candidate returned from API."):
        super().__init__(message)


class MalformedResponseError(GatewayError):
    """Upstream candidate does not have the shape the endpoint needs."""
