from .config import GatewayConfig
from .contracts import CompletionRequest, CompletionResult, RetryPolicy
from .gemini_session import GeminiCaller

__all__ = [
    "CompletionRequest",
    "CompletionResult",
    "GatewayConfig",
    "GeminiCaller",
    "RetryPolicy",
]
