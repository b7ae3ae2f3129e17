from __future__ import annotations

import json
import re
from typing import Any

from .contracts import AudioPayload, Citation, CompletionResult
from .errors import MalformedResponseError

TABLE_FALLBACK = (
    "<table><tr><td>Error: AI tidak mengembalikan format tabel yang valid. Coba lagi.</td></tr></table>"
)
MISSING_AUDIO_MESSAGE = "Respons API tidak valid atau tidak mengandung data audio."

_TABLE_RE = re.compile(r"<table[\s\S]*?</table>", re.IGNORECASE)


def _first_part(candidate: dict[str, Any]) -> dict[str, Any] | None:
    content = candidate.get("content")
    if not isinstance(content, dict):
        return None
    parts = content.get("parts")
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        return None
    return parts[0]


def candidate_text(candidate: dict[str, Any]) -> str | None:
    part = _first_part(candidate)
    if part is None:
        return None
    text = part.get("text")
    return text if isinstance(text, str) else None


def candidate_audio(candidate: dict[str, Any]) -> AudioPayload | None:
    part = _first_part(candidate)
    if part is None:
        return None
    inline = part.get("inlineData")
    if not isinstance(inline, dict):
        return None
    data = inline.get("data")
    mime_type = inline.get("mimeType")
    if not data or not isinstance(data, str) or not isinstance(mime_type, str):
        return None
    if not mime_type.startswith("audio/"):
        return None
    return AudioPayload(data=data, mime_type=mime_type)


def candidate_citations(candidate: dict[str, Any]) -> tuple[Citation, ...]:
    metadata = candidate.get("groundingMetadata")
    if not isinstance(metadata, dict):
        return ()
    sources = metadata.get("groundingAttributions")
    if not isinstance(sources, list):
        sources = metadata.get("groundingChunks")
    if not isinstance(sources, list):
        return ()

    out: list[Citation] = []
    for source in sources:
        web = source.get("web") if isinstance(source, dict) else None
        if not isinstance(web, dict):
            continue
        uri, title = web.get("uri"), web.get("title")
        if uri and title:
            out.append(Citation(uri=str(uri), title=str(title)))
    return tuple(out)


def parse_structured(text: str | None) -> Any:
    if text is None:
        raise MalformedResponseError("Missing text in upstream response.")
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedResponseError(f"Upstream returned invalid JSON: {e.msg}.") from e


def build_result(candidate: dict[str, Any], *, structured: bool = False) -> CompletionResult:
    text = candidate_text(candidate)
    return CompletionResult(
        text=text,
        structured_payload=parse_structured(text) if structured else None,
        audio=candidate_audio(candidate),
        citations=candidate_citations(candidate),
    )


def require_text(result: CompletionResult) -> str:
    if result.text is None:
        raise MalformedResponseError("Missing text in upstream response.")
    return result.text


def project_fields(payload: Any, schema: dict[str, Any]) -> dict[str, Any]:
    """Keep exactly the fields declared by `schema`, failing on missing required ones."""
    if not isinstance(payload, dict):
        raise MalformedResponseError("Upstream JSON result is not an object.")
    declared = list((schema.get("properties") or {}).keys())
    missing = [name for name in schema.get("required", []) if name not in payload]
    if missing:
        raise MalformedResponseError(f"Upstream JSON result is missing fields: {', '.join(missing)}.")
    return {name: payload[name] for name in declared if name in payload}


def table_fragment(text: str) -> str:
    match = _TABLE_RE.search(text)
    if match is None:
        return TABLE_FALLBACK
    return match.group(0)


def require_audio(result: CompletionResult) -> AudioPayload:
    if result.audio is None:
        raise MalformedResponseError(MISSING_AUDIO_MESSAGE)
    return result.audio
