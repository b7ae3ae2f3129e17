from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, create_model

from .catalog import EndpointSpec
from .contracts import AudioPayload, Citation
from .errors import InvalidRequestError


class ErrorResponse(BaseModel):
    message: str


class StatusResponse(BaseModel):
    message: str


class CitationModel(BaseModel):
    uri: str
    title: str


class GroundedAnalysisResponse(BaseModel):
    analysisText: str
    citations: list[CitationModel]


class AudioResponse(BaseModel):
    audioData: str
    mimeType: str


class _InboundBody(BaseModel):
    model_config = ConfigDict(extra="allow")


_body_models: dict[str, type[BaseModel]] = {}


def body_model_for(spec: EndpointSpec) -> type[BaseModel]:
    model = _body_models.get(spec.route)
    if model is None:
        name = "".join(piece.capitalize() for piece in spec.route.rsplit("/", 1)[-1].split("-")) + "Body"
        fields: dict[str, Any] = {field: (str, ...) for field in spec.input_fields}
        model = create_model(name, __base__=_InboundBody, **fields)
        _body_models[spec.route] = model
    return model


def parse_body(spec: EndpointSpec, raw: Any) -> dict[str, str]:
    try:
        parsed = body_model_for(spec).model_validate(raw)
    except ValidationError as e:
        missing = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")}) or list(spec.input_fields)
        raise InvalidRequestError(f"Invalid request body; check fields: {', '.join(missing)}.") from e
    return {field: getattr(parsed, field) for field in spec.input_fields}


def make_grounded_response(text: str, citations: tuple[Citation, ...]) -> GroundedAnalysisResponse:
    return GroundedAnalysisResponse(
        analysisText=text,
        citations=[CitationModel(uri=c.uri, title=c.title) for c in citations],
    )


def make_audio_response(audio: AudioPayload) -> AudioResponse:
    return AudioResponse(audioData=audio.data, mimeType=audio.mime_type)
