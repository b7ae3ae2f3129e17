from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from . import prompts


class ResponseShape(str, Enum):
    TEXT = "text"
    STRUCTURED = "structured"
    GROUNDED = "grounded"
    TABLE = "table"
    AUDIO = "audio"


@dataclass(frozen=True)
class EndpointSpec:
    route: str
    text_field: str
    shape: ResponseShape
    system_instructions: str | None = None
    prompt_template: str | None = None
    output_schema: dict[str, Any] | None = None
    tools: tuple[str, ...] = ()
    voice_field: str | None = None

    def __post_init__(self) -> None:
        if self.shape is ResponseShape.STRUCTURED and self.output_schema is None:
            raise ValueError(f"{self.route}: structured endpoints need an output_schema.")
        if self.shape is ResponseShape.AUDIO and not self.voice_field:
            raise ValueError(f"{self.route}: audio endpoints need a voice_field.")

    @property
    def input_fields(self) -> tuple[str, ...]:
        if self.voice_field:
            return (self.text_field, self.voice_field)
        return (self.text_field,)

    def user_text(self, body: dict[str, str]) -> str:
        if self.prompt_template is None:
            return body[self.text_field]
        return self.prompt_template.format(**{self.text_field: body[self.text_field]})


def _string_object(*names: str) -> dict[str, Any]:
    return {
        "type": "OBJECT",
        "properties": {name: {"type": "STRING"} for name in names},
        "required": list(names),
    }


ENDPOINTS: tuple[EndpointSpec, ...] = (
    # Value analysis
    EndpointSpec(
        route="/api/analyze",
        text_field="userQuery",
        shape=ResponseShape.TEXT,
        system_instructions=prompts.ANALYZE_PROMPT,
    ),
    EndpointSpec(
        route="/api/ai-help",
        text_field="userQuery",
        shape=ResponseShape.STRUCTURED,
        system_instructions=prompts.AI_HELP_PROMPT,
        output_schema=_string_object("jenisProduk", "lokasiPenjualan", "deskripsiProduk", "targetKonsumen"),
    ),
    EndpointSpec(
        route="/api/summarize",
        text_field="prompt",
        shape=ResponseShape.TEXT,
        system_instructions=prompts.SUMMARIZE_PROMPT,
    ),
    # Market mapping
    EndpointSpec(
        route="/api/map-market",
        text_field="userInput",
        shape=ResponseShape.GROUNDED,
        system_instructions=prompts.MAP_MARKET_PROMPT,
        tools=("google_search",),
    ),
    EndpointSpec(
        route="/api/map-market-helper",
        text_field="productName",
        shape=ResponseShape.STRUCTURED,
        system_instructions=prompts.MAP_MARKET_HELPER_PROMPT,
        prompt_template='Nama Produk: "{productName}"',
        output_schema=_string_object(
            "usp",
            "audiencePrimary",
            "audienceSecondary",
            "customerJobs",
            "customerPains",
            "customerGains",
        ),
    ),
    # Psychological profiling
    EndpointSpec(
        route="/api/psikologis-helper",
        text_field="businessName",
        shape=ResponseShape.STRUCTURED,
        system_instructions=prompts.PSIKOLOGIS_HELPER_PROMPT,
        prompt_template='Nama Bisnis: "{businessName}"',
        output_schema=_string_object("mappingInput", "reviewInput", "socialInput"),
    ),
    EndpointSpec(
        route="/api/psikologis-market",
        text_field="userInput",
        shape=ResponseShape.TEXT,
        system_instructions=prompts.PSIKOLOGIS_MARKET_PROMPT,
    ),
    EndpointSpec(
        route="/api/psikologis-hooks",
        text_field="prompt",
        shape=ResponseShape.TEXT,
        system_instructions=prompts.PSIKOLOGIS_HOOKS_PROMPT,
    ),
    EndpointSpec(
        route="/api/psikologis-persona",
        text_field="prompt",
        shape=ResponseShape.TEXT,
        system_instructions=prompts.PSIKOLOGIS_PERSONA_PROMPT,
    ),
    # Content planning & copywriting
    EndpointSpec(
        route="/api/content-planner",
        text_field="userPrompt",
        shape=ResponseShape.TABLE,
        system_instructions=prompts.CONTENT_PLANNER_PROMPT,
    ),
    EndpointSpec(
        route="/api/copywriting",
        text_field="userPrompt",
        shape=ResponseShape.TEXT,
        system_instructions=prompts.COPYWRITING_PROMPT,
    ),
    # Text to speech
    EndpointSpec(
        route="/api/tts-generator",
        text_field="promptText",
        shape=ResponseShape.AUDIO,
        voice_field="voice",
    ),
)


def endpoint_for(route: str) -> EndpointSpec:
    for spec in ENDPOINTS:
        if spec.route == route:
            return spec
    raise KeyError(route)
