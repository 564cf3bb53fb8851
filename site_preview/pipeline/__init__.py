"""Preview generation: system prompt, content providers, orchestration."""

from site_preview.pipeline.generator import ai_generate
from site_preview.pipeline.prompts import JSON_SCHEMA, build_system_prompt
from site_preview.pipeline.provider import (
    anthropic_provide,
    get_provider,
    mock_provide,
)

__all__ = [
    "ai_generate",
    "JSON_SCHEMA",
    "build_system_prompt",
    "anthropic_provide",
    "get_provider",
    "mock_provide",
]
