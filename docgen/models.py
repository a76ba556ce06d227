"""Pydantic models for the content plan, planned jobs and the OpenAPI index."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from docgen.config.constants import (
    AI_GENERATED_KEY,
    API_ENDPOINTS_KEY,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_PROVIDER,
    DEFAULT_TIMEOUT,
)


class BaseModelWithConfig(BaseModel):
    """Base model enabling alias population and forbidding silent data loss."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class GlobalSettings(BaseModelWithConfig):
    """The ``global`` block of the content plan."""

    api_spec: str = Field(validation_alias=AliasChoices("apiSpec", "apiSpecRef", "api_spec"))
    ai_prompt: str = Field(default="", validation_alias=AliasChoices("aiPrompt", "promptTemplate", "ai_prompt"))
    ai_model: str = Field(default=DEFAULT_MODEL, validation_alias=AliasChoices("aiModel", "modelId", "ai_model"))
    ai_provider: str = Field(default=DEFAULT_PROVIDER, validation_alias=AliasChoices("aiProvider", "ai_provider"))
    max_tokens: int = Field(default=DEFAULT_MAX_TOKENS, validation_alias=AliasChoices("maxTokens", "max_tokens"))
    temperature: Optional[float] = None
    timeout: int = DEFAULT_TIMEOUT

    # Site configs usually carry extra keys (site name, theme, ...)
    model_config = ConfigDict(populate_by_name=True, extra="allow")


class Topic(BaseModelWithConfig):
    """One planned output document."""

    filename: str
    front_matter: Dict[str, Any] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("frontMatter", "front_matter"),
    )

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @property
    def title(self) -> str:
        return str(self.front_matter.get("title", ""))

    @property
    def description(self) -> str:
        value = self.front_matter.get("description")
        return "" if value is None else str(value)

    @property
    def ai_generated(self) -> bool:
        return self.front_matter.get(AI_GENERATED_KEY) is not False

    @property
    def declares_api_endpoints(self) -> bool:
        # an explicit empty list still declares the endpoints block
        value = self.front_matter.get(API_ENDPOINTS_KEY)
        return isinstance(value, list) or bool(value)

    @property
    def api_endpoints(self) -> List[str]:
        endpoints = self.front_matter.get(API_ENDPOINTS_KEY) or []
        if isinstance(endpoints, str):
            return [endpoints]
        return [str(e) for e in endpoints]


class Section(BaseModelWithConfig):
    """A group of topics sharing an output directory and prompt context."""

    directory: str
    title: str = ""
    purpose: str = ""
    audience: str = ""
    reader_level: str = Field(default="", validation_alias=AliasChoices("readerLevel", "reader_level"))
    topic_sections: Optional[List[str]] = Field(
        default=None,
        validation_alias=AliasChoices("topicSections", "topic_sections"),
    )
    topics: List[Topic] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class ContentPlan(BaseModelWithConfig):
    topics: List[Topic] = Field(default_factory=list)
    sections: List[Section] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class DocSetConfig(BaseModelWithConfig):
    """Whole content plan: global settings plus root topics and sections."""

    global_: GlobalSettings = Field(validation_alias=AliasChoices("global", "global_"))
    content: ContentPlan = Field(default_factory=ContentPlan)

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class GenerationMode(str, Enum):
    TEMPLATED = "templated"
    GENERATED = "generated"


class Job(BaseModelWithConfig):
    """A resolved unit of work: one topic ready to be produced and written."""

    topic: Topic
    output_dir: Path
    section: Optional[Section] = None
    identity: str

    @property
    def mode(self) -> GenerationMode:
        return GenerationMode.GENERATED if self.topic.ai_generated else GenerationMode.TEMPLATED

    @property
    def output_path(self) -> Path:
        return self.output_dir / self.topic.filename


class OpenApiIndex(BaseModelWithConfig):
    """Endpoint path to ``(METHOD, summary)`` pairs, built once from the fetched document."""

    title: str = ""
    version: str = ""
    paths: Dict[str, List[Tuple[str, str]]] = Field(default_factory=dict)

    def operations(self, path: str) -> List[Tuple[str, str]]:
        return list(self.paths.get(path, []))
