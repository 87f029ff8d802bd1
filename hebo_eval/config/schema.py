"""
Configuration schema, validated with pydantic.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class ProviderType(str, Enum):
    OPENAI = "openai"
    HEBO = "hebo"
    ANTHROPIC = "anthropic"


class AuthHeader(BaseModel):
    name: str = "Authorization"
    format: str = "Bearer {api_key}"


class ProviderConfig(BaseModel):
    provider: ProviderType
    base_url: Optional[str] = None
    api_key: Optional[str] = None
    auth_header: Optional[AuthHeader] = None

    model_config = {"extra": "allow"}

    @field_validator("base_url")
    @classmethod
    def _check_url(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got '{value}'")
        return value


class ScoringConfig(BaseModel):
    threshold: float = Field(0.8, ge=0.0, le=1.0)
    ngram_sizes: List[int] = Field(default_factory=lambda: [1, 2])
    ngram_weight: float = Field(0.5, ge=0.0)
    lcs_weight: float = Field(0.5, ge=0.0)
    assertion_weight: float = Field(0.7, ge=0.0, le=1.0)
    max_tokens: int = Field(4096, ge=1)

    @field_validator("ngram_sizes")
    @classmethod
    def _check_sizes(cls, value: List[int]) -> List[int]:
        if not value or any(n < 1 for n in value):
            raise ValueError("ngram_sizes must be a non-empty list of positive integers")
        return value

    @model_validator(mode="after")
    def _check_weights(self) -> "ScoringConfig":
        if self.ngram_weight + self.lcs_weight == 0:
            raise ValueError("ngram_weight and lcs_weight cannot both be zero")
        return self


class ExecutionConfig(BaseModel):
    max_concurrency: int = Field(5, ge=1)
    timeout_seconds: float = Field(30.0, gt=0)
    test_cases_dir: str = "examples"
    output_format: str = "text"

    @field_validator("output_format")
    @classmethod
    def _check_format(cls, value: str) -> str:
        if value not in ("text", "markdown", "json"):
            raise ValueError(f"output_format must be text, markdown or json, got '{value}'")
        return value


class EvalConfig(BaseModel):
    providers: Dict[str, ProviderConfig] = Field(default_factory=dict)
    default_provider: Optional[str] = None
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)

    model_config = {"extra": "allow"}
