"""
Settings Schemas
================
Pydantic models for configuration validation and serialization.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from .defaults import (
    DEFAULT_ENDPOINT,
    DEFAULT_MODEL,
    DEFAULT_FUZZY_THRESHOLD,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_MAX_TOKENS,
)


class SmartSettings(BaseModel):
    """Fuzzy pre-filter and LLM confirmation settings."""
    model_config = ConfigDict(extra="forbid")

    enabled: bool = False
    endpoint: str = DEFAULT_ENDPOINT
    model: str = DEFAULT_MODEL
    fuzzy_threshold: float = Field(DEFAULT_FUZZY_THRESHOLD, ge=0.0, le=1.0)
    api_key: Optional[str] = None
    prompt: Optional[str] = None  # Template with {message} and {candidates}
    timeout: float = Field(DEFAULT_TIMEOUT_SECONDS, gt=0)
    max_tokens: int = Field(DEFAULT_MAX_TOKENS, ge=1)


class TinyLingoConfig(BaseModel):
    """Top-level configuration."""
    model_config = ConfigDict(extra="forbid")

    smart: SmartSettings = Field(default_factory=SmartSettings)
    debug: bool = False
