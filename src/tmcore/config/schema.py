"""Pydantic models for matching configuration and YAML settings."""

import math
from pydantic import BaseModel, ConfigDict, Field, field_validator

class MatchConfig(BaseModel):
    """
    Threshold and result cap for fuzzy matching.

    Out-of-range values are clamped instead of rejected. Instances are frozen;
    use ``with_threshold`` / ``with_max_results`` to derive a changed copy.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    threshold: float = Field(default=0.7,
                             description="Minimum similarity score, clamped to [0, 1]")
    max_results: int = Field(default=10,
                             description="Maximum number of matches returned, clamped to >= 1")

    @field_validator("threshold")
    @classmethod
    def _clamp_threshold(cls, value: float) -> float:
        if math.isnan(value):
            return 0.0
        return min(1.0, max(0.0, value))

    @field_validator("max_results")
    @classmethod
    def _clamp_max_results(cls, value: int) -> int:
        return max(1, value)

    def with_threshold(self, threshold: float) -> "MatchConfig":
        """Return a copy with a new (clamped) threshold."""
        return type(self)(threshold=threshold, max_results=self.max_results)

    def with_max_results(self, max_results: int) -> "MatchConfig":
        """Return a copy with a new (clamped) result cap."""
        return type(self)(threshold=self.threshold, max_results=max_results)

class TMSettings(BaseModel):
    """Settings for a translation memory lookup, usually read from YAML."""
    model_config = ConfigDict(extra="forbid")

    version: int = Field(default=1, description="Settings schema version")
    locale: str = Field(default="en", description="Source locale tag, e.g. 'de-DE'")
    stemming: bool = Field(default=False,
                           description="Compare stemmed text instead of surface forms")
    matching: MatchConfig = Field(default_factory=MatchConfig,
                                  description="Fuzzy match threshold and result cap")
