"""Configuration models."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RankingWeights(BaseModel):
    """Weight applied to each ranking signal.

    Weights are not required to sum to 1.0; the personalized score is
    clamped to [0, 1] after the weighted sum.
    """

    model_config = ConfigDict(frozen=True)

    base_hot_score: float = Field(0.35, ge=0.0, description="Engagement/time decay weight")
    author_affinity: float = Field(0.20, ge=0.0, description="Viewer-author affinity weight")
    topic_relevance: float = Field(0.15, ge=0.0, description="Topic interest weight")
    social_proof: float = Field(0.10, ge=0.0, description="Followed-user engagement weight")
    diversity_penalty: float = Field(0.10, ge=0.0, description="Weight of the inverted diversity penalty")
    quality_score: float = Field(0.05, ge=0.0, description="Content quality weight")
    freshness_bonus: float = Field(0.05, ge=0.0, description="Freshness weight")


class RankingConfig(BaseModel):
    """Ranking configuration, shared read-only across ranking calls."""

    model_config = ConfigDict(frozen=True)

    weights: RankingWeights = Field(default_factory=RankingWeights)
    cold_start_threshold: int = Field(
        10, ge=0, description="Interactions below which a viewer is in cold start"
    )
    fresh_content_window_minutes: float = Field(
        240.0, gt=0.0, description="Age under which content gets the full freshness bonus"
    )
    max_age_hours: float = Field(
        48.0, gt=0.0, description="Age at which the freshness bonus reaches zero"
    )
    max_per_author: int = Field(3, ge=1, description="Soft cap on items per author")
    diversity_window: int = Field(20, ge=1, description="Informational diversity window size")

    @model_validator(mode="after")
    def validate_freshness_window(self) -> "RankingConfig":
        """Validate that the fresh window fits inside the age ceiling."""
        if self.fresh_content_window_minutes > self.max_age_hours * 60:
            raise ValueError(
                f"fresh_content_window_minutes ({self.fresh_content_window_minutes}) "
                f"exceeds max_age_hours ({self.max_age_hours}h)"
            )
        return self


class DisplayConfig(BaseModel):
    """CLI display preferences."""

    top_n: int = Field(10, ge=1, le=500, description="Rows shown in the ranking summary")
    show_signals: bool = Field(True, description="Show the per-signal breakdown")


class ConfigModel(BaseModel):
    """Main configuration model."""

    ranking: RankingConfig = Field(default_factory=RankingConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)


DEFAULT_CONFIG = RankingConfig()
