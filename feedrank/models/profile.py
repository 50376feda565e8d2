"""Viewer profile model."""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserProfile(BaseModel):
    """Per-viewer personalization state, read-only for the ranking engine."""

    model_config = ConfigDict(frozen=True)

    user_id: Optional[str] = Field(None, description="Viewer identifier")
    followed_author_ids: List[str] = Field(default_factory=list, description="Authors the viewer follows")
    liked_author_counts: Dict[str, int] = Field(
        default_factory=dict,
        description="Author id -> number of likes given by the viewer",
    )
    topic_interests: Dict[str, float] = Field(
        default_factory=dict,
        description="Topic -> interest weight (0-1)",
    )
    total_interactions: int = Field(0, ge=0, description="Total recorded interactions")

    @field_validator("liked_author_counts")
    @classmethod
    def validate_like_counts(cls, v: Dict[str, int]) -> Dict[str, int]:
        """Validate that like counts are non-negative."""
        for author, count in v.items():
            if count < 0:
                raise ValueError(f"Like count for {author} must be non-negative, got {count}")
        return v

    @field_validator("topic_interests")
    @classmethod
    def validate_topic_interests(cls, v: Dict[str, float]) -> Dict[str, float]:
        """Validate interest weights and normalize topic keys to lowercase."""
        normalized = {}
        for topic, weight in v.items():
            if not 0.0 <= weight <= 1.0:
                raise ValueError(f"Interest in {topic} must be within [0, 1], got {weight}")
            normalized[topic.lower()] = weight
        return normalized

    def follows(self, author_id: str) -> bool:
        """Check whether the viewer follows an author."""
        return author_id in self.followed_author_ids

    def likes_for(self, author_id: str) -> int:
        """Number of past likes the viewer gave an author."""
        return self.liked_author_counts.get(author_id, 0)
