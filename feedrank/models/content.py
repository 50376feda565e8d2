"""Content item model for ranking candidates."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class EngagementCounts(BaseModel):
    """Engagement counters for a content item."""

    model_config = ConfigDict(frozen=True)

    likes: int = Field(0, ge=0, description="Number of likes")
    replies: int = Field(0, ge=0, description="Number of replies")
    reposts: int = Field(0, ge=0, description="Number of reposts")

    @property
    def total(self) -> int:
        """Sum of all engagement counters."""
        return self.likes + self.replies + self.reposts


class ContentItem(BaseModel):
    """Immutable candidate for ranking."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique item identifier")
    author_id: str = Field(..., description="Identifier of the creator")
    text: str = Field("", description="Content text used for topic extraction")
    created_at: datetime = Field(..., description="Creation instant (ISO string or epoch milliseconds)")
    engagement: EngagementCounts = Field(default_factory=EngagementCounts)
    liked_by: List[str] = Field(
        default_factory=list,
        description="Viewer ids that liked this item, in like order",
    )
