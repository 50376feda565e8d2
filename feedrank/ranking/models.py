"""Ranking models."""

from datetime import datetime
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from ..models import ContentItem


class RankingSignals(BaseModel):
    """Per-item signal breakdown."""

    base_hot_score: float = Field(0.0, description="Engagement decayed by age", ge=0.0, le=1.0)
    author_affinity: float = Field(0.0, description="Viewer affinity for the author", ge=0.0, le=1.0)
    topic_relevance: float = Field(0.0, description="Match with viewer interests", ge=0.0, le=1.0)
    social_proof: float = Field(0.0, description="Engagement from followed users", ge=0.0, le=1.0)
    diversity_penalty: float = Field(0.0, description="Fraction of author-repetition penalty", ge=0.0, le=1.0)
    quality_score: float = Field(0.0, description="Intrinsic quality", ge=0.0, le=1.0)
    freshness_bonus: float = Field(0.0, description="Boost for recent content", ge=0.0, le=1.0)


class FollowingReason(BaseModel):
    type: Literal["following"] = "following"
    author: str


class AuthorAffinityReason(BaseModel):
    type: Literal["author_affinity"] = "author_affinity"
    author: str
    like_count: int


class TopicInterestReason(BaseModel):
    type: Literal["topic_interest"] = "topic_interest"
    topic: str


class SocialProofReason(BaseModel):
    type: Literal["social_proof"] = "social_proof"
    engaged_followers: List[str] = Field(..., min_length=1)


class TrendingReason(BaseModel):
    type: Literal["trending"] = "trending"
    engagement_rate: float


class FreshContentReason(BaseModel):
    type: Literal["fresh_content"] = "fresh_content"
    age_minutes: int


class PopularReason(BaseModel):
    type: Literal["popular"] = "popular"
    total_engagement: int


ExplanationReason = Annotated[
    Union[
        FollowingReason,
        AuthorAffinityReason,
        TopicInterestReason,
        SocialProofReason,
        TrendingReason,
        FreshContentReason,
        PopularReason,
    ],
    Field(discriminator="type"),
]


class RankingExplanation(BaseModel):
    """Why an item is shown to the viewer."""

    item_id: str = Field(..., description="Explained item id")
    primary_reason: ExplanationReason = Field(..., description="Highest-priority triggered reason")
    secondary_reasons: List[ExplanationReason] = Field(
        default_factory=list, description="Remaining triggered reasons in priority order"
    )
    signals: Optional[RankingSignals] = Field(None, description="Signals the explanation was built from")

    @property
    def reasons(self) -> List[ExplanationReason]:
        """All reasons, primary first."""
        return [self.primary_reason, *self.secondary_reasons]


class ScoredItem(BaseModel):
    """Candidate with its score and signal breakdown."""

    item: ContentItem
    score: float = Field(..., description="Combined score", ge=0.0, le=1.0)
    signals: RankingSignals
    explanation: Optional[RankingExplanation] = None


class RankingResult(BaseModel):
    """Result of ranking a candidate pool for one viewer."""

    user_id: Optional[str] = Field(None, description="Viewer the feed was ranked for")
    total_items: int = Field(..., description="Total candidates considered")
    cold_start: bool = Field(..., description="Whether the cold-start policy applied")
    ranked_items: List[ScoredItem] = Field(..., description="Final ordering")
    ranking_timestamp: datetime = Field(..., description="When ranking was performed")
    config_used: Dict = Field(..., description="Ranking configuration used")


class FeedContext:
    """Per-call scratch state for author diversity."""

    def __init__(self, max_per_author: int = 3, diversity_window: int = 20) -> None:
        self.max_per_author = max_per_author
        self.diversity_window = diversity_window
        self.per_author_counts: Dict[str, int] = {}

    def count_for(self, author_id: str) -> int:
        """Items by an author already recorded in this context."""
        return self.per_author_counts.get(author_id, 0)

    def record(self, author_id: str) -> None:
        """Record one more item by an author."""
        self.per_author_counts[author_id] = self.count_for(author_id) + 1
