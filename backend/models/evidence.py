from typing import List, Literal, Optional

from pydantic import Field

from .base import FrozenModel


class Evidence(FrozenModel):
    """Related coverage from a news outlet."""
    title: str
    source: str
    url: str
    published_at: str
    description: str
    sentiment: Literal["supporting", "contradicting", "neutral"] = "neutral"


class FactCheck(FrozenModel):
    claim: str
    rating: str
    publisher: str
    url: str
    date: Optional[str] = None


class SocialDiscussion(FrozenModel):
    title: str
    subreddit: str
    score: int = 0
    num_comments: int = 0
    url: str
    created_at: str
    sentiment: Literal["positive", "neutral", "negative"] = "neutral"


class EvidenceBundle(FrozenModel):
    """Output of the evidence synthesizer, merged into the analysis by the caller."""
    evidence: List[Evidence] = Field(default_factory=list)
    fact_checks: List[FactCheck] = Field(default_factory=list)
    social_discussions: List[SocialDiscussion] = Field(default_factory=list)

    @classmethod
    def empty(cls) -> "EvidenceBundle":
        return cls()

    def is_empty(self) -> bool:
        return not (self.evidence or self.fact_checks or self.social_discussions)
