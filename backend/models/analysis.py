from typing import Dict, List, Literal

from pydantic import Field

from .base import FrozenModel
from .evidence import Evidence, FactCheck, SocialDiscussion

VerdictType = Literal["Likely Real", "Uncertain", "Likely Fake"]
VerdictClass = Literal["real", "uncertain", "fake"]
ConfidenceLevel = Literal["low", "medium", "high"]
IngestionMode = Literal["text", "url", "image"]

VERDICT_LABELS: Dict[str, str] = {
    "real": "Likely Real",
    "uncertain": "Uncertain",
    "fake": "Likely Fake",
}


class AgentSignal(FrozenModel):
    """One weighted sub-signal of the breakdown."""
    name: str
    score: int = Field(..., ge=0, le=100)
    confidence: ConfidenceLevel
    details: str
    weight: float = Field(..., ge=0.0, le=1.0)


class SignalBreakdown(FrozenModel):
    source: AgentSignal
    language: AgentSignal
    keywords: AgentSignal
    fact_check: AgentSignal
    cross_reference: AgentSignal
    social_media: AgentSignal

    def signals(self) -> List[AgentSignal]:
        return [getattr(self, name) for name in type(self).model_fields]

    def total_weight(self) -> float:
        return sum(signal.weight for signal in self.signals())


class AnalysisMetadata(FrozenModel):
    domain: str
    title: str
    ingested_from: IngestionMode


class AnalysisResult(FrozenModel):
    """Structured verdict record handed to the presentation layer."""
    verdict: VerdictType
    verdict_class: VerdictClass
    confidence_score: int = Field(..., ge=0, le=100)
    overall_confidence: ConfidenceLevel
    recommendation: str
    breakdown: SignalBreakdown
    suspicious_terms: List[str] = Field(default_factory=list, max_length=10)
    evidence: List[Evidence] = Field(default_factory=list)
    fact_checks: List[FactCheck] = Field(default_factory=list)
    social_discussions: List[SocialDiscussion] = Field(default_factory=list)
    key_signals: List[AgentSignal]
    metadata: AnalysisMetadata
