from typing import List, Optional

from .analysis import (
    AnalysisMetadata,
    AnalysisResult,
    ConfidenceLevel,
    SignalBreakdown,
    VerdictClass,
    VerdictType,
)
from .base import FrozenModel


class BatchResult(FrozenModel):
    """Per-article outcome of a batch; analysis fields are absent on failure."""
    id: str
    success: bool
    error: Optional[str] = None
    verdict: Optional[VerdictType] = None
    verdict_class: Optional[VerdictClass] = None
    confidence_score: Optional[int] = None
    overall_confidence: Optional[ConfidenceLevel] = None
    recommendation: Optional[str] = None
    breakdown: Optional[SignalBreakdown] = None
    metadata: Optional[AnalysisMetadata] = None

    @classmethod
    def from_analysis(cls, item_id: str, result: AnalysisResult) -> "BatchResult":
        return cls(
            id=item_id,
            success=True,
            verdict=result.verdict,
            verdict_class=result.verdict_class,
            confidence_score=result.confidence_score,
            overall_confidence=result.overall_confidence,
            recommendation=result.recommendation,
            breakdown=result.breakdown,
            metadata=result.metadata,
        )

    @classmethod
    def from_error(cls, item_id: str, error: str) -> "BatchResult":
        return cls(id=item_id, success=False, error=error)


class BatchResponse(FrozenModel):
    results: List[BatchResult]
