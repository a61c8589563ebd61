from .analysis import (
    VerdictType,
    VerdictClass,
    ConfidenceLevel,
    IngestionMode,
    VERDICT_LABELS,
    AgentSignal,
    SignalBreakdown,
    AnalysisMetadata,
    AnalysisResult,
)
from .evidence import (
    Evidence,
    FactCheck,
    SocialDiscussion,
    EvidenceBundle,
)
from .requests import (
    ArticleInput,
    BatchRequest,
    HighlightsRequest,
    EvidenceRequest,
)
from .batch import BatchResult, BatchResponse
from .highlights import Highlight, HighlightsResponse

__all__ = [
    "VerdictType",
    "VerdictClass",
    "ConfidenceLevel",
    "IngestionMode",
    "VERDICT_LABELS",
    "AgentSignal",
    "SignalBreakdown",
    "AnalysisMetadata",
    "AnalysisResult",

    "Evidence",
    "FactCheck",
    "SocialDiscussion",
    "EvidenceBundle",

    "ArticleInput",
    "BatchRequest",
    "HighlightsRequest",
    "EvidenceRequest",

    "BatchResult",
    "BatchResponse",

    "Highlight",
    "HighlightsResponse",
]
