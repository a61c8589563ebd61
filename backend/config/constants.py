from dataclasses import dataclass, field
from typing import Dict, Tuple

@dataclass(frozen=True)
class LLMConfig:
    REQUEST_TIMEOUT: float = 60.0
    ANALYSIS_TEMPERATURE: float = 0.3
    EVIDENCE_TEMPERATURE: float = 0.4

@dataclass(frozen=True)
class ConfidenceConfig:
    HIGH_THRESHOLD: int = 75
    MEDIUM_THRESHOLD: int = 50

    DEFAULT_SCORE: int = 65
    MAX_SCORE: int = 100

@dataclass(frozen=True)
class AnalysisLimits:
    MAX_SUSPICIOUS_TERMS: int = 10
    MAX_BATCH_SIZE: int = 5
    MAX_TEXT_LENGTH: int = 20000
    MAX_TITLE_LENGTH: int = 500
    MAX_URL_LENGTH: int = 2048
    LOG_PREVIEW_LENGTH: int = 100

@dataclass(frozen=True)
class SignalProfile:
    """Fixed sub-signal definition; scores are keyed by verdict class."""
    name: str
    details: str
    confidence: str
    weight: float
    scores: Dict[str, int] = field(default_factory=dict)

    def score_for(self, verdict_class: str) -> int:
        return self.scores[verdict_class]


# Order matters: it is the serialization order of the breakdown.
SIGNAL_PROFILES: Tuple[Tuple[str, SignalProfile], ...] = (
    ("source", SignalProfile(
        name="Source Credibility",
        details="Analysis of source reputation and domain credibility",
        confidence="medium",
        weight=0.25,
        scores={"real": 75, "fake": 35, "uncertain": 55},
    )),
    ("language", SignalProfile(
        name="Language Analysis",
        details="Sentiment and emotional manipulation detection",
        confidence="high",
        weight=0.20,
        scores={"real": 70, "fake": 30, "uncertain": 50},
    )),
    ("keywords", SignalProfile(
        name="Keyword Analysis",
        details="Clickbait and sensational keyword detection",
        confidence="high",
        weight=0.15,
        scores={"real": 72, "fake": 32, "uncertain": 52},
    )),
    ("factCheck", SignalProfile(
        name="Fact Checking",
        details="Cross-reference with fact-checking databases",
        confidence="medium",
        weight=0.20,
        scores={"real": 78, "fake": 28, "uncertain": 55},
    )),
    ("crossReference", SignalProfile(
        name="Cross Reference",
        details="Verification against trusted news sources",
        confidence="medium",
        weight=0.15,
        scores={"real": 76, "fake": 30, "uncertain": 53},
    )),
    ("socialMedia", SignalProfile(
        name="Social Media",
        details="Social media discussion and sentiment analysis",
        confidence="low",
        weight=0.05,
        scores={"real": 68, "fake": 38, "uncertain": 48},
    )),
)

KEY_SIGNALS: Tuple[str, ...] = ("source", "language", "factCheck")

RECOMMENDATIONS: Dict[str, str] = {
    "real": (
        "This content appears to be credible. However, always cross-reference "
        "important information with multiple trusted sources."
    ),
    "fake": (
        "Exercise extreme caution. This content shows multiple indicators of "
        "misinformation. Do not share without verification from trusted sources."
    ),
    "uncertain": (
        "Unable to verify with high confidence. Approach with skepticism and verify "
        "claims through trusted fact-checking organizations before sharing."
    ),
}

LLM_CONFIG = LLMConfig()
CONFIDENCE_CONFIG = ConfidenceConfig()
ANALYSIS_LIMITS = AnalysisLimits()
