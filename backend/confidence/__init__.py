from .confidence_scorer import ConfidenceScorer
from .signal_breakdown import SignalBreakdownBuilder

__all__ = [
    "ConfidenceScorer",
    "SignalBreakdownBuilder",
]
