from config.constants import CONFIDENCE_CONFIG
from models.analysis import ConfidenceLevel


class ConfidenceScorer:
    def __init__(self, config=CONFIDENCE_CONFIG):
        self.config = config

    def get_confidence_level(self, score: int) -> ConfidenceLevel:
        if score >= self.config.HIGH_THRESHOLD:
            return "high"
        elif score >= self.config.MEDIUM_THRESHOLD:
            return "medium"
        else:
            return "low"
