from .llm import TextGenerationClient
from .normalizer import VerdictNormalizer, build_analysis_content
from .synthesis import EvidenceSynthesizer, parse_evidence_response
from .highlights import HighlightExtractor
from .analysis import AnalysisService, merge_evidence

__all__ = [
    "TextGenerationClient",
    "VerdictNormalizer",
    "build_analysis_content",
    "EvidenceSynthesizer",
    "parse_evidence_response",
    "HighlightExtractor",
    "AnalysisService",
    "merge_evidence",
]
