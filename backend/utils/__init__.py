from .parsing import (
    extract_verdict,
    extract_confidence,
    extract_suspicious_terms,
    extract_domain,
)
from .validation import InputValidator

__all__ = [
    "extract_verdict",
    "extract_confidence",
    "extract_suspicious_terms",
    "extract_domain",
    "InputValidator",
]
