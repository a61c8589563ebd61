import re
from typing import List, Optional
from urllib.parse import urlsplit

from config.constants import CONFIDENCE_CONFIG, ANALYSIS_LIMITS
from exceptions import MalformedInputError

REAL_MARKERS = ("likely real", "appears authentic")
FAKE_MARKERS = ("likely fake", "misinformation")

CONFIDENCE_PATTERNS = [
    re.compile(r"confidence[:\s]+(\d+)%?", re.IGNORECASE | re.ASCII),
    re.compile(r"score[:\s]+(\d+)%?", re.IGNORECASE | re.ASCII),
    re.compile(r"(\d+)%\s*confidence", re.IGNORECASE | re.ASCII),
]

SUSPICIOUS_TERM_PATTERNS = [
    re.compile(r"shocking", re.IGNORECASE),
    re.compile(r"breaking", re.IGNORECASE),
    re.compile(r"urgent", re.IGNORECASE),
    re.compile(r"must see", re.IGNORECASE),
    re.compile(r"you won't believe", re.IGNORECASE),
    re.compile(r"doctors hate", re.IGNORECASE),
    re.compile(r"they don't want you to know", re.IGNORECASE),
]


def extract_verdict(text: Optional[str]) -> str:
    """Classify model prose as real, fake or uncertain by marker phrases.

    Real markers are checked first, so prose containing both kinds of
    marker is classified as real.
    """
    lowered = (text or "").lower()
    if any(marker in lowered for marker in REAL_MARKERS):
        return "real"
    if any(marker in lowered for marker in FAKE_MARKERS):
        return "fake"
    return "uncertain"


def extract_confidence(text: Optional[str]) -> int:
    """Return the first confidence figure mentioned in the prose, or the default."""
    if not text:
        return CONFIDENCE_CONFIG.DEFAULT_SCORE
    for pattern in CONFIDENCE_PATTERNS:
        m = pattern.search(text)
        if m:
            digits = m.group(1).lstrip("0") or "0"
            # More digits than MAX_SCORE always saturates; skip int() on huge runs.
            if len(digits) > len(str(CONFIDENCE_CONFIG.MAX_SCORE)):
                return CONFIDENCE_CONFIG.MAX_SCORE
            return min(int(digits), CONFIDENCE_CONFIG.MAX_SCORE)
    return CONFIDENCE_CONFIG.DEFAULT_SCORE


def extract_suspicious_terms(
    text: Optional[str],
    limit: int = ANALYSIS_LIMITS.MAX_SUSPICIOUS_TERMS
) -> List[str]:
    if not text:
        return []
    terms: List[str] = []
    for pattern in SUSPICIOUS_TERM_PATTERNS:
        for match in pattern.findall(text):
            term = match.lower()
            if term not in terms:
                terms.append(term)
    return terms[:limit]


def extract_domain(url: Optional[str]) -> str:
    """Host of the URL, or "unknown" when no URL was supplied."""
    if not url:
        return "unknown"
    try:
        host = urlsplit(url.strip()).hostname
    except ValueError as e:
        raise MalformedInputError(url, str(e))
    if not host:
        raise MalformedInputError(url)
    return host
