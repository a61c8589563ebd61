from typing import List, Literal

from .base import FrozenModel

HighlightType = Literal["sensational", "absolutist", "urgency", "conspiracy"]
SeverityLevel = Literal["low", "medium", "high"]


class Highlight(FrozenModel):
    text: str
    type: HighlightType
    position: int
    reason: str
    severity: SeverityLevel


class HighlightsResponse(FrozenModel):
    highlights: List[Highlight]
