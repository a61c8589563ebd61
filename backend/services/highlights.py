"""Suspicious-phrase highlighting for submitted text.

Each rule is a case-insensitive phrase with a category, a reason shown to
the reader and a severity. Matching is local and needs no model call.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from models import Highlight


@dataclass(frozen=True)
class HighlightRule:
    pattern: re.Pattern
    type: str
    reason: str
    severity: str


def _rules(category: str, reason: str, phrases: List[Tuple[str, str]]) -> List[HighlightRule]:
    return [
        HighlightRule(
            pattern=re.compile(rf"(?<!\w){re.escape(phrase)}(?!\w)", re.IGNORECASE),
            type=category,
            reason=reason,
            severity=severity,
        )
        for phrase, severity in phrases
    ]


HIGHLIGHT_RULES: List[HighlightRule] = [
    *_rules(
        "sensational",
        "Sensational wording meant to provoke an emotional reaction",
        [
            ("shocking", "medium"),
            ("unbelievable", "medium"),
            ("jaw-dropping", "medium"),
            ("mind-blowing", "medium"),
            ("outrageous", "low"),
            ("miracle", "high"),
            ("you won't believe", "high"),
            ("doctors hate", "high"),
        ],
    ),
    *_rules(
        "absolutist",
        "Absolute claim that leaves no room for nuance or exceptions",
        [
            ("always", "low"),
            ("never", "low"),
            ("everyone knows", "medium"),
            ("nobody", "low"),
            ("guaranteed", "medium"),
            ("100%", "medium"),
            ("proven fact", "medium"),
        ],
    ),
    *_rules(
        "urgency",
        "Urgency cue pushing the reader to react before verifying",
        [
            ("breaking", "medium"),
            ("urgent", "medium"),
            ("must see", "medium"),
            ("act now", "high"),
            ("share before", "high"),
            ("before it's too late", "high"),
            ("before it gets deleted", "high"),
        ],
    ),
    *_rules(
        "conspiracy",
        "Conspiratorial framing that discourages checking other sources",
        [
            ("they don't want you to know", "high"),
            ("cover-up", "high"),
            ("cover up", "high"),
            ("mainstream media won't", "high"),
            ("wake up", "medium"),
            ("hidden truth", "high"),
            ("deep state", "high"),
            ("hoax", "medium"),
        ],
    ),
]


class HighlightExtractor:

    def __init__(self, rules: Optional[List[HighlightRule]] = None):
        self.rules = rules if rules is not None else HIGHLIGHT_RULES

    def extract(self, text: Optional[str]) -> List[Highlight]:
        if not text:
            return []

        found = []
        for rule in self.rules:
            for m in rule.pattern.finditer(text):
                found.append(Highlight(
                    text=m.group(0),
                    type=rule.type,
                    position=m.start(),
                    reason=rule.reason,
                    severity=rule.severity,
                ))

        found.sort(key=lambda h: (h.position, -len(h.text)))
        return found
