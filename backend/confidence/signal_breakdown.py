from typing import List

from config.constants import SIGNAL_PROFILES, KEY_SIGNALS
from models.analysis import AgentSignal, SignalBreakdown, VerdictClass


class SignalBreakdownBuilder:
    """Builds the six weighted sub-signals for a verdict class.

    Scores depend only on the verdict class; weights, names and confidence
    levels are fixed per signal.
    """

    def __init__(self, profiles=SIGNAL_PROFILES, key_signals=KEY_SIGNALS):
        self.profiles = profiles
        self.key_signal_names = key_signals

    def build(self, verdict_class: VerdictClass) -> SignalBreakdown:
        signals = {
            key: AgentSignal(
                name=profile.name,
                score=profile.score_for(verdict_class),
                confidence=profile.confidence,
                details=profile.details,
                weight=profile.weight,
            )
            for key, profile in self.profiles
        }
        return SignalBreakdown.model_validate(signals)

    def key_signals(self, breakdown: SignalBreakdown) -> List[AgentSignal]:
        by_alias = {
            field.alias: getattr(breakdown, name)
            for name, field in SignalBreakdown.model_fields.items()
        }
        return [by_alias[key] for key in self.key_signal_names]
