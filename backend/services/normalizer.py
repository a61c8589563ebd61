from typing import Optional

from config import TextGenerationConfig, logger
from config.constants import ANALYSIS_LIMITS, LLM_CONFIG, RECOMMENDATIONS
from confidence import ConfidenceScorer, SignalBreakdownBuilder
from models import (
    VERDICT_LABELS,
    AnalysisMetadata,
    AnalysisResult,
    ArticleInput,
    IngestionMode,
)
from prompts import (
    ANALYSIS_SYSTEM_PROMPT,
    ANALYSIS_USER_PROMPT,
    IMAGE_CONTENT,
    TEXT_CONTENT,
    URL_CONTENT,
)
from utils.parsing import (
    extract_confidence,
    extract_domain,
    extract_suspicious_terms,
    extract_verdict,
)
from .llm import TextGenerationClient


def build_analysis_content(article: ArticleInput) -> str:
    """Content block sent to the model; text wins over url, url over imageUrl."""
    if article.text:
        return TEXT_CONTENT.format(title=article.title or "N/A", text=article.text)
    if article.url:
        return URL_CONTENT.format(url=article.url)
    if article.image_url:
        return IMAGE_CONTENT.format(image_url=article.image_url)
    return ""


class VerdictNormalizer:
    """Turns free-text model verdicts into AnalysisResult records."""

    def __init__(
        self,
        config: TextGenerationConfig,
        client: Optional[TextGenerationClient] = None,
        confidence_scorer: Optional[ConfidenceScorer] = None,
        breakdown_builder: Optional[SignalBreakdownBuilder] = None,
    ):
        self.client = client or TextGenerationClient(config)
        self.confidence_scorer = confidence_scorer or ConfidenceScorer()
        self.breakdown_builder = breakdown_builder or SignalBreakdownBuilder()

    async def analyze(self, article: ArticleInput) -> AnalysisResult:
        """Run one generation for the article and normalize its prose.

        Upstream failures propagate unchanged; there is no retry and no
        partial result.
        """
        ingested_from = article.ingested_from
        logger.info(
            "Analyzing article (ingestedFrom=%s, title=%r, text=%r)",
            ingested_from,
            article.title,
            (article.text or "")[:ANALYSIS_LIMITS.LOG_PREVIEW_LENGTH],
        )

        user_prompt = ANALYSIS_USER_PROMPT.format(content=build_analysis_content(article))
        analysis_text = await self.client.generate(
            ANALYSIS_SYSTEM_PROMPT,
            user_prompt,
            temperature=LLM_CONFIG.ANALYSIS_TEMPERATURE,
        )

        return self.normalize(
            analysis_text,
            article.title or "Untitled",
            article.url or "",
            ingested_from,
        )

    def normalize(
        self,
        raw_text: str,
        title: str,
        url: str,
        ingested_from: IngestionMode
    ) -> AnalysisResult:
        verdict_class = extract_verdict(raw_text)
        confidence_score = extract_confidence(raw_text)
        breakdown = self.breakdown_builder.build(verdict_class)

        result = AnalysisResult(
            verdict=VERDICT_LABELS[verdict_class],
            verdict_class=verdict_class,
            confidence_score=confidence_score,
            overall_confidence=self.confidence_scorer.get_confidence_level(confidence_score),
            recommendation=RECOMMENDATIONS[verdict_class],
            breakdown=breakdown,
            suspicious_terms=extract_suspicious_terms(raw_text),
            key_signals=self.breakdown_builder.key_signals(breakdown),
            metadata=AnalysisMetadata(
                domain=extract_domain(url),
                title=title,
                ingested_from=ingested_from,
            ),
        )

        logger.info(
            "Normalized verdict=%s score=%d terms=%d domain=%s",
            result.verdict_class,
            result.confidence_score,
            len(result.suspicious_terms),
            result.metadata.domain,
        )
        return result
