import asyncio
from typing import List, Optional

from config import TextGenerationConfig, logger
from config.constants import ANALYSIS_LIMITS
from exceptions import BatchSizeException, TriageException
from models import (
    AnalysisResult,
    ArticleInput,
    BatchResult,
    EvidenceBundle,
    Highlight,
)
from utils.validation import InputValidator
from .highlights import HighlightExtractor
from .normalizer import VerdictNormalizer
from .synthesis import EvidenceSynthesizer


def merge_evidence(result: AnalysisResult, bundle: EvidenceBundle) -> AnalysisResult:
    """New record carrying the analysis plus the synthesized evidence."""
    return result.model_copy(update={
        "evidence": list(bundle.evidence),
        "fact_checks": list(bundle.fact_checks),
        "social_discussions": list(bundle.social_discussions),
    })


class AnalysisService:

    def __init__(
        self,
        config: TextGenerationConfig,
        normalizer: Optional[VerdictNormalizer] = None,
        synthesizer: Optional[EvidenceSynthesizer] = None,
        highlight_extractor: Optional[HighlightExtractor] = None,
        max_batch_size: int = ANALYSIS_LIMITS.MAX_BATCH_SIZE,
    ):
        self.normalizer = normalizer or VerdictNormalizer(config)
        self.synthesizer = synthesizer or EvidenceSynthesizer(config)
        self.highlight_extractor = highlight_extractor or HighlightExtractor()
        self.max_batch_size = max_batch_size

    async def analyze_article(self, article: ArticleInput) -> AnalysisResult:
        """Verdict and evidence for one article, fetched concurrently.

        A normalizer failure (or cancellation of this call) cancels the
        pending evidence search and propagates; evidence failures only
        leave the evidence lists empty.
        """
        start_time = asyncio.get_running_loop().time()

        evidence_task = asyncio.create_task(
            self.synthesizer.synthesize(article.text or article.url or article.image_url, article.title)
        )
        try:
            analysis = await self.normalizer.analyze(article)
        except BaseException:
            evidence_task.cancel()
            raise

        bundle = await evidence_task
        result = merge_evidence(analysis, bundle)

        duration = round(asyncio.get_running_loop().time() - start_time, 2)
        logger.info(
            "Analysis completed (verdict=%s, evidence=%s) in %s seconds.",
            result.verdict_class,
            "empty" if bundle.is_empty() else len(bundle.evidence),
            duration,
        )
        return result

    async def analyze_batch(self, articles: List[ArticleInput]) -> List[BatchResult]:
        if not articles or len(articles) > self.max_batch_size:
            raise BatchSizeException(len(articles), self.max_batch_size)

        results = await asyncio.gather(
            *(self._analyze_batch_item(f"article-{i + 1}", article) for i, article in enumerate(articles))
        )
        succeeded = sum(1 for r in results if r.success)
        logger.info("Batch analysis finished: %d/%d succeeded.", succeeded, len(results))
        return list(results)

    async def _analyze_batch_item(self, item_id: str, article: ArticleInput) -> BatchResult:
        try:
            result = await self.normalizer.analyze(InputValidator.sanitize_article(article))
        except TriageException as e:
            logger.warning("Batch item %s failed: %s", item_id, e.message)
            return BatchResult.from_error(item_id, e.message)
        except Exception as e:
            logger.exception("Unexpected error analyzing batch item %s.", item_id)
            return BatchResult.from_error(item_id, str(e) or e.__class__.__name__)
        return BatchResult.from_analysis(item_id, result)

    async def search_evidence(self, query: Optional[str], title: Optional[str]) -> EvidenceBundle:
        return await self.synthesizer.synthesize(query, title)

    def highlights(self, text: Optional[str]) -> List[Highlight]:
        return self.highlight_extractor.extract(text)
