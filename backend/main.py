from datetime import datetime, timezone

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import check_api_keys_on_startup, get_settings, logger
from config.constants import ANALYSIS_LIMITS
from exceptions import TriageException
from middleware import RequestContextMiddleware, get_request_id
from models import (
    AnalysisResult,
    ArticleInput,
    BatchRequest,
    BatchResponse,
    EvidenceBundle,
    EvidenceRequest,
    HighlightsRequest,
    HighlightsResponse,
)
from services import AnalysisService
from utils.validation import InputValidator

app = FastAPI(title="News Triage API")

@app.on_event("startup")
async def startup_event():
    check_api_keys_on_startup(get_settings())

app.add_middleware(RequestContextMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_analysis_service() -> AnalysisService:
    return AnalysisService(get_settings().text_generation_config())


@app.exception_handler(TriageException)
async def triage_exception_handler(request: Request, exc: TriageException):
    logger.error(
        "Request %s failed with %s: %s",
        get_request_id(),
        exc.__class__.__name__,
        exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request body")
    return JSONResponse(
        status_code=422,
        content={"error": f"{location}: {message}" if location else message},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    # Runs outside RequestContextMiddleware, which has already logged the traceback.
    return JSONResponse(status_code=500, content={"error": str(exc) or "Analysis failed"})


@app.get("/")
async def root():
    return {"status": "ok", "message": "News Triage API is running."}


@app.get("/health")
async def health_check():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@app.post("/analyze", response_model=AnalysisResult)
async def analyze(req: ArticleInput, service: AnalysisService = Depends(get_analysis_service)):
    """Verdict, breakdown and evidence for one article."""
    article = InputValidator.sanitize_article(req)
    return await service.analyze_article(article)


@app.post("/analyze/batch", response_model=BatchResponse, response_model_exclude_none=True)
async def analyze_batch(req: BatchRequest, service: AnalysisService = Depends(get_analysis_service)):
    """Up to five articles analyzed concurrently; failures are reported per item."""
    results = await service.analyze_batch(req.articles)
    return BatchResponse(results=results)


@app.post("/analyze/highlights", response_model=HighlightsResponse)
async def analyze_highlights(req: HighlightsRequest, service: AnalysisService = Depends(get_analysis_service)):
    """Flagged phrases with their offsets in the submitted text."""
    # Not stripped, so positions line up with what the caller sent.
    text = InputValidator.sanitize_text(
        req.text, "text", ANALYSIS_LIMITS.MAX_TEXT_LENGTH, strip=False
    )
    return HighlightsResponse(highlights=service.highlights(text))


@app.post("/search-evidence", response_model=EvidenceBundle)
async def search_evidence(req: EvidenceRequest, service: AnalysisService = Depends(get_analysis_service)):
    return await service.search_evidence(req.query, req.title)
