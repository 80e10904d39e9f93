import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_analyzer
from config import settings
from models.requests import PreferenceProfile, TextAnalyzeRequest
from models.responses import AnalysisResult
from services import document_parser
from services.cv_analyzer import CVAnalyzer
from services.errors import ConfigurationMissingError, TransportError

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)

ANALYSIS_FAILED_DETAIL = "Failed to analyze CV. Please try again."


async def _run_analysis(
    analyzer: CVAnalyzer, cv_content: str, preferences: PreferenceProfile
) -> AnalysisResult:
    try:
        return await analyzer.analyze(cv_content, preferences)
    except ConfigurationMissingError as e:
        logger.error("Analysis not possible, service misconfigured: %s", e)
        raise HTTPException(status_code=502, detail=ANALYSIS_FAILED_DETAIL) from e
    except TransportError as e:
        logger.error("Analysis failed, completion service unavailable: %s", e)
        raise HTTPException(status_code=502, detail=ANALYSIS_FAILED_DETAIL) from e


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
        "model": settings.analysis_model,
    }


@router.post("/analyze", response_model=AnalysisResult)
@limiter.limit(settings.analyze_rate_limit)
async def analyze(
    request: Request,
    cv_file: UploadFile = File(...),
    preferences: str = Form(..., description="JSON-encoded preference profile"),
    analyzer: CVAnalyzer = Depends(get_analyzer),
):
    try:
        profile = PreferenceProfile.model_validate_json(preferences)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False)) from e

    # Validate file type
    if not cv_file.filename:
        raise HTTPException(status_code=400, detail="A CV file is required")
    if document_parser.file_extension(cv_file.filename) not in document_parser.SUPPORTED_EXTENSIONS:
        raise HTTPException(status_code=400, detail="Please upload a PDF, Word (.docx) or text file")

    # Read and validate size
    content = await cv_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    try:
        document = document_parser.build_cv_document(cv_file.filename, content, settings.max_cv_chars)
    except Exception:
        logger.warning("Could not read uploaded CV %r", cv_file.filename, exc_info=True)
        raise HTTPException(status_code=400, detail="Could not read CV file")

    if not document.content:
        raise HTTPException(status_code=400, detail="No text could be extracted from CV")

    return await _run_analysis(analyzer, document.content, profile)


@router.post("/analyze/text", response_model=AnalysisResult)
@limiter.limit(settings.analyze_rate_limit)
async def analyze_text(
    request: Request,
    body: TextAnalyzeRequest,
    analyzer: CVAnalyzer = Depends(get_analyzer),
):
    if not body.cv_content.strip():
        raise HTTPException(status_code=400, detail="CV content is empty")
    if len(body.cv_content) > settings.max_cv_chars:
        raise HTTPException(
            status_code=400,
            detail=f"CV content too long (max {settings.max_cv_chars} chars)",
        )
    return await _run_analysis(analyzer, body.cv_content, body.preferences)
