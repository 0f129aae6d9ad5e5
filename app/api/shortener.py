from fastapi import APIRouter, BackgroundTasks
import logging

from app.core.config import settings
from app.schemas import (
    GenerateRequest,
    AlgorithmGenerateRequest,
    CustomLengthRequest,
    BatchGenerateRequest,
    GenerateResponse,
    BatchItem,
    BatchGenerateResponse,
    CustomLengthResponse,
    ValidateResponse,
    GenerationStats,
    StatsResponse,
)
from app.services.shortener import ShortLinkService
from app.services import metrics
from app.utils.encoding import current_millis

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/shortlink", tags=["shortlink"])


def _generate_response(link) -> GenerateResponse:
    return GenerateResponse(
        original_url=link.original_url,
        short_link=link.short_code,
        short_url=link.full_short_url(settings.BASE_URL),
        algorithm=link.algorithm,
        timestamp=current_millis(),
    )


@router.post("/generate", response_model=GenerateResponse)
def generate_endpoint(request: GenerateRequest, background_tasks: BackgroundTasks):
    link = ShortLinkService.create_short_link(request.url)
    metrics.update_stat(background_tasks)
    return _generate_response(link)


@router.post("/batch-generate", response_model=BatchGenerateResponse)
def batch_generate_endpoint(request: BatchGenerateRequest, background_tasks: BackgroundTasks):
    links = ShortLinkService.create_batch(request.urls)
    metrics.update_stat(background_tasks, len(links))
    return BatchGenerateResponse(
        count=len(links),
        results=[BatchItem(original_url=link.original_url, short_link=link.short_code) for link in links],
        timestamp=current_millis(),
    )


@router.post("/generate-with-algorithm", response_model=GenerateResponse)
def generate_with_algorithm_endpoint(request: AlgorithmGenerateRequest, background_tasks: BackgroundTasks):
    """Generate with a named algorithm: hash, random, timestamp; anything else uses MD5."""
    link = ShortLinkService.create_short_link(request.url, request.algorithm)
    metrics.update_stat(background_tasks)
    return _generate_response(link)


@router.get("/validate/{short_link}", response_model=ValidateResponse, response_model_exclude_none=True)
def validate_endpoint(short_link: str):
    valid, length = ShortLinkService.validate_short_link(short_link)
    return ValidateResponse(
        short_link=short_link,
        is_valid=valid,
        message="Short link format is valid" if valid else "Short link format is invalid",
        length=length,
    )


@router.post("/generate-custom-length", response_model=CustomLengthResponse)
def generate_custom_length_endpoint(request: CustomLengthRequest, background_tasks: BackgroundTasks):
    link = ShortLinkService.create_custom_length(request.url, request.length)
    metrics.update_stat(background_tasks)
    return CustomLengthResponse(
        original_url=link.original_url,
        short_link=link.short_code,
        length=len(link.short_code),
        timestamp=current_millis(),
    )


@router.get("/stats", response_model=StatsResponse)
def stats_endpoint():
    summary = ShortLinkService.describe(metrics.get_total_generated())
    logger.info("Stats requested: %d codes generated so far", summary["total_generated"])
    return StatsResponse(stats=GenerationStats(timestamp=current_millis(), **summary))
