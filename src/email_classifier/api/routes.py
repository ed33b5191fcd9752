"""
Classification API routes.

- POST /api/classify: classify one email and store the result
- GET /api/stats: today's counts per category
- GET /api/history: most recent classifications
- GET /health: service and dependency status
"""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from email_classifier.api.dependencies import (
    get_classification_engine,
    get_llm_client,
    get_repository,
    get_settings,
)
from email_classifier.api.models import ErrorResponse, HealthResponse
from email_classifier.classification.engine import ClassificationEngine
from email_classifier.classification.exceptions import ClassificationError
from email_classifier.config import Settings
from email_classifier.llm.base_client import BaseLLMClient
from email_classifier.models.enums import ClassifierMode
from email_classifier.models.input_models import ClassificationRequest
from email_classifier.models.output_models import (
    ClassificationResult,
    ClassificationStats,
    EmailClassification,
)
from email_classifier.persistence.repository import ClassificationRepository

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/api/classify",
    response_model=ClassificationResult,
    status_code=status.HTTP_200_OK,
    summary="Classify a single email",
    description="""
    Classify an email as complaint, query, feedback or lead.
    
    Uses the remote model when a production OPENAI_API_KEY is configured,
    otherwise the keyword classifier. The result is stored before it is returned.
    """,
    responses={
        200: {"description": "Classification completed"},
        400: {"model": ErrorResponse, "description": "Email content missing or too short"},
        401: {"model": ErrorResponse, "description": "API key rejected by the model provider"},
        500: {"model": ErrorResponse, "description": "Classification failed"},
    },
)
async def classify_email(
    request: ClassificationRequest,
    engine: ClassificationEngine = Depends(get_classification_engine),
    repository: ClassificationRepository = Depends(get_repository),
) -> ClassificationResult:
    logger.info(
        "Classification request received",
        extra={"email_length": len(request.email_content)},
    )
    
    try:
        result = await engine.classify(request.email_content)
        record = await repository.save(request.email_content, result)
    except ClassificationError:
        # Rendered by the exception handler (401/500)
        raise
    except Exception as exc:
        logger.error(
            "Classification error",
            extra={"error_type": type(exc).__name__},
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc) or "Failed to classify email",
        ) from exc
    
    logger.info(
        "Classification stored",
        extra={"record_id": record.id, "category": result.primary_category},
    )
    return result


@router.get(
    "/api/stats",
    response_model=ClassificationStats,
    summary="Today's classification counts",
    responses={500: {"model": ErrorResponse}},
)
async def get_stats(
    repository: ClassificationRepository = Depends(get_repository),
) -> ClassificationStats:
    try:
        return await repository.get_stats()
    except Exception as exc:
        logger.error("Stats error", extra={"error_type": type(exc).__name__}, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to get statistics",
        ) from exc


@router.get(
    "/api/history",
    response_model=list[EmailClassification],
    summary="Most recent classifications, newest first",
    responses={500: {"model": ErrorResponse}},
)
async def get_history(
    repository: ClassificationRepository = Depends(get_repository),
) -> list[EmailClassification]:
    try:
        return await repository.get_history()
    except Exception as exc:
        logger.error("History error", extra={"error_type": type(exc).__name__}, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to get classification history",
        ) from exc


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="""
    Reports the active classifier mode and the status of:
    - the model provider (only probed in remote mode)
    - the classification store
    """,
    responses={
        200: {"description": "Healthy or degraded"},
        503: {"description": "Storage unavailable"},
    },
)
async def health_check(
    settings: Settings = Depends(get_settings),
    engine: ClassificationEngine = Depends(get_classification_engine),
    llm_client: BaseLLMClient = Depends(get_llm_client),
    repository: ClassificationRepository = Depends(get_repository),
):
    mode = engine.current_mode()
    services = {}
    
    if mode is ClassifierMode.FALLBACK:
        services["llm"] = "not_configured"
    else:
        services["llm"] = "ok" if await llm_client.health_check() else "unreachable"
    
    services["storage"] = "ok" if await repository.ping() else "unreachable"
    
    if services["storage"] != "ok":
        health_status = "unhealthy"
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    elif services["llm"] == "unreachable":
        health_status = "degraded"
        status_code = status.HTTP_200_OK
    else:
        health_status = "healthy"
        status_code = status.HTTP_200_OK
    
    logger.info(
        "Health check",
        extra={"status": health_status, "mode": mode.value, "services": services},
    )
    
    response = HealthResponse(
        status=health_status,
        version=settings.APP_VERSION,
        classifier_mode=mode.value,
        services=services,
        timestamp=datetime.utcnow(),
    )
    return JSONResponse(
        status_code=status_code,
        content=response.model_dump(mode="json"),
    )
