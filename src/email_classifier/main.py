"""
FastAPI application entry point for the Email Classifier.
"""

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from email_classifier.api.dependencies import get_classification_engine, get_llm_client
from email_classifier.api.error_handlers import EXCEPTION_HANDLERS
from email_classifier.api.middleware import RequestTracingMiddleware
from email_classifier.api.routes import router
from email_classifier.config import settings
from email_classifier.logging_config import configure_logging
from email_classifier.persistence.redis_client import RedisClient

# Configure structured logging before anything logs
configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT)
logger = structlog.get_logger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Customer email classification (complaint, query, feedback, lead) with confidence scores",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Request tracing middleware (must be first for request_id in all logs)
app.add_middleware(RequestTracingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for exc_class, handler in EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exc_class, handler)

app.include_router(router)


@app.on_event("startup")
async def startup():
    """Log the effective configuration."""
    logger.info(
        "Application startup",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        classifier_mode=get_classification_engine().current_mode().value,
        model=settings.OPENAI_MODEL,
        storage_backend=settings.STORAGE_BACKEND,
    )


@app.on_event("shutdown")
async def shutdown():
    """Close the pooled HTTP and Redis connections."""
    logger.info("Application shutdown")
    await get_llm_client().close()
    await RedisClient.close_async_pool()
    logger.info("Application shutdown complete")


if settings.PROMETHEUS_ENABLED:
    Instrumentator().instrument(app).expose(app)


@app.get("/")
async def root():
    """Root endpoint with API documentation links."""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running",
        "docs": "/docs",
        "health": "/health",
        "metrics": "/metrics" if settings.PROMETHEUS_ENABLED else None,
    }


if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(
        "email_classifier.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
