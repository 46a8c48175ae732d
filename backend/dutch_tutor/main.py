"""
FastAPI application for the Dutch tutor backend.
Sets up logging, CORS, the proxy error handler and the routers.
"""
from fastapi import FastAPI
from fastapi.responses import JSONResponse
import logging

from dutch_tutor.config import settings
from dutch_tutor.api.middleware.cors import APICORSMiddleware
from dutch_tutor.api.proxy import PROXY_PATHS
from dutch_tutor.core.errors import ProxyError, proxy_error_handler

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format=settings.LOG_FORMAT
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Backend for learning Dutch: exercise feedback, gamification and learning paths",
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None
)

# Configure CORS (the proxies handle their own)
app.add_middleware(
    APICORSMiddleware,
    skip_paths=[f"{settings.PROXY_PREFIX}{path}" for path in PROXY_PATHS],
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(ProxyError, proxy_error_handler)


@app.on_event("startup")
async def startup_event():
    """Run on application startup."""
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    if not settings.HF_API_KEY:
        logger.info("HF_API_KEY not set, chat proxy relies on caller bearer tokens")


@app.get("/")
async def root():
    """Health check endpoint"""
    return JSONResponse(content={
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "healthy",
        "environment": settings.ENVIRONMENT
    })


@app.get("/health")
async def health_check():
    """Detailed health check endpoint."""
    return JSONResponse(content={
        "status": "healthy",
        "services": {
            "api": "up",
            "chat_proxy": "configured" if settings.HF_API_KEY else "token_passthrough",
            "storage": "json_files" if settings.DATA_DIR else "memory"
        }
    })


# Include routers
from dutch_tutor.api import proxy
from dutch_tutor.api.v1.endpoints import exercises
from dutch_tutor.api.v1.endpoints import gamification
from dutch_tutor.api.v1.endpoints import learning_paths
from dutch_tutor.api.v1.endpoints import cefr
from dutch_tutor.api.v1.endpoints import review
from dutch_tutor.api.v1.endpoints import performance
app.include_router(proxy.router, prefix=settings.PROXY_PREFIX, tags=["proxy"])
app.include_router(exercises.router, prefix=f"{settings.API_V1_PREFIX}/exercises", tags=["exercises"])
app.include_router(gamification.router, prefix=f"{settings.API_V1_PREFIX}/gamification", tags=["gamification"])
app.include_router(learning_paths.router, prefix=f"{settings.API_V1_PREFIX}/learning-paths", tags=["learning-paths"])
app.include_router(cefr.router, prefix=f"{settings.API_V1_PREFIX}/cefr", tags=["cefr"])
app.include_router(review.router, prefix=f"{settings.API_V1_PREFIX}/review", tags=["review"])
app.include_router(performance.router, prefix=f"{settings.API_V1_PREFIX}/performance", tags=["performance"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "dutch_tutor.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
