"""
Skill Quiz Server - AI quiz generation and evaluation

FastAPI server with:
- Quiz generation via external text generator (Gemini)
- Strict parsing/validation of the generator output
- Answer scoring with AI feedback
- Rate limiting on paid endpoints, CORS
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

import app_state
from config import get_config
from quiz.router import results_router, router as quiz_router

config = get_config()

logging.basicConfig(
    level=getattr(logging, config.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("server")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Cria e fecha os recursos compartilhados (pool httpx do gerador)."""
    await app_state.startup(config)
    logger.info("Skill Quiz Server iniciado")
    yield
    await app_state.shutdown()
    logger.info("Skill Quiz Server encerrado")


app = FastAPI(
    title="Skill Quiz",
    description="AI quiz generation and evaluation",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Rate limiter
app.state.limiter = app_state.limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Routers
app.include_router(quiz_router, prefix="/api")
app.include_router(results_router, prefix="/api")


# =============================================================================
# HEALTH ENDPOINTS
# =============================================================================


@app.get("/")
async def root():
    """Health check."""
    return {
        "status": "ok",
        "message": "Skill Quiz - AI quiz generation",
        "engine_ready": app_state.engine is not None,
    }


@app.get("/health")
async def health_check():
    """Detailed health check."""
    current = get_config()
    return {
        "status": "healthy",
        "environment": current.environment,
        "engine_ready": app_state.engine is not None,
        "generator": {
            "api_key_set": bool(current.gemini_api_key),
            "timeout_seconds": current.timeout_seconds,
            "max_concurrency": current.max_concurrency,
        },
        "rate_limiter": "slowapi" if app_state.limiter.enabled else "disabled",
    }


# =============================================================================
# MAIN
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8001)
