"""Main FastAPI application."""

import logging

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tranzio import __version__
from tranzio.config import settings
from tranzio.api.dependencies import get_pipeline
from tranzio.api.v1.routes import glossary, translation, usage
from tranzio.core.translation import TranslationPipeline

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    description="Glossary-first translation service with LLM fallback",
    version=__version__,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(translation.router, prefix="/api/v1", tags=["translation"])
app.include_router(glossary.router, prefix="/api/v1", tags=["glossary"])
app.include_router(usage.router, prefix="/api/v1", tags=["usage"])

logger.info(
    "Translation service configured: provider=%s, model=%s, glossary=%s",
    settings.llm_provider,
    settings.llm_model,
    settings.glossary_path,
)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Tranzio Translator API", "version": __version__}


@app.get("/health")
async def health(
    deep: bool = False,
    pipeline: TranslationPipeline = Depends(get_pipeline),
):
    """Health check endpoint; ``?deep=true`` also pings the model provider."""
    if not deep:
        return {"status": "healthy"}
    model_ok = await pipeline.health_check()
    return {
        "status": "healthy" if model_ok else "degraded",
        "model": {
            "provider": pipeline.gateway.provider,
            "name": pipeline.gateway.model,
            "reachable": model_ok,
        },
    }
