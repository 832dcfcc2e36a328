"""Translation API routes."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ValidationError

from tranzio.api.dependencies import get_pipeline
from tranzio.core.translation.languages import get_supported_languages
from tranzio.core.translation.models import PromptStrategyType
from tranzio.core.translation.pipeline import TranslationPipeline

router = APIRouter()


class TranslateRequest(BaseModel):
    """Request to translate a text."""
    text: str
    target_language: str
    source_language: Optional[str] = None
    strategy: Optional[PromptStrategyType] = None  # Override the classifier


def _invalid_request(error: ValidationError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail=[err["msg"] for err in error.errors()],
    )


@router.post("/translate")
async def translate(
    request: TranslateRequest,
    pipeline: TranslationPipeline = Depends(get_pipeline),
):
    """Translate a text.

    Upstream failures are reported in the body with ``status: "error"``;
    only invalid input is rejected with 422.
    """
    try:
        result = await pipeline.translate(
            request.text,
            request.target_language,
            source_language=request.source_language,
            strategy=request.strategy,
        )
    except ValidationError as e:
        raise _invalid_request(e)
    return result.to_flat_dict()


@router.post("/translate/preview")
async def preview_translation(
    request: TranslateRequest,
    pipeline: TranslationPipeline = Depends(get_pipeline),
):
    """Preview the prompt a translation would use without calling the model."""
    try:
        return await pipeline.preview(
            request.text,
            request.target_language,
            source_language=request.source_language,
            strategy=request.strategy,
        )
    except ValidationError as e:
        raise _invalid_request(e)


@router.get("/languages")
async def list_languages() -> list[str]:
    """List languages offered to clients."""
    return get_supported_languages()
