"""Glossary API routes."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from tranzio.api.dependencies import get_glossary_store
from tranzio.core.glossary import GlossaryStats, GlossaryStore
from tranzio.utils.text import normalize_phrase

router = APIRouter()


class AddEntryRequest(BaseModel):
    """Request to add or replace a glossary translation."""
    phrase: str
    translation: str
    target_language: str
    source_language: Optional[str] = None


@router.get("/glossary/stats")
async def glossary_stats(
    store: GlossaryStore = Depends(get_glossary_store),
) -> GlossaryStats:
    """Get glossary statistics."""
    return await store.stats()


@router.get("/glossary/lookup")
async def lookup_phrase(
    phrase: str,
    target_language: str,
    store: GlossaryStore = Depends(get_glossary_store),
):
    """Look up an exact phrase translation.

    Raises:
        HTTPException: 400 for an empty phrase, 404 when not in the glossary
    """
    if not phrase.strip():
        raise HTTPException(status_code=400, detail="Phrase must not be empty")

    translation = await store.lookup(phrase, target_language)
    if translation is None:
        raise HTTPException(
            status_code=404,
            detail=f"No '{target_language}' translation for '{phrase}'",
        )
    return {
        "phrase": phrase,
        "target_language": target_language,
        "translation": translation,
    }


@router.post("/glossary/entries")
async def add_entry(
    request: AddEntryRequest,
    store: GlossaryStore = Depends(get_glossary_store),
):
    """Add a translation to the glossary."""
    if not all(
        value.strip()
        for value in (request.phrase, request.translation, request.target_language)
    ):
        raise HTTPException(
            status_code=400,
            detail="Phrase, translation and target language must not be empty",
        )

    saved = await store.add_entry(
        request.phrase,
        request.translation,
        request.target_language,
        source_language=request.source_language,
    )
    if not saved:
        raise HTTPException(status_code=500, detail="Failed to save glossary entry")
    return {"success": True, "phrase": normalize_phrase(request.phrase)}
