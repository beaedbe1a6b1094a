import logging
from typing import Any

from fastapi import APIRouter, Body

from app.config import settings
from app.models.review import RequestOutcome, ReviewMode, ReviewModesResponse
from app.services import review_handler

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.post(
    "",
    response_model=RequestOutcome,
    response_model_by_alias=True,
    response_model_exclude_none=True,
)
async def generate_review(
    form: dict[str, Any] = Body(...),
    mode: ReviewMode | None = None,
):
    """
    Generate a positive review from the submitted business details.

    Always answers 200 with either `reviewText` or `error`; the web form shows
    whichever one is present.
    """
    return await review_handler.handle_generate_review(form, mode)


@router.get("/modes", response_model=ReviewModesResponse)
async def list_modes():
    """List the prompt modes and the one used when none is requested."""
    return ReviewModesResponse(modes=list(ReviewMode), default=settings.review_mode)
