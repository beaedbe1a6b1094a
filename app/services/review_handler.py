import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from app.config import settings
from app.errors import EmptyResultError, GENERIC_PROVIDER_MESSAGE, ProviderError, ReviewPipelineError
from app.models.review import RequestOutcome, ReviewMode
from app.services import claude_client
from app.services.prompts import build_prompt
from app.services.validation import validate_review_form

logger = logging.getLogger(__name__)


class PipelineStage(str, Enum):
    VALIDATING = "validating"
    GENERATING = "generating"
    DONE = "done"


async def handle_generate_review(
    raw: Mapping[str, Any],
    mode: ReviewMode | None = None,
) -> RequestOutcome:
    """
    Validate a form submission, generate a review and report the outcome.

    This is the only entry point callers should use: nothing raises past it.

    1. Check the provider credential.
    2. Validate the form; bad input never reaches the provider.
    3. Render the prompt for the active mode and make one provider call.
    4. Map every failure to a single human-readable error message.
    """
    mode = mode or settings.review_mode
    stage = PipelineStage.VALIDATING
    try:
        claude_client.ensure_configured()
        request = validate_review_form(raw, mode)

        stage = PipelineStage.GENERATING
        logger.debug("stage=%s mode=%s business=%r", stage.value, mode.value, request.business_name)
        result = await claude_client.generate_review(build_prompt(request, mode))
        if not result.review_text:
            raise EmptyResultError("Provider returned no review text")
    except ProviderError as e:
        logger.error("Review generation failed (stage=%s): %s", stage.value, e, exc_info=e)
        outcome = RequestOutcome(error=e.user_message)
    except ReviewPipelineError as e:
        logger.warning("Review request rejected (stage=%s): %s", stage.value, e)
        outcome = RequestOutcome(error=e.user_message)
    except Exception:
        logger.exception("Unexpected failure while generating a review (stage=%s)", stage.value)
        outcome = RequestOutcome(error=GENERIC_PROVIDER_MESSAGE)
    else:
        outcome = RequestOutcome(review_text=result.review_text)

    stage = PipelineStage.DONE
    logger.debug("stage=%s ok=%s", stage.value, outcome.ok)
    return outcome
