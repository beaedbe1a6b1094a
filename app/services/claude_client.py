import logging
from typing import Any

import anthropic

from app.config import settings
from app.errors import ConfigurationError, MalformedResponseError, ProviderError
from app.models.review import GenerationResult
from app.services.prompts import RenderedPrompt

logger = logging.getLogger(__name__)

_client: anthropic.AsyncAnthropic | None = None

REVIEW_TOOL_NAME = "submit_review"

# Forcing this tool makes the model answer with a {"reviewText": ...} object.
REVIEW_TOOL = {
    "name": REVIEW_TOOL_NAME,
    "description": "Submit the finished customer review.",
    "input_schema": {
        "type": "object",
        "properties": {
            "reviewText": {
                "type": "string",
                "description": "The generated positive review text.",
            }
        },
        "required": ["reviewText"],
    },
}


def _get_client() -> anthropic.AsyncAnthropic:
    global _client
    if _client is None:
        _client = anthropic.AsyncAnthropic(
            api_key=settings.anthropic_api_key,
            max_retries=0,
            timeout=settings.provider_timeout,
        )
    return _client


def ensure_configured() -> None:
    """Fail fast when no provider credential is available."""
    if not settings.anthropic_api_key:
        raise ConfigurationError(
            "The ANTHROPIC_API_KEY is not set. Please add it to your .env file."
        )


def parse_review_payload(message: Any) -> GenerationResult:
    """
    Pull the submit_review tool input out of a Messages API response.

    Raises:
        MalformedResponseError: No tool call, or its input is not the expected shape.
    """
    tool_call = next(
        (
            block
            for block in getattr(message, "content", None) or []
            if getattr(block, "type", None) == "tool_use"
            and getattr(block, "name", None) == REVIEW_TOOL_NAME
        ),
        None,
    )
    if tool_call is None:
        raise MalformedResponseError("Provider response has no submit_review tool call")

    payload = tool_call.input
    if not isinstance(payload, dict):
        raise MalformedResponseError(f"Tool input is {type(payload).__name__}, expected object")

    review_text = payload.get("reviewText")
    if review_text is not None and not isinstance(review_text, str):
        raise MalformedResponseError("reviewText is not a string")

    return GenerationResult(review_text=(review_text or "").strip() or None)


async def generate_review(prompt: RenderedPrompt) -> GenerationResult:
    """
    Send one rendered prompt to Claude and parse the structured reply.

    Args:
        prompt: Output of the prompt builder, including its sampling temperature.

    Returns:
        GenerationResult; review_text is None when the model returned no text.

    Raises:
        ConfigurationError: ANTHROPIC_API_KEY is not set (checked before any network call).
        ProviderError: Transport, timeout, API or response-shape failure.
    """
    ensure_configured()
    client = _get_client()

    extra: dict[str, Any] = {}
    if prompt.temperature is not None:
        extra["temperature"] = prompt.temperature

    try:
        message = await client.messages.create(
            model=settings.model_name,
            max_tokens=settings.max_tokens,
            messages=[{"role": "user", "content": prompt.text}],
            tools=[REVIEW_TOOL],
            tool_choice={"type": "tool", "name": REVIEW_TOOL_NAME},
            **extra,
        )
    except anthropic.APIError as e:
        raise ProviderError(f"Claude API error: {e}") from e

    result = parse_review_payload(message)
    logger.info(
        "Generated review | mode=%s | input_tokens=%d | output_tokens=%d",
        prompt.mode.value,
        message.usage.input_tokens,
        message.usage.output_tokens,
    )
    return result
