from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from app.config import settings
from app.models.review import ReviewMode, ReviewRequest

_PROMPT_DIR = Path(__file__).parent.parent / "prompts"

PERSONAS: tuple[str, ...] = (
    "a first-time customer who was pleasantly surprised",
    "a loyal customer who has come back many times",
    "a skeptic who turned into a fan",
    "a customer who cares most about friendly, attentive service",
    "a customer who cares most about quality",
    "a customer who cares most about value for money",
    "a professional who works in the same field",
)


@dataclass(frozen=True)
class PromptPolicy:
    mode: ReviewMode
    template_name: str
    uses_experience: bool = False
    temperature: float | None = None  # None keeps the provider default


@dataclass(frozen=True)
class RenderedPrompt:
    text: str
    mode: ReviewMode
    temperature: float | None = None


POLICIES: dict[ReviewMode, PromptPolicy] = {
    ReviewMode.LITERAL: PromptPolicy(ReviewMode.LITERAL, "literal.txt", uses_experience=True),
    ReviewMode.EMBELLISH: PromptPolicy(ReviewMode.EMBELLISH, "embellish.txt"),
    ReviewMode.DIVERSITY: PromptPolicy(
        ReviewMode.DIVERSITY,
        "diversity.txt",
        temperature=settings.diversity_temperature,
    ),
}


@lru_cache(maxsize=None)
def _load_template(name: str) -> str:
    return (_PROMPT_DIR / name).read_text(encoding="utf-8")


def build_prompt(request: ReviewRequest, mode: ReviewMode) -> RenderedPrompt:
    """Render the prompt for `mode`. Same request and mode always give the same text."""
    policy = POLICIES[mode]
    fields = {
        "business_name": request.business_name,
        "product_or_service": request.product_or_service,
        "personas": "\n".join(f"- {persona}" for persona in PERSONAS),
    }
    if policy.uses_experience:
        fields["positive_experience"] = request.positive_experience or ""

    text = _load_template(policy.template_name).format(**fields)
    return RenderedPrompt(text=text.strip(), mode=mode, temperature=policy.temperature)
