import pytest

from app.models.review import ReviewMode, ReviewRequest
from app.services.prompts import PERSONAS, POLICIES, build_prompt


@pytest.fixture
def sample_request():
    return ReviewRequest(
        business_name="The Corner Cafe",
        product_or_service="Iced Latte",
        positive_experience="Staff was incredibly friendly and the coffee was the best I've had.",
    )


def test_every_mode_has_a_policy():
    assert set(POLICIES) == set(ReviewMode)


@pytest.mark.parametrize("mode", list(ReviewMode))
def test_build_prompt_is_deterministic(sample_request, mode):
    first = build_prompt(sample_request, mode)
    second = build_prompt(sample_request, mode)
    assert first == second
    assert first.text.encode() == second.text.encode()


def test_literal_prompt_includes_experience_verbatim(sample_request):
    prompt = build_prompt(sample_request, ReviewMode.LITERAL)

    assert "Business Name: The Corner Cafe" in prompt.text
    assert "Product or Service: Iced Latte" in prompt.text
    assert sample_request.positive_experience in prompt.text
    assert prompt.temperature is None


def test_embellish_prompt_has_no_experience(sample_request):
    prompt = build_prompt(sample_request, ReviewMode.EMBELLISH)

    assert sample_request.positive_experience not in prompt.text
    assert "concise" in prompt.text
    assert prompt.temperature is None


def test_diversity_prompt_lists_personas_and_raises_temperature(sample_request):
    prompt = build_prompt(sample_request, ReviewMode.DIVERSITY)

    for persona in PERSONAS:
        assert persona in prompt.text
    assert "2-4 sentences" in prompt.text
    assert prompt.temperature == 0.95
    assert prompt.mode is ReviewMode.DIVERSITY


def test_braces_in_user_input_are_not_interpreted():
    request = ReviewRequest(business_name="{weird} Name", product_or_service="Tacos {x}")
    prompt = build_prompt(request, ReviewMode.EMBELLISH)
    assert "Business Name: {weird} Name" in prompt.text
