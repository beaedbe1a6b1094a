import logging
from collections.abc import Mapping
from typing import Any

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from app.errors import ValidationError
from app.models.review import ReviewMode, ReviewRequest

logger = logging.getLogger(__name__)

MIN_EXPERIENCE_LENGTH = 20

_any_url = TypeAdapter(AnyUrl)


def _required_text(value: Any, label: str) -> str:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise PydanticCustomError("required", "{label} is required.", {"label": label})
    if not isinstance(value, str):
        raise PydanticCustomError("text_type", "{label} must be text.", {"label": label})
    return value


def _optional_text(value: Any, label: str) -> str | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if not isinstance(value, str):
        raise PydanticCustomError("text_type", "{label} must be text.", {"label": label})
    return value


class _ReviewForm(BaseModel):
    """Raw form schema. Every field has a default so missing keys reach our own messages."""

    model_config = ConfigDict(populate_by_name=True, validate_default=True, extra="ignore")

    business_name: str = Field(default="", alias="businessName")
    product_or_service: str = Field(default="", alias="productOrService")
    positive_experience: str | None = Field(default=None, alias="positiveExperience")
    destination_link: str | None = Field(default=None, alias="destinationLink")

    # "before" validators run ahead of the str type check so null or
    # non-string values still produce a message naming the field.
    @field_validator("business_name", mode="before")
    @classmethod
    def _business_name_required(cls, value: Any) -> str:
        return _required_text(value, "Business name")

    @field_validator("product_or_service", mode="before")
    @classmethod
    def _product_required(cls, value: Any) -> str:
        return _required_text(value, "Product or service")

    @field_validator("positive_experience", mode="before")
    @classmethod
    def _experience_length(cls, value: Any, info: ValidationInfo) -> str | None:
        text = _optional_text(value, "Experience")
        mode = (info.context or {}).get("mode", ReviewMode.LITERAL)
        if mode is not ReviewMode.LITERAL:
            return text
        if text is None or len(text.strip()) < MIN_EXPERIENCE_LENGTH:
            raise PydanticCustomError(
                "too_short",
                "Experience must be at least {min_length} characters.",
                {"min_length": MIN_EXPERIENCE_LENGTH},
            )
        return text

    @field_validator("destination_link", mode="before")
    @classmethod
    def _destination_is_url(cls, value: Any) -> str | None:
        link = _optional_text(value, "Destination link")
        if link is None:
            return None
        try:
            _any_url.validate_python(link)
        except PydanticValidationError:
            raise PydanticCustomError("url", "Please enter a valid URL.") from None
        # Keep the submitted string; AnyUrl would normalise it (trailing slash etc).
        return link


def validate_review_form(raw: Mapping[str, Any], mode: ReviewMode) -> ReviewRequest:
    """
    Check raw form values and build a ReviewRequest.

    Args:
        raw: Flat key/value map as submitted by the form (camelCase keys).
        mode: Active prompt mode; decides whether the experience narrative is required.

    Returns:
        The validated, immutable ReviewRequest.

    Raises:
        ValidationError: With every field message joined into one string.
    """
    try:
        form = _ReviewForm.model_validate(dict(raw), context={"mode": mode})
    except PydanticValidationError as exc:
        messages = [err["msg"] for err in exc.errors()]
        logger.info("Rejected review form (%d problems, mode=%s)", len(messages), mode.value)
        raise ValidationError(messages) from None

    return ReviewRequest.model_validate(form.model_dump())
