from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ReviewMode(str, Enum):
    LITERAL = "literal"
    EMBELLISH = "embellish"
    DIVERSITY = "diversity"


class ReviewRequest(BaseModel):
    """Validated input for one generation call. Built only by the validation step."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    business_name: str = Field(alias="businessName")
    product_or_service: str = Field(alias="productOrService")
    positive_experience: str | None = Field(default=None, alias="positiveExperience")
    destination_link: str | None = Field(default=None, alias="destinationLink")


class GenerationResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    review_text: str | None = Field(default=None, alias="reviewText")


class RequestOutcome(BaseModel):
    """Either the generated review or a human-readable error, never both."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    review_text: str | None = Field(default=None, alias="reviewText")
    error: str | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> "RequestOutcome":
        if (self.review_text is None) == (self.error is None):
            raise ValueError("exactly one of reviewText or error must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None


class ReviewModesResponse(BaseModel):
    modes: list[ReviewMode]
    default: ReviewMode
