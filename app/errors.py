GENERIC_PROVIDER_MESSAGE = "An unexpected error occurred while contacting the AI service."


class ReviewPipelineError(Exception):
    """Base class for failures the request handler turns into an error outcome."""

    user_message = GENERIC_PROVIDER_MESSAGE


class ValidationError(ReviewPipelineError):
    def __init__(self, messages: list[str]):
        self.messages = messages
        self.user_message = f"Invalid form data: {' '.join(messages)}"
        super().__init__(self.user_message)


class ConfigurationError(ReviewPipelineError):
    def __init__(self, message: str):
        self.user_message = message
        super().__init__(message)


class ProviderError(ReviewPipelineError):
    """Transport, timeout or response-shape failure from the generation call."""


class MalformedResponseError(ProviderError):
    pass


class EmptyResultError(ReviewPipelineError):
    user_message = "Failed to generate review. The AI did not return any text."
