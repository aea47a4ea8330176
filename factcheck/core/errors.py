"""
Typed failures surfaced to callers of the fact checker.

Evidence gathering never raises these; it degrades to less (or no) evidence.
Validation, provider and parse failures propagate to the caller unchanged and
are never retried inside the pipeline.
"""


class FactCheckError(Exception):
    """Base class for every failure reported to callers."""

    user_message = "Failed to verify fact"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.user_message)
        self.message = message or self.user_message


class StatementValidationError(FactCheckError):
    user_message = "Please provide a valid statement (at least 3 characters)"


class ProviderError(FactCheckError):
    """The generative model failed for a reason not covered by a subclass."""

    user_message = "The AI model failed to produce a response"


class ProviderConfigurationError(ProviderError):
    user_message = "API key not configured. Please set GROQ_API_KEY in your environment variables."


class ProviderAuthError(ProviderError):
    user_message = "Invalid API key. Please check your Groq API key configuration."


class ProviderRateLimitError(ProviderError):
    user_message = "API rate limit exceeded. Please try again later."


class ProviderTimeoutError(ProviderError):
    user_message = "Request timed out. The AI service might be experiencing high load."


class ResponseParseError(FactCheckError):
    """No parsing strategy could make sense of the model's reply."""

    user_message = "Failed to parse AI response"

    def __init__(self, raw_text: str, message: str | None = None) -> None:
        super().__init__(message)
        self.raw_text = raw_text


class VerdictParseError(ResponseParseError):
    pass


class TopicParseError(ResponseParseError):
    pass
