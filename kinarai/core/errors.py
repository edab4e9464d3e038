class KinaraiError(Exception):
    """Base class for errors raised by the recommendation pipeline."""


class ConfigurationError(KinaraiError):
    """A required setting (usually the Gemini API key) is missing."""


class InvalidRequestError(KinaraiError):
    """The caller sent neither a location nor a food type."""


class UpstreamTimeout(KinaraiError):
    """The generative model did not answer before its deadline."""


class ExtractionFailure(KinaraiError):
    """The model output contained no parseable JSON array."""

    def __init__(self, message, raw_text=None):
        super().__init__(message)
        self.raw_text = raw_text


class VerificationFailure(KinaraiError):
    """The verification reply could not be used to filter candidates."""
