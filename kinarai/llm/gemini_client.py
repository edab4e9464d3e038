import logging

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from kinarai.core.config import settings as default_settings
from kinarai.core.errors import UpstreamTimeout

logger = logging.getLogger(__name__)


class GeminiClient:
    """
    Thin wrapper around google-generativeai.

    One operation: send a prompt, get raw text back. Nothing about the
    output shape is enforced here; callers run the text through the
    response extractor.
    """

    def __init__(self, api_key: str, model_name: str = "gemini-2.0-flash", timeout: float = 55):
        genai.configure(api_key=api_key)
        self.model_name = model_name
        self.timeout = timeout
        self._model = genai.GenerativeModel(model_name)

    @classmethod
    def from_settings(cls, settings=None):
        settings = settings or default_settings
        return cls(
            api_key=settings.require_api_key(),
            model_name=settings.GEMINI_MODEL,
            timeout=settings.LLM_TIMEOUT_SECONDS,
        )

    def generate(self, prompt: str) -> str:
        logger.debug("Sending prompt to %s (%d chars)", self.model_name, len(prompt))
        try:
            response = self._model.generate_content(
                prompt,
                request_options={"timeout": self.timeout},
            )
        except google_exceptions.DeadlineExceeded as e:
            raise UpstreamTimeout(f"{self.model_name} timed out after {self.timeout}s") from e

        text = (response.text or "").strip()
        logger.debug("Raw response from %s:\n%s", self.model_name, text)
        return text
