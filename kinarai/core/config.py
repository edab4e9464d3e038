import os
from dotenv import load_dotenv

from kinarai.core.errors import ConfigurationError

load_dotenv()


def _as_bool(value, default=False):
    if value is None:
        return default
    return str(value).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
    GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
    LLM_TIMEOUT_SECONDS = float(os.getenv("LLM_TIMEOUT_SECONDS", 55))
    REQUEST_TIMEOUT_SECONDS = float(os.getenv("REQUEST_TIMEOUT_SECONDS", 120))
    VERIFY_LOCATIONS = _as_bool(os.getenv("VERIFY_LOCATIONS"), default=True)
    SECRET_KEY = os.getenv("SECRET_KEY", "secret")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    def require_api_key(self) -> str:
        if not self.GEMINI_API_KEY:
            raise ConfigurationError("GEMINI_API_KEY is not defined")
        return self.GEMINI_API_KEY


settings = Settings()
