import os
from dotenv import load_dotenv
from utils.utils import setup_logger

load_dotenv()
logger = setup_logger(__name__)

PROVIDERS = ("gemini", "openai")


def _env_flag(name, default="false"):
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Settings read from the environment (and .env) at construction time."""

    def __init__(self):
        self.PORT = int(os.getenv("PORT", "5000"))
        self.AI_PROVIDER = os.getenv("AI_PROVIDER", "gemini").strip().lower()

        self.GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY")
        self.OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
        self.GEMINI_MODEL_NAME = os.getenv("GEMINI_MODEL_NAME", "gemini-2.5-flash-lite")
        self.OPENAI_MODEL_NAME = os.getenv("OPENAI_MODEL_NAME", "gpt-4o")
        self.MAX_OUTPUT_TOKENS = int(os.getenv("MAX_OUTPUT_TOKENS", "1000"))
        self.REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "60"))

        self.UPLOAD_DIR = os.getenv("UPLOAD_DIR", os.path.join(os.getcwd(), "uploads"))
        self.DELETE_UPLOADS = _env_flag("DELETE_UPLOADS")
        self.STRICT_SCHEMA = _env_flag("STRICT_SCHEMA")

    def validate(self):
        """Validate the provider choice and warn when its API key is missing."""
        if self.AI_PROVIDER not in PROVIDERS:
            raise ValueError(f"Unsupported AI_PROVIDER: {self.AI_PROVIDER}")
        if self.AI_PROVIDER == "gemini" and not self.GOOGLE_API_KEY:
            logger.warning("GOOGLE_API_KEY is missing. Gemini calls will fail.")
        if self.AI_PROVIDER == "openai" and not self.OPENAI_API_KEY:
            logger.warning("OPENAI_API_KEY is missing. OpenAI calls will fail.")
