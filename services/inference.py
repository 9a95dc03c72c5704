import base64
import google.generativeai as genai
from openai import OpenAI
from services.errors import InferenceError
from utils.utils import setup_logger

logger = setup_logger(__name__)


class InferenceClient:
    """Given a prompt and a base64 image, return the model's free-form text."""

    def complete(self, prompt, image_b64, mime_type, max_output_tokens):
        raise NotImplementedError


class GeminiVisionClient(InferenceClient):
    def __init__(self, api_key, model_name, timeout=None):
        self.model_name = model_name
        self.timeout = timeout
        self.model = None
        if not api_key:
            logger.warning("Google API Key not found")
        else:
            genai.configure(api_key=api_key)
            self.model = genai.GenerativeModel(model_name)

    def complete(self, prompt, image_b64, mime_type, max_output_tokens):
        if self.model is None:
            raise InferenceError("GOOGLE_API_KEY is not configured")

        image_part = {
            "mime_type": mime_type,
            "data": base64.b64decode(image_b64),
        }
        request_options = {"timeout": self.timeout} if self.timeout else None
        response = self.model.generate_content(
            [prompt, image_part],
            generation_config={"max_output_tokens": max_output_tokens},
            request_options=request_options,
        )
        try:
            return response.text or ""
        except ValueError:
            # Blocked or empty candidates have no text accessor
            logger.warning("Gemini returned no text content")
            return ""


class OpenAIVisionClient(InferenceClient):
    def __init__(self, api_key, model_name="gpt-4o", timeout=None):
        self.model_name = model_name
        self.client = None
        if not api_key:
            logger.warning("OpenAI API Key not found")
        else:
            kwargs = {"api_key": api_key}
            if timeout:
                kwargs["timeout"] = timeout
            self.client = OpenAI(**kwargs)

    def complete(self, prompt, image_b64, mime_type, max_output_tokens):
        if self.client is None:
            raise InferenceError("OPENAI_API_KEY is not configured")

        completion = self.client.chat.completions.create(
            model=self.model_name,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": prompt},
                        {
                            "type": "image_url",
                            "image_url": {"url": f"data:{mime_type};base64,{image_b64}"},
                        },
                    ],
                }
            ],
            max_tokens=max_output_tokens,
        )
        if not completion.choices:
            return ""
        return completion.choices[0].message.content or ""


def build_client(config):
    if config.AI_PROVIDER == "gemini":
        return GeminiVisionClient(
            config.GOOGLE_API_KEY, config.GEMINI_MODEL_NAME, timeout=config.REQUEST_TIMEOUT
        )
    if config.AI_PROVIDER == "openai":
        return OpenAIVisionClient(
            config.OPENAI_API_KEY, config.OPENAI_MODEL_NAME, timeout=config.REQUEST_TIMEOUT
        )
    raise ValueError(f"Unsupported AI_PROVIDER: {config.AI_PROVIDER}")
