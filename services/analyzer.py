from services.errors import InferenceError
from utils.ingestion import IngestionManager
from utils.prompts import MEDICINE_PROMPT
from utils.utils import setup_logger

logger = setup_logger(__name__)


class MedicineAnalyzer:
    def __init__(self, client, normalizer, max_output_tokens=1000, prompt=MEDICINE_PROMPT):
        self.client = client
        self.normalizer = normalizer
        self.max_output_tokens = max_output_tokens
        self.prompt = prompt

    def run_inference(self, file_path):
        """Send the stored image to the model and return its raw text."""
        image_b64, mime_type = IngestionManager.load_image(file_path)
        try:
            raw = self.client.complete(
                self.prompt, image_b64, mime_type, self.max_output_tokens
            )
        except InferenceError:
            raise
        except Exception as e:
            logger.error(f"Inference call failed: {e}")
            raise InferenceError(str(e)) from e
        return raw or ""

    def analyze(self, file_path):
        raw = self.run_inference(file_path)
        return self.normalizer.normalize(raw)
