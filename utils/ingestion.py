import base64
from io import BytesIO
from PIL import Image, UnidentifiedImageError
from utils.utils import setup_logger

logger = setup_logger(__name__)

DEFAULT_MIME_TYPE = "image/jpeg"


class IngestionManager:
    @staticmethod
    def detect_mime_type(data):
        """Sniff the image format from its bytes, falling back to JPEG."""
        try:
            with Image.open(BytesIO(data)) as img:
                return Image.MIME.get(img.format, DEFAULT_MIME_TYPE)
        except (UnidentifiedImageError, OSError):
            logger.debug("Unrecognised image bytes, assuming JPEG")
            return DEFAULT_MIME_TYPE

    @staticmethod
    def load_image(file_path):
        """Return (base64 data, mime type) for the image stored at file_path."""
        with open(file_path, "rb") as f:
            data = f.read()
        mime_type = IngestionManager.detect_mime_type(data)
        return base64.b64encode(data).decode("utf-8"), mime_type
