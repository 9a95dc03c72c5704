import os
import time
from werkzeug.utils import secure_filename
from services.errors import MissingUploadError
from utils.utils import setup_logger, ensure_directory

logger = setup_logger(__name__)


class UploadReceiver:
    def __init__(self, upload_dir):
        self.upload_dir = ensure_directory(upload_dir)

    def save(self, file_storage):
        """
        Store an uploaded file as "<epoch-millis>-<original name>" and return its path.
        """
        if file_storage is None or not file_storage.filename:
            raise MissingUploadError("No image file provided")

        filename = secure_filename(file_storage.filename) or "upload"
        stored_name = f"{int(time.time() * 1000)}-{filename}"
        file_path = os.path.join(self.upload_dir, stored_name)
        file_storage.save(file_path)
        logger.info(f"Saved upload to {file_path}")
        return file_path

    def discard(self, file_path):
        try:
            os.remove(file_path)
        except FileNotFoundError:
            logger.warning(f"Upload already removed: {file_path}")
