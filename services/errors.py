class MediSnapError(Exception):
    """Base error carrying a stable code for the HTTP layer."""
    code = "internal_error"


class MissingUploadError(MediSnapError):
    code = "upload_missing"


class InferenceError(MediSnapError):
    code = "inference_failed"
