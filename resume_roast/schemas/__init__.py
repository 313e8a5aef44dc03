from .analysis import (
    ALLOWED_CONTENT_TYPES,
    MAX_UPLOAD_BYTES,
    MIN_JOB_DESCRIPTION_CHARS,
    MIN_RESUME_TEXT_CHARS,
    AnalysisResult,
    ErrorResponse,
    UploadedFile,
    UploadRequest,
)

__all__ = [
    "ALLOWED_CONTENT_TYPES",
    "MAX_UPLOAD_BYTES",
    "MIN_JOB_DESCRIPTION_CHARS",
    "MIN_RESUME_TEXT_CHARS",
    "AnalysisResult",
    "ErrorResponse",
    "UploadedFile",
    "UploadRequest",
]
