from __future__ import annotations

import asyncio

import httpx
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from resume_roast.ai.exceptions import ProviderQuotaError, ProviderTimeoutError


class AnalysisError(RuntimeError):
    kind = "unclassified_failure"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Failed to analyze resume"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class MissingFile(AnalysisError):
    kind = "missing_file"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "No resume file provided"


class DescriptionTooShort(AnalysisError):
    kind = "description_too_short"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Job description must be at least 50 characters"


class UnsupportedFileType(AnalysisError):
    kind = "unsupported_file_type"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Only PDF files are supported"


class FileTooLarge(AnalysisError):
    kind = "file_too_large"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "File size exceeds 5MB limit"


class InsufficientText(AnalysisError):
    kind = "insufficient_text"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Could not extract sufficient text from PDF. Ensure it's a text-based PDF (not scanned)."


class ExtractionFailed(AnalysisError):
    kind = "extraction_failed"


class MalformedResponse(AnalysisError):
    kind = "malformed_response"
    default_message = "Failed to parse AI response. Please try again."


class InvalidResponseShape(AnalysisError):
    kind = "invalid_response_shape"
    default_message = "Invalid AI response structure"


class QuotaExceeded(AnalysisError):
    kind = "quota_exceeded"
    default_message = "API quota exceeded. Please try again later."


class UpstreamTimeout(AnalysisError):
    kind = "upstream_timeout"
    default_message = "Request timed out. Try with a shorter resume."


class UnclassifiedFailure(AnalysisError):
    pass


def classify_upstream_failure(exc: BaseException) -> AnalysisError:
    """Map a failed model call onto the user-facing error kinds.

    Quota wins over timeout when a message mentions both.
    """
    if isinstance(exc, AnalysisError):
        return exc
    message = str(exc).lower()
    if isinstance(exc, ProviderQuotaError) or "quota" in message:
        return QuotaExceeded()
    if isinstance(exc, (ProviderTimeoutError, TimeoutError, asyncio.TimeoutError, httpx.TimeoutException)) or "timeout" in message:
        return UpstreamTimeout()
    return UnclassifiedFailure()


def analysis_error_handler(request: Request, exc: AnalysisError) -> JSONResponse:
    _ = request
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    _ = request
    fields = {str(err.get("loc", ("", ""))[-1]) for err in exc.errors()}
    message = MissingFile.default_message if "resume" in fields else "Invalid form data"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})
