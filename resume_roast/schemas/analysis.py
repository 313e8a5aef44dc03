from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict

MAX_UPLOAD_BYTES = 5 * 1024 * 1024  # 5 MB
MIN_JOB_DESCRIPTION_CHARS = 50
MIN_RESUME_TEXT_CHARS = 100
ALLOWED_CONTENT_TYPES = frozenset({"application/pdf"})


@dataclass(frozen=True)
class UploadedFile:
    filename: str
    content_type: str
    size: int
    content: bytes


@dataclass(frozen=True)
class UploadRequest:
    file: UploadedFile
    job_description: str


class AnalysisResult(BaseModel):
    """Structured feedback returned by the model for one resume/job pair.

    Only the container types are enforced and the score must be finite; list
    elements are forwarded as-is.
    """

    model_config = ConfigDict(strict=True, extra="ignore", allow_inf_nan=False)

    score: int | float
    summary: str
    missing_keywords: list[Any]
    formatting_issues: list[Any]
    strengths: list[Any]
    recommendations: list[Any]


class ErrorResponse(BaseModel):
    error: str
