from __future__ import annotations

from resume_roast.schemas.analysis import (
    ALLOWED_CONTENT_TYPES,
    MAX_UPLOAD_BYTES,
    MIN_JOB_DESCRIPTION_CHARS,
    UploadedFile,
    UploadRequest,
)
from resume_roast.services.errors import (
    DescriptionTooShort,
    FileTooLarge,
    MissingFile,
    UnsupportedFileType,
)


def validate_upload(file: UploadedFile | None, job_description: str | None) -> UploadRequest:
    """Check an upload before any extraction or model work happens.

    Checks run in a fixed order and the first failure is raised. The declared
    content type is trusted; the file bytes are never inspected here.
    """
    if file is None:
        raise MissingFile()

    if not job_description or len(job_description.strip()) < MIN_JOB_DESCRIPTION_CHARS:
        raise DescriptionTooShort()

    if file.content_type not in ALLOWED_CONTENT_TYPES:
        raise UnsupportedFileType()

    if file.size > MAX_UPLOAD_BYTES:
        raise FileTooLarge()

    return UploadRequest(file=file, job_description=job_description)
