from fastapi import APIRouter, Depends, File, Form, Request, UploadFile

from resume_roast.ai.factory import get_ai_client
from resume_roast.ai.types import AIClient
from resume_roast.core.config import settings
from resume_roast.core.rate_limit import rate_limit
from resume_roast.schemas.analysis import MAX_UPLOAD_BYTES, AnalysisResult, ErrorResponse, UploadedFile
from resume_roast.services.analysis_service import analyze_resume

router = APIRouter()

READ_CHUNK_BYTES = 64 * 1024


async def _buffer_upload(upload: UploadFile) -> UploadedFile:
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await upload.read(READ_CHUNK_BYTES)
        if not chunk:
            break
        total += len(chunk)
        # Oversized uploads are still counted so the size check reports them.
        if total <= MAX_UPLOAD_BYTES:
            chunks.append(chunk)
    return UploadedFile(
        filename=upload.filename or "resume.pdf",
        content_type=upload.content_type or "",
        size=total,
        content=b"".join(chunks),
    )


@router.post(
    "/analyze",
    response_model=AnalysisResult,
    responses={400: {"model": ErrorResponse}, 429: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@rate_limit()
async def analyze(
    request: Request,
    resume: UploadFile | None = File(default=None),
    job_desc: str | None = Form(default=None, alias="jobDesc"),
    client: AIClient = Depends(get_ai_client),
):
    _ = request
    uploaded = await _buffer_upload(resume) if resume is not None else None
    return await analyze_resume(
        uploaded,
        job_desc,
        client=client,
        timeout_s=settings.ai_timeout_s,
    )
