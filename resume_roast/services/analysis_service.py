from __future__ import annotations

import asyncio
import logging
import time

from fastapi.concurrency import run_in_threadpool

from resume_roast.ai.types import AIClient
from resume_roast.parsing.parse import PdfExtractionError, parse_pdf_bytes
from resume_roast.prompts.analysis import build_analysis_prompt
from resume_roast.schemas.analysis import MIN_RESUME_TEXT_CHARS, AnalysisResult, UploadedFile
from resume_roast.services.errors import (
    AnalysisError,
    ExtractionFailed,
    InsufficientText,
    UnclassifiedFailure,
    classify_upstream_failure,
)
from resume_roast.services.response_validation import parse_analysis_response
from resume_roast.services.upload_validation import validate_upload

logger = logging.getLogger(__name__)


async def extract_resume_text(content: bytes) -> str:
    try:
        parsed = await run_in_threadpool(parse_pdf_bytes, content)
    except PdfExtractionError as exc:
        raise ExtractionFailed() from exc

    if parsed.trimmed_length < MIN_RESUME_TEXT_CHARS:
        logger.info(
            "resume_text_insufficient doc_id=%s pages=%s chars=%s",
            parsed.doc_id,
            parsed.page_count,
            parsed.trimmed_length,
        )
        raise InsufficientText()
    return parsed.text


async def request_analysis(client: AIClient, prompt: str, timeout_s: float) -> str:
    try:
        return await asyncio.wait_for(client.generate_json(prompt), timeout=timeout_s)
    except Exception as exc:
        error = classify_upstream_failure(exc)
        logger.warning("analysis_model_call_failed kind=%s: %s", error.kind, exc)
        raise error from exc


async def analyze_resume(
    file: UploadedFile | None,
    job_description: str | None,
    *,
    client: AIClient,
    timeout_s: float,
) -> AnalysisResult:
    started = time.perf_counter()
    try:
        upload = validate_upload(file, job_description)
        resume_text = await extract_resume_text(upload.file.content)
        prompt = build_analysis_prompt(upload.job_description.strip(), resume_text)
        raw = await request_analysis(client, prompt, timeout_s)
        result = parse_analysis_response(raw)
    except AnalysisError as exc:
        logger.info("analysis_rejected kind=%s status=%s", exc.kind, exc.status_code)
        raise
    except Exception as exc:
        logger.error("analysis_unexpected_failure: %s", exc, exc_info=True)
        raise UnclassifiedFailure() from exc

    if not 0 <= result.score <= 100:
        logger.warning("analysis_score_out_of_range score=%s", result.score)

    logger.info(
        "analysis_completed score=%s resume_chars=%s prompt_chars=%s latency_ms=%s",
        result.score,
        len(resume_text),
        len(prompt),
        int((time.perf_counter() - started) * 1000),
    )
    return result
