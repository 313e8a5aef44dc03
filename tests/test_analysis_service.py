import json
import os
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("GEMINI_API_KEY", "test-key")
os.environ.setdefault("RATE_LIMIT_ENABLED", "0")

import httpx  # noqa: E402

from resume_roast.ai.exceptions import ProviderError, ProviderQuotaError, ProviderTimeoutError  # noqa: E402
from resume_roast.parsing.models import ParsedDoc  # noqa: E402
from resume_roast.parsing.parse import PdfExtractionError  # noqa: E402
from resume_roast.schemas.analysis import UploadedFile  # noqa: E402
from resume_roast.services.analysis_service import analyze_resume  # noqa: E402
from resume_roast.services.errors import (  # noqa: E402
    ExtractionFailed,
    InsufficientText,
    MalformedResponse,
    QuotaExceeded,
    UnclassifiedFailure,
    UnsupportedFileType,
    UpstreamTimeout,
    classify_upstream_failure,
)
from support import VALID_ANALYSIS, FakeAIClient  # noqa: E402

JOB_DESCRIPTION = "  Senior backend engineer: Python, FastAPI, PostgreSQL, AWS and Docker.  "
PARSE_TARGET = "resume_roast.services.analysis_service.parse_pdf_bytes"


def _upload(content_type: str = "application/pdf") -> UploadedFile:
    return UploadedFile(filename="resume.pdf", content_type=content_type, size=2048, content=b"%PDF-1.4")


def _parsed(text: str) -> ParsedDoc:
    return ParsedDoc(doc_id="abc123", page_count=1, text=text)


class AnalysisServiceTests(unittest.IsolatedAsyncioTestCase):
    async def _run(self, client: FakeAIClient, text: str = "r" * 400, timeout_s: float = 5.0, **kwargs):
        with patch(PARSE_TARGET, return_value=_parsed(text)) as parser:
            result = await analyze_resume(
                kwargs.get("upload", _upload()),
                kwargs.get("job_description", JOB_DESCRIPTION),
                client=client,
                timeout_s=timeout_s,
            )
        return result, parser

    async def test_successful_analysis_returns_model_payload(self):
        client = FakeAIClient(response=json.dumps(VALID_ANALYSIS))
        result, parser = await self._run(client)

        self.assertEqual(result.model_dump(), VALID_ANALYSIS)
        parser.assert_called_once_with(b"%PDF-1.4")
        self.assertEqual(len(client.prompts), 1)
        self.assertIn(f"<job_description>\n{JOB_DESCRIPTION.strip()}\n</job_description>", client.prompts[0])

    async def test_extracted_text_boundary(self):
        client = FakeAIClient(response=json.dumps(VALID_ANALYSIS))
        with self.assertRaises(InsufficientText):
            await self._run(client, text="\n  " + "a" * 99 + "  \n")
        self.assertEqual(client.prompts, [])

        result, _ = await self._run(client, text="\n  " + "a" * 100 + "  \n")
        self.assertEqual(result.score, 82)
        self.assertEqual(len(client.prompts), 1)

    async def test_validation_failure_skips_extraction_and_model(self):
        client = FakeAIClient(response=json.dumps(VALID_ANALYSIS))
        with self.assertRaises(UnsupportedFileType):
            await self._run(client, upload=_upload("image/png"))
        self.assertEqual(client.prompts, [])

    async def test_extractor_failure_is_extraction_failed(self):
        client = FakeAIClient(response=json.dumps(VALID_ANALYSIS))
        with patch(PARSE_TARGET, side_effect=PdfExtractionError("broken xref")):
            with self.assertRaises(ExtractionFailed) as ctx:
                await analyze_resume(_upload(), JOB_DESCRIPTION, client=client, timeout_s=5.0)
        self.assertEqual(ctx.exception.status_code, 500)
        self.assertEqual(client.prompts, [])

    async def test_model_timeout_message(self):
        client = FakeAIClient(error=RuntimeError("Deadline exceeded: request timeout after 10s"))
        with self.assertRaises(UpstreamTimeout) as ctx:
            await self._run(client)
        self.assertEqual(ctx.exception.message, "Request timed out. Try with a shorter resume.")

    async def test_deadline_abandons_slow_model_call(self):
        client = FakeAIClient(response=json.dumps(VALID_ANALYSIS), delay=2.0)
        with self.assertRaises(UpstreamTimeout):
            await self._run(client, timeout_s=0.05)

    async def test_model_quota_message(self):
        client = FakeAIClient(error=RuntimeError("429 Resource has been exhausted (e.g. check quota)."))
        with self.assertRaises(QuotaExceeded) as ctx:
            await self._run(client)
        self.assertEqual(ctx.exception.message, "API quota exceeded. Please try again later.")

    async def test_unknown_model_failure_is_generic(self):
        client = FakeAIClient(error=ProviderError("connection reset by peer"))
        with self.assertRaises(UnclassifiedFailure) as ctx:
            await self._run(client)
        self.assertEqual(ctx.exception.message, "Failed to analyze resume")
        self.assertEqual(ctx.exception.status_code, 500)

    async def test_malformed_model_output(self):
        client = FakeAIClient(response="Sure, here's the analysis: " + json.dumps(VALID_ANALYSIS))
        with self.assertRaises(MalformedResponse):
            await self._run(client)

    async def test_unexpected_exception_is_unclassified(self):
        client = FakeAIClient(response=json.dumps(VALID_ANALYSIS))
        with patch(PARSE_TARGET, side_effect=RuntimeError("boom")):
            with self.assertRaises(UnclassifiedFailure):
                await analyze_resume(_upload(), JOB_DESCRIPTION, client=client, timeout_s=5.0)


class UpstreamClassificationTests(unittest.TestCase):
    def test_provider_error_types(self):
        self.assertIsInstance(classify_upstream_failure(ProviderQuotaError("429")), QuotaExceeded)
        self.assertIsInstance(classify_upstream_failure(ProviderTimeoutError("deadline")), UpstreamTimeout)
        self.assertIsInstance(classify_upstream_failure(TimeoutError()), UpstreamTimeout)

    def test_transport_timeout_is_upstream_timeout(self):
        error = classify_upstream_failure(httpx.ReadTimeout("The read operation timed out"))
        self.assertIsInstance(error, UpstreamTimeout)
        self.assertEqual(error.message, "Request timed out. Try with a shorter resume.")

    def test_quota_is_checked_before_timeout(self):
        error = classify_upstream_failure(RuntimeError("quota check hit a timeout"))
        self.assertIsInstance(error, QuotaExceeded)

    def test_message_match_ignores_case(self):
        self.assertIsInstance(classify_upstream_failure(RuntimeError("Quota Exceeded for project")), QuotaExceeded)
        self.assertIsInstance(classify_upstream_failure(RuntimeError("Read Timeout")), UpstreamTimeout)

    def test_other_errors_are_unclassified(self):
        self.assertIsInstance(classify_upstream_failure(ValueError("bad gateway")), UnclassifiedFailure)


if __name__ == "__main__":
    unittest.main()
