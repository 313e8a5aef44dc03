from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_roast.ai.factory import get_ai_client  # noqa: E402
from resume_roast.core.config import settings  # noqa: E402
from resume_roast.schemas.analysis import UploadedFile  # noqa: E402
from resume_roast.services.analysis_service import analyze_resume  # noqa: E402
from resume_roast.services.errors import AnalysisError  # noqa: E402


def _load_upload(path: Path) -> UploadedFile:
    content = path.read_bytes()
    # Same declared type the web form sends; unreadable bytes fail at extraction.
    return UploadedFile(filename=path.name, content_type="application/pdf", size=len(content), content=content)


def _read_job_description(args: argparse.Namespace) -> str:
    if args.job_desc_text:
        return args.job_desc_text
    if args.job_desc == "-":
        return sys.stdin.read()
    return Path(args.job_desc).read_text(encoding="utf-8")


def _fail(message: str) -> int:
    print(json.dumps({"error": message}), file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score a PDF resume against a job description.")
    parser.add_argument("--resume", required=True, help="Path to the PDF resume")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--job-desc", help="Path to a text file with the job description ('-' reads stdin)")
    group.add_argument("--job-desc-text", help="Job description passed inline")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation for the printed result")
    args = parser.parse_args(argv)

    try:
        upload = _load_upload(Path(args.resume))
        job_description = _read_job_description(args)
    except OSError as exc:
        return _fail(f"Could not read {exc.filename or 'input'}: {exc.strerror or exc}")
    except UnicodeDecodeError:
        return _fail("Job description file is not valid UTF-8 text")

    try:
        client = get_ai_client()
    except RuntimeError as exc:
        return _fail(str(exc))

    try:
        result = asyncio.run(
            analyze_resume(
                upload,
                job_description,
                client=client,
                timeout_s=settings.ai_timeout_s,
            )
        )
    except AnalysisError as exc:
        return _fail(exc.message)

    print(json.dumps(result.model_dump(mode="json"), indent=args.indent, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
