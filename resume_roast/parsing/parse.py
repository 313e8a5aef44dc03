from __future__ import annotations

import hashlib
import logging
from io import BytesIO

from pypdf import PdfReader

from .models import ParsedDoc, ParsedPage

logger = logging.getLogger(__name__)


class PdfExtractionError(RuntimeError):
    pass


def _compute_doc_id(content: bytes) -> str:
    return hashlib.sha256(content).hexdigest()[:16]


def parse_pdf_bytes(content: bytes) -> ParsedDoc:
    """Extract plain text from an in-memory PDF.

    Any reader failure is raised as PdfExtractionError. The underlying stream
    is closed on every exit path.
    """
    pages: list[ParsedPage] = []
    warnings: list[str] = []

    try:
        with BytesIO(content) as stream:
            reader = PdfReader(stream)
            page_count = len(reader.pages)
            for index, page in enumerate(reader.pages, start=1):
                page_text = page.extract_text() or ""
                if page_text.strip():
                    pages.append(ParsedPage(page=index, text=page_text))
    except Exception as exc:
        logger.warning("pdf_extraction_failed bytes=%s: %s", len(content), exc)
        raise PdfExtractionError(f"PDF parsing failed: {exc}") from exc

    if not pages:
        warnings.append("No extractable text found in PDF.")

    return ParsedDoc(
        doc_id=_compute_doc_id(content),
        page_count=page_count,
        text="\n".join(item.text for item in pages),
        pages=pages,
        parsing_warnings=warnings,
    )
