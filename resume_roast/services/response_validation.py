from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from resume_roast.schemas.analysis import AnalysisResult
from resume_roast.services.errors import InvalidResponseShape, MalformedResponse

logger = logging.getLogger(__name__)


def parse_analysis_response(raw: str) -> AnalysisResult:
    """Parse the model's raw text into an AnalysisResult.

    The text must be a bare JSON document; prose around the JSON is rejected
    rather than repaired.
    """
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError) as exc:
        logger.warning("analysis_response_malformed response_len=%s: %s", len(raw or ""), exc)
        raise MalformedResponse() from exc

    if not isinstance(parsed, dict):
        logger.warning("analysis_response_invalid_shape type=%s", type(parsed).__name__)
        raise InvalidResponseShape()

    try:
        return AnalysisResult.model_validate(parsed)
    except ValidationError as exc:
        fields = sorted({".".join(str(part) for part in err["loc"][:1]) for err in exc.errors()})
        logger.warning("analysis_response_invalid_shape fields=%s", ",".join(fields))
        raise InvalidResponseShape() from exc
