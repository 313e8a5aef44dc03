from contextlib import asynccontextmanager
import logging

from resume_roast.ai.config import load_ai_config
from resume_roast.ai.factory import get_ai_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    cfg = load_ai_config()
    # A missing provider key raises here and aborts startup.
    get_ai_client()
    logger.info("analysis_client_ready provider=%s model=%s", cfg.provider, cfg.model)
    yield
