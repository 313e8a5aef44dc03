from functools import lru_cache

from resume_roast.ai.config import load_ai_config
from resume_roast.ai.types import AIClient

from resume_roast.ai.providers.gemini_provider import GeminiProvider
from resume_roast.ai.providers.openai_provider import OpenAIProvider


@lru_cache(maxsize=1)
def get_ai_client() -> AIClient:
    cfg = load_ai_config()

    if cfg.provider == "gemini":
        return GeminiProvider(model=cfg.model, temperature=cfg.temperature, timeout_s=cfg.timeout_s)

    if cfg.provider == "openai":
        return OpenAIProvider(model=cfg.model, temperature=cfg.temperature, timeout_s=cfg.timeout_s)

    raise ValueError(f"Unsupported AI_PROVIDER='{cfg.provider}'")
