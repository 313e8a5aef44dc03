from dataclasses import dataclass

from resume_roast.core.config import DEFAULT_AI_MODELS, settings


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    temperature: float
    timeout_s: float


def load_ai_config() -> AIConfig:
    provider = settings.ai_provider
    model = (settings.ai_model or DEFAULT_AI_MODELS[provider]).strip()
    return AIConfig(
        provider=provider,
        model=model,
        temperature=settings.ai_temperature,
        timeout_s=settings.ai_timeout_s,
    )
