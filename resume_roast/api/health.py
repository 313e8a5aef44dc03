from fastapi import APIRouter

from resume_roast.ai.config import load_ai_config

router = APIRouter()


@router.get("/health", summary="Health Check", description="Liveness plus the analysis backend this instance is configured for.")
async def health_check():
    ai_config = load_ai_config()
    return {"status": "healthy", "provider": ai_config.provider, "model": ai_config.model}
