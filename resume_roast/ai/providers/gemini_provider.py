from __future__ import annotations

from typing import Optional

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from resume_roast.ai.exceptions import ProviderError, ProviderQuotaError, ProviderTimeoutError
from resume_roast.core.config import settings


class GeminiProvider:
    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        temperature: float = 0.7,
        timeout_s: float = 10.0,
    ):
        self._model = model
        key = (api_key or settings.gemini_api_key or "").strip()
        if not key:
            raise RuntimeError("GEMINI_API_KEY environment variable is not set")

        self._client = genai.Client(
            api_key=key,
            http_options=types.HttpOptions(timeout=int(timeout_s * 1000)),
        )
        self._config = types.GenerateContentConfig(
            response_mime_type="application/json",
            temperature=temperature,
        )

    async def generate_json(self, prompt: str) -> str:
        try:
            response = await self._client.aio.models.generate_content(
                model=self._model,
                contents=prompt,
                config=self._config,
            )
        except genai_errors.APIError as exc:
            if exc.code == 429:
                raise ProviderQuotaError(f"Gemini quota exceeded: {exc}") from exc
            if exc.code in {408, 504}:
                raise ProviderTimeoutError(f"Gemini request timeout: {exc}") from exc
            raise ProviderError(f"Gemini request failed: {exc}") from exc
        except httpx.TimeoutException as exc:
            raise ProviderTimeoutError(f"Gemini request timeout: {exc}") from exc

        text = response.text
        if not text:
            raise ProviderError("Gemini returned an empty response.")
        return text
