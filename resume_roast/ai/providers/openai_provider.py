from __future__ import annotations

from typing import Optional

from openai import APITimeoutError, AsyncOpenAI, RateLimitError

from resume_roast.ai.exceptions import ProviderError, ProviderQuotaError, ProviderTimeoutError
from resume_roast.core.config import settings


class OpenAIProvider:
    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        temperature: float = 0.7,
        timeout_s: float = 10.0,
    ):
        self._model = model
        self._temperature = temperature
        key = (api_key or settings.openai_api_key or "").strip()
        if not key:
            raise RuntimeError("OPENAI_API_KEY environment variable is not set")

        # Retries are left to the user resubmitting the form.
        self._client = AsyncOpenAI(
            api_key=key,
            base_url=(base_url or settings.openai_base_url or None),
            timeout=timeout_s,
            max_retries=0,
        )

    async def generate_json(self, prompt: str) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self._temperature,
                response_format={"type": "json_object"},
            )
        except RateLimitError as exc:
            raise ProviderQuotaError(f"OpenAI quota exceeded: {exc}") from exc
        except APITimeoutError as exc:
            raise ProviderTimeoutError(f"OpenAI request timeout: {exc}") from exc

        content = response.choices[0].message.content if response.choices else ""
        if not content:
            raise ProviderError("OpenAI returned an empty response.")
        return content
