from typing import Protocol


class AIClient(Protocol):
    async def generate_json(self, prompt: str) -> str: ...
