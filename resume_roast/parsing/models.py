from __future__ import annotations

from pydantic import BaseModel, Field


class ParsedPage(BaseModel):
    page: int
    text: str


class ParsedDoc(BaseModel):
    doc_id: str
    page_count: int = 0
    text: str
    pages: list[ParsedPage] = Field(default_factory=list)
    parsing_warnings: list[str] = Field(default_factory=list)

    @property
    def trimmed_length(self) -> int:
        return len(self.text.strip())
