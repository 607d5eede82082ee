from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SearchResultRecord(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    id: int
    title: str


class SearchResultList(BaseModel):
    model_config = ConfigDict(frozen=True)

    result: list[SearchResultRecord] = Field(default_factory=list)
