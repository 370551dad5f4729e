"""
Lookup list responses (categories, difficulties, types) with per-entry question counts.
"""
from pydantic import BaseModel


class LookupResponse(BaseModel):
    id: str
    label: str
    question_count: int = 0


class LookupListResponse(BaseModel):
    items: list[LookupResponse]
