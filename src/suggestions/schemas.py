from __future__ import annotations
from typing import List
from pydantic import BaseModel, Field

class SuggestionsReply(BaseModel):
    suggestions: List[str] = Field(default_factory=list)

class RecommendationsReply(BaseModel):
    recommendations: List[str] = Field(default_factory=list)
