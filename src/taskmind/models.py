from __future__ import annotations

from datetime import date, datetime
from typing import Literal, Optional, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


TaskStatus = Literal["pending", "in_progress", "completed"]
SourceType = Literal["whatsapp", "email", "notes"]
Sentiment = Literal["positive", "negative", "neutral"]

SortField = Literal["priority", "deadline", "created"]
SortOrder = Literal["asc", "desc"]

MAX_KEYWORDS = 5


def _strip_title(v: str) -> str:
    v2 = v.strip()
    if not v2:
        raise ValueError("title must not be blank")
    return v2


class Task(BaseModel):
    id: str
    title: str = Field(..., min_length=1)
    description: str = ""
    category: str = ""

    priority_score: int = Field(3, ge=1, le=5)
    deadline: date
    status: TaskStatus = "pending"

    created_at: datetime
    updated_at: datetime

    ai_enhanced: bool = False
    context_based: bool = False

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        return _strip_title(v)

    def is_overdue(self, today: date) -> bool:
        return self.deadline < today and self.status != "completed"


class ContextEntry(BaseModel):
    id: str
    content: str = Field(..., min_length=1)
    source_type: SourceType = "notes"
    created_at: datetime

    processed_insights: str = ""
    keywords: List[str] = Field(default_factory=list, max_length=MAX_KEYWORDS)
    sentiment: Sentiment = "neutral"


class Category(BaseModel):
    id: str
    name: str = Field(..., min_length=1)
    color: str = "#64748b"
    usage_count: int = Field(0, ge=0)
    created_at: datetime


# --- write payloads (what the user typed) ---


class TaskDraft(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = ""
    category: str = ""
    deadline: date
    priority_score: int = Field(3, ge=1, le=5)
    status: TaskStatus = "pending"

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        return _strip_title(v)


class TaskUpdate(BaseModel):
    """Partial edit; only fields that were explicitly set are written."""

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None
    deadline: Optional[date] = None
    priority_score: Optional[int] = Field(None, ge=1, le=5)
    status: Optional[TaskStatus] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return _strip_title(v)


class ContextDraft(BaseModel):
    content: str = Field(..., min_length=1)
    source_type: SourceType = "notes"

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("content must not be blank")
        return v


class CategoryDraft(BaseModel):
    name: str = Field(..., min_length=1)
    color: str = "#64748b"


# --- heuristic requests (immutable) ---


class TaskAnalysisRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1)
    description: str = ""
    # caller supplies these most-recent first
    recent_context: tuple[ContextEntry, ...] = ()
    today: date


class ContextAnalysisRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: str = ""


class TaskFilter(BaseModel):
    model_config = ConfigDict(frozen=True)

    search_term: str = ""
    status: TaskStatus | Literal["all"] = "all"
    category: str = "all"


class TaskSort(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: SortField = "priority"
    order: SortOrder = "desc"


# --- heuristic results ---


class TaskSuggestion(BaseModel):
    priority_score: int = Field(..., ge=1, le=5)
    suggested_deadline: date
    enhanced_description: str
    suggested_category: str
    reasoning: str


class ContextAnalysis(BaseModel):
    keywords: List[str] = Field(default_factory=list, max_length=MAX_KEYWORDS)
    sentiment: Sentiment = "neutral"
    insights: str = ""
    task_suggestions: List[str] = Field(default_factory=list)


class DashboardStats(BaseModel):
    total: int = 0
    completed: int = 0
    pending: int = 0
    in_progress: int = 0
    overdue: int = 0
    ai_enhanced: int = 0
    context_entries: int = 0
    completion_rate: int = 0
    recent: List[Task] = Field(default_factory=list)


def priority_label(priority_score: int) -> str:
    if priority_score >= 4:
        return "High"
    if priority_score >= 3:
        return "Medium"
    return "Low"
