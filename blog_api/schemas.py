from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


# --- Comment ---

class CommentRequest(BaseModel):
    content: str

    @field_validator("content")
    @classmethod
    def reject_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Comment content is required")
        return value


class CommentResponse(BaseModel):
    id: int
    content: str
    article_id: int
    created_at: datetime
    model_config = ConfigDict(frozen=True)


# --- Article ---

class ArticleRequest(BaseModel):
    """Payload for both create and update; update replaces both fields."""

    title: str = Field(min_length=3, max_length=100)
    content: str

    @field_validator("title", "content")
    @classmethod
    def reject_blank(cls, value: str, info: ValidationInfo) -> str:
        if not value.strip():
            raise ValueError(f"{info.field_name.capitalize()} is required")
        return value


class ArticleSummary(BaseModel):
    id: int
    title: str
    content: str
    created_at: datetime
    updated_at: datetime
    comment_count: int
    model_config = ConfigDict(frozen=True)


class ArticleDetail(BaseModel):
    id: int
    title: str
    content: str
    created_at: datetime
    updated_at: datetime
    comments: tuple[CommentResponse, ...] = ()
    model_config = ConfigDict(frozen=True)


# --- Errors ---

class ErrorResponse(BaseModel):
    status: int
    message: str
    timestamp: datetime
    errors: dict[str, str] | None = None
