"""Pure projection tests — no database involved."""
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from blog_api.models import Article, Comment
from blog_api.services.projections import (
    to_article_detail,
    to_article_summary,
    to_comment_response,
)

CREATED = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
UPDATED = CREATED + timedelta(hours=1)


def _article() -> Article:
    return Article(id=7, title="Hello World", content="First post", created_at=CREATED, updated_at=UPDATED)


def _comment(comment_id: int, article_id: int = 7) -> Comment:
    return Comment(id=comment_id, content=f"Comment {comment_id}", article_id=article_id, created_at=CREATED)


def test_summary_projection():
    summary = to_article_summary(_article(), 3)
    assert summary.model_dump() == {
        "id": 7,
        "title": "Hello World",
        "content": "First post",
        "created_at": CREATED,
        "updated_at": UPDATED,
        "comment_count": 3,
    }


def test_detail_projection_keeps_comment_order():
    detail = to_article_detail(_article(), [_comment(2), _comment(1)])
    assert [c.id for c in detail.comments] == [2, 1]
    assert "comment_count" not in detail.model_dump()


def test_detail_projection_stamps_owner_id_on_comments():
    """A comment row carrying a stale article_id is still reported under its owner."""
    detail = to_article_detail(_article(), [_comment(1, article_id=999)])
    assert detail.comments[0].article_id == 7


def test_comment_projection_uses_given_article_id():
    response = to_comment_response(_comment(5, article_id=999), 7)
    assert response.model_dump() == {
        "id": 5,
        "content": "Comment 5",
        "article_id": 7,
        "created_at": CREATED,
    }


def test_projections_are_immutable():
    summary = to_article_summary(_article(), 0)
    with pytest.raises(ValidationError):
        summary.title = "changed"
