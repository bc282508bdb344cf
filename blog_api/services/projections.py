"""
Response projections — pure mapping from ORM rows to frozen response models.

None of these functions touch the session: callers load whatever the
projection needs (comment counts, comment lists) through the repository
first and pass it in, so a projection can never trigger a lazy load.
"""
from collections.abc import Iterable

from blog_api.models import Article, Comment
from blog_api.schemas import ArticleDetail, ArticleSummary, CommentResponse


def to_comment_response(comment: Comment, article_id: int) -> CommentResponse:
    """
    Project *comment* as seen from its owning article.

    ``article_id`` comes from the owner rather than from the comment row.
    """
    return CommentResponse(
        id=comment.id,
        content=comment.content,
        article_id=article_id,
        created_at=comment.created_at,
    )


def to_article_summary(article: Article, comment_count: int) -> ArticleSummary:
    return ArticleSummary(
        id=article.id,
        title=article.title,
        content=article.content,
        created_at=article.created_at,
        updated_at=article.updated_at,
        comment_count=comment_count,
    )


def to_article_detail(article: Article, comments: Iterable[Comment]) -> ArticleDetail:
    return ArticleDetail(
        id=article.id,
        title=article.title,
        content=article.content,
        created_at=article.created_at,
        updated_at=article.updated_at,
        comments=tuple(to_comment_response(c, article.id) for c in comments),
    )
