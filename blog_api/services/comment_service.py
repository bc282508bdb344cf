"""
Comment service — append-only comments scoped to an article.

Comments cannot be edited or deleted on their own; they disappear only
when their article is deleted.  Every operation checks that the parent
article exists before any comment is read or written.
"""
import logging

from blog_api.models import Comment, utcnow
from blog_api.repository import BlogRepository
from blog_api.schemas import CommentRequest, CommentResponse
from blog_api.services.article_service import ArticleService
from blog_api.services.projections import to_comment_response

logger = logging.getLogger(__name__)


class CommentService:
    def __init__(self, repository: BlogRepository, articles: ArticleService):
        self._repository = repository
        self._articles = articles

    async def list_comments(self, article_id: int) -> list[CommentResponse]:
        """
        Return every comment of *article_id*.

        Raises ``ResourceNotFoundError`` when the article does not exist,
        even though the comment lookup would simply come back empty.
        """
        await self._articles.ensure_exists(article_id)
        comments = await self._repository.find_by_parent_id(article_id)
        return [to_comment_response(c, article_id) for c in comments]

    async def add_comment(self, article_id: int, data: CommentRequest) -> CommentResponse:
        """Append a comment to *article_id*; nothing is written if it is missing."""
        await self._articles.ensure_exists(article_id)

        comment = Comment(
            content=data.content,
            article_id=article_id,
            created_at=utcnow(),
        )
        async with self._repository.transaction():
            comment = await self._repository.save(comment)
        logger.info("Added comment id=%s to article id=%s", comment.id, article_id)
        return to_comment_response(comment, article_id)
