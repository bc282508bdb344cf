"""
Article service — lifecycle of the Article aggregate.

Design notes
------------
- The service talks to storage only through the ``BlogRepository`` it is
  constructed with.  Every write runs inside ``repository.transaction()``,
  which commits before the method returns; an article delete (article row
  plus all comment rows) is therefore one atomic unit, and a failed commit
  surfaces to the caller instead of being lost after the response.
- Comment counts are read live from the comments table on every call;
  ``list_articles`` fetches all counts with one grouped query.
- Failures are not handled here: ``ResourceNotFoundError`` and
  ``StorageError`` propagate to the exception handlers unchanged.
"""
import logging

from blog_api.exceptions import ResourceNotFoundError
from blog_api.models import Article, utcnow
from blog_api.repository import BlogRepository
from blog_api.schemas import ArticleDetail, ArticleRequest, ArticleSummary
from blog_api.services.projections import to_article_detail, to_article_summary

logger = logging.getLogger(__name__)


class ArticleService:
    """Creates, reads, updates and cascade-deletes articles."""

    def __init__(self, repository: BlogRepository):
        self._repository = repository

    async def _get_or_raise(self, article_id: int) -> Article:
        article = await self._repository.find_by_id(Article, article_id)
        if article is None:
            raise ResourceNotFoundError("Article", article_id)
        return article

    async def ensure_exists(self, article_id: int) -> None:
        """Raise ``ResourceNotFoundError`` unless *article_id* exists."""
        if not await self._repository.exists_by_id(Article, article_id):
            raise ResourceNotFoundError("Article", article_id)

    async def list_articles(self) -> list[ArticleSummary]:
        articles = await self._repository.find_all(Article)
        counts = await self._repository.comment_counts()
        return [to_article_summary(a, counts.get(a.id, 0)) for a in articles]

    async def get_article(self, article_id: int) -> ArticleDetail:
        """Return *article_id* with every comment it owns."""
        article = await self._get_or_raise(article_id)
        comments = await self._repository.find_by_parent_id(article.id)
        return to_article_detail(article, comments)

    async def create_article(self, data: ArticleRequest) -> ArticleSummary:
        now = utcnow()
        article = Article(
            title=data.title,
            content=data.content,
            created_at=now,
            updated_at=now,
        )
        async with self._repository.transaction():
            article = await self._repository.save(article)
        logger.info("Created article id=%s", article.id)
        # A brand-new article cannot have comments yet.
        return to_article_summary(article, 0)

    async def update_article(self, article_id: int, data: ArticleRequest) -> ArticleSummary:
        """
        Replace title and content of *article_id* and refresh ``updated_at``.

        ``created_at`` is never touched.  Concurrent updates are
        last-write-wins.
        """
        article = await self._get_or_raise(article_id)
        async with self._repository.transaction():
            article.title = data.title
            article.content = data.content
            article.updated_at = utcnow()
            article = await self._repository.save(article)

        comment_count = await self._repository.count_by_parent_id(article.id)
        logger.info("Updated article id=%s", article.id)
        return to_article_summary(article, comment_count)

    async def delete_article(self, article_id: int) -> None:
        """Delete *article_id* together with all of its comments."""
        article = await self._get_or_raise(article_id)
        async with self._repository.transaction():
            await self._repository.delete(article)
        logger.info("Deleted article id=%s and its comments", article_id)
