"""
FastAPI dependencies wiring the request session to the services.

Usage in a router::

    @router.get("/articles")
    async def list_articles(service: ArticleService = Depends(get_article_service)):
        ...

All three providers share the request's ``get_db`` session (FastAPI caches
a dependency per request).  Services commit their writes themselves via
``BlogRepository.transaction()``.
"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.database import get_db
from blog_api.repository import BlogRepository, SQLAlchemyBlogRepository
from blog_api.services.article_service import ArticleService
from blog_api.services.comment_service import CommentService


def get_repository(db: AsyncSession = Depends(get_db)) -> BlogRepository:
    return SQLAlchemyBlogRepository(db)


def get_article_service(
    repository: BlogRepository = Depends(get_repository),
) -> ArticleService:
    return ArticleService(repository)


def get_comment_service(
    repository: BlogRepository = Depends(get_repository),
    articles: ArticleService = Depends(get_article_service),
) -> CommentService:
    return CommentService(repository, articles)
