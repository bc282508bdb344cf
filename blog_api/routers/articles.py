from fastapi import APIRouter, Depends

from blog_api.dependencies import get_article_service
from blog_api.schemas import ArticleDetail, ArticleRequest, ArticleSummary
from blog_api.services.article_service import ArticleService

router = APIRouter(prefix="/api/v1/articles", tags=["articles"])

@router.get("", response_model=list[ArticleSummary])
async def list_articles(service: ArticleService = Depends(get_article_service)):
    return await service.list_articles()

@router.get("/{article_id}", response_model=ArticleDetail)
async def get_article(article_id: int, service: ArticleService = Depends(get_article_service)):
    return await service.get_article(article_id)

@router.post("", status_code=201, response_model=ArticleSummary)
async def create_article(data: ArticleRequest, service: ArticleService = Depends(get_article_service)):
    return await service.create_article(data)

@router.put("/{article_id}", response_model=ArticleSummary)
async def update_article(
    article_id: int,
    data: ArticleRequest,
    service: ArticleService = Depends(get_article_service),
):
    return await service.update_article(article_id, data)

@router.delete("/{article_id}", status_code=204)
async def delete_article(article_id: int, service: ArticleService = Depends(get_article_service)):
    await service.delete_article(article_id)
