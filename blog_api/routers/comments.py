from fastapi import APIRouter, Depends

from blog_api.dependencies import get_comment_service
from blog_api.schemas import CommentRequest, CommentResponse
from blog_api.services.comment_service import CommentService

router = APIRouter(prefix="/api/v1/articles/{article_id}/comments", tags=["comments"])

@router.get("", response_model=list[CommentResponse])
async def list_comments(article_id: int, service: CommentService = Depends(get_comment_service)):
    return await service.list_comments(article_id)

@router.post("", status_code=201, response_model=CommentResponse)
async def add_comment(
    article_id: int,
    data: CommentRequest,
    service: CommentService = Depends(get_comment_service),
):
    return await service.add_comment(article_id, data)
