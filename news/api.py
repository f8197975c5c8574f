"""
REST API статей и комментариев
"""
import json
from typing import List

from ninja import Query, Router

from core.exceptions import CommentValidationFailed, MalformedPayload
from core.results import Invalid

from .schemas import (
    CommentIn,
    CommentOut,
    ErrorOut,
    PostListParams,
    PostOut,
    ValidationErrorOut,
)
from .services import CommentService, PostService

router = Router(tags=["Posts"])

FORM_CONTENT_TYPES = ('multipart/form-data', 'application/x-www-form-urlencoded')


def read_comment_payload(request):
    """
    Данные формы комментария из тела запроса

    JSON может быть плоским или вложенным под ключом "comment".
    """
    content_type = request.META.get('CONTENT_TYPE', '')
    if content_type.startswith(FORM_CONTENT_TYPES) or not request.body:
        return request.POST

    try:
        data = json.loads(request.body)
    except (TypeError, ValueError):
        raise MalformedPayload()

    if not isinstance(data, dict):
        raise MalformedPayload()
    if isinstance(data.get('comment'), dict):
        data = data['comment']
    return data


@router.get("", response=List[PostOut])
def list_posts(request, filters: PostListParams = Query(...)):
    """Получение списка статей (постранично)"""
    return PostService.list_posts(page=filters.page, count=filters.count)


@router.get("/{post_id}", response={200: PostOut, 404: ErrorOut})
def get_post(request, post_id: int):
    """Получение конкретной статьи"""
    return PostService.get_post(post_id)


@router.get("/{post_id}/comments", response={200: List[CommentOut], 404: ErrorOut})
def list_post_comments(request, post_id: int):
    """Комментарии к статье"""
    return PostService.list_post_comments(post_id)


@router.post(
    "/{post_id}/comments",
    response={200: CommentOut, 400: ValidationErrorOut, 403: ErrorOut, 404: ErrorOut},
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": CommentIn.model_json_schema()}},
        },
    },
)
def create_post_comment(request, post_id: int):
    """Добавление комментария к статье"""
    data = read_comment_payload(request)
    result = CommentService.create_post_comment(post_id, data)

    if isinstance(result, Invalid):
        raise CommentValidationFailed(result.errors)
    return result.value
