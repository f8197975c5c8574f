"""
Исключения API и их обработчик для NinjaAPI
"""
from typing import Optional

import structlog

logger = structlog.get_logger(__name__)


class NewsAPIException(Exception):
    """Базовое исключение API: сообщение, машинный код и HTTP статус"""

    status_code = 400
    code = "error"
    detail = "Bad request"

    def __init__(
        self,
        detail: Optional[str] = None,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        if detail is not None:
            self.detail = detail
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.detail)

    def as_dict(self):
        return {"detail": self.detail, "code": self.code}


class PostNotFound(NewsAPIException):
    status_code = 404
    code = "post_not_found"

    def __init__(self, post_id, detail: Optional[str] = None):
        self.post_id = post_id
        super().__init__(detail or f"Post ({post_id}) not found")


class PostNotCommentable(NewsAPIException):
    status_code = 403
    code = "post_not_commentable"

    def __init__(self, post_id):
        self.post_id = post_id
        super().__init__(f"Post ({post_id}) not commentable")


class MalformedPayload(NewsAPIException):
    status_code = 400
    code = "malformed_payload"
    detail = "Request body is not a valid JSON object"


class CommentValidationFailed(NewsAPIException):
    """Комментарий не прошёл валидацию формы; errors: {field: [{message, code}]}"""

    status_code = 400
    code = "validation_failed"
    detail = "Comment validation failed"

    def __init__(self, errors):
        self.errors = errors
        super().__init__()

    def as_dict(self):
        return {**super().as_dict(), "errors": self.errors}


def register_exception_handlers(api):
    """Регистрирует обработчик NewsAPIException на экземпляре NinjaAPI"""

    @api.exception_handler(NewsAPIException)
    def handle_news_exception(request, exc: NewsAPIException):
        log = logger.warning if exc.status_code < 500 else logger.error
        log("api_error", code=exc.code, status_code=exc.status_code, detail=exc.detail)
        return api.create_response(request, exc.as_dict(), status=exc.status_code)

    return handle_news_exception
