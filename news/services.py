"""
Сервисный слой приложения news
"""
from typing import Any, List, Mapping, Optional

from django.db.models import QuerySet
from django.utils.module_loading import import_string

from core.exceptions import PostNotCommentable, PostNotFound
from core.logging_config import log_operation, logger
from core.results import Found, Invalid, LookupResult, NotFound, Validated, ValidationResult

from .conf import get_setting
from .forms import CommentForm
from .managers import CommentManager, PostManager
from .models import Comment, Post


def get_post_manager() -> PostManager:
    return PostManager(Post)


def get_comment_manager() -> CommentManager:
    return CommentManager(Comment, get_post_manager())


def get_mailer():
    """Экземпляр класса из настройки NEWS_MAILER"""
    mailer_class = import_string(get_setting('NEWS_MAILER'))
    return mailer_class()


class PostService:
    """
    Сервис для работы со статьями
    """

    @staticmethod
    def find_post(post_id) -> LookupResult[Post]:
        """
        Ищет статью по id: Found(post) или NotFound
        """
        result = get_post_manager().lookup(id=post_id)
        if isinstance(result, NotFound):
            return NotFound(f"Post ({post_id}) not found")
        return result

    @staticmethod
    def get_post(post_id) -> Post:
        """
        Статья по id или PostNotFound (HTTP 404)
        """
        result = PostService.find_post(post_id)
        if isinstance(result, Found):
            return result.value

        logger.info("post_not_found", post_id=post_id)
        raise PostNotFound(post_id, result.message)

    @staticmethod
    @log_operation("list_posts")
    def list_posts(page: int = 1, count: Optional[int] = None, **criteria: Any) -> List[Post]:
        """
        Одна страница статей через pager менеджера
        """
        if count is None:
            count = get_setting('NEWS_DEFAULT_PAGE_SIZE')
        count = min(count, get_setting('NEWS_MAX_PAGE_SIZE'))

        pager = get_post_manager().get_pager(criteria, page, count)
        posts = pager.get_results()

        logger.info(
            "posts_listed",
            page=page,
            count=count,
            returned=len(posts),
            total=pager.nb_results,
        )
        return posts

    @staticmethod
    @log_operation("list_post_comments")
    def list_post_comments(post_id) -> QuerySet:
        return PostService.get_post(post_id).comments.all()


class CommentService:
    """
    Сервис для работы с комментариями
    """

    @staticmethod
    @log_operation("create_post_comment")
    def create_post_comment(post_id, data: Mapping[str, Any]) -> ValidationResult[Comment]:
        """
        Создаёт комментарий к статье

        PostNotFound и PostNotCommentable прерывают запрос; ошибки полей
        возвращаются как Invalid, ничего не сохраняя.
        """
        post = PostService.get_post(post_id)

        if not post.is_commentable:
            logger.warning("comment_rejected", post_id=post.id, reason="not_commentable")
            raise PostNotCommentable(post_id)

        comment_manager = get_comment_manager()
        comment = comment_manager.create()
        comment.post = post
        comment.status = post.comments_default_status

        form = CommentForm(data, instance=comment)
        if not form.is_valid():
            errors = form.error_dict()
            logger.info("comment_invalid", post_id=post.id, fields=sorted(errors))
            return Invalid(errors)

        comment = form.save(commit=False)
        comment_manager.save(comment)
        get_mailer().send_comment_notification(comment)

        logger.info(
            "comment_created",
            comment_id=comment.id,
            post_id=post.id,
            status=comment.status,
        )
        return Validated(comment)
