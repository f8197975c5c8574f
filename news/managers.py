"""
Менеджеры статей и комментариев
"""
from typing import Any, Dict, Optional, Sequence

from django.db import transaction

from core.managers import PageableManager
from core.pager import Pager

from .models import Comment, CommentStatus, Post


class PostManager(PageableManager):
    """
    Менеджер статей

    Критерии get_pager:
      mode    -- 'public' (по умолчанию): только включённые статьи, если enabled не задан;
                 'admin': все статьи
      enabled -- фильтр по флагу enabled
    """

    default_sort = ('-publication_date', '-id')

    def __init__(self, model=Post):
        super().__init__(model)

    def get_pager(
        self,
        criteria: Dict[str, Any],
        page: int,
        limit: int = 10,
        sort: Optional[Sequence[str]] = None,
    ) -> Pager:
        criteria = dict(criteria or {})
        mode = criteria.get('mode') or 'public'
        if criteria.get('enabled') is None and mode == 'public':
            criteria['enabled'] = True

        queryset = self.get_queryset()
        if criteria.get('enabled') is not None:
            queryset = queryset.filter(enabled=criteria['enabled'])

        queryset = queryset.order_by(*(sort or self.default_sort))
        return Pager(queryset, page=page, max_per_page=limit)

    def update_comments_count(self, post: Post) -> int:
        """Пересчитывает число одобренных комментариев статьи"""
        count = post.comments.filter(status=CommentStatus.APPROVED).count()
        self.get_queryset().filter(pk=post.pk).update(comments_count=count)
        post.comments_count = count
        return count


class CommentManager(PageableManager):
    """
    Менеджер комментариев

    Критерии get_pager: post (экземпляр или id), status
    """

    default_sort = ('created_at', 'id')

    def __init__(self, model=Comment, post_manager: Optional[PostManager] = None):
        super().__init__(model)
        self.post_manager = post_manager or PostManager()

    def save(self, comment: Comment, and_flush: bool = True) -> Comment:
        with transaction.atomic():
            super().save(comment, and_flush=and_flush)
            if and_flush:
                self.post_manager.update_comments_count(comment.post)
        return comment

    def get_pager(
        self,
        criteria: Dict[str, Any],
        page: int,
        limit: int = 10,
        sort: Optional[Sequence[str]] = None,
    ) -> Pager:
        criteria = criteria or {}
        queryset = self.get_queryset()
        if criteria.get('post') is not None:
            queryset = queryset.filter(post=criteria['post'])
        if criteria.get('status') is not None:
            queryset = queryset.filter(status=criteria['status'])

        queryset = queryset.order_by(*(sort or self.default_sort))
        return Pager(queryset, page=page, max_per_page=limit)
