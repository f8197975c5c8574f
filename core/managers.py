"""
Менеджеры сущностей поверх Django ORM
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Sequence

from django.db import models

from .pager import Pager
from .results import Found, LookupResult, NotFound


class BaseEntityManager:
    """
    Базовый менеджер: создание, сохранение, поиск экземпляров одной модели
    """

    def __init__(self, model):
        self.model = model

    def get_class(self):
        return self.model

    def get_queryset(self) -> models.QuerySet:
        return self.model._default_manager.all()

    def create(self, **fields):
        """Новый несохранённый экземпляр модели"""
        return self.model(**fields)

    def save(self, obj, and_flush: bool = True):
        if and_flush:
            obj.save()
        return obj

    def delete(self, obj) -> None:
        obj.delete()

    def find_one_by(self, **criteria) -> Optional[Any]:
        return self.get_queryset().filter(**criteria).first()

    def find_by(self, order_by: Optional[Sequence[str]] = None, **criteria) -> models.QuerySet:
        queryset = self.get_queryset().filter(**criteria)
        if order_by:
            queryset = queryset.order_by(*order_by)
        return queryset

    def lookup(self, **criteria) -> LookupResult:
        """Поиск по точному совпадению: Found или NotFound вместо None"""
        obj = self.find_one_by(**criteria)
        if obj is None:
            lookup = ", ".join(f"{key}={value!r}" for key, value in sorted(criteria.items()))
            return NotFound(f"{self.model.__name__} ({lookup}) not found")
        return Found(obj)


class PageableManager(BaseEntityManager, ABC):
    """Менеджер, умеющий отдавать постраничную выборку"""

    @abstractmethod
    def get_pager(
        self,
        criteria: Dict[str, Any],
        page: int,
        limit: int = 10,
        sort: Optional[Sequence[str]] = None,
    ) -> Pager:
        raise NotImplementedError
