"""
Постраничная выборка поверх django.core.paginator.Paginator
"""
from typing import List

from django.core.paginator import EmptyPage, Paginator


class Pager:
    """
    Одна страница результатов из QuerySet

    Страница за пределами выборки даёт пустой список, а не исключение.
    """

    def __init__(self, queryset, page: int = 1, max_per_page: int = 10):
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        if max_per_page < 1:
            raise ValueError(f"max_per_page must be >= 1, got {max_per_page}")

        self.page = page
        self.max_per_page = max_per_page
        self._paginator = Paginator(queryset, max_per_page)
        try:
            self._page = self._paginator.page(page)
        except EmptyPage:
            self._page = None

    @property
    def nb_results(self) -> int:
        return self._paginator.count

    @property
    def last_page(self) -> int:
        return self._paginator.num_pages

    @property
    def has_next(self) -> bool:
        return self._page is not None and self._page.has_next()

    @property
    def has_previous(self) -> bool:
        return self.page > 1 and self.nb_results > 0

    def get_results(self) -> List:
        if self._page is None:
            return []
        return list(self._page.object_list)

    def __iter__(self):
        return iter(self.get_results())

    def __len__(self):
        return len(self.get_results())
