# core/__init__.py
"""
Общие компоненты: логирование, middleware, менеджеры сущностей, пагинация
"""
