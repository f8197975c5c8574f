# news/__init__.py
"""
Приложение новостей: статьи и комментарии к ним
"""
