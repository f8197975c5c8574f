# core/apps.py
from django.apps import AppConfig


class CoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core'
    verbose_name = 'Core'

    def ready(self):
        # Инициализация логирования при запуске приложения
        from core.logging_config import configure_structlog
        configure_structlog()
