"""
Настройки приложения news со значениями по умолчанию
"""
from django.conf import settings

DEFAULTS = {
    'NEWS_MAILER': 'news.mailer.Mailer',
    'NEWS_NOTIFICATION_FROM': 'no-reply@example.com',
    'NEWS_NOTIFICATION_RECIPIENTS': [],
    'NEWS_DEFAULT_PAGE_SIZE': 10,
    'NEWS_MAX_PAGE_SIZE': 100,
}


def get_setting(name: str):
    if name not in DEFAULTS:
        raise KeyError(f"Unknown news setting: {name}")
    return getattr(settings, name, DEFAULTS[name])
