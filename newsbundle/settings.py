"""
Настройки Django проекта newsbundle

Значения берутся из переменных окружения.
"""
import os
from pathlib import Path

from core.logging_config import build_logging_config

BASE_DIR = Path(__file__).resolve().parent.parent


def env_bool(name: str, default: bool = False) -> bool:
    return os.environ.get(name, str(default)).lower() in ('1', 'true', 'yes', 'on')


def env_list(name: str, default: str = '') -> list:
    return [item.strip() for item in os.environ.get(name, default).split(',') if item.strip()]


SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'insecure-dev-key-change-me')
DEBUG = env_bool('DJANGO_DEBUG', False)
ALLOWED_HOSTS = env_list('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1,testserver')

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'core',
    'news',
]

MIDDLEWARE = [
    'core.middleware.LoggingMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'newsbundle.urls'
WSGI_APPLICATION = 'newsbundle.wsgi.application'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {'context_processors': []},
    },
]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.environ.get('DATABASE_PATH', str(BASE_DIR / 'db.sqlite3')),
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

# Почта
EMAIL_BACKEND = os.environ.get('EMAIL_BACKEND', 'django.core.mail.backends.console.EmailBackend')
DEFAULT_FROM_EMAIL = os.environ.get('DEFAULT_FROM_EMAIL', 'no-reply@example.com')

# Приложение news
NEWS_MAILER = os.environ.get('NEWS_MAILER', 'news.mailer.Mailer')
NEWS_NOTIFICATION_FROM = os.environ.get('NEWS_NOTIFICATION_FROM', DEFAULT_FROM_EMAIL)
NEWS_NOTIFICATION_RECIPIENTS = env_list('NEWS_NOTIFICATION_RECIPIENTS', 'editors@example.com')
NEWS_DEFAULT_PAGE_SIZE = 10
NEWS_MAX_PAGE_SIZE = int(os.environ.get('NEWS_MAX_PAGE_SIZE', '100'))

# Логирование
LOGGING = build_logging_config(
    level=os.environ.get('LOG_LEVEL', 'INFO'),
    fmt=os.environ.get('LOG_FORMAT', 'console'),
)
