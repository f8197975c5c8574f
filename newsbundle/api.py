from django.http import HttpRequest
from ninja import NinjaAPI
import structlog

from core.exceptions import register_exception_handlers
from news.api import router as posts_router

logger = structlog.get_logger(__name__)

api = NinjaAPI(
    title="News API",
    version="1.0.0",
    description="API для статей и комментариев",
    docs_url="/docs",
    openapi_url="/openapi.json",
    urls_namespace="news-api",
)

register_exception_handlers(api)

# Регистрация маршрутов
api.add_router("/posts", posts_router)


@api.get("/health", tags=["Health"])
def health_check(request: HttpRequest):
    """Проверка здоровья API"""
    logger.debug("Health check requested")
    return {"status": "healthy", "service": "news-api"}
