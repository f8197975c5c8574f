import functools
import logging
from typing import Any, Callable, Dict, List

import structlog

logger = structlog.get_logger("news")


def shared_processors() -> List[Callable]:
    """Процессоры, общие для structlog и stdlib ProcessorFormatter"""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def configure_structlog() -> None:
    """Настройка structlog поверх стандартного logging"""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def build_logging_config(level: str = "INFO", fmt: str = "console") -> Dict[str, Any]:
    """Словарь LOGGING для settings.py"""
    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "structlog": {
                "()": structlog.stdlib.ProcessorFormatter,
                "processor": renderer,
                "foreign_pre_chain": shared_processors(),
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "structlog",
            },
        },
        "root": {"handlers": ["console"], "level": level},
        "loggers": {
            "django": {"handlers": ["console"], "level": "WARNING", "propagate": False},
            "news": {"handlers": ["console"], "level": level, "propagate": False},
            "core": {"handlers": ["console"], "level": level, "propagate": False},
        },
    }


def log_operation(operation: str):
    """
    Декоратор для сервисных операций: логирует сбой и пробрасывает исключение дальше
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            log = logger.bind(operation=operation)
            log.debug(f"{operation}_started")
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                log.warning(f"{operation}_failed", error=str(e), error_type=type(e).__name__)
                raise
            log.debug(f"{operation}_finished")
            return result
        return wrapper
    return decorator


def set_level(level: int = logging.ERROR, names=("django", "news", "core")) -> None:
    for name in names:
        logging.getLogger(name).setLevel(level)
