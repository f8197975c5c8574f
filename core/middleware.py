"""
Middleware для логирования HTTP запросов
"""
import time
import uuid

import structlog


class LoggingMiddleware:
    """Middleware для логирования запросов"""

    def __init__(self, get_response):
        self.get_response = get_response
        self.logger = structlog.get_logger(__name__)

    def __call__(self, request):
        request_id = request.META.get('HTTP_X_REQUEST_ID') or uuid.uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        started = time.monotonic()
        self.logger.info(
            "request_started",
            method=request.method,
            path=request.path,
            ip=self._get_client_ip(request),
            user_agent=request.META.get('HTTP_USER_AGENT'),
        )

        response = self.get_response(request)

        duration_ms = round((time.monotonic() - started) * 1000, 2)
        log = self.logger.bind(
            method=request.method,
            path=request.path,
            status_code=response.status_code,
            duration_ms=duration_ms,
        )
        if response.status_code >= 500:
            log.error("request_completed")
        elif response.status_code >= 400:
            log.warning("request_completed")
        else:
            log.info("request_completed")

        response['X-Request-ID'] = request_id
        return response

    def _get_client_ip(self, request):
        x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
        if x_forwarded_for:
            return x_forwarded_for.split(',')[0].strip()
        return request.META.get('REMOTE_ADDR')
