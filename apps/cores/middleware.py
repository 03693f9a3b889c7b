import logging
import time

logger = logging.getLogger(__name__)


class RequestLogMiddleware:
    """Logs method, path, status and duration for every request."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        started = time.monotonic()
        response = self.get_response(request)
        elapsed_ms = (time.monotonic() - started) * 1000

        user = getattr(request, "user", None)
        user_id = user.pk if user is not None and user.is_authenticated else None

        logger.info(
            "%s %s -> %s (%.1f ms, user=%s)",
            request.method,
            request.get_full_path(),
            response.status_code,
            elapsed_ms,
            user_id,
        )
        return response
