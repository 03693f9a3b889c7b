import logging

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def _first_message(detail):
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
        return "Validation failed"
    if isinstance(detail, list):
        return _first_message(detail[0]) if detail else "Validation failed"
    return str(detail)


def api_exception_handler(exc, context):
    """
    Wraps every error as {"success": false, "message": ..., "errors": ...}.
    """
    response = exception_handler(exc, context)
    view = context.get("view")

    if response is None:
        logger.exception("Unhandled exception in %s", view.__class__.__name__ if view else "unknown view")
        return Response(
            {"success": False, "message": "An unexpected error occurred", "errors": None},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    detail = getattr(exc, "detail", None)
    if isinstance(exc, ValidationError):
        message = _first_message(detail)
    else:
        message = str(detail) if detail is not None else str(exc)

    if response.status_code >= 500:
        logger.error("Server error %s: %s", response.status_code, message)

    response.data = {"success": False, "message": message, "errors": response.data}
    return response
