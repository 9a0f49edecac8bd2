"""
Centralized exception-to-response translation for the kiosk API.

Wired through ``REST_FRAMEWORK["EXCEPTION_HANDLER"]`` so that views and
services raise errors and never build error responses themselves.

Every error response has the same shape:

    {
        "timestamp": "2025-11-02T14:30:00+00:00",
        "status": 400,
        "detail": "Insufficient stock for product: Cola. Available: 5, Requested: 9",
        "errors": null
    }

``errors`` maps field name to message for validation failures, and stock
failures add ``product_id``, ``product_name``, ``available`` and ``requested``.
"""

import logging

from django.http import Http404
from django.utils import timezone

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import set_rollback

from .exceptions import (
    InsufficientStockError,
    InternalError,
    InvalidArgumentError,
    KioskError,
    NotFoundError,
    ValidationFailedError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidArgumentError: status.HTTP_400_BAD_REQUEST,
    InsufficientStockError: status.HTTP_400_BAD_REQUEST,
    ValidationFailedError: status.HTTP_400_BAD_REQUEST,
    InternalError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _first_message(value):
    if isinstance(value, dict):
        return "; ".join(f"{key}: {_first_message(item)}" for key, item in value.items())
    if isinstance(value, (list, tuple)):
        return _first_message(value[0]) if value else ""
    return str(value)


def field_messages(detail):
    """Reduce DRF error detail to one message per offending field."""
    if isinstance(detail, dict):
        return {str(field): _first_message(value) for field, value in detail.items()}
    return {"non_field_errors": _first_message(detail)}


def status_for(error):
    for error_class, status_code in STATUS_BY_ERROR.items():
        if isinstance(error, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def build_error_payload(status_code, detail, errors=None):
    return {
        "timestamp": timezone.now().isoformat(),
        "status": status_code,
        "detail": detail,
        "errors": errors,
    }


def kiosk_exception_handler(exc, context):
    """
    Translate any exception raised inside a view into a JSON error response.

    Unknown exceptions are logged with their traceback and reported as 500.
    The current transaction is always marked for rollback.
    """
    if isinstance(exc, exceptions.ValidationError):
        exc = ValidationFailedError(field_messages(exc.detail))
    elif isinstance(exc, Http404):
        exc = NotFoundError(str(exc) or None)

    set_rollback()

    if isinstance(exc, KioskError):
        status_code = status_for(exc)
        errors = exc.errors if isinstance(exc, ValidationFailedError) else None
        payload = build_error_payload(status_code, exc.message, errors)

        if isinstance(exc, InsufficientStockError):
            payload.update(
                {
                    "product_id": exc.product_id,
                    "product_name": exc.product_name,
                    "available": exc.available,
                    "requested": exc.requested,
                }
            )

        if status_code >= 500:
            logger.error(f"Internal error: {exc.message}", exc_info=exc)
        return Response(payload, status=status_code)

    if isinstance(exc, exceptions.APIException):
        headers = {}
        if getattr(exc, "wait", None):
            headers["Retry-After"] = str(int(exc.wait))
        payload = build_error_payload(exc.status_code, _first_message(exc.detail))
        return Response(payload, status=exc.status_code, headers=headers)

    view = context.get("view")
    logger.error(
        f"Unhandled error in {view.__class__.__name__ if view else 'unknown view'}: {exc}",
        exc_info=exc,
    )
    payload = build_error_payload(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        f"{InternalError.default_message}: {exc}",
    )
    return Response(payload, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
