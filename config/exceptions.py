"""
API exception handler.

Maps service-layer exceptions from ``apps.core.exceptions`` to HTTP
responses with the body ``{"error": <message>, "code": <CODE>}``. Anything
else falls through to DRF's default handler; unhandled errors are left to
Django.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from apps.core.exceptions import (
    AccessDeniedError,
    AuthenticationFailedError,
    ConflictError,
    InvalidInputError,
    NotFoundError,
    ServiceError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AccessDeniedError, status.HTTP_403_FORBIDDEN),
    (InvalidInputError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_409_CONFLICT),
    (AuthenticationFailedError, status.HTTP_401_UNAUTHORIZED),
]


def status_for(exc):
    """HTTP status for a service exception (400 for unmapped kinds)."""
    for error_class, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def api_exception_handler(exc, context):
    if isinstance(exc, ServiceError):
        status_code = status_for(exc)
        view = context.get('view')
        logger.warning(
            "%s in %s: %s",
            exc.code,
            view.__class__.__name__ if view else 'unknown view',
            exc,
        )
        return Response({'error': str(exc), 'code': exc.code}, status=status_code)

    return exception_handler(exc, context)
