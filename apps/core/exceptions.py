"""
Domain exceptions and DRF exception handler for the Credit Application System.

Every domain error carries an ErrorKind; the handler derives the HTTP
status from the kind and renders a uniform error body.
"""

import enum
import logging
from http import HTTPStatus

from django.db import IntegrityError
from django.utils import timezone
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class ErrorKind(enum.Enum):
    """Kinds of domain failure recognized by the HTTP boundary."""

    NOT_FOUND = 'not_found'
    INVALID = 'invalid'
    CONFLICT = 'conflict'


STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
}


class BusinessError(APIException):
    """Raised when a lookup misses or a business rule is violated."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Business rule violated.'
    default_code = 'business_error'

    def __init__(self, detail=None, kind=ErrorKind.INVALID):
        super().__init__(detail=detail)
        self.kind = kind
        self.status_code = STATUS_BY_KIND[kind]


class ConflictError(APIException):
    """Raised when a write collides with a uniqueness or reference constraint."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Conflicting record.'
    default_code = 'conflict'
    kind = ErrorKind.CONFLICT


def build_error_body(status_code: int, exception_name: str, details: list) -> dict:
    """Build the error payload shared by the handler and the middleware."""
    reason = HTTPStatus(status_code).phrase
    return {
        'title': f'{reason}! Consult the documentation',
        'timestamp': timezone.now().isoformat(),
        'status': status_code,
        'exception': exception_name,
        'details': details,
    }


def flatten_details(data, prefix=None) -> list:
    """
    Flatten DRF error data into a list of strings.

    Field errors render as "<field>: <message>"; nested serializers
    join their field names with dots.
    """
    if isinstance(data, dict):
        details = []
        for field, value in data.items():
            name = field if prefix is None else f'{prefix}.{field}'
            details.extend(flatten_details(value, name))
        return details
    if isinstance(data, (list, tuple)):
        details = []
        for value in data:
            details.extend(flatten_details(value, prefix))
        return details
    if prefix in (None, 'detail', 'errors'):
        return [str(data)]
    return [f'{prefix}: {data}']


def custom_exception_handler(exc, context):
    """
    Custom DRF exception handler that returns consistent error responses.

    Domain errors take their status from their ErrorKind, integrity
    violations become conflicts and anything unhandled is logged and
    returned as a 500.
    """
    if isinstance(exc, IntegrityError):
        logger.warning(
            "Integrity violation in %s: %s",
            context.get('view', 'unknown'),
            exc,
        )
        body = build_error_body(
            status.HTTP_409_CONFLICT,
            exc.__class__.__name__,
            [str(exc)],
        )
        return Response(body, status=status.HTTP_409_CONFLICT)

    response = exception_handler(exc, context)

    if response is not None:
        kind = getattr(exc, 'kind', None)
        if kind is not None:
            response.status_code = STATUS_BY_KIND[kind]
        response.data = build_error_body(
            response.status_code,
            exc.__class__.__name__,
            flatten_details(response.data),
        )
        return response

    logger.exception(
        "Unhandled exception in %s",
        context.get('view', 'unknown'),
        exc_info=exc,
    )
    body = build_error_body(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        exc.__class__.__name__,
        ['An unexpected error occurred. Please try again later.'],
    )
    return Response(body, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
