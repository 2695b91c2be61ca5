"""
DRF exception handler - turns application exceptions into API responses.
"""
import logging
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler
from core.exceptions import (
    BaseApplicationException, ValidationError, NotFoundError, PermissionDeniedError,
    CapacityExceededError, IdempotentConditionError, SignatureMismatchError,
)

logger = logging.getLogger(__name__)

# Most specific first: TargetFullError is matched through CapacityExceededError
STATUS_BY_EXCEPTION = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (SignatureMismatchError, status.HTTP_400_BAD_REQUEST),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN),
    (CapacityExceededError, status.HTTP_409_CONFLICT),
    (IdempotentConditionError, status.HTTP_200_OK),
]


def status_for(exc: BaseApplicationException) -> int:
    for exc_class, status_code in STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_class):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def exception_handler(exc, context):
    """
    Application exceptions map to 4xx (or 200 for no-op conditions), DRF and
    Django exceptions keep DRF's handling, anything else becomes a plain 500.
    """
    if isinstance(exc, BaseApplicationException):
        status_code = status_for(exc)
        body = {'detail': exc.message, 'code': exc.code}
        if exc.details:
            body['details'] = exc.details
        if isinstance(exc, IdempotentConditionError):
            body['changed'] = False
        logger.info(f"{exc.__class__.__name__} ({exc.code}): {exc.message}")
        return Response(body, status=status_code)

    response = drf_exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get('view')
    logger.error(
        f"Unhandled error in {view.__class__.__name__ if view else 'unknown view'}: {str(exc)}",
        exc_info=exc
    )
    return Response(
        {'detail': 'An unexpected error occurred. Please try again later.', 'code': 'INTERNAL_ERROR'},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
