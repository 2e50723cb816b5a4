from rest_framework import status
from rest_framework.response import Response
import logging

from orders.exceptions import (
    EmptyCart,
    InvalidQuantity,
    InvalidTableNumber,
    InvalidTransition,
    ItemUnavailable,
    NotFound,
)

logger = logging.getLogger(__name__)

# ConstraintViolation is deliberately absent: it signals a defect, not bad input
ERROR_STATUS_CODES = {
    NotFound: status.HTTP_404_NOT_FOUND,
    InvalidQuantity: status.HTTP_400_BAD_REQUEST,
    InvalidTableNumber: status.HTTP_400_BAD_REQUEST,
    EmptyCart: status.HTTP_400_BAD_REQUEST,
    ItemUnavailable: status.HTTP_400_BAD_REQUEST,
    InvalidTransition: status.HTTP_409_CONFLICT,
}

HANDLED_ERRORS = tuple(ERROR_STATUS_CODES)


def error_response(exc) -> Response:
    """Translate a handled order error into an API error response."""
    status_code = ERROR_STATUS_CODES[type(exc)]
    logger.info(f"Rejected order request ({type(exc).__name__}): {exc}")
    return Response(
        {"error": str(exc), "code": type(exc).__name__},
        status=status_code,
    )
