"""
Errors raised by the order repository and lifecycle services.

They are business-rule or data-integrity failures, never transient ones, so
callers should not retry them. Storage failures are not wrapped and surface as
``django.db.DatabaseError`` subclasses.
"""


class OrderError(Exception):
    """Base class for order engine errors."""


class NotFound(OrderError):
    """A referenced order or menu item does not exist."""


class InvalidQuantity(OrderError):
    """A requested line quantity is not a positive integer."""


class InvalidTableNumber(OrderError):
    """A table number is not a positive integer."""


class EmptyCart(OrderError):
    """A cart was submitted without any lines."""


class ItemUnavailable(OrderError):
    """A menu item exists but is not currently offered."""


class InvalidTransition(OrderError):
    """A status change that the kitchen state machine does not allow."""


class ConstraintViolation(OrderError):
    """
    A write would leave an order total out of step with its line items.

    This signals a programming defect rather than bad user input.
    """
