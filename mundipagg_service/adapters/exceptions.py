"""Exceptions raised by payment adapters."""

from typing import Optional


class PaymentError(Exception):
    """Base exception for payment-related errors."""
    pass


class ValidationError(PaymentError):
    """Raised when input validation fails before any request is sent."""
    pass


class ConfigurationError(ValidationError):
    """Raised when an adapter is built without required settings."""
    pass


class PaymentProcessingError(PaymentError):
    """Raised when payment processing fails."""
    pass


class ResponseError(PaymentProcessingError):
    """Raised by the transport when the processor answers with a non-2xx status."""

    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Failed with {status_code}: {body[:200]}")


class UnmappedTransportError(PaymentProcessingError):
    """Raised for HTTP failures that have no locally mapped message."""

    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Unhandled processor response {status_code}")


class MalformedResponseError(PaymentProcessingError):
    """Raised when a processor response cannot be interpreted."""

    def __init__(self, message: str, body: Optional[object] = None) -> None:
        self.body = body
        super().__init__(message)
