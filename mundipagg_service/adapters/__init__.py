"""Adapters for integrating external payment processors."""

from .base import PaymentAdapter
from .exceptions import PaymentError, ValidationError, ConfigurationError, PaymentProcessingError, ResponseError, UnmappedTransportError, MalformedResponseError

__all__ = ["PaymentAdapter", "PaymentError", "ValidationError", "ConfigurationError", "PaymentProcessingError", "ResponseError", "UnmappedTransportError", "MalformedResponseError"]
