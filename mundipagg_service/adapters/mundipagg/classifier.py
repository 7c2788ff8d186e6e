"""Turn Mundipagg charge responses into :class:`GatewayResponse` objects."""

from typing import Any, Dict, Optional

import pydantic

from ...models import GatewayResponse
from ..exceptions import MalformedResponseError, UnmappedTransportError

SUCCESS_STATUSES = frozenset({"pending", "paid", "processing", "voided"})

# No catalog of processor error codes is kept; failed responses carry this.
UNMAPPED_ERROR_CODE = "unmapped"

STATUS_CODE_MESSAGES = {
    400: "Invalid request",
    401: "Invalid API key",
    404: "The requested resource does not exist",
    412: "Valid parameters but request failed",
    422: "Invalid parameters",
    500: "An internal error occurred",
}


def _last_transaction(body: Dict[str, Any]) -> Dict[str, Any]:
    last_transaction = body.get("last_transaction")
    return last_transaction if isinstance(last_transaction, dict) else {}


def success_from(body: Dict[str, Any]) -> bool:
    return body.get("status") in SUCCESS_STATUSES


def message_from(body: Dict[str, Any]) -> str:
    message = body.get("message")
    if message is not None:
        return message
    message = _last_transaction(body).get("acquirer_message")
    if message is None:
        raise MalformedResponseError(
            "Response has neither message nor last_transaction.acquirer_message", body
        )
    return message


def authorization_from(body: Dict[str, Any]) -> Optional[str]:
    return body.get("id")


def error_code_from(body: Dict[str, Any]) -> Optional[str]:
    if success_from(body):
        return None
    return UNMAPPED_ERROR_CODE


def classify_body(body: Any, test: bool = False) -> GatewayResponse:
    """Classify a decoded JSON body from a 2xx response."""
    if not isinstance(body, dict):
        raise MalformedResponseError("Expected a JSON object from the processor", body)

    last_transaction = _last_transaction(body)
    try:
        return GatewayResponse(
            success=success_from(body),
            message=message_from(body),
            params=body,
            authorization=authorization_from(body),
            avs_code=last_transaction.get("avs_code"),
            cvv_code=last_transaction.get("cvv_code"),
            test=test,
            error_code=error_code_from(body),
        )
    except pydantic.ValidationError as exc:
        raise MalformedResponseError(f"Unexpected field types in processor response: {exc}", body) from exc


def classify_failure(status_code: int, body_text: str = "", test: bool = False) -> GatewayResponse:
    """Map a failed HTTP exchange to a failed response.

    Only the known status codes are mapped, and the body is ignored for them.
    Anything else raises :class:`UnmappedTransportError`.
    """
    message = STATUS_CODE_MESSAGES.get(status_code)
    if message is None:
        raise UnmappedTransportError(status_code, body_text)
    return GatewayResponse(
        success=False,
        message=message,
        params={},
        test=test,
        error_code=UNMAPPED_ERROR_CODE,
    )
