"""Action to endpoint routing for the Mundipagg charges API."""

from typing import NamedTuple, Optional

from ..exceptions import ValidationError

SALE = "sale"
AUTHONLY = "authonly"
CAPTURE = "capture"
REFUND = "refund"
VOID = "void"

ACTIONS = (SALE, AUTHONLY, CAPTURE, REFUND, VOID)
ACTIONS_REQUIRING_AUTHORIZATION = (CAPTURE, REFUND, VOID)

CHARGES_PATH = "charges/"


class Route(NamedTuple):
    method: str
    path: str


def route(action: str, authorization: Optional[str] = None) -> Route:
    """Return the HTTP method and path (relative to the API base) for ``action``.

    Raises:
        ValidationError: unknown action, or a capture/refund/void without an
            authorization to act on.
    """
    if action not in ACTIONS:
        raise ValidationError(f"Unknown action: {action}")

    if action in (SALE, AUTHONLY):
        return Route("POST", CHARGES_PATH)

    if not authorization:
        raise ValidationError(f"An authorization is required to {action} a charge")

    path = f"{CHARGES_PATH}{authorization}/"
    if action == CAPTURE:
        return Route("POST", path + "capture/")
    if action == VOID:
        return Route("DELETE", path)
    return Route("POST", path)
