"""HTTP transport for the Mundipagg API."""

import base64
import json
import logging
from typing import Any, Dict, Optional

import httpx

from ..exceptions import MalformedResponseError, ResponseError
from .scrubbing import scrub

logger = logging.getLogger(__name__)


class MundipaggTransport:
    """Sends JSON requests with the account's Basic credentials.

    When ``client`` is given it is used as-is and left open; otherwise every
    request gets a short-lived ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        api_key: str,
        timeout: float = 20.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._api_key = api_key
        self.timeout = timeout
        self._client = client

    def headers(self) -> Dict[str, str]:
        token = base64.b64encode(f"{self._api_key}:".encode()).decode()
        return {
            "Authorization": f"Basic {token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def request(
        self, method: str, url: str, payload: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Raises:
            ResponseError: the processor answered with a non-2xx status.
            MalformedResponseError: a 2xx answer whose body is not JSON.
        """
        content = json.dumps(payload) if payload is not None else None
        logger.debug("Mundipagg request %s %s %s", method, url, scrub(content or ""))

        if self._client is not None:
            response = await self._client.request(
                method, url, content=content, headers=self.headers()
            )
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.request(
                    method, url, content=content, headers=self.headers()
                )

        logger.debug("Mundipagg response %s %s", response.status_code, scrub(response.text))

        if not response.is_success:
            raise ResponseError(response.status_code, response.text)

        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                f"Non-JSON response from processor: {response.text[:200]}", response.text
            ) from exc
