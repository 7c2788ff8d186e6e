"""Mundipagg payment processor adapter."""

import logging
from typing import Optional

import httpx

from ...models import GatewayResponse, Money, PaymentInstrument, TransactionOptions
from ..base import PaymentAdapter
from ..exceptions import ConfigurationError, PaymentError, ResponseError
from . import scrubbing
from .classifier import classify_body, classify_failure
from .payloads import RequestPayload, build_payload
from .routing import AUTHONLY, CAPTURE, REFUND, SALE, VOID, route
from .transport import MundipaggTransport

logger = logging.getLogger(__name__)


class MundipaggAdapter(PaymentAdapter):
    """Adapter for the Mundipagg Core v1 charges API.

    Each operation sends exactly one request (``verify`` sends at most two)
    and maps the answer onto a :class:`GatewayResponse`. The sandbox and
    production APIs share the same URL; the account's key decides which one
    is used.
    """

    TEST_URL = "https://api.mundipagg.com/core/v1/"
    LIVE_URL = "https://api.mundipagg.com/core/v1/"

    DISPLAY_NAME = "Mundipagg"
    HOMEPAGE_URL = "https://www.mundipagg.com/"
    DEFAULT_CURRENCY = "USD"
    SUPPORTED_COUNTRIES = ["US"]
    SUPPORTED_CARDTYPES = ["visa", "master", "american_express", "discover"]

    VERIFY_AMOUNT = 100

    def __init__(
        self,
        api_key: str,
        enable_test_mode: bool = False,
        default_currency: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = 20.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError("Mundipagg adapter requires an api_key")
        self.test_mode = enable_test_mode
        self.default_currency = default_currency or self.DEFAULT_CURRENCY
        self.base_url = base_url or (self.TEST_URL if enable_test_mode else self.LIVE_URL)
        self._transport = MundipaggTransport(api_key, timeout=timeout, client=client)

    def _money(self, money: int, options: TransactionOptions) -> Money:
        return Money(amount=money, currency=options.currency or self.default_currency)

    def url_for(self, path: str) -> str:
        return self.base_url.rstrip("/") + "/" + path

    async def _commit(
        self,
        action: str,
        payload: Optional[RequestPayload],
        authorization: Optional[str] = None,
    ) -> GatewayResponse:
        method, path = route(action, authorization)
        url = self.url_for(path)
        body = payload.to_payload() if payload is not None else None

        try:
            parsed = await self._transport.request(method, url, body)
        except ResponseError as exc:
            logger.warning("Mundipagg %s failed with HTTP %s", action, exc.status_code)
            return classify_failure(exc.status_code, exc.body, test=self.test_mode)

        response = classify_body(parsed, test=self.test_mode)
        if not response.success:
            logger.warning(
                "Mundipagg %s declined: %s (status=%s)",
                action, response.message, parsed.get("status"),
            )
        return response

    async def purchase(
        self,
        money: int,
        payment: PaymentInstrument,
        options: Optional[TransactionOptions] = None,
    ) -> GatewayResponse:
        options = options or TransactionOptions()
        payload = build_payload(SALE, self._money(money, options), payment, options)
        return await self._commit(SALE, payload)

    async def authorize(
        self,
        money: int,
        payment: PaymentInstrument,
        options: Optional[TransactionOptions] = None,
    ) -> GatewayResponse:
        options = options or TransactionOptions()
        payload = build_payload(AUTHONLY, self._money(money, options), payment, options)
        return await self._commit(AUTHONLY, payload)

    async def capture(
        self,
        authorization: str,
        money: Optional[int] = None,
        options: Optional[TransactionOptions] = None,
    ) -> GatewayResponse:
        # Mundipagg always captures the full authorized amount.
        return await self._commit(CAPTURE, None, authorization)

    async def refund(
        self,
        money: int,
        authorization: str,
        options: Optional[TransactionOptions] = None,
    ) -> GatewayResponse:
        options = options or TransactionOptions()
        payload = build_payload(REFUND, self._money(money, options), options=options)
        return await self._commit(REFUND, payload, authorization)

    async def void(
        self,
        authorization: str,
        options: Optional[TransactionOptions] = None,
    ) -> GatewayResponse:
        return await self._commit(VOID, None, authorization)

    async def verify(
        self,
        payment: PaymentInstrument,
        options: Optional[TransactionOptions] = None,
    ) -> GatewayResponse:
        """Authorize a nominal amount, then void it.

        The result is always the authorization's. The void is only sent when
        the authorization succeeded, and its outcome is not reported.
        """
        response = await self.authorize(self.VERIFY_AMOUNT, payment, options)
        if not response.success or not response.authorization:
            return response

        try:
            void_response = await self.void(response.authorization, options)
        except (PaymentError, httpx.HTTPError) as exc:
            logger.warning(
                "Void of verification charge %s failed: %s", response.authorization, exc
            )
        else:
            if not void_response.success:
                logger.warning(
                    "Void of verification charge %s was declined: %s",
                    response.authorization, void_response.message,
                )
        return response

    def supports_scrubbing(self) -> bool:
        return True

    def scrub(self, transcript: str) -> str:
        return scrubbing.scrub(transcript)


__all__ = ["MundipaggAdapter"]
