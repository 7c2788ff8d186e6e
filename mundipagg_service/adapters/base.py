"""Base class for payment processor adapters."""

from abc import ABC, abstractmethod
from typing import Optional

from ..models import GatewayResponse, PaymentInstrument, TransactionOptions


class PaymentAdapter(ABC):
    """Abstract base class for payment processor adapters.

    Every operation sends requests to the processor and returns a
    :class:`GatewayResponse`. Declines and mapped HTTP failures come back as
    unsuccessful responses. Failures the adapter cannot interpret are raised.
    """

    DISPLAY_NAME: str = ""
    HOMEPAGE_URL: str = ""
    DEFAULT_CURRENCY: str = "USD"
    SUPPORTED_COUNTRIES: list[str] = []
    SUPPORTED_CARDTYPES: list[str] = []

    @abstractmethod
    async def purchase(
        self,
        money: int,
        payment: PaymentInstrument,
        options: Optional[TransactionOptions] = None,
    ) -> GatewayResponse:
        """Authorize and settle a payment in one step.

        Args:
            money: Amount in smallest currency unit
            payment: Credit card or voucher to charge
            options: Customer, address and currency details

        Returns:
            Result of the charge, with the charge id as authorization
        """
        pass

    @abstractmethod
    async def authorize(
        self,
        money: int,
        payment: PaymentInstrument,
        options: Optional[TransactionOptions] = None,
    ) -> GatewayResponse:
        """Reserve funds without settling them.

        Args:
            money: Amount in smallest currency unit
            payment: Credit card or voucher to hold funds on
            options: Customer, address and currency details

        Returns:
            Result of the hold, with the charge id as authorization
        """
        pass

    @abstractmethod
    async def capture(
        self,
        authorization: str,
        money: Optional[int] = None,
        options: Optional[TransactionOptions] = None,
    ) -> GatewayResponse:
        """Settle a previously authorized charge.

        Args:
            authorization: Charge id returned by ``authorize``
            money: Amount to capture, where the processor supports it
            options: Additional call options

        Returns:
            Result of the capture
        """
        pass

    @abstractmethod
    async def refund(
        self,
        money: int,
        authorization: str,
        options: Optional[TransactionOptions] = None,
    ) -> GatewayResponse:
        """Refund a settled charge (full or partial)."""
        pass

    @abstractmethod
    async def void(
        self,
        authorization: str,
        options: Optional[TransactionOptions] = None,
    ) -> GatewayResponse:
        """Cancel an authorization or charge."""
        pass

    @abstractmethod
    async def verify(
        self,
        payment: PaymentInstrument,
        options: Optional[TransactionOptions] = None,
    ) -> GatewayResponse:
        """Check that a payment instrument is chargeable.

        Returns:
            Result of the verification attempt
        """
        pass

    def supports_scrubbing(self) -> bool:
        return False

    def scrub(self, transcript: str) -> str:
        raise NotImplementedError("Transcript scrubbing not implemented")
