"""Caller-facing domain models for payment operations."""

from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Money(BaseModel):
    """Amount in the currency's smallest unit."""

    model_config = ConfigDict(frozen=True)

    amount: int
    currency: str


class Address(BaseModel):
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    zip: Optional[str] = None
    neighborhood: Optional[str] = None


class CreditCard(BaseModel):
    kind: Literal["credit_card"] = "credit_card"
    number: str
    name: str
    month: int
    year: int
    verification_value: Optional[str] = None


class Voucher(BaseModel):
    """Meal/benefit voucher card; the processor also wants the holder's document."""

    kind: Literal["voucher"] = "voucher"
    number: str
    name: str
    month: int
    year: int
    verification_value: Optional[str] = None
    holder_document: Optional[str] = None


PaymentInstrument = Annotated[Union[CreditCard, Voucher], Field(discriminator="kind")]


class TransactionOptions(BaseModel):
    """Per-call options accompanying a payment operation.

    ``billing_address`` takes precedence over ``address`` when building the
    card's billing block; ``shipping_address`` is only sent when present.
    """

    email: Optional[str] = None
    currency: Optional[str] = None
    holder_document: Optional[str] = None
    billing_address: Optional[Address] = None
    address: Optional[Address] = None
    shipping_address: Optional[Address] = None


class GatewayResponse(BaseModel):
    """Uniform result of a single gateway call."""

    success: bool
    message: Optional[str] = None
    params: Dict[str, Any] = Field(default_factory=dict)
    authorization: Optional[str] = None
    avs_code: Optional[str] = None
    cvv_code: Optional[str] = None
    test: bool = False
    error_code: Optional[str] = None
