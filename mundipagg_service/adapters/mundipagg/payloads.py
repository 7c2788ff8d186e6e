"""Typed request bodies for the Mundipagg charges API.

Each request model dumps to the nested JSON document the processor expects
via :meth:`to_payload`; unset optional fields are left out of the document
rather than sent as ``null``.
"""

from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel

from ...models import Address, CreditCard, Money, PaymentInstrument, TransactionOptions, Voucher
from ..exceptions import ValidationError
from .address import parse_street_address
from .routing import AUTHONLY, CAPTURE, REFUND, SALE, VOID


class _Payload(BaseModel):
    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class AddressBlock(_Payload):
    street: Optional[str] = None
    number: Optional[str] = None
    # Wire name used by the processor for the second address line.
    compliment: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    zip_code: Optional[str] = None
    neighborhood: Optional[str] = None


class CustomerBlock(_Payload):
    email: Optional[str] = None
    name: Optional[str] = None


class CardBlock(_Payload):
    number: str
    holder_name: str
    holder_document: Optional[str] = None
    exp_month: int
    exp_year: int
    cvv: Optional[str] = None
    billing_address: Optional[AddressBlock] = None


class PaymentMethodBlock(_Payload):
    card: CardBlock
    capture: Optional[bool] = None


class PaymentBlock(_Payload):
    payment_method: Literal["credit_card", "voucher"]
    credit_card: Optional[PaymentMethodBlock] = None
    voucher: Optional[PaymentMethodBlock] = None

    def method_block(self) -> PaymentMethodBlock:
        block = getattr(self, self.payment_method)
        if block is None:
            raise ValidationError(f"Payment block has no {self.payment_method} details")
        return block


class RefundRequest(_Payload):
    amount: int
    currency: str


class ChargeRequest(_Payload):
    amount: int
    currency: str
    customer: CustomerBlock
    address: Optional[AddressBlock] = None
    payment: Optional[PaymentBlock] = None


RequestPayload = Union[ChargeRequest, RefundRequest]


def build_address_block(address: Optional[Address], include_neighborhood: bool = False) -> Optional[AddressBlock]:
    if address is None:
        return None
    street, number = parse_street_address(address.address1)
    block = AddressBlock(
        street=street,
        number=number,
        compliment=address.address2 or None,
        city=address.city or None,
        state=address.state or None,
        country=address.country or None,
        zip_code=address.zip or None,
    )
    if include_neighborhood:
        block.neighborhood = address.neighborhood
    return block


def build_billing_address(options: TransactionOptions) -> Optional[AddressBlock]:
    """Billing block for the card, falling back to the general address."""
    return build_address_block(
        options.billing_address or options.address, include_neighborhood=True
    )


def build_card_block(payment: PaymentInstrument, options: TransactionOptions) -> CardBlock:
    card = CardBlock(
        number=payment.number,
        holder_name=payment.name,
        exp_month=payment.month,
        exp_year=payment.year,
        cvv=payment.verification_value,
        billing_address=build_billing_address(options),
    )
    if payment.kind == "voucher":
        card.holder_document = payment.holder_document or options.holder_document
    return card


def build_payment_block(payment: PaymentInstrument, options: TransactionOptions) -> PaymentBlock:
    method = PaymentMethodBlock(card=build_card_block(payment, options))
    if payment.kind == "credit_card":
        return PaymentBlock(payment_method="credit_card", credit_card=method)
    if payment.kind == "voucher":
        return PaymentBlock(payment_method="voucher", voucher=method)
    raise ValidationError(f"Unsupported payment instrument: {payment.kind}")


def build_charge_request(
    money: Money,
    payment: Union[CreditCard, Voucher],
    options: TransactionOptions,
) -> ChargeRequest:
    return ChargeRequest(
        amount=money.amount,
        currency=money.currency,
        customer=CustomerBlock(email=options.email, name=payment.name),
        address=build_address_block(options.shipping_address),
        payment=build_payment_block(payment, options),
    )


def build_refund_request(money: Money) -> RefundRequest:
    return RefundRequest(amount=money.amount, currency=money.currency)


def apply_capture_flag(request: ChargeRequest) -> ChargeRequest:
    """Ask the processor to hold the funds without settling them.

    The flag goes on the payment-method object (``payment.voucher`` or
    ``payment.credit_card``), next to ``card`` rather than inside it.
    """
    if request.payment is None:
        raise ValidationError("Capture flag requires a payment block")
    request.payment.method_block().capture = False
    return request


def build_payload(
    action: str,
    money: Optional[Money] = None,
    payment: Optional[Union[CreditCard, Voucher]] = None,
    options: Optional[TransactionOptions] = None,
) -> Optional[RequestPayload]:
    """Build the request body for ``action``; capture and void carry none."""
    options = options or TransactionOptions()

    if action in (CAPTURE, VOID):
        return None

    if money is None:
        raise ValidationError(f"An amount is required to {action}")

    if action == REFUND:
        return build_refund_request(money)

    if action in (SALE, AUTHONLY):
        if payment is None:
            raise ValidationError(f"A payment instrument is required to {action}")
        request = build_charge_request(money, payment, options)
        if action == AUTHONLY:
            apply_capture_flag(request)
        return request

    raise ValidationError(f"Unknown action: {action}")
