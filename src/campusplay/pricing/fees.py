"""Squad payment-processor fee table."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from campusplay.errors import InvalidInput
from campusplay.money import Numeric, to_decimal


class PaymentMethod(str, Enum):
    CARD = "CARD"
    TRANSFER = "TRANSFER"
    USSD = "USSD"
    BANK = "BANK"


@dataclass(frozen=True)
class FeeRule:
    percentage: Decimal
    cap: Decimal


@dataclass
class SquadFee:
    fee_percentage: float
    total_fee: float
    capped_fee: float


FEE_TABLE: dict[PaymentMethod, FeeRule] = {
    PaymentMethod.CARD: FeeRule(percentage=Decimal("0.012"), cap=Decimal("1500")),
    PaymentMethod.USSD: FeeRule(percentage=Decimal("0.012"), cap=Decimal("1500")),
    PaymentMethod.TRANSFER: FeeRule(percentage=Decimal("0.0025"), cap=Decimal("1000")),
    PaymentMethod.BANK: FeeRule(percentage=Decimal("0.0025"), cap=Decimal("1000")),
}


def parse_payment_method(method: PaymentMethod | str) -> PaymentMethod:
    """Resolve a method name, refusing anything outside the fee table."""

    try:
        return PaymentMethod(method)
    except ValueError as exc:
        raise InvalidInput(f"unsupported payment method {method!r}") from exc


def fee_rule(method: PaymentMethod | str) -> FeeRule:
    return FEE_TABLE[parse_payment_method(method)]


def squad_fee_decimal(amount: Numeric, method: PaymentMethod | str) -> tuple[Decimal, Decimal]:
    """Return the uncapped and capped fee as exact decimals."""

    rule = fee_rule(method)
    raw = to_decimal(amount) * rule.percentage
    return raw, min(raw, rule.cap)


def break_even_amount(method: PaymentMethod | str) -> float:
    """Smallest amount at which the fee cap starts to bind."""

    rule = fee_rule(method)
    return float(rule.cap / rule.percentage)


def calculate_squad_fee(amount: Numeric, method: PaymentMethod | str) -> SquadFee:
    rule = fee_rule(method)
    if to_decimal(amount) < 0:
        raise InvalidInput("amount must be non-negative")
    raw, capped = squad_fee_decimal(amount, method)
    return SquadFee(
        fee_percentage=float(rule.percentage),
        total_fee=float(raw),
        capped_fee=float(capped),
    )
