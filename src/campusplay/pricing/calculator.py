"""Buyer/seller price breakdowns, security deposits and withdrawal checks."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from campusplay.config import get_settings
from campusplay.errors import InvalidInput
from campusplay.money import Numeric, round2, round_whole, to_decimal
from campusplay.pricing.fees import PaymentMethod, fee_rule, parse_payment_method, squad_fee_decimal

logger = logging.getLogger(__name__)

DEFAULT_PAYMENT_METHOD = PaymentMethod.TRANSFER


@dataclass
class PricingBreakdown:
    seller_price: float
    platform_commission: float
    payment_fee: float
    buyer_pays: float
    seller_receives: float
    commission_rate: float
    payment_method: PaymentMethod = DEFAULT_PAYMENT_METHOD


@dataclass
class SecurityDeposit:
    required: float
    amount_to_lock: float


@dataclass
class WithdrawalDecision:
    allowed: bool
    reason: str | None = None


def _resolve_commission_rate(commission_rate: float | None) -> float:
    rate = get_settings().commission_rate if commission_rate is None else commission_rate
    if not 0 <= rate <= 1:
        raise InvalidInput(f"commission rate {rate} is outside 0..1")
    return rate


def calculate_pricing_from_seller_price(
    seller_price: Numeric,
    commission_rate: float | None = None,
    payment_method: PaymentMethod | str = DEFAULT_PAYMENT_METHOD,
) -> PricingBreakdown:
    """Breakdown for a seller's desired price.

    Each term is rounded half-up to 2 dp before ``buyer_pays`` is summed, so
    the totals reconcile with the individually stored ledger columns.
    """

    price = to_decimal(seller_price)
    if price <= 0:
        raise InvalidInput("seller price must be positive")
    rate = _resolve_commission_rate(commission_rate)
    method = parse_payment_method(payment_method)

    commission = round2(price * to_decimal(rate))
    _, capped_fee = squad_fee_decimal(price, method)
    payment_fee = round2(capped_fee)
    buyer_pays = round2(price + commission + payment_fee)
    seller_receives = round2(price - commission)

    return PricingBreakdown(
        seller_price=float(price),
        platform_commission=float(commission),
        payment_fee=float(payment_fee),
        buyer_pays=float(buyer_pays),
        seller_receives=float(seller_receives),
        commission_rate=rate,
        payment_method=method,
    )


def calculate_pricing_from_buyer_price(
    buyer_price: Numeric,
    commission_rate: float | None = None,
    payment_method: PaymentMethod | str = DEFAULT_PAYMENT_METHOD,
) -> PricingBreakdown:
    """Estimate the seller price behind a buyer-facing total.

    A single fee-adjusted pass: the fee is sized on a first estimate, so the
    resulting ``buyer_pays`` can fall short of ``buyer_price`` by the
    difference between the estimated and the final processing fee.
    """

    total = to_decimal(buyer_price)
    if total <= 0:
        raise InvalidInput("buyer price must be positive")
    rate = to_decimal(_resolve_commission_rate(commission_rate))
    rule = fee_rule(payment_method)

    estimate = total / (1 + rate)
    fee = min(estimate * rule.percentage, rule.cap)
    seller_price = round2((total - fee) / (1 + rate))
    if seller_price <= 0:
        raise InvalidInput("buyer price does not cover processing fees")
    return calculate_pricing_from_seller_price(seller_price, float(rate), payment_method)


def calculate_negotiation_pricing(
    offer_price: Numeric,
    commission_rate: float | None = None,
    payment_method: PaymentMethod | str = DEFAULT_PAYMENT_METHOD,
) -> PricingBreakdown:
    return calculate_pricing_from_seller_price(offer_price, commission_rate, payment_method)


def get_security_deposit_amount(amount: Numeric) -> int:
    """Deposit held against a transaction: 5% of ``amount``, whole naira."""

    rate = to_decimal(get_settings().security_deposit_rate)
    return round_whole(to_decimal(amount) * rate)


def calculate_security_deposit_required(currently_locked: Numeric) -> SecurityDeposit:
    required = to_decimal(get_settings().security_deposit_amount)
    to_lock = max(to_decimal(0), required - to_decimal(currently_locked))
    return SecurityDeposit(required=float(required), amount_to_lock=float(to_lock))


def is_withdrawal_allowed(balance: Numeric, amount: Numeric) -> bool:
    return to_decimal(balance) >= to_decimal(amount) and to_decimal(amount) > 0


def check_withdrawal(amount: Numeric, *, balance: Numeric, is_verified: bool) -> WithdrawalDecision:
    """Withdrawal decision with a user-facing reason when refused."""

    if to_decimal(amount) <= 0:
        return WithdrawalDecision(allowed=False, reason="Withdrawal amount must be positive")
    if not is_withdrawal_allowed(balance, amount):
        return WithdrawalDecision(allowed=False, reason="Insufficient balance")
    limit = get_settings().unverified_withdrawal_limit
    if not is_verified and to_decimal(amount) > to_decimal(limit):
        logger.info("Refused unverified withdrawal of %s above limit %s", amount, limit)
        return WithdrawalDecision(
            allowed=False,
            reason=(
                f"Unverified sellers can only withdraw up to ₦{limit:,.0f}. "
                "Please complete verification to withdraw larger amounts."
            ),
        )
    return WithdrawalDecision(allowed=True)
