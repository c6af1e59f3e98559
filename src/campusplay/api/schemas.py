"""Pydantic schemas for the CampusPlay API."""

from __future__ import annotations

from pydantic import BaseModel

from campusplay.games.types import DuelWinner, HandRank, WinPattern
from campusplay.pricing.fees import PaymentMethod


class DiceHandRequest(BaseModel):
    dice: list[int]


class HandResponse(BaseModel):
    rank: HandRank
    rank_value: int
    name: str
    tiebreak: list[int]
    score: int


class StakeRequest(BaseModel):
    stake: float = 0.0
    practice: bool = False


class DuelResponse(BaseModel):
    player_dice: list[int]
    ai_dice: list[int]
    player_hand: HandResponse
    ai_hand: HandResponse
    winner: DuelWinner
    rerolls: int
    score: int


class BingoCellSchema(BaseModel):
    phrase: str
    marked: bool = False
    is_free_space: bool = False


class BingoCardSchema(BaseModel):
    grid: list[list[BingoCellSchema]]


class BingoDetectRequest(StakeRequest):
    card: BingoCardSchema


class BingoDetectResponse(BaseModel):
    pattern: WinPattern
    payout: int


class SpinResponse(BaseModel):
    index: int
    multiplier: int
    label: str
    payout: int
    won: bool


class PricingRequest(BaseModel):
    seller_price: float
    commission_rate: float | None = None
    payment_method: str = PaymentMethod.TRANSFER.value


class PricingResponse(BaseModel):
    seller_price: float
    platform_commission: float
    payment_fee: float
    buyer_pays: float
    seller_receives: float
    commission_rate: float
    payment_method: PaymentMethod
    formatted_total: str


class SquadFeeResponse(BaseModel):
    payment_method: PaymentMethod
    fee_percentage: float
    total_fee: float
    capped_fee: float
