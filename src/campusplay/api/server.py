"""FastAPI backend exposing the CampusPlay engines as JSON."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import FastAPI, HTTPException, Query, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from campusplay import __version__
from campusplay.api.schemas import (
    BingoCardSchema,
    BingoCellSchema,
    BingoDetectRequest,
    BingoDetectResponse,
    DiceHandRequest,
    DuelResponse,
    HandResponse,
    PricingRequest,
    PricingResponse,
    SpinResponse,
    SquadFeeResponse,
    StakeRequest,
)
from campusplay.errors import DuelUnresolved, InvalidInput
from campusplay.games import bingo, dice, wheel
from campusplay.games.types import BingoCard, BingoCell, HandResult
from campusplay.money import format_naira
from campusplay.pricing.calculator import calculate_pricing_from_seller_price
from campusplay.pricing.fees import calculate_squad_fee, parse_payment_method

logger = logging.getLogger(__name__)

app = FastAPI(
    title="CampusPlay API",
    version=__version__,
    description="Mini-game outcomes and marketplace pricing for the campus marketplace.",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidInput)
async def invalid_input_handler(request: Request, exc: InvalidInput) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
def version() -> dict[str, str]:
    return {"name": "campusplay-core", "version": __version__}


def _hand_response(hand: HandResult) -> HandResponse:
    return HandResponse(
        rank=hand.rank,
        rank_value=hand.rank_value,
        name=hand.name,
        tiebreak=list(hand.tiebreak),
        score=dice.hand_score(hand),
    )


@app.post("/games/dice/evaluate", response_model=HandResponse)
def evaluate_dice(payload: DiceHandRequest) -> HandResponse:
    return _hand_response(dice.evaluate_dice_hand(payload.dice))


@app.post("/games/dice/duel", response_model=DuelResponse)
def dice_duel() -> DuelResponse:
    try:
        result = dice.play_duel()
    except DuelUnresolved as exc:  # pragma: no cover - needs a long run of ties
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    return DuelResponse(
        player_dice=result.player_dice,
        ai_dice=result.ai_dice,
        player_hand=_hand_response(result.player_hand),
        ai_hand=_hand_response(result.ai_hand),
        winner=result.winner,
        rerolls=result.rerolls,
        score=result.score,
    )


def _card_to_schema(card: BingoCard) -> BingoCardSchema:
    return BingoCardSchema(
        grid=[
            [BingoCellSchema(phrase=c.phrase, marked=c.marked, is_free_space=c.is_free_space) for c in row]
            for row in card.grid
        ]
    )


def _schema_to_card(schema: BingoCardSchema) -> BingoCard:
    return BingoCard(
        grid=[
            [BingoCell(phrase=c.phrase, marked=c.marked, is_free_space=c.is_free_space) for c in row]
            for row in schema.grid
        ]
    )


@app.post("/games/bingo/card", response_model=BingoCardSchema)
def bingo_card() -> BingoCardSchema:
    return _card_to_schema(bingo.generate_bingo_card())


@app.get("/games/bingo/calls")
def bingo_calls() -> dict[str, list[str]]:
    return {"calls": bingo.generate_call_sequence()}


@app.post("/games/bingo/detect", response_model=BingoDetectResponse)
def bingo_detect(payload: BingoDetectRequest) -> BingoDetectResponse:
    pattern = bingo.detect_win_pattern(_schema_to_card(payload.card))
    return BingoDetectResponse(
        pattern=pattern,
        payout=bingo.pattern_payout(pattern, payload.stake, payload.practice),
    )


@app.post("/games/wheel/spin", response_model=SpinResponse)
def wheel_spin(payload: StakeRequest) -> SpinResponse:
    outcome = wheel.select_wheel_segment()
    return SpinResponse(
        index=outcome.index,
        multiplier=outcome.multiplier,
        label=outcome.label,
        payout=wheel.spin_payout(payload.stake, outcome.multiplier),
        won=wheel.is_winning_multiplier(outcome.multiplier),
    )


@app.post("/pricing/quote", response_model=PricingResponse)
def pricing_quote(payload: PricingRequest) -> PricingResponse:
    breakdown = calculate_pricing_from_seller_price(
        payload.seller_price,
        payload.commission_rate,
        payload.payment_method,
    )
    return PricingResponse(
        seller_price=breakdown.seller_price,
        platform_commission=breakdown.platform_commission,
        payment_fee=breakdown.payment_fee,
        buyer_pays=breakdown.buyer_pays,
        seller_receives=breakdown.seller_receives,
        commission_rate=breakdown.commission_rate,
        payment_method=breakdown.payment_method,
        formatted_total=format_naira(breakdown.buyer_pays),
    )


AmountQuery = Annotated[float, Query()]


@app.get("/pricing/fees/{payment_method}", response_model=SquadFeeResponse)
def squad_fee(payment_method: str, amount: AmountQuery) -> SquadFeeResponse:
    method = parse_payment_method(payment_method)
    fee = calculate_squad_fee(amount, method)
    return SquadFeeResponse(
        payment_method=method,
        fee_percentage=fee.fee_percentage,
        total_fee=fee.total_fee,
        capped_fee=fee.capped_fee,
    )
