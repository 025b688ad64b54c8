"""HTTP routes for the rochambeau API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel, Field

from rochambeau.api.runtime import ApiState
from rochambeau.domain.throw import InvalidThrowError

router = APIRouter()


def get_state(request: Request) -> ApiState:
    state = getattr(request.app.state, "api_state", None)
    if state is None:  # pragma: no cover - FastAPI should always initialise state
        raise RuntimeError("API state not initialised")
    return state


ApiStateDep = Annotated[ApiState, Depends(get_state)]


class ThrowsResponse(BaseModel):
    throws: list[str]
    standard: list[str]


class RulesResponse(BaseModel):
    rules: dict[str, list[str]]
    standard: list[str]


class PlayRequest(BaseModel):
    throw: str = Field(min_length=1)


class PlayResponse(BaseModel):
    player_throw: str
    opponent_throw: str
    outcome: str
    message: str
    source: str
    used_fallback: bool


@router.get("/health")
async def health(state: ApiStateDep) -> dict[str, object]:
    return {
        "status": "ok",
        "strategy": state.settings.opponent_strategy,
        "throws": list(state.rules.throws),
    }


@router.get("/throws", response_model=ThrowsResponse)
async def list_throws(state: ApiStateDep) -> ThrowsResponse:
    return ThrowsResponse(throws=list(state.rules.throws), standard=list(state.rules.standard))


@router.get("/rules", response_model=RulesResponse)
async def rules_overview(state: ApiStateDep) -> RulesResponse:
    return RulesResponse(rules=state.rules.as_dict(), standard=list(state.rules.standard))


@router.post("/games/play", response_model=PlayResponse)
async def play(request: PlayRequest, state: ApiStateDep) -> PlayResponse:
    try:
        game_round = await state.play(request.throw)
    except InvalidThrowError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid throw selection: {request.throw}",
        ) from exc
    return PlayResponse.model_validate(game_round.to_dict())
