# backend/bowling_score/routers/scores.py
from fastapi import APIRouter

from ..exceptions import InvalidRoll
from ..schemas import RulesOut, ScoreOut, ScoreRequest
from ..scoring import bowling
from ..scoring.game import InvalidRollError, ScoringRules

# Resource-only prefix
router = APIRouter(prefix="/bowling", tags=["bowling"])


def _rules_out(rules: ScoringRules) -> RulesOut:
    return RulesOut(
        enforce_frame_overflow=rules.enforce_frame_overflow,
        tenth_frame_always_three_rolls=rules.tenth_frame_always_three_rolls,
    )


# GET /api/v0/bowling/rules
@router.get("/rules", response_model=RulesOut)
def get_default_rules() -> RulesOut:
    return _rules_out(ScoringRules.from_config())


# POST /api/v0/bowling/score
@router.post("/score", response_model=ScoreOut)
def score_game(body: ScoreRequest) -> ScoreOut:
    config = body.rules.to_config() if body.rules else {}
    try:
        summary = bowling.score_rolls(body.rolls, config)
    except InvalidRollError as exc:
        raise InvalidRoll(exc.detail, exc.index) from exc

    return ScoreOut(**summary)
