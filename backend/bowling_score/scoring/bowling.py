"""Ten-pin bowling scoring engine.

Wraps :class:`~.game.Game` in the ``init_state`` / ``apply`` / ``summary``
contract shared by the event-driven scoring engines.
"""
from dataclasses import asdict
from typing import Dict, Iterable, Optional

from .game import Game, InvalidRollError, ScoringRules


def init_state(config: Dict) -> Dict:
    rules = ScoringRules.from_config(config)
    return {
        "config": rules.to_config(),
        "rules": rules,
        "game": Game(rules),
    }


def apply(event: Dict, state: Dict) -> Dict:
    if event.get("type") != "ROLL":
        raise ValueError("invalid bowling event")
    state["game"].roll(event.get("pins"))
    return state


def summary(state: Dict) -> Dict:
    game: Game = state["game"]
    return {
        "frames": [list(f.rolls) for f in game.frames],
        "scores": [game.frame_score(i) for i in range(len(game.frames))],
        "running": game.running_totals(),
        "total": game.score(),
        "finished": game.is_finished,
        "current_frame": None if game.is_finished else game.current_frame_index + 1,
        "rules": asdict(state["rules"]),
    }


def score_rolls(rolls: Iterable[int], config: Optional[Dict] = None) -> Dict:
    """Replay ``rolls`` into a fresh game and return its summary.

    An :class:`InvalidRollError` raised along the way carries the zero-based
    ``index`` of the offending roll.
    """

    state = init_state(config or {})
    for index, pins in enumerate(rolls):
        try:
            state = apply({"type": "ROLL", "pins": pins}, state)
        except InvalidRollError as exc:
            exc.index = index
            raise
    return summary(state)
