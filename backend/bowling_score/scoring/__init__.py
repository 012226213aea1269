"""Scoring engine for ten-pin bowling."""

from . import bowling, game
from .game import FinalFrame, Frame, FrameState, Game, InvalidRollError, ScoringRules

__all__ = [
    "bowling",
    "game",
    "FinalFrame",
    "Frame",
    "FrameState",
    "Game",
    "InvalidRollError",
    "ScoringRules",
]
