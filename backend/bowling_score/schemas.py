from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class RulesIn(BaseModel):
    """Optional per-request override of the default scoring rules."""

    enforce_frame_overflow: Optional[bool] = None
    tenth_frame_always_three_rolls: Optional[bool] = None

    model_config = ConfigDict(extra="forbid")

    def to_config(self) -> dict:
        cfg = {}
        if self.enforce_frame_overflow is not None:
            cfg["enforceFrameOverflow"] = self.enforce_frame_overflow
        if self.tenth_frame_always_three_rolls is not None:
            cfg["tenthFrameAlwaysThreeRolls"] = self.tenth_frame_always_three_rolls
        return cfg


class RulesOut(BaseModel):
    enforce_frame_overflow: bool
    tenth_frame_always_three_rolls: bool


class ScoreRequest(BaseModel):
    rolls: List[int] = Field(default_factory=list, max_length=64)
    rules: Optional[RulesIn] = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("rolls", mode="before")
    @classmethod
    def _reject_booleans(cls, value):
        # Reject booleans explicitly (bool is a subclass of int in Python)
        if isinstance(value, list) and any(isinstance(v, bool) for v in value):
            raise ValueError("rolls must be integers (not booleans)")
        return value


class ScoreOut(BaseModel):
    frames: List[List[int]]
    scores: List[int]
    running: List[int]
    total: int
    finished: bool
    current_frame: Optional[int] = None
    rules: RulesOut
