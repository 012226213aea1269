"""Ten-pin bowling game: frame state machine and score calculation."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple, Union

from .. import config

logger = logging.getLogger(__name__)

PINS = 10
FRAMES = 10


class InvalidRollError(ValueError):
    """Raised when a roll cannot be recorded; the game is left unchanged."""

    def __init__(self, detail: str, *, pins: Any = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.pins = pins
        self.index: Optional[int] = None


def _rule_flag(cfg: Mapping[str, Any], key: str, default: bool) -> bool:
    value = cfg.get(key, default)
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        parsed = config.parse_flag(value)
        if parsed is not None:
            return parsed
    raise ValueError(f"{key} must be a boolean (got {value!r})")


@dataclass(frozen=True)
class ScoringRules:
    enforce_frame_overflow: bool = True
    tenth_frame_always_three_rolls: bool = True

    @classmethod
    def from_config(cls, cfg: Optional[Mapping[str, Any]] = None) -> ScoringRules:
        """Build rules from a ruleset config using camelCase keys.

        Missing keys fall back to the environment defaults in ``config``.
        Values may be booleans or the strings accepted for environment
        flags (``"true"``, ``"off"``, ...); anything else raises
        ``ValueError``.
        """

        cfg = cfg or {}
        return cls(
            enforce_frame_overflow=_rule_flag(
                cfg, "enforceFrameOverflow", config.BOWLING_ENFORCE_FRAME_OVERFLOW
            ),
            tenth_frame_always_three_rolls=_rule_flag(
                cfg,
                "tenthFrameAlwaysThreeRolls",
                config.BOWLING_TENTH_FRAME_ALWAYS_THREE_ROLLS,
            ),
        )

    def to_config(self) -> dict:
        return {
            "enforceFrameOverflow": self.enforce_frame_overflow,
            "tenthFrameAlwaysThreeRolls": self.tenth_frame_always_three_rolls,
        }


class FrameState(enum.Enum):
    EMPTY = "empty"
    ONE_ROLL = "one_roll"
    STRIKE = "strike"
    SPARE = "spare"
    OPEN = "open"


_FINISHED_STATES = {FrameState.STRIKE, FrameState.SPARE, FrameState.OPEN}


class Frame:
    """One of frames 1-9: a strike ends it, otherwise two rolls do."""

    def __init__(self, rules: ScoringRules) -> None:
        self._rules = rules
        self._rolls: List[int] = []
        self.state = FrameState.EMPTY

    @property
    def rolls(self) -> Tuple[int, ...]:
        return tuple(self._rolls)

    @property
    def pinfall(self) -> int:
        return sum(self._rolls)

    @property
    def is_strike(self) -> bool:
        return self.state is FrameState.STRIKE

    @property
    def is_spare(self) -> bool:
        return self.state is FrameState.SPARE

    @property
    def is_finished(self) -> bool:
        return self.state in _FINISHED_STATES

    @property
    def bonus_rolls(self) -> int:
        """Number of following rolls this frame pulls into its score."""
        if self.is_strike:
            return 2
        if self.is_spare:
            return 1
        return 0

    def roll(self, pins: int) -> None:
        if self.is_finished:
            return
        if self.state is FrameState.EMPTY:
            self._rolls.append(pins)
            self.state = FrameState.STRIKE if pins == PINS else FrameState.ONE_ROLL
            return

        first = self._rolls[0]
        if self._rules.enforce_frame_overflow and first + pins > PINS:
            raise InvalidRollError(
                f"frame pinfall cannot exceed {PINS} (already {first}, rolled {pins})",
                pins=pins,
            )
        self._rolls.append(pins)
        self.state = FrameState.SPARE if first + pins == PINS else FrameState.OPEN


class FinalFrame:
    """The tenth frame: up to three rolls, no bonus pulled from later frames.

    The third roll is only granted after a strike or a spare. With
    ``tenth_frame_always_three_rolls`` disabled, two opening strikes close
    the frame early.
    """

    def __init__(self, rules: ScoringRules) -> None:
        self._rules = rules
        self._rolls: List[int] = []

    @property
    def rolls(self) -> Tuple[int, ...]:
        return tuple(self._rolls)

    @property
    def pinfall(self) -> int:
        return sum(self._rolls)

    # The tenth frame's strikes and spares are paid by its own bonus rolls.
    is_strike = False
    is_spare = False
    bonus_rolls = 0

    @property
    def is_finished(self) -> bool:
        rolls = self._rolls
        if len(rolls) >= 3:
            return True
        if len(rolls) < 2:
            return False
        if rolls[0] == PINS:
            return rolls[1] == PINS and not self._rules.tenth_frame_always_three_rolls
        return rolls[0] + rolls[1] < PINS

    def _standing_pins(self) -> int:
        # Pins are reset after every strike or spare.
        standing = PINS
        for pins in self._rolls:
            standing -= pins
            if standing == 0:
                standing = PINS
        return standing

    def roll(self, pins: int) -> None:
        if self.is_finished:
            return
        if self._rules.enforce_frame_overflow and pins > self._standing_pins():
            raise InvalidRollError(
                f"only {self._standing_pins()} pins standing (rolled {pins})",
                pins=pins,
            )
        self._rolls.append(pins)


class Game:
    """A single bowler's game of ten frames.

    Rolls are fed one at a time through :meth:`roll`; :meth:`score` may be
    read at any point. Rolls after the tenth frame is finished are ignored.
    Instances are not thread-safe.
    """

    def __init__(self, rules: Optional[ScoringRules] = None) -> None:
        self.rules = rules or ScoringRules.from_config()
        self._frames: Tuple[Union[Frame, FinalFrame], ...] = tuple(
            [Frame(self.rules) for _ in range(FRAMES - 1)] + [FinalFrame(self.rules)]
        )
        self.current_frame_index = 0

    @property
    def frames(self) -> Tuple[Union[Frame, FinalFrame], ...]:
        return self._frames

    @property
    def rolls(self) -> List[int]:
        return [pins for frame in self._frames for pins in frame.rolls]

    @property
    def is_finished(self) -> bool:
        return self.current_frame_index >= FRAMES

    def roll(self, pins: int) -> None:
        # bool is a subclass of int; reject it explicitly
        if isinstance(pins, bool) or not isinstance(pins, int):
            raise InvalidRollError(f"pins must be an integer (got {pins!r})", pins=pins)
        if not 0 <= pins <= PINS:
            raise InvalidRollError(f"pins must be between 0 and {PINS} (got {pins})", pins=pins)
        if self.is_finished:
            logger.debug("Ignoring roll of %d pins; game is over", pins)
            return

        frame = self._frames[self.current_frame_index]
        try:
            frame.roll(pins)
        except InvalidRollError:
            logger.debug(
                "Rejected roll of %d pins in frame %d", pins, self.current_frame_index + 1
            )
            raise
        if frame.is_finished:
            self.current_frame_index += 1

    def _rolls_after(self, index: int, count: int) -> List[int]:
        following: List[int] = []
        for nxt in range(index + 1, FRAMES):
            following.extend(self._frames[nxt].rolls)
            if len(following) >= count:
                break
        return following[:count]

    def frame_score(self, index: int) -> int:
        frame = self._frames[index]
        return frame.pinfall + sum(self._rolls_after(index, frame.bonus_rolls))

    def score(self) -> int:
        return sum(self.frame_score(i) for i in range(FRAMES))

    def running_totals(self) -> List[int]:
        totals: List[int] = []
        total = 0
        for i in range(FRAMES):
            total += self.frame_score(i)
            totals.append(total)
        return totals
