"""Playback state variants for tracked audio items.

A state is one of five immutable variants. Only ``Playing`` and ``Paused``
carry a position, only ``Recording`` carries an amplitude trace and only
``Error`` carries a failure. An item that never had a state set is
represented by ``None`` and treated as idle.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple, Union


class StateKind(Enum):
    """Tag identifying which variant a playback state is."""

    IDLE = "idle"
    ERROR = "error"
    PLAYING = "playing"
    PAUSED = "paused"
    RECORDING = "recording"


@dataclass(frozen=True)
class Idle:
    """No playback or recording."""

    @property
    def kind(self) -> StateKind:
        return StateKind.IDLE


@dataclass(frozen=True)
class Error:
    """Playback or recording failed.

    Attributes:
        failure: Opaque failure value supplied by the audio engine,
            usually the exception that was raised
    """

    failure: Any

    @property
    def kind(self) -> StateKind:
        return StateKind.ERROR


@dataclass(frozen=True)
class Playing:
    """Playback running at a position.

    Attributes:
        playback_time: Position in milliseconds
        percentage: Position as fraction of the total duration (0-1)
    """

    playback_time: int
    percentage: float

    def __post_init__(self):
        object.__setattr__(self, "playback_time", int(self.playback_time))
        object.__setattr__(self, "percentage", float(self.percentage))

    @property
    def kind(self) -> StateKind:
        return StateKind.PLAYING


@dataclass(frozen=True)
class Paused:
    """Playback suspended at a position.

    Attributes:
        playback_time: Position in milliseconds
        percentage: Position as fraction of the total duration (0-1)
    """

    playback_time: int
    percentage: float

    def __post_init__(self):
        object.__setattr__(self, "playback_time", int(self.playback_time))
        object.__setattr__(self, "percentage", float(self.percentage))

    @property
    def kind(self) -> StateKind:
        return StateKind.PAUSED


@dataclass(frozen=True)
class Recording:
    """Recording in progress.

    Attributes:
        amplitudes: Amplitude samples recorded so far, oldest first
    """

    amplitudes: Tuple[int, ...] = ()

    def __post_init__(self):
        object.__setattr__(
            self, "amplitudes", tuple(int(a) for a in self.amplitudes)
        )

    @property
    def kind(self) -> StateKind:
        return StateKind.RECORDING


PlaybackState = Union[Idle, Error, Playing, Paused, Recording]

IDLE = Idle()


def _unknown_state(state: Any) -> TypeError:
    return TypeError(f"Unknown playback state: {state!r}")


def playback_time_of(state: Optional[PlaybackState]) -> Optional[int]:
    """Get the position in milliseconds carried by a state.

    Args:
        state: Playback state, or None for an item never set

    Returns:
        Position for Playing/Paused, None for every other state
    """
    if isinstance(state, (Playing, Paused)):
        return state.playback_time
    if state is None or isinstance(state, (Idle, Error, Recording)):
        return None
    raise _unknown_state(state)


def percentage_of(state: Optional[PlaybackState]) -> Optional[float]:
    """Get the position fraction carried by a state.

    Args:
        state: Playback state, or None for an item never set

    Returns:
        Percentage for Playing/Paused, None for every other state
    """
    if isinstance(state, (Playing, Paused)):
        return state.percentage
    if state is None or isinstance(state, (Idle, Error, Recording)):
        return None
    raise _unknown_state(state)


def is_active(state: Optional[PlaybackState]) -> bool:
    """Check whether a state counts as playing or recording."""
    if isinstance(state, (Playing, Recording)):
        return True
    if state is None or isinstance(state, (Idle, Error, Paused)):
        return False
    raise _unknown_state(state)
