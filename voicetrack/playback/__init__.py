"""Playback state tracking."""

from .factory import create_tracker
from .state import (
    IDLE,
    Error,
    Idle,
    Paused,
    PlaybackState,
    Playing,
    Recording,
    StateKind,
)
from .tracker import ActivityListener, Listener, PlaybackTracker

__all__ = [
    "IDLE",
    "ActivityListener",
    "Error",
    "Idle",
    "Listener",
    "Paused",
    "PlaybackState",
    "PlaybackTracker",
    "Playing",
    "Recording",
    "StateKind",
    "create_tracker",
]
