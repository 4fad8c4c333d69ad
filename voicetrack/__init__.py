"""Playback and recording state tracking for audio messages.

This package keeps one playback state per audio message, notifies
per-item listeners when it changes and tells activity listeners whether
anything is currently playing or recording.
"""

from .playback import (
    IDLE,
    Error,
    Idle,
    Paused,
    PlaybackState,
    PlaybackTracker,
    Playing,
    Recording,
    StateKind,
    create_tracker,
)
from .utils.config import TrackerConfig
from .utils.dispatch import ThreadDispatcher, TkDispatcher

__all__ = [
    "IDLE",
    "Error",
    "Idle",
    "Paused",
    "PlaybackState",
    "PlaybackTracker",
    "Playing",
    "Recording",
    "StateKind",
    "ThreadDispatcher",
    "TkDispatcher",
    "TrackerConfig",
    "create_tracker",
]
