"""Wiring of a playback tracker with its dispatcher."""

from typing import Optional

from ..utils.config import DISPATCHER_THREAD, DISPATCHER_TK, TrackerConfig
from ..utils.dispatch import ThreadDispatcher, TkDispatcher
from .tracker import PlaybackTracker


def create_tracker(
    config: Optional[TrackerConfig] = None, root=None
) -> PlaybackTracker:
    """Create a playback tracker.

    The tracker is meant to be created once at startup and handed to the
    audio engine and the UI.

    Args:
        config: Tracker configuration, defaults to TrackerConfig.from_env()
        root: Tk root window; when given, listeners run in its main loop

    Returns:
        PlaybackTracker with its dispatcher ready to use

    Raises:
        ValueError: If a tk dispatcher is configured without a root
    """
    if config is None:
        config = TrackerConfig.from_env()

    if root is not None:
        dispatcher = TkDispatcher(root)
    elif config.dispatcher == DISPATCHER_TK:
        raise ValueError("A Tk root window is required for the tk dispatcher")
    elif config.dispatcher == DISPATCHER_THREAD:
        dispatcher = ThreadDispatcher(
            name=config.thread_name, join_timeout=config.join_timeout
        )
        dispatcher.start()
    else:
        raise ValueError(f"Unknown dispatcher '{config.dispatcher}'")

    return PlaybackTracker(dispatcher, debug=config.debug)
