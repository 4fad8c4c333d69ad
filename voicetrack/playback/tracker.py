"""Playback tracker for audio messages.

Keeps the playback or recording state of every audio item, enforces that
only one item plays at a time and notifies listeners through a dispatcher.

Set environment variable VOICETRACK_DEBUG=1 to print state changes.
"""

import threading
from collections import deque
from typing import Callable, Deque, Dict, List, Optional

from ..constants import TrackerConstants
from ..utils.config import debug_enabled
from .state import (
    IDLE,
    Error,
    Paused,
    PlaybackState,
    Playing,
    Recording,
    is_active,
    percentage_of,
    playback_time_of,
)

Listener = Callable[[PlaybackState], None]
ActivityListener = Callable[[bool], None]


class PlaybackTracker:
    """Tracks playback state per audio item and notifies listeners.

    Mutations may be called from any thread. The state map is updated
    synchronously, while listener callbacks are posted to the dispatcher
    and run there in call order. Queries read the map directly.

    Each item has at most one listener; tracking an item again replaces
    its listener. Activity listeners receive True whenever any item is
    playing or recording, False otherwise, after every state change.
    """

    RECORDING_ID = TrackerConstants.RECORDING_ID

    def __init__(self, dispatcher, debug: Optional[bool] = None):
        """Initialize the tracker.

        Args:
            dispatcher: Object with a post(callback) method running
                callbacks on the UI context
            debug: Print state changes, defaults to VOICETRACK_DEBUG
        """
        self.dispatcher = dispatcher
        self.debug = debug_enabled() if debug is None else debug

        self._lock = threading.RLock()
        self._listeners: Dict[str, Listener] = {}
        self._activity_listeners: List[ActivityListener] = []
        self._states: Dict[str, PlaybackState] = {}
        # Deliveries in the order their states were written
        self._pending: Deque[Callable[[], None]] = deque()

    # Registration

    def track_activity(self, listener: ActivityListener) -> None:
        """Register a listener for the playing-or-recording flag."""
        with self._lock:
            self._activity_listeners.append(listener)

    def untrack_activity(self, listener: ActivityListener) -> None:
        """Remove an activity listener. No-op if it is not registered."""
        with self._lock:
            if listener in self._activity_listeners:
                self._activity_listeners.remove(listener)

    def track(self, item_id: str, listener: Listener) -> None:
        """Register the listener for an item and replay its current state.

        Args:
            item_id: Audio item identifier
            listener: Callback receiving the item's states
        """
        with self._lock:
            self._listeners[item_id] = listener
            current_state = self._states.get(item_id, IDLE)
            self._pending.append(lambda: listener(current_state))
        self._post_deliveries(1)

    def untrack(self, item_id: str) -> None:
        """Remove the listener for an item. Its state is kept."""
        with self._lock:
            self._listeners.pop(item_id, None)

    def unregister_listeners(self) -> None:
        """Reset every item listener to idle and drop them all.

        Listeners are called synchronously, before this method returns.
        Activity listeners and states are left untouched.
        """
        with self._lock:
            for listener in list(self._listeners.values()):
                listener(IDLE)
            self._listeners.clear()

    # Delivery

    def _write_state(self, item_id: str, state: PlaybackState) -> None:
        """Store a state and queue its delivery. Caller holds the lock."""
        self._states[item_id] = state
        playing_or_recording = any(is_active(s) for s in self._states.values())
        if self.debug:
            print(
                f"{TrackerConstants.LOG_PREFIX} {item_id}: {state} "
                f"(active={playing_or_recording})"
            )
        self._pending.append(
            lambda: self._deliver(item_id, state, playing_or_recording)
        )

    def _post_deliveries(self, count: int) -> None:
        """Post one delivery callback per queued delivery.

        Must be called without holding the lock: posting from a worker
        thread waits for the UI thread, which takes the lock to deliver.
        """
        for _ in range(count):
            self.dispatcher.post(self._run_next_delivery)

    def _run_next_delivery(self) -> None:
        """Run the oldest queued delivery. Runs on the dispatcher."""
        with self._lock:
            if not self._pending:
                return
            delivery = self._pending.popleft()
        delivery()

    def _deliver(
        self, item_id: str, state: PlaybackState, playing_or_recording: bool
    ) -> None:
        """Notify listeners about one state change."""
        with self._lock:
            listener = self._listeners.get(item_id)
            activity_listeners = list(self._activity_listeners)

        if listener is not None:
            listener(state)
        for activity_listener in activity_listeners:
            activity_listener(playing_or_recording)

    # Mutations

    def _set_state(self, item_id: str, state: PlaybackState) -> None:
        """Set state and notify the listeners."""
        with self._lock:
            self._write_state(item_id, state)
        self._post_deliveries(1)

    def _pause_locked(self, item_id: str) -> bool:
        """Pause a playing item. Caller holds the lock."""
        state = self._states.get(item_id)
        if isinstance(state, Playing):
            self._write_state(item_id, Paused(state.playback_time, state.percentage))
            return True
        return False

    def start_playback(self, item_id: str) -> None:
        """Start playing an item from its last known position.

        Any other item currently playing is reset to idle.
        """
        with self._lock:
            playback_time = self.get_playback_time(item_id)
            if playback_time is None:
                playback_time = TrackerConstants.DEFAULT_PLAYBACK_TIME_MS
            percentage = self.get_percentage(item_id)
            if percentage is None:
                percentage = TrackerConstants.DEFAULT_PERCENTAGE
            self._write_state(item_id, Playing(playback_time, percentage))
            written = 1

            # Only one item plays at a time. Other items lose their position
            # instead of being paused.
            for key, state in list(self._states.items()):
                if key != item_id and isinstance(state, Playing):
                    self._write_state(key, IDLE)
                    written += 1
        self._post_deliveries(written)

    def pause_all_playbacks(self) -> None:
        """Pause playback of every item that has a listener.

        Playing items without a listener are not paused.
        """
        with self._lock:
            written = 0
            for item_id in list(self._listeners.keys()):
                if self._pause_locked(item_id):
                    written += 1
        self._post_deliveries(written)

    def pause_playback(self, item_id: str) -> None:
        """Pause an item if it is playing, keeping its position."""
        with self._lock:
            written = 1 if self._pause_locked(item_id) else 0
        self._post_deliveries(written)

    def stop_playback(self, item_id: str) -> None:
        """Reset an item to idle unless it is in error."""
        with self._lock:
            if isinstance(self._states.get(item_id), Error):
                return
            self._write_state(item_id, IDLE)
        self._post_deliveries(1)

    def on_error(self, item_id: str, failure) -> None:
        """Put an item in error state.

        Args:
            item_id: Audio item identifier
            failure: Failure reported by the audio engine
        """
        self._set_state(item_id, Error(failure))

    def update_playing_at_playback_time(
        self, item_id: str, time: int, percentage: float
    ) -> None:
        """Set an item playing at the given position."""
        self._set_state(item_id, Playing(time, percentage))

    def update_paused_at_playback_time(
        self, item_id: str, time: int, percentage: float
    ) -> None:
        """Set an item paused at the given position."""
        self._set_state(item_id, Paused(time, percentage))

    def update_current_recording(self, item_id: str, amplitudes) -> None:
        """Set an item recording with the amplitude samples so far.

        Args:
            item_id: Audio item identifier, usually RECORDING_ID
            amplitudes: Sequence of amplitude samples, oldest first
        """
        self._set_state(item_id, Recording(amplitudes))

    # Queries

    def get_playback_state(self, item_id: str) -> Optional[PlaybackState]:
        """Get the state of an item, None if it was never set."""
        return self._states.get(item_id)

    def get_playback_time(self, item_id: str) -> Optional[int]:
        """Get the position in milliseconds of a playing or paused item."""
        return playback_time_of(self._states.get(item_id))

    def get_percentage(self, item_id: str) -> Optional[float]:
        """Get the position fraction of a playing or paused item."""
        return percentage_of(self._states.get(item_id))

    def is_playing_or_recording(self) -> bool:
        """Check if any item is playing or recording."""
        with self._lock:
            return any(is_active(s) for s in self._states.values())
