"""Amplitude traces for recordings in progress.

The recorder reports one amplitude value per captured chunk. The values
are collected in a trace and published to the tracker as the payload of
the Recording state, from which the UI draws the live waveform.
"""

from collections import deque
from typing import List, Optional

import numpy as np

from ..constants import AmplitudeConstants, TrackerConstants


def peak_amplitude(chunk: np.ndarray) -> int:
    """Calculate the peak amplitude of an audio chunk.

    Float audio is expected in [-1, 1]. Integer audio is scaled to the
    16-bit range.

    Args:
        chunk: Audio samples, any shape

    Returns:
        Peak amplitude between 0 and MAX_AMPLITUDE
    """
    data = np.asarray(chunk)
    if data.size == 0:
        return 0

    peak = float(np.max(np.abs(data.astype(np.float64))))

    if np.issubdtype(data.dtype, np.floating):
        scaled = peak * AmplitudeConstants.MAX_AMPLITUDE
    elif data.dtype.itemsize > 2:
        scaled = (
            peak
            / AmplitudeConstants.NORM_FACTOR_32BIT
            * AmplitudeConstants.NORM_FACTOR_16BIT
        )
    else:
        scaled = peak

    return int(min(AmplitudeConstants.MAX_AMPLITUDE, round(scaled)))


class AmplitudeTrace:
    """Rolling list of amplitude samples for the current recording."""

    def __init__(
        self, max_length: Optional[int] = AmplitudeConstants.DEFAULT_TRACE_LENGTH
    ):
        """Initialize an empty trace.

        Args:
            max_length: Number of samples kept, oldest dropped first.
                None keeps every sample.
        """
        if max_length is not None and max_length <= 0:
            raise ValueError(f"max_length must be positive, got {max_length}")
        self.max_length = max_length
        self._samples = deque(maxlen=max_length)

    def __len__(self) -> int:
        return len(self._samples)

    @property
    def samples(self) -> List[int]:
        """Get a copy of the samples, oldest first."""
        return list(self._samples)

    def append(self, value: int) -> None:
        """Add one amplitude sample."""
        self._samples.append(int(value))

    def add_chunk(self, chunk: np.ndarray) -> int:
        """Add the peak amplitude of an audio chunk.

        Returns:
            The amplitude sample that was added
        """
        value = peak_amplitude(chunk)
        self._samples.append(value)
        return value

    def reset(self) -> None:
        """Remove all samples."""
        self._samples.clear()

    def publish(self, tracker, item_id: str = TrackerConstants.RECORDING_ID) -> None:
        """Report the trace to the tracker as a Recording state.

        Args:
            tracker: PlaybackTracker to update
            item_id: Identifier of the recording
        """
        tracker.update_current_recording(item_id, self.samples)
