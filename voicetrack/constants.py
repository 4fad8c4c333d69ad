"""Constants for the voicetrack package.

Values are grouped by concern: tracker defaults, amplitude scaling for
recording traces, and dispatcher thread settings.
"""


class TrackerConstants:
    """Playback tracker related constants."""

    # Reserved identifier for the recording in progress
    RECORDING_ID = "RECORDING_ID"

    # Position used when playback starts without a known position
    DEFAULT_PLAYBACK_TIME_MS = 0
    DEFAULT_PERCENTAGE = 0.0

    # Prefix for debug output
    LOG_PREFIX = "[PlaybackTracker]"


class AmplitudeConstants:
    """Amplitude trace constants.

    Amplitudes are reported on a 16-bit scale so that waveforms drawn
    from them look the same regardless of the capture format.
    """

    MAX_AMPLITUDE = 32767

    # Normalization factors
    NORM_FACTOR_16BIT = 32768.0  # 2^15
    NORM_FACTOR_32BIT = 2147483648.0  # 2^31

    # Samples kept for the waveform of an ongoing recording
    DEFAULT_TRACE_LENGTH = 200


class DispatchConstants:
    """Listener dispatch constants."""

    THREAD_NAME = "PlaybackDispatch"

    # Timing (seconds)
    QUEUE_POLL_TIMEOUT = 0.1
    JOIN_TIMEOUT = 1.0

    # Delay passed to tkinter's after()
    TK_AFTER_DELAY_MS = 0
