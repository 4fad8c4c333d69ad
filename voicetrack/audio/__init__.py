"""Audio helpers for producers feeding the tracker."""

from .amplitude import AmplitudeTrace, peak_amplitude

__all__ = ["AmplitudeTrace", "peak_amplitude"]
