"""Tracker configuration."""

import os
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from ..constants import DispatchConstants

DISPATCHER_TK = "tk"
DISPATCHER_THREAD = "thread"
DISPATCHERS = (DISPATCHER_TK, DISPATCHER_THREAD)

_TRUE_VALUES = ("1", "true", "yes")


@dataclass
class TrackerConfig:
    """Settings used when wiring up a playback tracker.

    Configuration is never written anywhere; it comes from the
    environment or from the caller.
    """

    # Execution context for listener callbacks: "tk" or "thread"
    dispatcher: str = DISPATCHER_TK
    # Print one line per state change
    debug: bool = False

    # Thread dispatcher settings
    thread_name: str = DispatchConstants.THREAD_NAME
    join_timeout: float = DispatchConstants.JOIN_TIMEOUT

    def __post_init__(self):
        if self.dispatcher not in DISPATCHERS:
            raise ValueError(
                f"Unknown dispatcher '{self.dispatcher}', "
                f"expected one of: {', '.join(DISPATCHERS)}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TrackerConfig":
        """Create config from dictionary."""
        # Filter out unknown keys
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered_data)

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "TrackerConfig":
        """Create config from VOICETRACK_* environment variables.

        Args:
            environ: Mapping to read instead of os.environ

        Returns:
            TrackerConfig with defaults for unset variables
        """
        env = os.environ if environ is None else environ
        data: Dict[str, Any] = {}

        if env.get("VOICETRACK_DISPATCHER"):
            data["dispatcher"] = env["VOICETRACK_DISPATCHER"].strip().lower()
        if "VOICETRACK_DEBUG" in env:
            data["debug"] = env["VOICETRACK_DEBUG"].lower() in _TRUE_VALUES
        if env.get("VOICETRACK_JOIN_TIMEOUT"):
            try:
                data["join_timeout"] = float(env["VOICETRACK_JOIN_TIMEOUT"])
            except ValueError as e:
                raise ValueError(f"Invalid VOICETRACK_JOIN_TIMEOUT: {e}") from e

        return cls.from_dict(data)


def debug_enabled() -> bool:
    """Check if debug output is enabled via VOICETRACK_DEBUG."""
    return os.environ.get("VOICETRACK_DEBUG", "").lower() in _TRUE_VALUES
