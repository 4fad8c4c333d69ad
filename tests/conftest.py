"""Pytest configuration and shared fixtures."""

import os

# Keep state change tracing out of test output unless asked for
os.environ.setdefault("VOICETRACK_DEBUG", "0")
