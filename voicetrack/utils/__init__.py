"""Utility modules for voicetrack."""
