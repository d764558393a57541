"""Launcher errors.

Acquisition failures are wrapped in :class:`LaunchError` tagged with the
stage that failed. Errors raised by the extractor are never wrapped.
"""
from enum import Enum


class LaunchStage(Enum):
    """Where in the resource chain a launch failed."""
    ALLOCATOR = "allocator"   # browser process spawn
    SESSION = "session"       # browser context / page creation
    DEADLINE = "deadline"     # timeout expired while extracting


class LaunchError(Exception):
    """Exception carrying the LaunchStage that failed."""

    def __init__(self, stage: LaunchStage, message: str = ""):
        self.stage = stage
        super().__init__(message or stage.value)


class DeadlineExceeded(LaunchError):
    """The session deadline expired before the extractor finished."""

    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(LaunchStage.DEADLINE, f"deadline of {timeout:g}s exceeded")
