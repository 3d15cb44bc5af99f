"""Custom exception hierarchy for pynavscenes."""

from __future__ import annotations


class NavSceneError(Exception):
    """Base exception for all pynavscenes errors."""


class NavSceneConfigError(NavSceneError):
    """Invalid or missing configuration."""


class DuplicateSceneKeyError(NavSceneError):
    """Two children of a navigation state derive the same scene key.

    This is a contract violation by whoever built the navigation state.
    The reducer never recovers from it; fix the state construction
    instead of retrying.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str = "",
        index: int = -1,
    ) -> None:
        self.key = key
        self.index = index
        super().__init__(message)
