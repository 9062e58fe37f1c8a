"""Brainstorm package exports."""

from .config import Settings, settings
from .domain import BrainstormSession, Idea, InMemorySessionRepository
from .hosting import ApplicationEnvironment

__all__ = [
    "ApplicationEnvironment",
    "BrainstormSession",
    "Idea",
    "InMemorySessionRepository",
    "Settings",
    "settings",
]
