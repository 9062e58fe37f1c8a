"""API router exports"""

from .failing import handled_router as failing_handled_router
from .failing import router as failing_router
from .health import router as health_router
from .home import router as home_router
from .ideas import router as ideas_router
from .session import router as session_router

__all__ = [
    "failing_handled_router",
    "failing_router",
    "health_router",
    "home_router",
    "ideas_router",
    "session_router",
]
