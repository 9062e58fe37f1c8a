"""API dependency wiring.

Everything a route needs lives on ``app.state`` and is created by the app
factory, so each application instance (and each test) has its own set.
"""

from fastapi import Request
from fastapi.templating import Jinja2Templates

from ..domain import InMemorySessionRepository
from ..hosting import ApplicationEnvironment


def get_session_repository(request: Request) -> InMemorySessionRepository:
    """Session store owned by the running application."""
    return request.app.state.session_repository


def get_environment(request: Request) -> ApplicationEnvironment:
    return request.app.state.environment


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates
