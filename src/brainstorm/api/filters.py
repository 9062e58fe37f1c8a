"""Route filters - hooks that run around route handlers.

FastAPI exposes two seams for this, and each filter uses the one that fits:

- Exception filters are custom ``APIRoute`` classes. A router opts in with
  ``APIRouter(route_class=ExceptionLoggingRoute)`` and every route on it gets
  its handler wrapped.
- Action filters are route dependencies. ``add_header`` writes to the
  per-request ``Response`` that FastAPI merges into the handler's result.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Coroutine
from typing import Any

from fastapi import Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

UNHANDLED_ERROR_DETAIL = "An unexpected error occurred."


class ExceptionLoggingRoute(APIRoute):
    """Exception filter that logs unhandled handler errors.

    HTTP and validation errors are part of normal control flow and pass
    through untouched. Anything else is logged with its traceback and then
    given to ``on_exception``. Returning ``None`` from there (the default)
    re-raises, leaving the response to the framework's 500 handling.
    """

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        original_route_handler = super().get_route_handler()

        async def exception_logging_route_handler(request: Request) -> Response:
            try:
                return await original_route_handler(request)
            except (StarletteHTTPException, RequestValidationError):
                raise
            except Exception as exc:
                logger.error(
                    "Unhandled %s in %s %s: %s",
                    type(exc).__name__,
                    request.method,
                    request.url.path,
                    exc,
                    exc_info=exc,
                )
                response = self.on_exception(request, exc)
                if response is None:
                    raise
                return response

        return exception_logging_route_handler

    def on_exception(self, request: Request, exc: Exception) -> Response | None:
        return None


class HandledExceptionLoggingRoute(ExceptionLoggingRoute):
    """Exception filter that logs and then handles the error itself.

    Responds with a generic JSON 500 so no exception details leave the
    process.
    """

    def on_exception(self, request: Request, exc: Exception) -> Response | None:
        return JSONResponse(status_code=500, content={"detail": UNHANDLED_ERROR_DETAIL})


def add_header(name: str, value: str) -> Callable[[Response], None]:
    """Action filter that adds a header to a successful response.

    Usage:
        >>> @router.get("/", dependencies=[Depends(add_header("X-Sample", "yes"))])

    The header lives on FastAPI's temporary response, which is only merged
    into responses built from a handler's return value. Error responses,
    and handlers that return a ``Response`` themselves, never carry it.
    """

    def set_header(response: Response) -> None:
        response.headers[name] = value

    return set_header


__all__ = [
    "UNHANDLED_ERROR_DETAIL",
    "ExceptionLoggingRoute",
    "HandledExceptionLoggingRoute",
    "add_header",
]
