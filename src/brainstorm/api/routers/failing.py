"""Failing Router - endpoints that always raise.

They exist to show the exception filters at work: the error is logged by
the route class before the response is decided, and the ``add_header``
action filter never reaches the client.
"""

from typing import NoReturn

from fastapi import APIRouter, Depends

from ..filters import ExceptionLoggingRoute, HandledExceptionLoggingRoute, add_header

FAILING_HEADER = "FailingController"
FAILING_HEADER_VALUE = "This shouldn't appear if exception was handled."

router = APIRouter(
    prefix="/failing",
    tags=["failing"],
    route_class=ExceptionLoggingRoute,
)

handled_router = APIRouter(
    prefix="/failing",
    tags=["failing"],
    route_class=HandledExceptionLoggingRoute,
)


@router.get(
    "",
    response_model=None,
    dependencies=[Depends(add_header(FAILING_HEADER, FAILING_HEADER_VALUE))],
)
async def index() -> NoReturn:
    """Raise; the framework turns the logged error into a 500."""
    raise Exception("Boom!")


@handled_router.get(
    "/handled",
    response_model=None,
    dependencies=[Depends(add_header(FAILING_HEADER, FAILING_HEADER_VALUE))],
)
async def handled() -> NoReturn:
    """Raise; the route class logs it and answers with its own JSON 500."""
    raise Exception("Boom!")
