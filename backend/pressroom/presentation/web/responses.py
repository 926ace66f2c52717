"""View results and the combinator that turns them into HTTP responses.

Handlers wrapped with :func:`html_view` return one of :class:`Page`,
:class:`Redirect` or :class:`NotFound`. The wrapper renders, redirects or
answers 404, and converts any escaping exception into the generic error
page so every request gets exactly one response.
"""

import functools
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from fastapi import Request, status
from fastapi.responses import RedirectResponse, Response

from pressroom.config import get_settings
from pressroom.presentation.web.templating import templates

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Page:
    """Render ``template`` with ``context``."""

    template: str
    context: dict[str, Any] = field(default_factory=dict)
    status_code: int = status.HTTP_200_OK


@dataclass(frozen=True)
class Redirect:
    """Send the browser to ``url`` with a GET."""

    url: str


@dataclass(frozen=True)
class NotFound:
    """Bare 404 with an empty body."""


ViewResult = Page | Redirect | NotFound


def to_response(request: Request, result: ViewResult) -> Response:
    """Map a view result onto the matching Starlette response."""
    if isinstance(result, Page):
        return templates.TemplateResponse(
            request,
            result.template,
            result.context,
            status_code=result.status_code,
        )
    if isinstance(result, Redirect):
        return RedirectResponse(result.url, status_code=status.HTTP_303_SEE_OTHER)
    if isinstance(result, NotFound):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    raise TypeError(f"Unsupported view result: {result!r}")


def error_response(request: Request, exc: Exception) -> Response:
    """Generic failure page for errors no handler recovers from."""
    settings = get_settings()
    message = str(exc) if settings.app_env == "development" else None
    return templates.TemplateResponse(
        request,
        "error.html",
        {"title": "Server Error", "message": message},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def html_view(
    handler: Callable[..., Awaitable[ViewResult]],
) -> Callable[..., Awaitable[Response]]:
    """Wrap an HTML handler so its outcome is mapped uniformly to a response.

    The handler must accept ``request: Request`` as a keyword argument.
    FastAPI still sees the handler's own signature through ``__wrapped__``.
    """

    @functools.wraps(handler)
    async def wrapper(*args: Any, **kwargs: Any) -> Response:
        request: Request = kwargs["request"]
        try:
            result = await handler(*args, **kwargs)
        except Exception as exc:
            logger.exception(
                "Unhandled error in %s %s", request.method, request.url.path
            )
            return error_response(request, exc)
        return to_response(request, result)

    return wrapper
