"""Permissive CORS headers for every response."""

from typing import Awaitable, Callable

from fastapi import Request
from starlette.responses import Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Max-Age": "86400",
}


def apply_cors_headers(response: Response) -> Response:
    """Stamp the CORS headers onto ``response`` and return it."""
    for name, value in CORS_HEADERS.items():
        response.headers[name] = value
    return response


async def cors_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """
    Answer preflight on any path, annotate everything else.

    OPTIONS never reaches the routers, so ``/msg``, ``/list`` and unknown
    paths all get the same bare 200.
    """
    if request.method == "OPTIONS":
        response = Response(status_code=200)
    else:
        response = await call_next(request)
    return apply_cors_headers(response)
