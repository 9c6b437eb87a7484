"""Request logging middleware.

Emits one line per request on the `phonebook.access` logger:

    POST /api/persons 200 3.215 ms - body {"name":"Ada","number":"12345"}

The body is only included for POST requests. Neither the request nor the
response is modified.
"""

import logging
import time

from fastapi import Request

access_logger = logging.getLogger("phonebook.access")


async def log_requests(request: Request, call_next):
    """`@app.middleware("http")` callable logging method, path, status and latency."""
    body = ""
    if request.method == "POST":
        # Starlette caches the body, so the route can still read it.
        raw = await request.body()
        body = raw.decode("utf-8", errors="replace")

    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000

    access_logger.info(
        "%s %s %s %.3f ms - body %s",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
        body,
    )
    return response
