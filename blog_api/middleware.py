import logging
import time
from contextvars import ContextVar

from sqlalchemy import event
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Per-request context variable
# ---------------------------------------------------------------------------

query_count_var: ContextVar[int] = ContextVar("query_count", default=0)


def install_query_counter(engine) -> None:
    """
    Register a ``before_cursor_execute`` listener on *engine* that bumps
    the per-request ``query_count_var`` for every SQL statement sent to the
    database, including the DELETEs issued by an article cascade.

    Must be called once per engine (production engine in ``database.py``,
    test engine in ``conftest.py``).
    """

    @event.listens_for(engine.sync_engine, "before_cursor_execute")
    def _count_query(conn, cursor, statement, parameters, context, executemany):
        query_count_var.set(query_count_var.get() + 1)


# ---------------------------------------------------------------------------
# Middleware (pure ASGI so ContextVar updates stay visible to us)
# ---------------------------------------------------------------------------

class TimingMiddleware:
    """
    Pure ASGI middleware adding two diagnostic response headers:

    - ``X-Response-Time-Ms``: wall-clock time spent on the request.
    - ``X-Query-Count``: SQL statements executed while serving it.

    One DEBUG log line per request records method, path, status and timing.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        query_count_var.set(0)
        start = time.perf_counter()

        async def send_wrapper(message: Message) -> None:
            if message["type"] == "http.response.start":
                duration_ms = round((time.perf_counter() - start) * 1000, 2)
                query_count = query_count_var.get()
                headers = list(message.get("headers", []))
                headers.append((b"x-response-time-ms", str(duration_ms).encode()))
                headers.append((b"x-query-count", str(query_count).encode()))
                message["headers"] = headers
                logger.debug(
                    "%s %s -> %d (%.2f ms, %d queries)",
                    scope["method"],
                    scope["path"],
                    message["status"],
                    duration_ms,
                    query_count,
                )
            await send(message)

        await self.app(scope, receive, send_wrapper)
