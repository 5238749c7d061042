import json
import logging
import sys
import time
import uuid
from contextvars import ContextVar
from typing import Any, Dict

trace_id_ctx: ContextVar[str | None] = ContextVar("trace_id", default=None)


def new_trace_id() -> str:
    return uuid.uuid4().hex


class TraceIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        tid = trace_id_ctx.get()
        record.trace_id = tid or "-"
        return True


# Domain fields passed via ``extra=``; none may shadow a LogRecord attribute such as ``created``
CONTEXT_FIELDS = (
    "event",
    "username",
    "role",
    "seed_status",
    "created_count",
    "present_count",
    "amount",
    "rounded",
    "adjustment",
    "payment_method",
)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        base: Dict[str, Any] = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "time": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created)),
            "trace_id": getattr(record, "trace_id", "-"),
        }
        for field in CONTEXT_FIELDS:
            if hasattr(record, field):
                base[field] = getattr(record, field)
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False, default=str)


def init_logging(debug: bool = False) -> None:
    root = logging.getLogger()
    root.handlers.clear()
    level = logging.DEBUG if debug else logging.INFO
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.addFilter(TraceIdFilter())
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)


async def request_context_middleware(request, call_next):  # type: ignore
    token = trace_id_ctx.set(new_trace_id())
    logger = logging.getLogger("cashdesk.request")
    logger.debug("request start %s %s", request.method, request.url.path)
    try:
        response = await call_next(request)
        return response
    finally:
        logger.debug("request end")
        trace_id_ctx.reset(token)
