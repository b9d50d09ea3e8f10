from contextvars import ContextVar
import logging
from typing import Optional
import uuid

trace_id_var: ContextVar[Optional[str]] = ContextVar("trace_id", default=None)


def trace_id_generator() -> str:
    return str(uuid.uuid4().hex)


class TraceIdFilter(logging.Filter):
    # Makes the trace id of the current call chain available to the log format.
    def filter(self, record):
        record.trace_id = trace_id_var.get() or ""
        return True


def add_trace_id_filter(logger: logging.Logger) -> logging.Logger:
    if not any(isinstance(f, TraceIdFilter) for f in logger.filters):
        logger.addFilter(TraceIdFilter())
    return logger
