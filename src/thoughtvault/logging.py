import logging
import sys
import uuid
from contextvars import ContextVar
from typing import Optional

# Context variable to track trace_id across a single user action
trace_id_ctx: ContextVar[Optional[str]] = ContextVar("trace_id", default=None)

def get_trace_id() -> str:
    """Retrieve the current trace_id or generate a new one if not set."""
    tid = trace_id_ctx.get()
    if tid is None:
        tid = uuid.uuid4().hex[:12]
        trace_id_ctx.set(tid)
    return tid

def new_trace_id() -> str:
    """Start a fresh trace for a new user action."""
    tid = uuid.uuid4().hex[:12]
    trace_id_ctx.set(tid)
    return tid

class TraceIDFilter(logging.Filter):
    """Injects trace_id into log records."""
    def filter(self, record):
        record.trace_id = get_trace_id()
        return True

def configure_logging(level: str = "INFO"):
    """Configures the root logger with a standard format including trace_id."""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers to avoid duplication
    if logger.handlers:
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | [%(trace_id)s] | %(name)s:%(funcName)s:%(lineno)d - %(message)s"
    )
    handler.setFormatter(formatter)
    handler.addFilter(TraceIDFilter())

    logger.addHandler(handler)

    # The OpenAI SDK logs every request through httpx
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)

# Initialize logging on import with default settings
configure_logging()
logger = logging.getLogger("thoughtvault")
