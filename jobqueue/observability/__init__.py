"""
Observability module.
Contains logging and tracing setup.
"""

from jobqueue.observability.logging import bind_context, clear_context, setup_logging
from jobqueue.observability.tracing import get_tracer, setup_tracing, start_span

__all__ = [
    "setup_logging",
    "bind_context",
    "clear_context",
    "setup_tracing",
    "get_tracer",
    "start_span",
]
