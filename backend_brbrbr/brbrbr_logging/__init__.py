"""
Structured logging for Backend brbrbr.

JSON logs with timestamp, event_type, request_id.
Use get_logger() in all modules for production-ready, aggregation-friendly output.
"""

from backend_brbrbr.brbrbr_logging.logger import bind_request, clear_request, get_logger

__all__ = ["bind_request", "clear_request", "get_logger"]
