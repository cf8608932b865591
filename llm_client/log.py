import os
import logging

LOG_REQUESTS = os.getenv("LOG_REQUESTS", "false").lower() in {"1", "true", "yes"}
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
request_logger = logging.getLogger("llm_client.request")
if LOG_REQUESTS:
    # Library code: only touch our own logger, never the root configuration.
    request_logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    if not request_logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(request_logger.level)
        formatter = logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        request_logger.addHandler(handler)
        # Avoid duplicate lines when the application also logs via root
        request_logger.propagate = False


def log_call(
    endpoint: str,
    operation: str,
    method: str,
    outcome: str,
    status: object,
    duration_ms: float,
) -> None:
    """Emit the one-line summary for a finished API call."""
    request_logger.info(
        "endpoint=%s operation=%s method=%s status=%s outcome=%s duration_ms=%.2f",
        endpoint,
        operation,
        method,
        status,
        outcome,
        duration_ms,
    )
