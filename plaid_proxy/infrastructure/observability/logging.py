"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from plaid_proxy.domain.results import TransportFailure, UpstreamFailure, UpstreamResult

logger = logging.getLogger("plaid_proxy.upstream")


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def __init__(self, *args: Any, service_name: str = "plaid-proxy", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.service_name = service_name

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = self.service_name


def setup_logging(level: str = "INFO", service_name: str = "plaid-proxy") -> None:
    """Configure structured JSON logging"""
    root = logging.getLogger()
    root.setLevel(level)

    # Remove existing handlers
    root.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s",
        service_name=service_name,
    )
    handler.setFormatter(formatter)
    root.addHandler(handler)


def log_upstream_result(request_id: str, endpoint: str, result: UpstreamResult) -> None:
    """Log structured outcome of a Plaid call; never includes tokens or credentials"""
    extra: Dict[str, Any] = {"request_id": request_id, "endpoint": endpoint}

    if isinstance(result, UpstreamFailure):
        extra["upstream_status"] = result.status_code
        try:
            extra["error_code"] = result.error_code()
        except ValueError:
            extra["error_code"] = None
        logger.warning("Plaid returned an error", extra=extra)
    elif isinstance(result, TransportFailure):
        extra["error"] = result.message
        logger.error("Plaid call failed", extra=extra)
    else:
        extra["upstream_status"] = result.status_code
        logger.info("Plaid call completed", extra=extra)
