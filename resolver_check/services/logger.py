"""Structured JSON logging for resolver-check.

Logs go to stderr; stdout is reserved for the result document.
"""

import logging
import sys
import uuid
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger


# Global run ID for correlation across log entries
RUN_ID = str(uuid.uuid4())


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter that adds run_id and standardized fields."""

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        """Add custom fields to log record.

        Args:
            log_record: The log record to modify.
            record: The original logging.LogRecord.
            message_dict: Additional fields from the logging call.
        """
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = (
            datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
        )
        log_record["run_id"] = RUN_ID
        log_record["level"] = record.levelname
        log_record["logger"] = record.name


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure structured JSON logging for the application.

    Args:
        verbose: Log at INFO instead of WARNING.

    Returns:
        logging.Logger: Configured root logger.
    """
    logger = logging.getLogger()
    logger.setLevel(logging.INFO if verbose else logging.WARNING)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    json_handler = logging.StreamHandler(sys.stderr)
    formatter = CustomJsonFormatter(
        "%(message)s",
        timestamp=True,
    )
    json_handler.setFormatter(formatter)
    logger.addHandler(json_handler)

    return logger


def log_query_result(
    domain: str,
    status: str,
    detail: str,
    duration_ms: int,
) -> None:
    """Log structured per-domain query result.

    Args:
        domain: Domain that was queried.
        status: ALLOWED, BLOCKED or ERROR.
        detail: Address, block reason or error message.
        duration_ms: Time spent on the query, retries included.
    """
    logger = logging.getLogger(__name__)
    level = logging.WARNING if status == "ERROR" else logging.INFO
    logger.log(
        level,
        "Domain query completed",
        extra={
            "domain": domain,
            "status": status,
            "detail": detail,
            "duration_ms": duration_ms,
        },
    )


def log_run_summary(
    total: int,
    allowed: int,
    blocked: int,
    errors: int,
    failed: int,
    exit_code: int,
    duration_sec: float,
) -> None:
    """Log run completion summary.

    Args:
        total: Number of domains queried.
        allowed: Results classified ALLOWED.
        blocked: Results classified BLOCKED.
        errors: Results classified ERROR.
        failed: Results with a FAIL verdict (0 outside policy mode).
        exit_code: Process exit code about to be returned.
        duration_sec: Total run time in seconds.
    """
    logger = logging.getLogger(__name__)
    logger.info(
        "Run completed",
        extra={
            "total": total,
            "allowed": allowed,
            "blocked": blocked,
            "errors": errors,
            "failed": failed,
            "exit_code": exit_code,
            "duration_sec": duration_sec,
        },
    )
