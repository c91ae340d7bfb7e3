"""
order_service.observability.logging

structlog setup for the Order Service.

Responsibilities:
- Route structlog through stdlib logging to stdout.
- Render JSON lines (default) or colored console output for local runs.
- Stamp every event with the service name.
- Keep the AWS SDK loggers at INFO or above.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

# The SDK logs signed request dumps at DEBUG.
SDK_LOGGERS = ("botocore", "aiobotocore", "urllib3")


def configure_logging(*, service_name: str, level: str, json_logs: bool = True) -> None:
    root_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=root_level)
    for name in SDK_LOGGERS:
        logging.getLogger(name).setLevel(max(logging.INFO, root_level))

    renderer: Any = (
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            service_stamp(service_name),
            structlog.processors.dict_tracebacks if json_logs else _keep_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def service_stamp(service_name: str):
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def _keep_exc_info(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    # ConsoleRenderer formats exc_info itself.
    return event_dict


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
