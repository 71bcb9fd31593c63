"""
Per-invocation structured logger
"""

import os
from contextlib import contextmanager

from aws_lambda_powertools import Logger

from config.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_SERVICE_NAME,
    ENV_LOG_LEVEL,
    ENV_SERVICE_NAME,
)


def build_logger(service: str = None, level: str = None, stream=None) -> Logger:
    """Create the JSON logger handed to every component of one invocation"""
    return Logger(
        service=service or os.environ.get(ENV_SERVICE_NAME, DEFAULT_SERVICE_NAME),
        level=level or os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL),
        stream=stream,
    )


@contextmanager
def invocation_logger(service: str = None, level: str = None, stream=None):
    """
    Yield a logger for the duration of one invocation and flush it on exit,
    whether the invocation finished or aborted.
    """
    logger = build_logger(service=service, level=level, stream=stream)
    try:
        yield logger
    finally:
        logger.registered_handler.flush()
