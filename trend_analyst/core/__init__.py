"""
Core 모듈.

로깅, 예외 처리 등 공통 기능을 제공합니다.
"""

from trend_analyst.core.logging import get_logger, log_exception, setup_logging
from trend_analyst.core.exceptions import (
    TrendAnalystError,
    ErrorKind,
    ConfigurationError,
    AuthenticationError,
    ValidationError,
    InvalidInputTypeError,
    InputTooShortError,
    APIError,
    RateLimitError,
    UpstreamError,
    ResponseError,
    MalformedResponseError,
    ContractViolationError,
)

__all__ = [
    # Logging
    "get_logger",
    "log_exception",
    "setup_logging",
    # Exceptions
    "TrendAnalystError",
    "ErrorKind",
    "ConfigurationError",
    "AuthenticationError",
    "ValidationError",
    "InvalidInputTypeError",
    "InputTooShortError",
    "APIError",
    "RateLimitError",
    "UpstreamError",
    "ResponseError",
    "MalformedResponseError",
    "ContractViolationError",
]
