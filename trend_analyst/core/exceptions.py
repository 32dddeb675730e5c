"""
커스텀 예외 클래스 모듈.

분석 파이프라인에서 발생하는 모든 실패를 정해진 종류(ErrorKind)로 분류합니다.
사용자에게는 message/suggestion만 노출하고, 원본 응답이나 스택 트레이스는 로그에만 남깁니다.
"""

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """실패 종류."""

    CONFIGURATION = "configuration_error"
    VALIDATION = "validation_error"
    RATE_LIMITED = "rate_limited"
    UPSTREAM = "upstream_error"
    MALFORMED_RESPONSE = "malformed_response"
    CONTRACT_VIOLATION = "contract_violation"


class TrendAnalystError(Exception):
    """Product Trend Analyst 기본 예외 클래스."""

    kind: ErrorKind = ErrorKind.UPSTREAM
    status_code: int = 500
    retryable: bool = False

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        suggestion: Optional[str] = None,
    ):
        """
        Args:
            message: 사용자에게 보여줄 에러 메시지
            details: 상세 정보 (로그용)
            suggestion: 해결 방법 제안
        """
        super().__init__(message)
        self.message = message
        self.details = details
        self.suggestion = suggestion

    def __str__(self) -> str:
        parts = [self.message]
        if self.details:
            parts.append(f"details: {self.details}")
        if self.suggestion:
            parts.append(f"hint: {self.suggestion}")
        return " | ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """호출자에게 돌려줄 안전한 에러 페이로드."""
        payload: dict[str, Any] = {"error": self.message, "kind": self.kind.value}
        if self.suggestion:
            payload["suggestion"] = self.suggestion
        return payload


# =============================================================================
# 설정 관련 예외
# =============================================================================


class ConfigurationError(TrendAnalystError):
    """모델 API에 접근할 수 없는 설정 오류 (운영자 조치 필요)."""

    kind = ErrorKind.CONFIGURATION

    def __init__(
        self,
        message: str = "Server configuration error: OPENAI_API_KEY not set",
        **kwargs,
    ):
        kwargs.setdefault("suggestion", "Set OPENAI_API_KEY in the environment or .env file.")
        super().__init__(message, **kwargs)


class AuthenticationError(ConfigurationError):
    """모델 API 인증 실패 예외."""

    def __init__(
        self,
        message: str = "Authentication error. Please check API configuration.",
        **kwargs,
    ):
        super().__init__(message, **kwargs)


# =============================================================================
# 입력 검증 예외
# =============================================================================


class ValidationError(TrendAnalystError):
    """호출자가 보낸 입력이 전제 조건을 만족하지 않음."""

    kind = ErrorKind.VALIDATION
    status_code = 400
    reason: str = "invalid"


class InvalidInputTypeError(ValidationError):
    """입력이 없거나 문자열이 아님."""

    reason = "wrong_type"

    def __init__(
        self,
        message: str = "Input is required and must be a string",
        **kwargs,
    ):
        super().__init__(message, **kwargs)


class InputTooShortError(ValidationError):
    """공백 제거 후 입력 길이가 최소 길이 미만."""

    reason = "too_short"

    def __init__(
        self,
        message: str = (
            "Input must be at least 50 characters long. "
            "Please provide more details about the product."
        ),
        length: Optional[int] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.length = length


# =============================================================================
# API 관련 예외
# =============================================================================


class APIError(TrendAnalystError):
    """모델 API 호출 관련 예외."""

    retryable = True

    def __init__(
        self,
        message: str = "An unexpected error occurred. Please try again.",
        **kwargs,
    ):
        super().__init__(message, **kwargs)


class RateLimitError(APIError):
    """API Rate Limit 초과 예외."""

    kind = ErrorKind.RATE_LIMITED
    status_code = 429

    def __init__(
        self,
        message: str = "Rate limit exceeded. Please wait a moment and try again.",
        retry_after: Optional[float] = None,
        **kwargs,
    ):
        kwargs.setdefault("suggestion", "Wait a minute before sending another request.")
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class UpstreamError(APIError):
    """분류되지 않은 모델 API 실패."""

    kind = ErrorKind.UPSTREAM


# =============================================================================
# 응답 처리 예외
# =============================================================================


class ResponseError(TrendAnalystError):
    """모델 응답을 신뢰할 수 없음."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("suggestion", "Please try again.")
        super().__init__(message, **kwargs)


class MalformedResponseError(ResponseError):
    """모델 응답을 JSON으로 해석할 수 없음."""

    kind = ErrorKind.MALFORMED_RESPONSE

    def __init__(
        self,
        message: str = "Failed to process AI response. Please try again.",
        **kwargs,
    ):
        super().__init__(message, **kwargs)


class ContractViolationError(ResponseError):
    """해석된 응답이 필수 필드 계약을 만족하지 않음."""

    kind = ErrorKind.CONTRACT_VIOLATION

    def __init__(
        self,
        message: str = "AI response validation failed. Please try again.",
        field: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.field = field
