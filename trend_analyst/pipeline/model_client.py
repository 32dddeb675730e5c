"""
모델 호출 모듈.

외부 LLM API를 프롬프트 → 텍스트 함수로 감쌉니다.
클라이언트는 설정에서 한 번 생성한 뒤 변경하지 않고 ProductAnalyzer에 주입합니다.
"""

from __future__ import annotations

import re
from typing import Any, Protocol

from langchain_core.messages import HumanMessage
from langchain_openai import ChatOpenAI

from trend_analyst.core.exceptions import (
    APIError,
    AuthenticationError,
    RateLimitError,
    UpstreamError,
)
from trend_analyst.utils.config import Settings

# 메시지에 "rate"가 포함되면 rate limit으로 분류 (부분 문자열, 대소문자 무시)
RATE_LIMIT_PATTERN = re.compile("rate", re.IGNORECASE)
AUTH_PATTERN = re.compile(r"api[\s_-]?key|authenticat|unauthori[sz]ed", re.IGNORECASE)


class ModelClient(Protocol):
    """외부 모델 호출 계약: 프롬프트를 보내고 텍스트를 받는다."""

    model_name: str

    def complete(self, prompt: str) -> str:
        ...


def message_text(content: Any) -> str:
    """AIMessage.content(문자열 또는 파트 리스트)에서 텍스트만 추출."""
    if isinstance(content, str):
        return content
    parts = []
    for part in content or []:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


class ChatModelClient:
    """LangChain ChatOpenAI 기반 모델 클라이언트."""

    def __init__(
        self,
        api_key: str,
        model_name: str = "gpt-4o-mini",
        max_tokens: int = 2048,
        temperature: float = 0.0,
        base_url: str | None = None,
    ):
        """
        초기화.

        Args:
            api_key: 모델 API 키
            model_name: 모델 식별자
            max_tokens: 최대 출력 토큰 수
            temperature: 온도 설정
            base_url: API 엔드포인트 (None이면 기본값)
        """
        self.model_name = model_name
        self.max_tokens = max_tokens

        # 재시도는 ProductAnalyzer에서만 결정
        self._llm = ChatOpenAI(
            model=model_name,
            temperature=temperature,
            max_tokens=max_tokens,
            openai_api_key=api_key,
            base_url=base_url,
            max_retries=0,
        )

    def complete(self, prompt: str) -> str:
        """프롬프트를 단일 사용자 메시지로 보내고 응답 텍스트 반환."""
        response = self._llm.invoke([HumanMessage(content=prompt)])
        return message_text(response.content)


def create_model_client(settings: Settings) -> ChatModelClient | None:
    """
    설정에서 모델 클라이언트 생성.

    Returns:
        ChatModelClient, API 키가 없으면 None
    """
    if not settings.has_api_key:
        return None

    return ChatModelClient(
        api_key=settings.openai_api_key,
        model_name=settings.openai_model,
        max_tokens=settings.analysis_max_tokens,
        temperature=settings.analysis_temperature,
        base_url=settings.openai_base_url,
    )


def _retry_after(error: Exception) -> float | None:
    response = getattr(error, "response", None)
    headers = getattr(response, "headers", None)
    if not headers:
        return None
    try:
        value = headers.get("retry-after")
        return float(value) if value is not None else None
    except (TypeError, ValueError):
        return None


def classify_upstream_error(error: Exception) -> APIError | AuthenticationError:
    """
    모델 호출 중 발생한 예외를 에러 종류로 변환.

    Rate limit 표시(429 또는 'rate')를 먼저 보고, 다음으로 인증 표시(401 또는 'API key')를 봅니다.
    나머지는 모두 UpstreamError입니다.
    """
    status_code = getattr(error, "status_code", None)
    message = str(error)
    details = f"{type(error).__name__}: {message[:300]}"

    if status_code == 429 or RATE_LIMIT_PATTERN.search(message):
        return RateLimitError(retry_after=_retry_after(error), details=details)

    if status_code == 401 or AUTH_PATTERN.search(message):
        return AuthenticationError(details=details)

    return UpstreamError(details=details)
