"""
제품 트렌드 분석기.

입력 검증 → 프롬프트 생성 → 모델 호출 → 응답 파싱 → 계약 검증을 한 번의 호출로 수행합니다.
요청 간 공유되는 가변 상태가 없으므로 여러 스레드에서 같은 인스턴스를 써도 안전합니다.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable

from trend_analyst.core.exceptions import (
    ConfigurationError,
    TrendAnalystError,
    UpstreamError,
)
from trend_analyst.core.logging import get_logger, log_exception
from trend_analyst.pipeline.model_client import (
    ModelClient,
    classify_upstream_error,
    create_model_client,
)
from trend_analyst.pipeline.response_parser import parse_analysis_response
from trend_analyst.pipeline.schemas import AnalysisResult
from trend_analyst.pipeline.validator import MIN_INPUT_LENGTH, validate_input
from trend_analyst.prompts.templates import ANALYSIS_PROMPT, PromptTemplate, build_analysis_prompt
from trend_analyst.utils.config import Settings, get_settings

logger = get_logger(__name__)


@dataclass(frozen=True)
class AnalyzerConfig:
    """분석기 설정."""

    min_input_length: int = MIN_INPUT_LENGTH
    max_retries: int = 0
    retry_delay: float = 1.0
    strict_contract: bool = False
    prompt: PromptTemplate = ANALYSIS_PROMPT

    @classmethod
    def from_settings(cls, settings: Settings) -> "AnalyzerConfig":
        return cls(
            max_retries=settings.analysis_max_retries,
            retry_delay=settings.analysis_retry_delay,
            strict_contract=settings.analysis_strict_contract,
        )


class ProductAnalyzer:
    """제품 설명을 구조화된 트렌드 분석으로 변환."""

    def __init__(
        self,
        client: ModelClient | None,
        config: AnalyzerConfig | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        초기화.

        Args:
            client: 모델 클라이언트 (None이면 모든 분석 요청이 ConfigurationError)
            config: 분석기 설정 (None이면 기본값 사용)
            sleep: 재시도 대기 함수
        """
        self._client = client
        self.config = config or AnalyzerConfig()
        self._sleep = sleep

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    def analyze(self, value: Any) -> AnalysisResult:
        """
        제품 설명 분석.

        Args:
            value: 제품 설명 또는 URL (trim 후 50자 이상)

        Returns:
            AnalysisResult 객체

        Raises:
            ConfigurationError: API 키 미설정 또는 인증 실패
            ValidationError: 입력 타입/길이 오류
            RateLimitError: 모델 API rate limit
            UpstreamError: 그 밖의 모델 API 실패
            MalformedResponseError: JSON이 아닌 응답
            ContractViolationError: 필수 필드 계약 위반
        """
        logger.debug("Analysis request received")

        if self._client is None:
            error = ConfigurationError()
            logger.error("Analysis refused: %s", error.message)
            raise error

        logger.debug("Validating input")
        text = validate_input(value, min_length=self.config.min_input_length)

        prompt = build_analysis_prompt(text, self.config.prompt)
        logger.debug("Prompt built (%d chars, template=%s)", len(prompt), self.config.prompt.name)

        raw = self._invoke(prompt)

        logger.debug("Parsing model response (%d chars)", len(raw))
        result = parse_analysis_response(raw, strict=self.config.strict_contract)

        logger.info("Analysis succeeded: %s", result.product_name)
        return result

    def _invoke(self, prompt: str) -> str:
        """모델 호출. 일시적 실패(retryable)만 max_retries 만큼 지수 백오프로 재시도."""
        attempts = self.config.max_retries + 1
        attempt = 0
        while True:
            logger.debug("Invoking model %s (attempt %d/%d)", self._client.model_name, attempt + 1, attempts)
            try:
                return self._call_client(prompt)
            except TrendAnalystError as e:
                if not e.retryable or attempt + 1 >= attempts:
                    raise
                delay = self.config.retry_delay * (2**attempt)
                # 서버가 알려준 Retry-After보다 먼저 재시도하지 않음
                retry_after = getattr(e, "retry_after", None)
                if retry_after is not None:
                    delay = max(delay, retry_after)
                logger.warning(
                    "%s on attempt %d/%d, retrying in %.1fs",
                    e.kind.value, attempt + 1, attempts, delay,
                )
                self._sleep(delay)
                attempt += 1

    def _call_client(self, prompt: str) -> str:
        try:
            raw = self._client.complete(prompt)
        except TrendAnalystError:
            raise
        except Exception as e:
            error = classify_upstream_error(e)
            log_exception(logger, e, context=f"Model call failed ({error.kind.value})")
            raise error from e

        if not isinstance(raw, str):
            logger.error("Model returned non-text payload: %s", type(raw).__name__)
            raise UpstreamError(details=f"non-text payload: {type(raw).__name__}")
        return raw


def create_analyzer(settings: Settings | None = None) -> ProductAnalyzer:
    """
    설정에서 분석기 생성 헬퍼 함수.

    설정은 여기서 한 번만 읽습니다. API 키가 없으면 클라이언트 없이 생성되고
    analyze 호출 시 ConfigurationError가 발생합니다.

    Args:
        settings: Settings 인스턴스 (None이면 환경변수에서 로드)

    Returns:
        ProductAnalyzer 인스턴스
    """
    settings = settings or get_settings()
    client = create_model_client(settings)
    if client is None:
        logger.warning("OPENAI_API_KEY is not set; analysis requests will be refused")

    return ProductAnalyzer(client=client, config=AnalyzerConfig.from_settings(settings))
