"""
모델 응답 파싱 및 계약 검증 모듈.

모델이 가끔 붙이는 마크다운 코드 펜스를 제거하고, JSON으로 해석한 뒤
최소 필드 계약을 만족하는지 확인해서 AnalysisResult로 변환합니다.
"""

from __future__ import annotations

import json
import re
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from trend_analyst.core.exceptions import ContractViolationError, MalformedResponseError
from trend_analyst.core.logging import get_logger
from trend_analyst.pipeline.schemas import AnalysisResult
from trend_analyst.prompts.templates import LIST_FIELDS, RESULT_FIELDS

logger = get_logger(__name__)

# ```json 여는 펜스(뒤 개행 선택)와 ``` 닫는 펜스(앞 개행 선택)
CODE_FENCE_PATTERN = re.compile(r"```json\n?|\n?```")

# 항상 검사하는 필수 필드
REQUIRED_TEXT_FIELDS = ("productName", "oneLineSummary")
REQUIRED_LIST_FIELD = "keyDifferentiators"


def strip_code_fences(text: str) -> str:
    """코드 펜스 표기와 앞뒤 공백 제거."""
    return CODE_FENCE_PATTERN.sub("", text).strip()


def decode_response(raw: str) -> Any:
    """
    모델 응답 텍스트를 JSON 값으로 해석.

    Args:
        raw: 모델이 돌려준 원문 텍스트

    Returns:
        해석된 JSON 값

    Raises:
        MalformedResponseError: JSON으로 해석할 수 없는 경우
    """
    cleaned = strip_code_fences(raw or "")
    try:
        return json.loads(cleaned)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError 외에 과도한 정수 자릿수(ValueError), 깊은 중첩(RecursionError)도 포함
        logger.error("Failed to parse AI response as JSON: %r", raw)
        raise MalformedResponseError(details=f"{type(e).__name__}: {str(e)[:200]}") from e


def _violation(field: str | None, reason: str, data: Any) -> ContractViolationError:
    logger.error("Invalid AI response structure (%s): %r", reason, data)
    return ContractViolationError(field=field, details=reason)


def enforce_contract(data: Any, strict: bool = False) -> AnalysisResult:
    """
    해석된 응답이 결과 계약을 만족하는지 확인.

    productName, oneLineSummary는 비어 있지 않은 문자열, keyDifferentiators는 리스트여야 합니다.
    나머지 다섯 필드는 strict=False이면 누락/null을 빈 값으로 채우고 경고를 남기며,
    strict=True이면 ContractViolationError로 거부합니다. 타입이 맞지 않는 값은 항상 거부합니다.

    Args:
        data: decode_response 결과
        strict: 여덟 필드를 모두 요구할지 여부

    Returns:
        AnalysisResult

    Raises:
        ContractViolationError: 계약 위반
    """
    if not isinstance(data, dict):
        raise _violation(None, f"expected a JSON object, got {type(data).__name__}", data)

    for name in REQUIRED_TEXT_FIELDS:
        value = data.get(name)
        if not isinstance(value, str) or not value.strip():
            raise _violation(name, f"'{name}' must be a non-empty string", data)

    if not isinstance(data.get(REQUIRED_LIST_FIELD), list):
        raise _violation(REQUIRED_LIST_FIELD, f"'{REQUIRED_LIST_FIELD}' must be a list", data)

    normalized = dict(data)
    missing = [name for name in RESULT_FIELDS if normalized.get(name) is None]
    if missing:
        if strict:
            raise _violation(missing[0], f"missing fields: {', '.join(missing)}", data)
        logger.warning("AI response omitted fields, filling defaults: %s", ", ".join(missing))
        for name in missing:
            normalized[name] = [] if name in LIST_FIELDS else ""

    try:
        return AnalysisResult.model_validate(normalized)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = str(first["loc"][0]) if first.get("loc") else None
        raise _violation(field, f"{field}: {first['msg']}", data) from e


def parse_analysis_response(raw: str, strict: bool = False) -> AnalysisResult:
    """펜스 제거 → JSON 해석 → 계약 검증."""
    return enforce_contract(decode_response(raw), strict=strict)
