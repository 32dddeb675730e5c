"""
입력 검증 모듈.

모델 호출 전에 사용자 입력의 타입과 최소 길이를 확인합니다.
"""

from __future__ import annotations

from typing import Any

from trend_analyst.core.exceptions import InputTooShortError, InvalidInputTypeError

# 공백 제거 후 최소 글자 수
MIN_INPUT_LENGTH = 50


def validate_input(value: Any, min_length: int = MIN_INPUT_LENGTH) -> str:
    """
    분석 입력 검증.

    길이 검사에만 trim 결과를 쓰고, 반환값은 원문 그대로입니다.
    최대 길이 제한은 없습니다.

    Args:
        value: 호출자가 보낸 입력
        min_length: 최소 글자 수

    Returns:
        원문 입력 텍스트

    Raises:
        InvalidInputTypeError: 입력이 없거나 문자열이 아닌 경우
        InputTooShortError: trim 후 길이가 min_length 미만인 경우
    """
    if not value or not isinstance(value, str):
        raise InvalidInputTypeError(details=f"received {type(value).__name__}")

    length = len(value.strip())
    if length < min_length:
        raise InputTooShortError(length=length, details=f"{length} < {min_length} characters")

    return value
