"""
응답 파서 / 계약 검증 단위 테스트.
"""

import json

import pytest

from trend_analyst.core.exceptions import (
    ContractViolationError,
    ErrorKind,
    MalformedResponseError,
)
from trend_analyst.pipeline.response_parser import (
    decode_response,
    enforce_contract,
    parse_analysis_response,
    strip_code_fences,
)
from trend_analyst.pipeline.analyzer import ProductAnalyzer
from trend_analyst.pipeline.schemas import AnalysisResult


# =============================================================================
# 코드 펜스 제거
# =============================================================================


class TestStripCodeFences:
    """코드 펜스 제거 테스트."""

    def test_json_fence_with_newlines(self):
        raw = '```json\n{"a": 1}\n```'
        assert strip_code_fences(raw) == '{"a": 1}'

    def test_json_fence_without_newlines(self):
        raw = '```json{"a": 1}```'
        assert strip_code_fences(raw) == '{"a": 1}'

    def test_surrounding_whitespace(self):
        raw = '\n\n  ```json\n{"a": 1}\n```  \n'
        assert strip_code_fences(raw) == '{"a": 1}'

    def test_plain_text_untouched(self):
        assert strip_code_fences('  {"a": 1}  ') == '{"a": 1}'

    def test_bare_fence(self):
        """언어 태그 없는 펜스도 제거."""
        assert strip_code_fences('```\n{"a": 1}\n```') == '{"a": 1}'


# =============================================================================
# JSON 해석
# =============================================================================


class TestDecodeResponse:
    """decode_response 테스트."""

    def test_fenced_minimal_object(self):
        """펜스로 감싼 JSON도 그대로 해석."""
        raw = '```json\n{"productName":"X","oneLineSummary":"Y","keyDifferentiators":[]}\n```'
        data = decode_response(raw)

        assert data == {"productName": "X", "oneLineSummary": "Y", "keyDifferentiators": []}

    def test_not_json(self):
        with pytest.raises(MalformedResponseError) as exc_info:
            decode_response("not json")

        assert exc_info.value.kind == ErrorKind.MALFORMED_RESPONSE

    def test_empty(self):
        with pytest.raises(MalformedResponseError):
            decode_response("")

    def test_raw_payload_not_exposed(self):
        """원문 응답은 사용자 메시지에 포함되지 않음."""
        secret = "model rambling with internal details"
        with pytest.raises(MalformedResponseError) as exc_info:
            decode_response(secret)

        assert secret not in exc_info.value.message
        assert secret not in json.dumps(exc_info.value.to_dict())

    def test_oversized_integer(self):
        """정수 자릿수 제한을 넘는 값도 MalformedResponseError."""
        raw = '{"productName":"X","oneLineSummary":"Y","keyDifferentiators":[],"n":' + "9" * 5000 + "}"
        with pytest.raises(MalformedResponseError) as exc_info:
            decode_response(raw)

        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_deeply_nested_array(self):
        """재귀 한도를 넘는 중첩도 MalformedResponseError."""
        with pytest.raises(MalformedResponseError) as exc_info:
            decode_response("[" * 200_000 + "]" * 200_000)

        assert isinstance(exc_info.value.__cause__, RecursionError)

    def test_raw_payload_logged(self, caplog):
        with pytest.raises(MalformedResponseError):
            decode_response("definitely not json")

        assert "definitely not json" in caplog.text


# =============================================================================
# 계약 검증
# =============================================================================


class TestEnforceContract:
    """enforce_contract 테스트."""

    def test_full_payload_round_trip(self, analysis_payload):
        """여덟 필드가 채워진 응답은 값 그대로 반환."""
        result = enforce_contract(analysis_payload)

        assert isinstance(result, AnalysisResult)
        assert result.to_dict() == analysis_payload
        assert result.product_name == "Linear"
        assert result.key_differentiators == analysis_payload["keyDifferentiators"]

    def test_empty_product_name(self, analysis_payload):
        analysis_payload["productName"] = ""
        with pytest.raises(ContractViolationError) as exc_info:
            enforce_contract(analysis_payload)

        assert exc_info.value.kind == ErrorKind.CONTRACT_VIOLATION
        assert exc_info.value.field == "productName"

    def test_missing_product_name(self, analysis_payload):
        del analysis_payload["productName"]
        with pytest.raises(ContractViolationError):
            enforce_contract(analysis_payload)

    def test_blank_summary(self, analysis_payload):
        analysis_payload["oneLineSummary"] = "   "
        with pytest.raises(ContractViolationError) as exc_info:
            enforce_contract(analysis_payload)

        assert exc_info.value.field == "oneLineSummary"

    @pytest.mark.parametrize("value", [None, "a, b, c", {"a": 1}])
    def test_differentiators_not_list(self, analysis_payload, value):
        analysis_payload["keyDifferentiators"] = value
        with pytest.raises(ContractViolationError) as exc_info:
            enforce_contract(analysis_payload)

        assert exc_info.value.field == "keyDifferentiators"

    def test_empty_differentiators_allowed(self, analysis_payload):
        analysis_payload["keyDifferentiators"] = []
        result = enforce_contract(analysis_payload)
        assert result.key_differentiators == []

    @pytest.mark.parametrize("value", [[1, 2], "text", None, 42])
    def test_non_object(self, value):
        with pytest.raises(ContractViolationError):
            enforce_contract(value)

    def test_minimal_payload_lenient(self):
        """기본 모드: 누락된 나머지 필드는 빈 값으로 채움."""
        result = enforce_contract(
            {"productName": "X", "oneLineSummary": "Y", "keyDifferentiators": []}
        )

        assert result.market_positioning == ""
        assert result.recommendations == []
        assert result.trend_analysis == ""

    def test_null_fields_lenient(self, analysis_payload, caplog):
        analysis_payload["growthPotential"] = None
        analysis_payload["recommendations"] = None

        result = enforce_contract(analysis_payload)

        assert result.growth_potential == ""
        assert result.recommendations == []
        assert "growthPotential" in caplog.text

    def test_minimal_payload_strict(self):
        """strict 모드: 여덟 필드 모두 필요."""
        with pytest.raises(ContractViolationError) as exc_info:
            enforce_contract(
                {"productName": "X", "oneLineSummary": "Y", "keyDifferentiators": []},
                strict=True,
            )

        assert exc_info.value.field == "marketPositioning"

    def test_full_payload_strict(self, analysis_payload):
        assert enforce_contract(analysis_payload, strict=True).to_dict() == analysis_payload

    def test_wrong_type_rejected(self, analysis_payload):
        """타입이 다른 값은 모드와 관계없이 거부."""
        analysis_payload["targetAudience"] = 42
        with pytest.raises(ContractViolationError) as exc_info:
            enforce_contract(analysis_payload)

        assert exc_info.value.field == "targetAudience"

    def test_non_string_list_items_rejected(self, analysis_payload):
        analysis_payload["recommendations"] = ["ok", {"nested": True}]
        with pytest.raises(ContractViolationError):
            enforce_contract(analysis_payload)

    def test_extra_fields_ignored(self, analysis_payload):
        payload = dict(analysis_payload, confidence="high")
        result = enforce_contract(payload)
        assert result.to_dict() == analysis_payload


class TestParseAnalysisResponse:
    """parse_analysis_response 테스트."""

    def test_fenced_full_payload(self, analysis_json, analysis_payload):
        result = parse_analysis_response(f"```json\n{analysis_json}\n```")
        assert result.to_dict() == analysis_payload

    def test_malformed(self):
        with pytest.raises(MalformedResponseError):
            parse_analysis_response("Sure! Here is the analysis: ...")

    def test_oversized_integer_through_analyzer(self, fake_client, product_description):
        """분석기 경계에서도 변환되지 않은 예외가 새지 않음."""
        raw = '{"productName":"X","oneLineSummary":"Y","keyDifferentiators":[],"n":' + "1" * 5000 + "}"
        analyzer = ProductAnalyzer(client=fake_client(raw))

        with pytest.raises(MalformedResponseError):
            analyzer.analyze(product_description)

    def test_contract_violation(self, analysis_payload):
        analysis_payload["productName"] = ""
        with pytest.raises(ContractViolationError):
            parse_analysis_response(json.dumps(analysis_payload))
