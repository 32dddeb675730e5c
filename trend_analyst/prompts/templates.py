"""
프롬프트 템플릿 모듈.

제품 트렌드 분석을 위한 프롬프트 템플릿을 제공합니다.
모델 레이어에는 스키마 강제 수단이 없으므로, 필드명과 타입을 프롬프트에 그대로 적어
응답 형태를 유도하고 돌아온 응답은 response_parser에서 다시 검증합니다.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PromptTemplate:
    """프롬프트 템플릿 데이터 구조."""

    name: str
    user_prompt_template: str
    description: str = ""
    version: str = "1.0"

    def format_user_prompt(self, **kwargs) -> str:
        """사용자 프롬프트 포맷팅."""
        return self.user_prompt_template.format(**kwargs)


# =============================================================================
# 제품 분석 프롬프트
# =============================================================================

# 응답 JSON의 필드 (순서 유지)
TEXT_FIELDS = (
    "productName",
    "oneLineSummary",
    "marketPositioning",
    "targetAudience",
    "trendAnalysis",
    "growthPotential",
)
LIST_FIELDS = ("keyDifferentiators", "recommendations")
RESULT_FIELDS = (
    "productName",
    "oneLineSummary",
    "marketPositioning",
    "targetAudience",
    "keyDifferentiators",
    "trendAnalysis",
    "growthPotential",
    "recommendations",
)

ANALYSIS_USER_TEMPLATE = """Analyze this Product Hunt product or description and provide a structured trend analysis:

{input}

Please respond with a JSON object (no markdown formatting) with these exact fields:
{{
  "productName": "Extract product name or 'Unknown Product' if not found",
  "oneLineSummary": "One sentence summary of what this product does",
  "marketPositioning": "2-3 sentences on how this product positions itself in the market",
  "targetAudience": "Who is this product for? Be specific about demographics, use cases, or industries",
  "keyDifferentiators": ["array", "of", "3-5 unique features or competitive advantages"],
  "trendAnalysis": "How this aligns with current market trends, emerging opportunities, or timing factors",
  "growthPotential": "Assessment of market opportunity, scalability, and adoption potential with reasoning",
  "recommendations": ["2-4 actionable", "suggestions for improvement", "or go-to-market strategies"]
}}

Focus on actionable insights, market fit, and strategic value. Be specific and evidence-based when possible."""

ANALYSIS_PROMPT = PromptTemplate(
    name="product_trend_analysis",
    user_prompt_template=ANALYSIS_USER_TEMPLATE,
    description="제품 설명/URL 기반 시장 포지셔닝 및 트렌드 분석 프롬프트 (JSON 출력)",
    version="1.0",
)


def build_analysis_prompt(text: str, template: PromptTemplate = ANALYSIS_PROMPT) -> str:
    """
    검증된 입력을 분석 프롬프트에 삽입.

    입력은 가공 없이 그대로 들어갑니다. 같은 입력이면 항상 같은 문자열을 반환합니다.

    Args:
        text: 검증된 입력 텍스트 (trim 하지 않은 원문)
        template: 사용할 프롬프트 템플릿

    Returns:
        모델에 보낼 프롬프트 문자열
    """
    return template.format_user_prompt(input=text)
