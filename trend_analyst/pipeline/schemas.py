"""
분석 결과 스키마.

모델 응답(JSON)의 camelCase 필드를 snake_case 속성으로 노출합니다.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AnalysisResult(BaseModel):
    """제품 트렌드 분석 결과 (요청마다 새로 생성, 생성 후 변경 불가)."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    product_name: str = Field(alias="productName", min_length=1, description="제품명")
    one_line_summary: str = Field(alias="oneLineSummary", min_length=1, description="한 줄 요약")
    market_positioning: str = Field(alias="marketPositioning", description="시장 포지셔닝")
    target_audience: str = Field(alias="targetAudience", description="타깃 고객")
    key_differentiators: list[str] = Field(alias="keyDifferentiators", description="핵심 차별점")
    trend_analysis: str = Field(alias="trendAnalysis", description="트렌드 분석")
    growth_potential: str = Field(alias="growthPotential", description="성장 잠재력")
    recommendations: list[str] = Field(alias="recommendations", description="개선/GTM 제안")

    def to_dict(self) -> dict[str, Any]:
        """응답 필드명(camelCase) 기준 딕셔너리로 변환."""
        return self.model_dump(by_alias=True)
