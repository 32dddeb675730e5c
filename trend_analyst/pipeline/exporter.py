"""
분석 결과 내보내기 모듈.

AnalysisResult를 JSON / Markdown / 텍스트로 변환합니다.
"""

from __future__ import annotations

import json
import re

from trend_analyst.pipeline.schemas import AnalysisResult

REPORT_TITLE = "Product Hunt Trending Analysis"

EXPORT_FORMATS = {
    "json": ("json", "application/json"),
    "markdown": ("md", "text/markdown"),
    "text": ("txt", "text/plain"),
}


def to_json(result: AnalysisResult) -> str:
    """JSON 문자열 (응답 필드명 그대로)."""
    return json.dumps(result.to_dict(), ensure_ascii=False, indent=2)


def to_markdown(result: AnalysisResult) -> str:
    """Markdown 리포트."""
    differentiators = "\n".join(f"- {d}" for d in result.key_differentiators)
    recommendations = "\n".join(f"- {r}" for r in result.recommendations)

    return f"""# {REPORT_TITLE}

## {result.product_name}

{result.one_line_summary}

## Market Positioning
{result.market_positioning}

## Target Audience
{result.target_audience}

## Key Differentiators
{differentiators}

## Trend Analysis
{result.trend_analysis}

## Growth Potential
{result.growth_potential}

## Recommendations
{recommendations}
"""


def to_text(result: AnalysisResult) -> str:
    """일반 텍스트 리포트 (클립보드 복사에도 사용)."""
    differentiators = "\n".join(f"• {d}" for d in result.key_differentiators)
    recommendations = "\n".join(f"• {r}" for r in result.recommendations)

    return f"""{REPORT_TITLE}

Product: {result.product_name}

{result.one_line_summary}

Market Positioning:
{result.market_positioning}

Target Audience:
{result.target_audience}

Key Differentiators:
{differentiators}

Trend Analysis:
{result.trend_analysis}

Growth Potential:
{result.growth_potential}

Recommendations:
{recommendations}
"""


def export_filename(result: AnalysisResult, extension: str) -> str:
    """다운로드 파일명 (예: 'Acme Notes' -> 'Acme-Notes-analysis.md')."""
    slug = re.sub(r"\s+", "-", result.product_name)
    return f"{slug}-analysis.{extension.lstrip('.')}"


def export(result: AnalysisResult, fmt: str) -> tuple[str, str, str]:
    """
    지정한 형식으로 내보내기.

    Args:
        result: 분석 결과
        fmt: "json", "markdown", "text" 중 하나

    Returns:
        (내용, 파일명, MIME 타입) 튜플

    Raises:
        ValueError: 지원하지 않는 형식
    """
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unsupported export format '{fmt}'. Available: {list(EXPORT_FORMATS)}")

    extension, mime = EXPORT_FORMATS[fmt]
    renderers = {"json": to_json, "markdown": to_markdown, "text": to_text}
    return renderers[fmt](result), export_filename(result, extension), mime
