"""
Product Trend Analyst - Streamlit 화면.

제품 설명 입력 → 분석 → 결과 표시/내보내기 UI를 제공합니다.
"""

import sys
from pathlib import Path

import streamlit as st

# 프로젝트 루트 경로 추가
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from trend_analyst.core.exceptions import RateLimitError, TrendAnalystError, ValidationError
from trend_analyst.core.logging import get_logger, setup_logging
from trend_analyst.pipeline.analyzer import ProductAnalyzer, create_analyzer
from trend_analyst.pipeline.exporter import EXPORT_FORMATS, export, to_text
from trend_analyst.pipeline.schemas import AnalysisResult
from trend_analyst.pipeline.validator import MIN_INPUT_LENGTH
from trend_analyst.utils.config import settings

setup_logging(level=settings.log_level, log_file=settings.log_file, log_dir=Path(settings.log_dir))
logger = get_logger(__name__)

EXPORT_LABELS = {
    "json": "💾 Download JSON",
    "markdown": "📄 Download Markdown",
    "text": "📝 Download Text",
}


@st.cache_resource
def get_analyzer() -> ProductAnalyzer:
    """프로세스 당 한 번 생성되는 분석기."""
    return create_analyzer()


def init_session_state():
    """세션 상태 초기화."""
    if "analysis_result" not in st.session_state:
        st.session_state.analysis_result = None
    if "analysis_error" not in st.session_state:
        st.session_state.analysis_error = None


def show_error(error: TrendAnalystError):
    """에러 종류별 사용자 메시지 표시."""
    if isinstance(error, ValidationError):
        st.warning(error.message)
    elif isinstance(error, RateLimitError):
        wait = f" (retry after {error.retry_after:.0f}s)" if error.retry_after else ""
        st.warning(f"⏳ {error.message}{wait}")
    else:
        st.error(f"⚠️ {error.message}")

    if error.suggestion:
        st.caption(error.suggestion)


def run_analysis(text: str):
    """분석 실행 후 세션에 결과/에러 저장."""
    st.session_state.analysis_result = None
    st.session_state.analysis_error = None

    try:
        with st.spinner("Analyzing product..."):
            st.session_state.analysis_result = get_analyzer().analyze(text)
    except TrendAnalystError as e:
        logger.info(f"Analysis failed: {e.kind.value}")
        st.session_state.analysis_error = e


def render_section(title: str, body: str):
    st.subheader(title)
    st.write(body)


def render_list_section(title: str, items: list[str]):
    st.subheader(title)
    if items:
        st.markdown("\n".join(f"- {item}" for item in items))
    else:
        st.caption("No items returned.")


def render_result(result: AnalysisResult):
    """분석 결과 표시."""
    st.header(result.product_name)
    st.markdown(f"> {result.one_line_summary}")

    col1, col2 = st.columns(2)
    with col1:
        render_section("🎯 Market Positioning", result.market_positioning)
        render_section("👥 Target Audience", result.target_audience)
        render_list_section("✨ Key Differentiators", result.key_differentiators)
    with col2:
        render_section("📈 Trend Analysis", result.trend_analysis)
        render_section("🚀 Growth Potential", result.growth_potential)
        render_list_section("💡 Recommendations", result.recommendations)

    render_export(result)


def render_export(result: AnalysisResult):
    """내보내기 버튼."""
    st.markdown("---")
    columns = st.columns(len(EXPORT_FORMATS))
    for column, fmt in zip(columns, EXPORT_FORMATS):
        content, filename, mime = export(result, fmt)
        with column:
            st.download_button(
                EXPORT_LABELS[fmt],
                data=content,
                file_name=filename,
                mime=mime,
                key=f"download_{fmt}",
            )

    with st.expander("📋 Copy to Clipboard"):
        st.code(to_text(result), language=None)


def main():
    st.set_page_config(
        page_title="Product Trend Analyst",
        page_icon="📊",
        layout="wide",
    )
    init_session_state()

    st.title("📊 Product Trend Analyst")
    st.markdown("Paste a Product Hunt URL or product description to get AI-powered trend analysis")

    if not get_analyzer().is_configured:
        st.error("🔑 OPENAI_API_KEY is not set. Add it to your `.env` file and restart the app.")

    text = st.text_area(
        "Product Description or URL",
        height=200,
        placeholder=(
            "Paste a Product Hunt URL, product description, or details "
            "about a product you want to analyze..."
        ),
    )
    st.caption(f"{len(text.strip())} characters (minimum {MIN_INPUT_LENGTH})")

    if st.button("Analyze Product", type="primary"):
        run_analysis(text)

    if st.session_state.analysis_error is not None:
        show_error(st.session_state.analysis_error)

    if st.session_state.analysis_result is not None:
        render_result(st.session_state.analysis_result)


if __name__ == "__main__":
    main()
