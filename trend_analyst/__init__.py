"""
Product Trend Analyst.

제품 설명(또는 URL)을 LLM으로 분석해 구조화된 트렌드 리포트를 만듭니다.
"""

__version__ = "0.1.0"
