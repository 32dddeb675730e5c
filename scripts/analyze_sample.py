#!/usr/bin/env python3
"""
실제 모델 API로 제품 분석을 한 번 실행해보는 스크립트.

사용법:
    ./venv/bin/python scripts/analyze_sample.py
    ./venv/bin/python scripts/analyze_sample.py "제품 설명..." --format markdown
"""

import argparse
import sys
from pathlib import Path

# 프로젝트 루트 경로 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from trend_analyst.core.exceptions import TrendAnalystError
from trend_analyst.core.logging import setup_logging
from trend_analyst.pipeline.analyzer import create_analyzer
from trend_analyst.pipeline.exporter import EXPORT_FORMATS, export
from trend_analyst.utils.config import get_settings

SAMPLE_DESCRIPTION = (
    "Notion Calendar is a calendar app that connects with your Notion workspace. "
    "It lets teams schedule meetings, see project deadlines next to their events, "
    "and join video calls in one click. It works with Google Calendar accounts and "
    "is free for individuals, with team features included in Notion plans."
)


def main():
    # 환경변수 로드
    load_dotenv()
    settings = get_settings()
    setup_logging(level=settings.log_level, log_file=settings.log_file, log_dir=Path(settings.log_dir))

    parser = argparse.ArgumentParser(description="Run one product trend analysis")
    parser.add_argument("text", nargs="?", default=SAMPLE_DESCRIPTION)
    parser.add_argument("--format", choices=list(EXPORT_FORMATS), default="text")
    args = parser.parse_args()

    print("=" * 60)
    print("📊 Product Trend Analysis")
    print("=" * 60)

    analyzer = create_analyzer(settings)
    try:
        result = analyzer.analyze(args.text)
    except TrendAnalystError as e:
        print(f"\n❌ [{e.kind.value}] {e.message}")
        if e.suggestion:
            print(f"   → {e.suggestion}")
        return 1

    content, filename, _ = export(result, args.format)
    print(f"\n{content}")
    print("=" * 60)
    print(f"✅ Done ({filename})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
