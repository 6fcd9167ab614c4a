"""
DB 초기화 스크립트

스키마 생성 후 기본 카테고리(및 선택적으로 샘플 데이터)를 삽입.

실행 방법:
    python -m scripts.seed_db
    python -m scripts.seed_db --sample
    python -m scripts.seed_db --db data/demo.db --settings config/settings.yaml
"""

import argparse
import asyncio
import logging
from pathlib import Path

from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema
from core.config.loader import get_settings
from core.logging import setup_logging
from core.storage.seed import seed_default_categories, seed_sample_data

logger = logging.getLogger(__name__)


async def main(db_path: Path, sample: bool) -> None:
    """초기화 실행

    Args:
        db_path: DB 파일 경로
        sample: 샘플 거래/목표 삽입 여부
    """
    logger.info(f"DB 초기화 시작: {db_path}")

    async with SQLiteAdapter(db_path) as db:
        await init_schema(db)

        created = await seed_default_categories(db)
        logger.info(f"기본 카테고리: {created}개 생성")

        if sample:
            tx_count, goal_count = await seed_sample_data(db)
            logger.info(f"샘플 데이터: 거래 {tx_count}건, 목표 {goal_count}건")

    logger.info("DB 초기화 완료 ✓")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="가계부 DB 스키마 생성 및 초기 데이터 삽입"
    )
    parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="settings.yaml 경로 (기본: config/settings.yaml)",
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="DB 파일 경로 (기본: 설정의 database.path)",
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="현재 월 기준 샘플 거래/목표 삽입",
    )
    args = parser.parse_args()

    setup_logging("seed_db")
    settings = get_settings(args.settings)

    asyncio.run(main(args.db or settings.db_path, args.sample))
