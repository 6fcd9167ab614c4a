"""
pytest 공통 fixture 정의

임시 디렉토리, 스키마가 준비된 SQLite 어댑터, 카테고리/거래 샘플
"""

import tempfile
from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio

from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema
from core.config.loader import Settings


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def reset_settings() -> None:
    """테스트마다 Settings 싱글턴 초기화"""
    Settings.reset()
    yield
    Settings.reset()


@pytest_asyncio.fixture
async def db(tmp_path: Path) -> AsyncGenerator[SQLiteAdapter, None]:
    """스키마가 생성된 임시 DB"""
    adapter = SQLiteAdapter(tmp_path / "finance_test.db")
    await adapter.connect()
    await init_schema(adapter)
    yield adapter
    await adapter.close()


@pytest.fixture
def write_settings(temp_dir: Path):
    """settings.yaml 작성 헬퍼

    사용 예:
        path = write_settings("environment: production\\n")
    """

    def _write(content: str, name: str = "settings.yaml") -> Path:
        path = temp_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
