"""
Web API 테스트 픽스처

임시 settings.yaml + 임시 DB로 앱을 띄운다 (lifespan에서 스키마/기본 카테고리 생성).
"""

from contextlib import contextmanager
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from core.config.loader import get_settings


@pytest.fixture
def make_client(write_settings, temp_dir: Path):
    """TestClient 생성 헬퍼

    사용 예:
        with make_client(environment="production") as client:
            ...
    """

    @contextmanager
    def _make(environment: str = "development", raise_server_exceptions: bool = True):
        path = write_settings(
            f"environment: {environment}\n"
            "database:\n"
            f"  path: {(temp_dir / 'api.db').as_posix()}\n"
            "seed:\n"
            "  default_categories: true\n"
            "  sample_data: false\n"
        )
        get_settings(path)

        from web.app import app

        with TestClient(app, raise_server_exceptions=raise_server_exceptions) as client:
            yield client

    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    with make_client() as client:
        yield client
