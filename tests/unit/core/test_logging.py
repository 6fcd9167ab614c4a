"""
core/logging.py 테스트
"""

import logging
from pathlib import Path

import pytest

from core.constants import Paths
from core.logging import LOG_FORMAT, NOISY_LOGGERS, get_log_file_path, setup_logging


@pytest.fixture
def restore_root_logger():
    """테스트 후 setup_logging이 붙인 핸들러 제거"""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler.formatter is not None and handler.formatter._fmt == LOG_FORMAT:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


class TestSetupLogging:
    """setup_logging 테스트"""

    def test_creates_log_file(self, temp_dir: Path, restore_root_logger) -> None:
        """로그 디렉토리/파일 생성"""
        log_dir = temp_dir / "logs"

        setup_logging("seed_db", log_dir=log_dir)
        logging.getLogger("test").info("hello")

        assert (log_dir / "seed_db.log").exists()

    def test_replaces_handlers(self, temp_dir: Path, restore_root_logger) -> None:
        """반복 호출해도 핸들러가 중복되지 않음"""
        setup_logging("seed_db", log_dir=temp_dir)
        setup_logging("seed_db", log_dir=temp_dir)

        assert len(logging.getLogger().handlers) == 2

    def test_default_dir_from_process_name(
        self,
        temp_dir: Path,
        monkeypatch,
        restore_root_logger,
    ) -> None:
        """log_dir 생략 시 get_log_file_path 경로에 기록"""
        monkeypatch.setattr(Paths, "LOGS_DIR", temp_dir / "default")

        setup_logging("seed_db")

        file_handlers = [
            h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)
        ]
        assert [Path(h.baseFilename) for h in file_handlers] == [get_log_file_path("seed_db")]
        assert get_log_file_path("seed_db") == temp_dir / "default" / "seed_db.log"

    def test_quiets_noisy_loggers(self, temp_dir: Path, restore_root_logger) -> None:
        setup_logging("seed_db", log_dir=temp_dir)

        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING


class TestGetLogFilePath:
    """get_log_file_path 테스트"""

    def test_web(self) -> None:
        assert get_log_file_path("web") == Paths.WEB_LOGS_DIR / "web.log"

    def test_other_process(self) -> None:
        assert get_log_file_path("seed_db") == Paths.LOGS_DIR / "seed_db.log"

    def test_explicit_dir(self, temp_dir: Path) -> None:
        assert get_log_file_path("web", temp_dir) == temp_dir / "web.log"
