"""
core/constants.py 테스트

모든 경로가 pathlib.Path 타입이고, 상수가 정상적으로 접근 가능한지 확인
"""

from pathlib import Path

from core.constants import PROJECT_ROOT, Defaults, Limits, Paths


class TestProjectRoot:
    """PROJECT_ROOT 테스트"""

    def test_project_root_is_path(self) -> None:
        """PROJECT_ROOT가 Path 타입인지 확인"""
        assert isinstance(PROJECT_ROOT, Path)

    def test_project_root_is_absolute(self) -> None:
        """PROJECT_ROOT가 절대 경로인지 확인"""
        assert PROJECT_ROOT.is_absolute()

    def test_project_root_contains_core_directory(self) -> None:
        """PROJECT_ROOT에 core 디렉토리가 있는지 확인"""
        assert (PROJECT_ROOT / "core").exists()


class TestDefaults:
    """Defaults 테스트"""

    def test_environment(self) -> None:
        assert Defaults.ENVIRONMENT == "development"

    def test_web(self) -> None:
        """Web 기본 호스트/포트"""
        assert Defaults.WEB_HOST == "127.0.0.1"
        assert Defaults.WEB_PORT == 8000

    def test_category_defaults(self) -> None:
        """카테고리 기본 색상/아이콘"""
        assert Defaults.CATEGORY_COLOR == "#3b82f6"
        assert Defaults.CATEGORY_ICON == "💰"


class TestLimits:
    """Limits 테스트"""

    def test_lengths(self) -> None:
        assert Limits.CATEGORY_NAME_MAX == 50
        assert Limits.CATEGORY_ICON_MAX == 8
        assert Limits.DESCRIPTION_MAX == 200
        assert Limits.GOAL_NAME_MAX == 100


class TestPaths:
    """Paths 테스트"""

    def test_all_paths_are_path_type(self) -> None:
        """모든 경로가 Path 타입인지 확인"""
        for name in ("CONFIG_DIR", "DATA_DIR", "LOGS_DIR", "WEB_LOGS_DIR", "SETTINGS_FILE", "DEFAULT_DB"):
            assert isinstance(getattr(Paths, name), Path), name

    def test_paths_under_project_root(self) -> None:
        """경로가 프로젝트 루트 하위인지 확인"""
        assert Paths.SETTINGS_FILE.parent == Paths.CONFIG_DIR
        assert Paths.DEFAULT_DB.parent == Paths.DATA_DIR
        assert Paths.WEB_LOGS_DIR.parent == Paths.LOGS_DIR
        assert Paths.CONFIG_DIR.parent == PROJECT_ROOT
