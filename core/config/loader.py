"""
설정 로더

config/settings.yaml 로드 (파일이 없으면 기본값)
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from core.constants import PROJECT_ROOT, Defaults, Paths

ENVIRONMENTS = ("development", "production")


@dataclass(frozen=True)
class AppConfig:
    """애플리케이션 설정 (settings.yaml에서 로드)

    불변 데이터 구조로 설정 변경 방지
    """

    environment: str
    db_path: Path
    web_host: str
    web_port: int
    seed_default_categories: bool
    seed_sample_data: bool


class SettingsLoadError(Exception):
    """설정 로드 실패 예외"""

    pass


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise SettingsLoadError(f"settings.yaml의 '{name}' 섹션은 매핑이어야 합니다")
    return section


def _resolve_path(value: str | Path) -> Path:
    """상대 경로는 프로젝트 루트 기준"""
    path = Path(value)
    if str(path) == ":memory:" or path.is_absolute():
        return path
    return PROJECT_ROOT / path


def load_config(path: Path | None = None) -> AppConfig:
    """settings.yaml 파일 로드

    Args:
        path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        AppConfig 인스턴스 (파일이 없으면 기본값)

    Raises:
        SettingsLoadError: 형식이 잘못된 경우
    """
    if path is None:
        path = Paths.SETTINGS_FILE

    data: dict[str, Any] = {}
    if path.exists():
        try:
            content = path.read_text(encoding="utf-8")
            loaded = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise SettingsLoadError(f"settings.yaml 파싱 실패: {e}") from e

        if loaded is not None:
            if not isinstance(loaded, dict):
                raise SettingsLoadError("settings.yaml의 최상위는 매핑이어야 합니다")
            data = loaded

    environment = str(data.get("environment", Defaults.ENVIRONMENT)).lower()
    if environment not in ENVIRONMENTS:
        raise SettingsLoadError(
            f"유효하지 않은 environment입니다: '{environment}'. "
            f"유효한 값: {list(ENVIRONMENTS)}"
        )

    database = _section(data, "database")
    web = _section(data, "web")
    seed = _section(data, "seed")

    try:
        web_port = int(web.get("port", Defaults.WEB_PORT))
    except (TypeError, ValueError) as e:
        raise SettingsLoadError(f"web.port는 정수여야 합니다: {web.get('port')!r}") from e

    return AppConfig(
        environment=environment,
        db_path=_resolve_path(database.get("path", Paths.DEFAULT_DB)),
        web_host=str(web.get("host", Defaults.WEB_HOST)),
        web_port=web_port,
        seed_default_categories=bool(seed.get("default_categories", True)),
        seed_sample_data=bool(seed.get("sample_data", False)),
    )


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    settings.yaml을 로드하고 관련 설정을 제공
    """

    _instance: "Settings | None" = None
    _config: AppConfig | None = None

    def __new__(cls, settings_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, settings_path: Path | None = None) -> None:
        if self._config is None:
            type(self)._config = load_config(settings_path)

    @property
    def environment(self) -> str:
        """실행 환경 (development/production)"""
        assert self._config is not None
        return self._config.environment

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def db_path(self) -> Path:
        """DB 파일 경로"""
        assert self._config is not None
        return self._config.db_path

    @property
    def web_host(self) -> str:
        assert self._config is not None
        return self._config.web_host

    @property
    def web_port(self) -> int:
        assert self._config is not None
        return self._config.web_port

    @property
    def seed_default_categories(self) -> bool:
        """시작 시 기본 카테고리 생성 여부"""
        assert self._config is not None
        return self._config.seed_default_categories

    @property
    def seed_sample_data(self) -> bool:
        """시작 시 샘플 데이터 생성 여부"""
        assert self._config is not None
        return self._config.seed_sample_data

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._config = None


def get_settings(settings_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        settings_path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(settings_path)
