"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from decimal import Decimal
from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → 프로젝트 루트)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class Defaults:
    """기본값 상수"""

    ENVIRONMENT: str = "development"

    WEB_HOST: str = "127.0.0.1"
    WEB_PORT: int = 8000

    CATEGORY_COLOR: str = "#3b82f6"
    CATEGORY_ICON: str = "💰"


class Limits:
    """입력 길이/형식 제한"""

    CATEGORY_NAME_MAX: int = 50
    CATEGORY_ICON_MAX: int = 8
    DESCRIPTION_MAX: int = 200
    GOAL_NAME_MAX: int = 100

    # 금액 상한 (미만만 허용). 진행률 계산이 Decimal 정밀도 안에 머물도록 제한
    AMOUNT_MAX: Decimal = Decimal("1000000000000")

    # SQLite INTEGER 범위 (64비트 부호 있는 정수)
    ID_MAX: int = 2**63 - 1


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    DATA_DIR: Path = PROJECT_ROOT / "data"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"
    WEB_LOGS_DIR: Path = LOGS_DIR / "web"

    # 설정 파일
    SETTINGS_FILE: Path = CONFIG_DIR / "settings.yaml"

    # DB 파일
    DEFAULT_DB: Path = DATA_DIR / "finance.db"
