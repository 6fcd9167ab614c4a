"""
에러 분류

- ValidationError: 입력 형식/규칙 위반 (필드 단위, HTTP 400)
- NotFoundError: 참조 엔티티 없음 (HTTP 404)
- ConflictError: 참조 중인 카테고리 삭제 시도 (HTTP 400)
- InternalError: 예상하지 못한 저장소/엔진 오류 (HTTP 500)

Web 계층의 exception handler가 응답 봉투로 변환한다.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Violation:
    """단일 규칙 위반 (필드 경로 + 메시지)"""

    field_path: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field_path": self.field_path, "message": self.message}


class FinanceError(Exception):
    """도메인 에러 기본 클래스"""

    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(FinanceError):
    """검증 실패

    한 번의 검증에서 발견된 모든 위반을 담는다.
    """

    status_code = 400

    def __init__(self, violations: list[Violation]):
        self.violations = list(violations)
        message = "; ".join(f"{v.field_path}: {v.message}" for v in self.violations)
        super().__init__(message or "Validation failed")

    @classmethod
    def single(cls, field_path: str, message: str) -> "ValidationError":
        return cls([Violation(field_path, message)])

    def fields(self) -> list[str]:
        """위반이 발생한 필드 경로 목록"""
        return [v.field_path for v in self.violations]

    def details(self) -> list[dict[str, Any]]:
        return [v.to_dict() for v in self.violations]


class NotFoundError(FinanceError):
    """엔티티 없음"""

    status_code = 404

    def __init__(self, entity: str, entity_id: Any = None):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")


class ConflictError(FinanceError):
    """참조 무결성 때문에 거부된 변경"""

    status_code = 400


class InternalError(FinanceError):
    """예상하지 못한 내부 오류"""

    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
