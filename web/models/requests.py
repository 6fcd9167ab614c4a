"""
요청 스키마 (Pydantic)

Web API 요청 본문 정의.
필드 타입은 느슨하게 받고(Any), 실제 규칙 검증은 core.validation에서 수행하여
위반을 필드 단위로 모두 보고한다.
"""

from typing import Any

from pydantic import BaseModel, Field


class _Payload(BaseModel):
    """요청 본문 공통 설정 (알 수 없는 필드 무시)"""

    model_config = {"extra": "ignore"}

    def to_payload(self) -> dict[str, Any]:
        """요청에 실제로 포함된 필드만 반환 (부분 갱신용)"""
        return self.model_dump(exclude_unset=True)


class CategoryPayload(_Payload):
    """카테고리 생성/갱신 요청"""

    name: Any = Field(default=None, description="카테고리 이름")
    type: Any = Field(default=None, description="구분 (income/expense)")
    color: Any = Field(default=None, description="색상 (#RRGGBB)")
    icon: Any = Field(default=None, description="아이콘 (이모지)")

    model_config = {
        "extra": "ignore",
        "json_schema_extra": {
            "examples": [
                {"name": "Food", "type": "expense", "color": "#ef4444", "icon": "🍜"},
            ]
        },
    }


class TransactionPayload(_Payload):
    """거래 생성/갱신 요청"""

    amount: Any = Field(default=None, description="금액 (양수)")
    type: Any = Field(default=None, description="구분 (income/expense)")
    category_id: Any = Field(default=None, description="카테고리 ID")
    description: Any = Field(default=None, description="설명 (최대 200자)")
    date: Any = Field(default=None, description="거래일 (YYYY-MM-DD)")

    model_config = {
        "extra": "ignore",
        "json_schema_extra": {
            "examples": [
                {
                    "amount": 450,
                    "type": "expense",
                    "category_id": 4,
                    "description": "Lunch",
                    "date": "2026-03-10",
                },
            ]
        },
    }


class GoalPayload(_Payload):
    """저축 목표 생성/갱신 요청"""

    name: Any = Field(default=None, description="목표 이름 (1~100자)")
    target_amount: Any = Field(default=None, description="목표 금액 (양수)")
    current_amount: Any = Field(default=None, description="현재 금액 (0 이상, 목표 이하)")
    deadline: Any = Field(default=None, description="마감일 (YYYY-MM-DD, 빈 문자열이면 없음)")

    model_config = {
        "extra": "ignore",
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Emergency fund",
                    "target_amount": 100000,
                    "current_amount": 35000,
                    "deadline": "2026-12-31",
                },
            ]
        },
    }
