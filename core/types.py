"""
타입 정의 모듈

Enum, Dataclass 등 핵심 타입 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능

금액은 Decimal, 날짜는 YYYY-MM-DD 문자열, 타임스탬프는 ISO-8601(UTC) 문자열.
레코드는 불변이며 값으로 전달된다.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from core.utils.numbers import to_json_number


class Kind(str, Enum):
    """카테고리/거래 구분 (수입 / 지출)"""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def values(cls) -> list[str]:
        return [k.value for k in cls]


@dataclass(frozen=True)
class Category:
    """카테고리 (불변)"""

    id: int
    name: str
    type: str
    color: str
    icon: str
    created_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "color": self.color,
            "icon": self.icon,
            "created_at": self.created_at,
        }


@dataclass(frozen=True)
class Transaction:
    """거래 (불변)

    category_name/color/icon은 조회 시 categories 테이블에서 조인된 값.
    """

    id: int | None
    amount: Decimal
    type: str
    category_id: int
    date: str
    description: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    category_name: str | None = None
    category_color: str | None = None
    category_icon: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "amount": to_json_number(self.amount),
            "type": self.type,
            "category_id": self.category_id,
            "category_name": self.category_name,
            "category_color": self.category_color,
            "category_icon": self.category_icon,
            "description": self.description,
            "date": self.date,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


@dataclass(frozen=True)
class Goal:
    """저축 목표 (불변)"""

    id: int | None
    name: str
    target_amount: Decimal
    current_amount: Decimal = Decimal("0")
    deadline: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "target_amount": to_json_number(self.target_amount),
            "current_amount": to_json_number(self.current_amount),
            "deadline": self.deadline,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
