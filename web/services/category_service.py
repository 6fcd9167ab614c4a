"""
Category 서비스

카테고리 CRUD 및 삭제 보호 (참조 중인 카테고리 삭제 불가)
"""

import logging
from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.errors import ConflictError, NotFoundError
from core.storage.category_store import CATEGORY_IN_USE, CategoryStore
from core.types import Category
from core.validation.rules import validate_category

logger = logging.getLogger(__name__)


class CategoryService:
    """Category 서비스

    Args:
        db: SQLite 어댑터 (쓰기 작업은 쓰기 가능 어댑터 필요)
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db
        self.store = CategoryStore(db)

    async def list_categories(self) -> list[dict[str, Any]]:
        """전체 카테고리 조회"""
        return [c.to_dict() for c in await self.store.list_all()]

    async def get_category(self, category_id: int) -> dict[str, Any]:
        """카테고리 조회

        Raises:
            NotFoundError: 카테고리 없음
        """
        return (await self._require(category_id)).to_dict()

    async def create_category(self, payload: dict[str, Any]) -> dict[str, Any]:
        """카테고리 생성

        Raises:
            ValidationError: 입력 규칙 위반
        """
        draft = validate_category(payload)
        category_id = await self.store.create(draft.name, draft.type, draft.color, draft.icon)
        return (await self._require(category_id)).to_dict()

    async def update_category(
        self,
        category_id: int,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        """카테고리 부분 갱신 (생략된 필드는 기존 값 유지)

        Raises:
            NotFoundError: 카테고리 없음
            ValidationError: 입력 규칙 위반
        """
        existing = await self._require(category_id)
        draft = validate_category(payload, existing)
        await self.store.update(category_id, draft)
        return (await self._require(category_id)).to_dict()

    async def delete_category(self, category_id: int) -> None:
        """카테고리 삭제

        Raises:
            NotFoundError: 카테고리 없음
            ConflictError: 거래가 참조 중인 카테고리
        """
        await self._require(category_id)

        in_use = await self.store.count_transactions(category_id)
        if in_use > 0:
            logger.info(
                f"Category delete blocked: {category_id}",
                extra={"transaction_count": in_use},
            )
            raise ConflictError(CATEGORY_IN_USE)

        await self.store.delete(category_id)

    async def _require(self, category_id: int) -> Category:
        category = await self.store.find_by_id(category_id)
        if category is None:
            raise NotFoundError("Category", category_id)
        return category
