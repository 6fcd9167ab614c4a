"""
Category Store

categories 테이블 CRUD 및 참조 개수 조회.
"""

import logging
from typing import Any

import aiosqlite

from adapters.db.sqlite_adapter import SQLiteAdapter, fits_sqlite_integer
from core.errors import ConflictError
from core.types import Category
from core.utils.timezone import now_iso
from core.validation.rules import CategoryDraft

logger = logging.getLogger(__name__)

_COLUMNS = "id, name, type, color, icon, created_at"

CATEGORY_IN_USE = "Cannot delete category that is being used by transactions"


class CategoryStore:
    """카테고리 저장소

    Args:
        adapter: SQLite 어댑터

    사용 예시:
    ```python
    store = CategoryStore(adapter)

    category_id = await store.create("Food", "expense", "#ef4444", "🍔")
    category = await store.find_by_id(category_id)

    if await store.count_transactions(category_id) == 0:
        await store.delete(category_id)
    ```
    """

    def __init__(self, adapter: SQLiteAdapter):
        self.adapter = adapter

    async def list_all(self) -> list[Category]:
        """전체 카테고리 (type, name 순)"""
        rows = await self.adapter.fetchall(
            f"SELECT {_COLUMNS} FROM categories ORDER BY type, name"
        )
        return [self._row_to_category(row) for row in rows]

    async def find_by_id(self, category_id: int) -> Category | None:
        """ID로 카테고리 조회"""
        if not fits_sqlite_integer(category_id):
            return None
        row = await self.adapter.fetchone(
            f"SELECT {_COLUMNS} FROM categories WHERE id = ?",
            (category_id,),
        )
        if row:
            return self._row_to_category(row)
        return None

    async def count(self) -> int:
        row = await self.adapter.fetchone("SELECT COUNT(*) FROM categories")
        return row[0] if row else 0

    async def count_transactions(self, category_id: int) -> int:
        """카테고리를 참조하는 거래 수"""
        row = await self.adapter.fetchone(
            "SELECT COUNT(*) FROM transactions WHERE category_id = ?",
            (category_id,),
        )
        return row[0] if row else 0

    async def create(
        self,
        name: str,
        type: str,
        color: str,
        icon: str,
    ) -> int:
        """카테고리 생성

        Returns:
            새 카테고리 ID
        """
        async with self.adapter.transaction() as conn:
            cursor = await conn.execute(
                "INSERT INTO categories (name, type, color, icon, created_at) VALUES (?, ?, ?, ?, ?)",
                (name, type, color, icon, now_iso()),
            )

        logger.info(
            f"Category created: {name}",
            extra={"category_id": cursor.lastrowid, "type": type},
        )
        return cursor.lastrowid

    async def update(self, category_id: int, draft: CategoryDraft) -> bool:
        """카테고리 갱신 (name, type, color, icon)

        Returns:
            갱신 여부
        """
        async with self.adapter.transaction() as conn:
            cursor = await conn.execute(
                "UPDATE categories SET name = ?, type = ?, color = ?, icon = ? WHERE id = ?",
                (
                    draft.name,
                    draft.type,
                    draft.color,
                    draft.icon,
                    category_id,
                ),
            )
        return cursor.rowcount > 0

    async def delete(self, category_id: int) -> bool:
        """카테고리 삭제

        호출 측에서 count_transactions()로 먼저 확인하지만, 그 사이 거래가 생기면
        FK 제약(ON DELETE RESTRICT)이 막는다. 이 경우 ConflictError.
        """
        try:
            async with self.adapter.transaction() as conn:
                cursor = await conn.execute(
                    "DELETE FROM categories WHERE id = ?",
                    (category_id,),
                )
        except aiosqlite.IntegrityError as e:
            raise ConflictError(CATEGORY_IN_USE) from e

        deleted = cursor.rowcount > 0
        if deleted:
            logger.info(f"Category deleted: {category_id}")
        return deleted

    def _row_to_category(self, row: tuple[Any, ...]) -> Category:
        return Category(
            id=row[0],
            name=row[1],
            type=row[2],
            color=row[3],
            icon=row[4],
            created_at=row[5],
        )
