"""
Goal Store

goals 테이블 CRUD.
"""

import logging
from decimal import Decimal
from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter, fits_sqlite_integer
from core.types import Goal
from core.utils.timezone import now_iso
from core.validation.rules import GoalDraft

logger = logging.getLogger(__name__)

_COLUMNS = "id, name, target_amount, current_amount, deadline, created_at, updated_at"


class GoalStore:
    """저축 목표 저장소

    Args:
        adapter: SQLite 어댑터
    """

    def __init__(self, adapter: SQLiteAdapter):
        self.adapter = adapter

    async def list_all(self) -> list[Goal]:
        """전체 목표 (마감일 오름차순, 마감일 없는 목표가 먼저, 최근 생성 순)"""
        rows = await self.adapter.fetchall(
            f"""
            SELECT {_COLUMNS} FROM goals
            ORDER BY deadline ASC, created_at DESC, id DESC
            """
        )
        return [self._row_to_goal(row) for row in rows]

    async def find_by_id(self, goal_id: int) -> Goal | None:
        if not fits_sqlite_integer(goal_id):
            return None
        row = await self.adapter.fetchone(
            f"SELECT {_COLUMNS} FROM goals WHERE id = ?",
            (goal_id,),
        )
        if row:
            return self._row_to_goal(row)
        return None

    async def create(self, draft: GoalDraft) -> int:
        """목표 생성

        Returns:
            새 목표 ID
        """
        now = now_iso()
        async with self.adapter.transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO goals (
                    name, target_amount, current_amount, deadline,
                    created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    draft.name,
                    str(draft.target_amount),
                    str(draft.current_amount),
                    draft.deadline,
                    now,
                    now,
                ),
            )

        logger.info(
            f"Goal created: {draft.name}",
            extra={"goal_id": cursor.lastrowid, "target_amount": str(draft.target_amount)},
        )
        return cursor.lastrowid

    async def update(self, goal_id: int, draft: GoalDraft) -> bool:
        async with self.adapter.transaction() as conn:
            cursor = await conn.execute(
                """
                UPDATE goals
                SET name = ?, target_amount = ?, current_amount = ?, deadline = ?,
                    updated_at = ?
                WHERE id = ?
                """,
                (
                    draft.name,
                    str(draft.target_amount),
                    str(draft.current_amount),
                    draft.deadline,
                    now_iso(),
                    goal_id,
                ),
            )
        return cursor.rowcount > 0

    async def delete(self, goal_id: int) -> bool:
        async with self.adapter.transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM goals WHERE id = ?",
                (goal_id,),
            )

        deleted = cursor.rowcount > 0
        if deleted:
            logger.info(f"Goal deleted: {goal_id}")
        return deleted

    def _row_to_goal(self, row: tuple[Any, ...]) -> Goal:
        return Goal(
            id=row[0],
            name=row[1],
            target_amount=Decimal(row[2]),
            current_amount=Decimal(row[3]),
            deadline=row[4],
            created_at=row[5],
            updated_at=row[6],
        )
