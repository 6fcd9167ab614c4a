"""
Transaction Store

transactions 테이블 CRUD.
조회 결과에는 카테고리 이름/색상/아이콘이 조인된다.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter, fits_sqlite_integer
from core.types import Transaction
from core.utils.timezone import now_iso
from core.validation.rules import TransactionDraft

logger = logging.getLogger(__name__)

_SELECT = """
    SELECT
        t.id, t.amount, t.type, t.category_id, t.description, t.date,
        t.created_at, t.updated_at,
        c.name, c.color, c.icon
    FROM transactions t
    LEFT JOIN categories c ON t.category_id = c.id
"""


@dataclass(frozen=True)
class TransactionFilter:
    """거래 목록 필터 (None이면 미적용)

    month는 날짜 문자열 앞 7자리(YYYY-MM)와 비교.
    """

    month: str | None = None
    type: str | None = None
    category_id: int | None = None


class TransactionStore:
    """거래 저장소

    Args:
        adapter: SQLite 어댑터
    """

    def __init__(self, adapter: SQLiteAdapter):
        self.adapter = adapter

    async def list(self, filter: TransactionFilter | None = None) -> list[Transaction]:
        """거래 목록 (date DESC, created_at DESC)"""
        if filter is None:
            filter = TransactionFilter()
        if filter.category_id is not None and not fits_sqlite_integer(filter.category_id):
            # 저장될 수 없는 ID → 일치하는 거래 없음
            return []

        sql = _SELECT + " WHERE 1=1"
        params: list[Any] = []

        if filter.month:
            sql += " AND substr(t.date, 1, 7) = ?"
            params.append(filter.month)

        if filter.type:
            sql += " AND t.type = ?"
            params.append(filter.type)

        if filter.category_id is not None:
            sql += " AND t.category_id = ?"
            params.append(filter.category_id)

        sql += " ORDER BY t.date DESC, t.created_at DESC, t.id DESC"

        rows = await self.adapter.fetchall(sql, tuple(params))
        return [self._row_to_transaction(row) for row in rows]

    async def count(self) -> int:
        row = await self.adapter.fetchone("SELECT COUNT(*) FROM transactions")
        return row[0] if row else 0

    async def find_by_id(self, transaction_id: int) -> Transaction | None:
        """ID로 거래 조회"""
        if not fits_sqlite_integer(transaction_id):
            return None
        row = await self.adapter.fetchone(_SELECT + " WHERE t.id = ?", (transaction_id,))
        if row:
            return self._row_to_transaction(row)
        return None

    async def create(self, draft: TransactionDraft) -> int:
        """거래 생성

        Returns:
            새 거래 ID
        """
        now = now_iso()
        async with self.adapter.transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO transactions (
                    amount, type, category_id, description, date,
                    created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    str(draft.amount),
                    draft.type,
                    draft.category_id,
                    draft.description,
                    draft.date,
                    now,
                    now,
                ),
            )

        logger.info(
            f"Transaction created: {draft.type} {draft.amount}",
            extra={"transaction_id": cursor.lastrowid, "category_id": draft.category_id},
        )
        return cursor.lastrowid

    async def update(self, transaction_id: int, draft: TransactionDraft) -> bool:
        """거래 갱신 (전체 필드 덮어쓰기, 병합은 검증 단계에서 완료)"""
        async with self.adapter.transaction() as conn:
            cursor = await conn.execute(
                """
                UPDATE transactions
                SET amount = ?, type = ?, category_id = ?, description = ?, date = ?,
                    updated_at = ?
                WHERE id = ?
                """,
                (
                    str(draft.amount),
                    draft.type,
                    draft.category_id,
                    draft.description,
                    draft.date,
                    now_iso(),
                    transaction_id,
                ),
            )
        return cursor.rowcount > 0

    async def delete(self, transaction_id: int) -> bool:
        async with self.adapter.transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM transactions WHERE id = ?",
                (transaction_id,),
            )

        deleted = cursor.rowcount > 0
        if deleted:
            logger.info(f"Transaction deleted: {transaction_id}")
        return deleted

    def _row_to_transaction(self, row: tuple[Any, ...]) -> Transaction:
        return Transaction(
            id=row[0],
            amount=Decimal(row[1]),
            type=row[2],
            category_id=row[3],
            description=row[4],
            date=row[5],
            created_at=row[6],
            updated_at=row[7],
            category_name=row[8],
            category_color=row[9],
            category_icon=row[10],
        )
