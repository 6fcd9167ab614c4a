"""
거래 서비스

거래 CRUD 및 월간 요약 (Ledger Query Engine 사용)
"""

from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.errors import NotFoundError
from core.ledger.engine import category_breakdown, monthly_summary
from core.storage.category_store import CategoryStore
from core.storage.transaction_store import TransactionFilter, TransactionStore
from core.types import Transaction
from core.utils.timezone import current_month
from core.validation.rules import (
    validate_kind_filter,
    validate_month,
    validate_transaction,
)


class TransactionService:
    """거래 서비스

    검증(Validation Rule Set) → 저장(TransactionStore) 순서로 처리.
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db
        self.store = TransactionStore(db)
        self.category_store = CategoryStore(db)

    async def get_transactions(
        self,
        month: str | None = None,
        type: str | None = None,
        category_id: int | None = None,
    ) -> list[dict[str, Any]]:
        """거래 목록 조회

        Args:
            month: YYYY-MM 필터 (선택)
            type: income/expense 필터 (선택)
            category_id: 카테고리 필터 (선택)

        Raises:
            ValidationError: 필터 형식 오류
        """
        filter = TransactionFilter(
            month=validate_month(month) if month else None,
            type=validate_kind_filter(type) if type else None,
            category_id=category_id,
        )
        return [t.to_dict() for t in await self.store.list(filter)]

    async def get_summary(self, month: str | None = None) -> dict[str, Any]:
        """월간 요약 + 카테고리별 분석

        Args:
            month: YYYY-MM (None이면 현재 월)

        Returns:
            month, summary, category_breakdown 포함 응답
        """
        month = validate_month(month) if month else current_month()

        transactions = await self.store.list(TransactionFilter(month=month))
        categories = await self.category_store.list_all()

        return {
            "month": month,
            "summary": monthly_summary(transactions, month).to_dict(),
            "category_breakdown": [
                row.to_dict() for row in category_breakdown(transactions, categories, month)
            ],
        }

    async def get_transaction(self, transaction_id: int) -> dict[str, Any]:
        """거래 조회

        Raises:
            NotFoundError: 거래 없음
        """
        return (await self._require(transaction_id)).to_dict()

    async def create_transaction(self, payload: dict[str, Any]) -> dict[str, Any]:
        """거래 생성

        Raises:
            ValidationError: 입력 규칙 위반 (존재하지 않는 카테고리 포함)
        """
        draft = await validate_transaction(payload, self.category_store.find_by_id)
        transaction_id = await self.store.create(draft)
        return (await self._require(transaction_id)).to_dict()

    async def update_transaction(
        self,
        transaction_id: int,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        """거래 부분 갱신

        생략된 필드는 저장된 값을 상속한 뒤 전체 규칙을 다시 검사.

        Raises:
            NotFoundError: 거래 없음
            ValidationError: 입력 규칙 위반
        """
        existing = await self._require(transaction_id)
        draft = await validate_transaction(
            payload,
            self.category_store.find_by_id,
            existing=existing,
        )
        await self.store.update(transaction_id, draft)
        return (await self._require(transaction_id)).to_dict()

    async def delete_transaction(self, transaction_id: int) -> None:
        """거래 삭제

        Raises:
            NotFoundError: 거래 없음
        """
        await self._require(transaction_id)
        await self.store.delete(transaction_id)

    async def _require(self, transaction_id: int) -> Transaction:
        transaction = await self.store.find_by_id(transaction_id)
        if transaction is None:
            raise NotFoundError("Transaction", transaction_id)
        return transaction
