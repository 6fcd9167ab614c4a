"""
초기 데이터 통합 테스트
"""

from datetime import date
from decimal import Decimal

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.ledger.engine import monthly_summary
from core.storage.category_store import CategoryStore
from core.storage.goal_store import GoalStore
from core.storage.seed import DEFAULT_CATEGORIES, seed_default_categories, seed_sample_data
from core.storage.transaction_store import TransactionFilter, TransactionStore


class TestSeedDefaultCategories:
    """seed_default_categories 테스트"""

    async def test_inserts_into_empty_table(self, db: SQLiteAdapter) -> None:
        created = await seed_default_categories(db)

        assert created == len(DEFAULT_CATEGORIES) == 9
        categories = await CategoryStore(db).list_all()
        assert len([c for c in categories if c.type == "income"]) == 3
        assert len([c for c in categories if c.type == "expense"]) == 6

    async def test_skips_when_not_empty(self, db: SQLiteAdapter) -> None:
        """이미 카테고리가 있으면 아무것도 하지 않음"""
        await CategoryStore(db).create("Mine", "expense", "#000000", "💰")

        assert await seed_default_categories(db) == 0
        assert await CategoryStore(db).count() == 1


class TestSeedSampleData:
    """seed_sample_data 테스트"""

    async def test_sample_month(self, db: SQLiteAdapter) -> None:
        """현재 월 기준 거래 9건 + 목표 3건"""
        tx_count, goal_count = await seed_sample_data(db, today=date(2026, 3, 20))

        assert (tx_count, goal_count) == (9, 3)

        transactions = await TransactionStore(db).list(TransactionFilter(month="2026-03"))
        summary = monthly_summary(transactions, "2026-03")
        assert summary.total_income == Decimal("65000")
        assert summary.total_expense == Decimal("17650")
        assert summary.balance == Decimal("47350")

        assert len(await GoalStore(db).list_all()) == 3

    async def test_idempotent(self, db: SQLiteAdapter) -> None:
        """거래가 이미 있으면 생략"""
        await seed_sample_data(db, today=date(2026, 3, 20))

        assert await seed_sample_data(db, today=date(2026, 3, 20)) == (0, 0)
        assert await TransactionStore(db).count() == 9
