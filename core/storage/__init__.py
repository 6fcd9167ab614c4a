"""
스토리지 모듈

Category / Transaction / Goal 저장소 및 초기 데이터
"""

from core.storage.category_store import CategoryStore
from core.storage.goal_store import GoalStore
from core.storage.transaction_store import TransactionFilter, TransactionStore

__all__ = [
    "CategoryStore",
    "GoalStore",
    "TransactionFilter",
    "TransactionStore",
]
