"""
Ledger Query Engine 패키지

거래/목표 컬렉션에서 파생 지표(월간 요약, 카테고리 분석, 목표 진행률) 계산.
"""

from core.ledger.engine import (
    CategoryBreakdown,
    GoalProgress,
    MonthlySummary,
    category_breakdown,
    goal_progress,
    monthly_summary,
)

__all__ = [
    "CategoryBreakdown",
    "GoalProgress",
    "MonthlySummary",
    "category_breakdown",
    "goal_progress",
    "monthly_summary",
]
