"""
Validation Rule Set 패키지

저장 전 엔티티 불변식 검증 (필드 단위 위반 보고).
"""

from core.validation.rules import (
    CategoryDraft,
    GoalDraft,
    TransactionDraft,
    merge_with_existing,
    validate_category,
    validate_goal,
    validate_kind_filter,
    validate_month,
    validate_transaction,
)

__all__ = [
    "CategoryDraft",
    "GoalDraft",
    "TransactionDraft",
    "merge_with_existing",
    "validate_category",
    "validate_goal",
    "validate_kind_filter",
    "validate_month",
    "validate_transaction",
]
