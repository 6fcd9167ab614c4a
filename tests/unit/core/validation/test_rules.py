"""
core/validation/rules.py 테스트

필드별 위반 수집, 교차 필드 규칙, 부분 갱신 병합 확인
"""

from datetime import date
from decimal import Decimal

import pytest

from core.errors import ValidationError
from core.types import Category, Goal, Transaction
from core.validation.rules import (
    merge_with_existing,
    validate_category,
    validate_goal,
    validate_kind_filter,
    validate_month,
    validate_transaction,
)

TODAY = date(2026, 3, 15)

FOOD = Category(4, "Food", "expense", "#ef4444", "🍜", "")


async def find_category(category_id: int) -> Category | None:
    """카테고리 4만 존재하는 조회 함수"""
    return FOOD if category_id == 4 else None


def _valid_tx(**overrides) -> dict:
    payload = {
        "amount": 450,
        "type": "expense",
        "category_id": 4,
        "description": "Lunch",
        "date": "2026-03-10",
    }
    payload.update(overrides)
    return payload


async def _tx_errors(payload, existing: Transaction | None = None) -> dict[str, str]:
    with pytest.raises(ValidationError) as exc_info:
        await validate_transaction(payload, find_category, existing=existing)
    return {v.field_path: v.message for v in exc_info.value.violations}


def _goal_errors(payload, existing: Goal | None = None) -> dict[str, str]:
    with pytest.raises(ValidationError) as exc_info:
        validate_goal(payload, existing, today=TODAY)
    return {v.field_path: v.message for v in exc_info.value.violations}


class TestMergeWithExisting:
    """merge_with_existing 테스트"""

    def test_missing_and_null_inherit(self) -> None:
        merged = merge_with_existing(
            {"amount": 5, "type": None},
            {"amount": 1, "type": "income", "date": "2026-03-01"},
            ("amount", "type", "date"),
        )

        assert merged == {"amount": 5, "type": "income", "date": "2026-03-01"}

    def test_empty_string_is_explicit(self) -> None:
        """빈 문자열은 상속하지 않음 (값 초기화)"""
        merged = merge_with_existing(
            {"description": ""},
            {"description": "old"},
            ("description",),
        )

        assert merged["description"] == ""

    def test_create_fills_none(self) -> None:
        merged = merge_with_existing({}, None, ("name", "deadline"))

        assert merged == {"name": None, "deadline": None}


class TestValidateTransaction:
    """validate_transaction 테스트"""

    async def test_valid(self) -> None:
        draft = await validate_transaction(_valid_tx(amount=35.5), find_category)

        assert draft.amount == Decimal("35.5")
        assert draft.type == "expense"
        assert draft.category_id == 4
        assert draft.date == "2026-03-10"
        assert draft.description == "Lunch"

    async def test_negative_amount(self) -> None:
        """음수 금액은 amount 위반"""
        errors = await _tx_errors(_valid_tx(amount=-5))

        assert errors == {"amount": "Amount must be greater than 0"}

    async def test_zero_amount(self) -> None:
        errors = await _tx_errors(_valid_tx(amount=0))

        assert "amount" in errors

    @pytest.mark.parametrize("amount", [float("nan"), float("inf")])
    async def test_non_finite_amount(self, amount: float) -> None:
        errors = await _tx_errors(_valid_tx(amount=amount))

        assert errors["amount"] == "Amount must be a valid number"

    async def test_string_amount(self) -> None:
        errors = await _tx_errors(_valid_tx(amount="100"))

        assert errors["amount"] == "Amount must be a number"

    async def test_bool_amount(self) -> None:
        errors = await _tx_errors(_valid_tx(amount=True))

        assert errors["amount"] == "Amount must be a number"

    async def test_invalid_type(self) -> None:
        errors = await _tx_errors(_valid_tx(type="transfer"))

        assert errors == {"type": "Type must be either income or expense"}

    async def test_collects_all_independent_violations(self) -> None:
        """독립 규칙 위반은 한 번에 모두 보고"""
        errors = await _tx_errors({
            "amount": -1,
            "type": "gift",
            "category_id": 0,
            "description": "x" * 201,
            "date": "10-03-2026",
        })

        assert list(errors) == ["amount", "type", "category_id", "description", "date"]
        assert errors["description"] == "Description must be less than 200 characters"
        assert errors["date"] == "Date must be in YYYY-MM-DD format"

    async def test_missing_fields(self) -> None:
        errors = await _tx_errors({})

        assert errors == {
            "amount": "Amount is required",
            "type": "Transaction type is required",
            "category_id": "Category is required",
            "date": "Date is required",
        }

    async def test_unknown_category(self) -> None:
        """존재하지 않는 카테고리는 category_id 위반"""
        errors = await _tx_errors(_valid_tx(category_id=99))

        assert errors == {"category_id": "Category not found"}

    async def test_category_lookup_skipped_when_id_invalid(self) -> None:
        calls: list[int] = []

        async def tracking_lookup(category_id: int) -> Category | None:
            calls.append(category_id)
            return None

        with pytest.raises(ValidationError):
            await validate_transaction(_valid_tx(category_id="abc"), tracking_lookup)

        assert calls == []

    async def test_fractional_category_id(self) -> None:
        errors = await _tx_errors(_valid_tx(category_id=4.5))

        assert errors["category_id"] == "Category must be a valid ID"

    async def test_category_id_beyond_integer_range(self) -> None:
        """저장될 수 없는 큰 ID는 조회 없이 Category not found"""
        calls: list[int] = []

        async def tracking_lookup(category_id: int) -> Category | None:
            calls.append(category_id)
            return None

        with pytest.raises(ValidationError) as exc_info:
            await validate_transaction(_valid_tx(category_id=10**20), tracking_lookup)

        assert exc_info.value.fields() == ["category_id"]
        assert exc_info.value.violations[0].message == "Category not found"
        assert calls == []

    async def test_amount_upper_bound(self) -> None:
        errors = await _tx_errors(_valid_tx(amount=1e12))

        assert errors == {"amount": "Amount must be less than 1,000,000,000,000"}

    async def test_amount_just_below_bound(self) -> None:
        draft = await validate_transaction(_valid_tx(amount=999999999999.99), find_category)

        assert draft.amount == Decimal("999999999999.99")

    @pytest.mark.parametrize("bad_date", ["2026-3-10", "2026/03/10", "2026-03-10T00:00:00", "20260310"])
    async def test_date_format_exact(self, bad_date: str) -> None:
        errors = await _tx_errors(_valid_tx(date=bad_date))

        assert errors["date"] == "Date must be in YYYY-MM-DD format"

    async def test_impossible_calendar_date(self) -> None:
        errors = await _tx_errors(_valid_tx(date="2026-02-30"))

        assert errors["date"] == "Date must be a valid calendar date"

    async def test_description_limit(self) -> None:
        draft = await validate_transaction(_valid_tx(description="x" * 200), find_category)

        assert len(draft.description) == 200

    async def test_non_object_body(self) -> None:
        """객체가 아닌 본문은 즉시 실패"""
        errors = await _tx_errors([1, 2, 3])

        assert errors == {"body": "Request body must be a JSON object"}

    async def test_partial_update_inherits(self) -> None:
        existing = Transaction(
            id=1,
            amount=Decimal("450"),
            type="expense",
            category_id=4,
            date="2026-03-10",
            description="Lunch",
        )

        draft = await validate_transaction({"amount": 500}, find_category, existing=existing)

        assert draft.amount == Decimal("500")
        assert draft.date == "2026-03-10"
        assert draft.description == "Lunch"

    async def test_partial_update_clears_description(self) -> None:
        existing = Transaction(
            id=1,
            amount=Decimal("450"),
            type="expense",
            category_id=4,
            date="2026-03-10",
            description="Lunch",
        )

        draft = await validate_transaction({"description": ""}, find_category, existing=existing)

        assert draft.description is None

    async def test_update_cannot_reach_invalid_state(self) -> None:
        existing = Transaction(
            id=1,
            amount=Decimal("450"),
            type="expense",
            category_id=4,
            date="2026-03-10",
        )

        errors = await _tx_errors({"amount": -1}, existing=existing)

        assert list(errors) == ["amount"]


class TestValidateGoal:
    """validate_goal 테스트"""

    def test_valid_defaults_current_to_zero(self) -> None:
        draft = validate_goal({"name": "  Car  ", "target_amount": 5000}, today=TODAY)

        assert draft.name == "Car"
        assert draft.current_amount == Decimal("0")
        assert draft.deadline is None

    def test_current_exceeds_target(self) -> None:
        """current > target은 current_amount 위반"""
        errors = _goal_errors({"name": "Car", "target_amount": 5000, "current_amount": 6000})

        assert list(errors) == ["current_amount"]
        assert "exceed target" in errors["current_amount"]

    def test_huge_target(self) -> None:
        """상한 이상 목표 금액은 저장 전에 거부"""
        errors = _goal_errors({"name": "Moon", "target_amount": 1e27})

        assert errors == {"target_amount": "Target amount must be less than 1,000,000,000,000"}

    def test_current_equal_target_allowed(self) -> None:
        draft = validate_goal(
            {"name": "Car", "target_amount": 5000, "current_amount": 5000},
            today=TODAY,
        )

        assert draft.current_amount == Decimal("5000")

    def test_past_deadline(self) -> None:
        errors = _goal_errors({"name": "Car", "target_amount": 5000, "deadline": "2020-01-01"})

        assert errors == {"deadline": "Deadline must be in the future"}

    def test_deadline_today_allowed(self) -> None:
        """일 단위 비교: 오늘 마감은 허용"""
        draft = validate_goal(
            {"name": "Car", "target_amount": 5000, "deadline": "2026-03-15"},
            today=TODAY,
        )

        assert draft.deadline == "2026-03-15"

    def test_empty_deadline_is_absent(self) -> None:
        draft = validate_goal({"name": "Car", "target_amount": 5000, "deadline": ""}, today=TODAY)

        assert draft.deadline is None

    def test_blank_name(self) -> None:
        errors = _goal_errors({"name": "   ", "target_amount": 5000})

        assert errors == {"name": "Goal name is required"}

    def test_name_too_long(self) -> None:
        errors = _goal_errors({"name": "x" * 101, "target_amount": 5000})

        assert "name" in errors

    def test_negative_current(self) -> None:
        errors = _goal_errors({"name": "Car", "target_amount": 5000, "current_amount": -1})

        assert errors == {"current_amount": "Current amount cannot be negative"}

    def test_refinement_skipped_when_prerequisite_fails(self) -> None:
        """target이 잘못되면 current/target 비교는 생략"""
        errors = _goal_errors({"name": "Car", "target_amount": "lots", "current_amount": 6000})

        assert list(errors) == ["target_amount"]

    def test_collects_primitive_and_refinement(self) -> None:
        errors = _goal_errors({
            "name": "",
            "target_amount": 100,
            "current_amount": 200,
            "deadline": "2020-01-01",
        })

        assert list(errors) == ["name", "current_amount", "deadline"]

    def test_update_inherits_and_rechecks(self) -> None:
        """갱신은 병합 결과 전체에 규칙 재적용"""
        existing = Goal(
            id=1,
            name="Car",
            target_amount=Decimal("5000"),
            current_amount=Decimal("1000"),
            deadline="2026-12-31",
        )

        draft = validate_goal({"current_amount": 2000}, existing, today=TODAY)
        assert draft.name == "Car"
        assert draft.deadline == "2026-12-31"

        errors = _goal_errors({"target_amount": 500}, existing)
        assert list(errors) == ["current_amount"]

    def test_update_clears_deadline(self) -> None:
        existing = Goal(
            id=1,
            name="Car",
            target_amount=Decimal("5000"),
            deadline="2026-12-31",
        )

        draft = validate_goal({"deadline": ""}, existing, today=TODAY)

        assert draft.deadline is None


class TestValidateCategory:
    """validate_category 테스트"""

    def test_defaults(self) -> None:
        draft = validate_category({"name": " Pets ", "type": "expense"})

        assert draft.name == "Pets"
        assert draft.color == "#3b82f6"
        assert draft.icon == "💰"

    def test_invalid_color(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_category({"name": "Pets", "type": "expense", "color": "red"})

        assert exc_info.value.fields() == ["color"]

    def test_missing_name_and_type(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_category({})

        assert exc_info.value.fields() == ["name", "type"]

    def test_update_keeps_existing(self) -> None:
        draft = validate_category({"color": "#000000"}, FOOD)

        assert draft.name == "Food"
        assert draft.icon == "🍜"
        assert draft.color == "#000000"


class TestFilters:
    """조회 필터 검증 테스트"""

    def test_valid_month(self) -> None:
        assert validate_month("2026-03") == "2026-03"

    @pytest.mark.parametrize("month", ["2026-13", "2026-3", "202603", "2026-03-01"])
    def test_invalid_month(self, month: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_month(month)

        assert exc_info.value.fields() == ["month"]

    def test_kind_filter(self) -> None:
        assert validate_kind_filter("income") == "income"

        with pytest.raises(ValidationError):
            validate_kind_filter("both")
