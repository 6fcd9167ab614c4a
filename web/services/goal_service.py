"""
Goal 서비스

저축 목표 CRUD 및 진행 상황 (Ledger Query Engine의 goal_progress 사용)
"""

from datetime import date
from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.errors import NotFoundError
from core.ledger.engine import goal_progress
from core.storage.goal_store import GoalStore
from core.types import Goal
from core.utils.timezone import today_local
from core.validation.rules import GoalDraft, validate_goal


class GoalService:
    """Goal 서비스

    목표 응답에는 progress_percentage, remaining_amount가 포함된다.

    Args:
        db: SQLite 어댑터
        today: 기준 날짜 (None이면 로컬 오늘, 테스트에서 고정용)
    """

    def __init__(self, db: SQLiteAdapter, today: date | None = None):
        self.db = db
        self.store = GoalStore(db)
        self._today = today

    @property
    def today(self) -> date:
        return self._today or today_local()

    async def list_goals(self) -> list[dict[str, Any]]:
        """전체 목표 조회"""
        return [self._with_progress(g) for g in await self.store.list_all()]

    async def get_goal(self, goal_id: int) -> dict[str, Any]:
        """목표 조회

        Raises:
            NotFoundError: 목표 없음
        """
        return self._with_progress(await self._require(goal_id))

    async def get_progress(self, goal_id: int) -> dict[str, Any]:
        """목표 진행 상황 상세

        목표 필드 + days_remaining, is_overdue, is_completed

        Raises:
            NotFoundError: 목표 없음
        """
        goal = await self._require(goal_id)
        return {**goal.to_dict(), **goal_progress(goal, self.today).to_dict()}

    async def create_goal(self, payload: dict[str, Any]) -> dict[str, Any]:
        """목표 생성

        Raises:
            ValidationError: 입력 규칙 위반
        """
        draft = validate_goal(payload, today=self.today)
        self._preview(draft)
        goal_id = await self.store.create(draft)
        return self._with_progress(await self._require(goal_id))

    async def update_goal(self, goal_id: int, payload: dict[str, Any]) -> dict[str, Any]:
        """목표 부분 갱신

        Raises:
            NotFoundError: 목표 없음
            ValidationError: 입력 규칙 위반 (병합 결과 기준)
        """
        existing = await self._require(goal_id)
        draft = validate_goal(payload, existing, today=self.today)
        self._preview(draft, goal_id)
        await self.store.update(goal_id, draft)
        return self._with_progress(await self._require(goal_id))

    async def delete_goal(self, goal_id: int) -> None:
        """목표 삭제

        Raises:
            NotFoundError: 목표 없음
        """
        await self._require(goal_id)
        await self.store.delete(goal_id)

    def _preview(self, draft: GoalDraft, goal_id: int | None = None) -> dict[str, Any]:
        """저장 전에 응답 형태로 계산해 본다

        진행률을 계산할 수 없는 목표는 저장되지 않아야 목록 조회가 깨지지 않는다.
        """
        goal = Goal(
            id=goal_id,
            name=draft.name,
            target_amount=draft.target_amount,
            current_amount=draft.current_amount,
            deadline=draft.deadline,
        )
        return self._with_progress(goal)

    def _with_progress(self, goal: Goal) -> dict[str, Any]:
        progress = goal_progress(goal, self.today).to_dict()
        return {
            **goal.to_dict(),
            "progress_percentage": progress["progress_percentage"],
            "remaining_amount": progress["remaining_amount"],
        }

    async def _require(self, goal_id: int) -> Goal:
        goal = await self.store.find_by_id(goal_id)
        if goal is None:
            raise NotFoundError("Goal", goal_id)
        return goal
