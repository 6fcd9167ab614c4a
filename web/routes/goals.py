"""
Goal 라우트

저축 목표 조회/진행 상황/생성/수정/삭제 API
"""

from fastapi import APIRouter, Depends, Path

from adapters.db.sqlite_adapter import SQLiteAdapter
from web.dependencies import get_db, get_db_write
from web.models.requests import GoalPayload
from web.models.responses import ApiResponse
from web.services.goal_service import GoalService

router = APIRouter(prefix="/api/goals", tags=["Goals"])


@router.get("", response_model=ApiResponse, response_model_exclude_unset=True)
async def list_goals(
    db: SQLiteAdapter = Depends(get_db),
) -> ApiResponse:
    """전체 목표 조회 (달성률/남은 금액 포함)"""
    service = GoalService(db)
    return ApiResponse(success=True, data=await service.list_goals())


@router.get("/{goal_id}", response_model=ApiResponse, response_model_exclude_unset=True)
async def get_goal(
    goal_id: int = Path(..., description="목표 ID"),
    db: SQLiteAdapter = Depends(get_db),
) -> ApiResponse:
    """목표 조회"""
    service = GoalService(db)
    return ApiResponse(success=True, data=await service.get_goal(goal_id))


@router.get("/{goal_id}/progress", response_model=ApiResponse, response_model_exclude_unset=True)
async def get_goal_progress(
    goal_id: int = Path(..., description="목표 ID"),
    db: SQLiteAdapter = Depends(get_db),
) -> ApiResponse:
    """목표 진행 상황 (남은 일수, 기한 초과, 달성 여부)"""
    service = GoalService(db)
    return ApiResponse(success=True, data=await service.get_progress(goal_id))


@router.post(
    "",
    status_code=201,
    response_model=ApiResponse,
    response_model_exclude_unset=True,
)
async def create_goal(
    request: GoalPayload,
    db: SQLiteAdapter = Depends(get_db_write),
) -> ApiResponse:
    """목표 생성"""
    service = GoalService(db)
    return ApiResponse(success=True, data=await service.create_goal(request.to_payload()))


@router.put("/{goal_id}", response_model=ApiResponse, response_model_exclude_unset=True)
async def update_goal(
    request: GoalPayload,
    goal_id: int = Path(..., description="목표 ID"),
    db: SQLiteAdapter = Depends(get_db_write),
) -> ApiResponse:
    """목표 수정 (부분 갱신)"""
    service = GoalService(db)
    return ApiResponse(success=True, data=await service.update_goal(goal_id, request.to_payload()))


@router.delete("/{goal_id}", response_model=ApiResponse, response_model_exclude_unset=True)
async def delete_goal(
    goal_id: int = Path(..., description="목표 ID"),
    db: SQLiteAdapter = Depends(get_db_write),
) -> ApiResponse:
    """목표 삭제"""
    service = GoalService(db)
    await service.delete_goal(goal_id)
    return ApiResponse(success=True, message="Goal deleted successfully")
