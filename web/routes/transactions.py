"""
거래 라우트

거래 목록/월간 요약/생성/수정/삭제 API
"""

from fastapi import APIRouter, Depends, Path, Query

from adapters.db.sqlite_adapter import SQLiteAdapter
from web.dependencies import get_db, get_db_write
from web.models.requests import TransactionPayload
from web.models.responses import ApiResponse
from web.services.transaction_service import TransactionService

router = APIRouter(prefix="/api/transactions", tags=["Transactions"])


@router.get("", response_model=ApiResponse, response_model_exclude_unset=True)
async def get_transactions(
    month: str | None = Query(default=None, description="월 필터 (YYYY-MM)"),
    type: str | None = Query(default=None, description="구분 필터 (income/expense)"),
    category_id: int | None = Query(default=None, description="카테고리 필터"),
    db: SQLiteAdapter = Depends(get_db),
) -> ApiResponse:
    """거래 목록 조회"""
    service = TransactionService(db)
    data = await service.get_transactions(month, type, category_id)
    return ApiResponse(success=True, data=data)


@router.get("/summary", response_model=ApiResponse, response_model_exclude_unset=True)
async def get_summary(
    month: str | None = Query(default=None, description="조회 월 (YYYY-MM, 기본: 이번 달)"),
    db: SQLiteAdapter = Depends(get_db),
) -> ApiResponse:
    """월간 요약 + 카테고리별 분석"""
    service = TransactionService(db)
    return ApiResponse(success=True, data=await service.get_summary(month))


@router.get("/{transaction_id}", response_model=ApiResponse, response_model_exclude_unset=True)
async def get_transaction(
    transaction_id: int = Path(..., description="거래 ID"),
    db: SQLiteAdapter = Depends(get_db),
) -> ApiResponse:
    """거래 조회"""
    service = TransactionService(db)
    return ApiResponse(success=True, data=await service.get_transaction(transaction_id))


@router.post(
    "",
    status_code=201,
    response_model=ApiResponse,
    response_model_exclude_unset=True,
)
async def create_transaction(
    request: TransactionPayload,
    db: SQLiteAdapter = Depends(get_db_write),
) -> ApiResponse:
    """거래 생성"""
    service = TransactionService(db)
    data = await service.create_transaction(request.to_payload())
    return ApiResponse(success=True, data=data)


@router.put("/{transaction_id}", response_model=ApiResponse, response_model_exclude_unset=True)
async def update_transaction(
    request: TransactionPayload,
    transaction_id: int = Path(..., description="거래 ID"),
    db: SQLiteAdapter = Depends(get_db_write),
) -> ApiResponse:
    """거래 수정 (부분 갱신)"""
    service = TransactionService(db)
    data = await service.update_transaction(transaction_id, request.to_payload())
    return ApiResponse(success=True, data=data)


@router.delete("/{transaction_id}", response_model=ApiResponse, response_model_exclude_unset=True)
async def delete_transaction(
    transaction_id: int = Path(..., description="거래 ID"),
    db: SQLiteAdapter = Depends(get_db_write),
) -> ApiResponse:
    """거래 삭제"""
    service = TransactionService(db)
    await service.delete_transaction(transaction_id)
    return ApiResponse(success=True, message="Transaction deleted successfully")
