"""
Category 라우트

카테고리 조회/생성/수정/삭제 API
"""

from fastapi import APIRouter, Depends, Path

from adapters.db.sqlite_adapter import SQLiteAdapter
from web.dependencies import get_db, get_db_write
from web.models.requests import CategoryPayload
from web.models.responses import ApiResponse
from web.services.category_service import CategoryService

router = APIRouter(prefix="/api/categories", tags=["Categories"])


@router.get("", response_model=ApiResponse, response_model_exclude_unset=True)
async def list_categories(
    db: SQLiteAdapter = Depends(get_db),
) -> ApiResponse:
    """전체 카테고리 조회"""
    service = CategoryService(db)
    return ApiResponse(success=True, data=await service.list_categories())


@router.get("/{category_id}", response_model=ApiResponse, response_model_exclude_unset=True)
async def get_category(
    category_id: int = Path(..., description="카테고리 ID"),
    db: SQLiteAdapter = Depends(get_db),
) -> ApiResponse:
    """카테고리 조회"""
    service = CategoryService(db)
    return ApiResponse(success=True, data=await service.get_category(category_id))


@router.post(
    "",
    status_code=201,
    response_model=ApiResponse,
    response_model_exclude_unset=True,
)
async def create_category(
    request: CategoryPayload,
    db: SQLiteAdapter = Depends(get_db_write),
) -> ApiResponse:
    """카테고리 생성"""
    service = CategoryService(db)
    return ApiResponse(success=True, data=await service.create_category(request.to_payload()))


@router.put("/{category_id}", response_model=ApiResponse, response_model_exclude_unset=True)
async def update_category(
    request: CategoryPayload,
    category_id: int = Path(..., description="카테고리 ID"),
    db: SQLiteAdapter = Depends(get_db_write),
) -> ApiResponse:
    """카테고리 수정 (부분 갱신)"""
    service = CategoryService(db)
    data = await service.update_category(category_id, request.to_payload())
    return ApiResponse(success=True, data=data)


@router.delete("/{category_id}", response_model=ApiResponse, response_model_exclude_unset=True)
async def delete_category(
    category_id: int = Path(..., description="카테고리 ID"),
    db: SQLiteAdapter = Depends(get_db_write),
) -> ApiResponse:
    """카테고리 삭제

    거래가 참조 중이면 400 (ConflictError).
    """
    service = CategoryService(db)
    await service.delete_category(category_id)
    return ApiResponse(success=True, message="Category deleted successfully")
