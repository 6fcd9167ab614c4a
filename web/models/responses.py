"""
응답 스키마 (Pydantic)

모든 API 응답은 {success, data?, error?, message?} 봉투를 따른다.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """헬스 체크 응답"""

    status: str = Field(default="ok", description="서비스 상태")
    environment: str = Field(..., description="실행 환경 (development/production)")
    timestamp: datetime = Field(..., description="응답 시간 (UTC)")


class ApiResponse(BaseModel):
    """성공 응답 봉투

    라우트는 response_model_exclude_unset=True로 설정하지 않은 필드를 생략한다.
    """

    success: bool = Field(default=True, description="성공 여부")
    data: Any = Field(default=None, description="응답 데이터")
    message: str | None = Field(default=None, description="처리 결과 메시지")


class FieldErrorResponse(BaseModel):
    """필드 단위 검증 오류"""

    field_path: str = Field(..., description="필드 경로")
    message: str = Field(..., description="오류 메시지")


class ErrorResponse(BaseModel):
    """실패 응답 봉투"""

    success: bool = Field(default=False, description="성공 여부")
    error: str = Field(..., description="오류 설명")
    details: list[FieldErrorResponse] | None = Field(default=None, description="필드 오류 목록")
    message: str | None = Field(default=None, description="내부 오류 메시지 (development 환경만)")
    path: str | None = Field(default=None, description="요청 경로 (404)")
