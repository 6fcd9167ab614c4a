"""
Web 모델 패키지

Pydantic 스키마 정의
"""

from web.models.requests import (
    CategoryPayload,
    GoalPayload,
    TransactionPayload,
)
from web.models.responses import (
    ApiResponse,
    ErrorResponse,
    FieldErrorResponse,
    HealthResponse,
)

__all__ = [
    # Requests
    "CategoryPayload",
    "GoalPayload",
    "TransactionPayload",
    # Responses
    "ApiResponse",
    "ErrorResponse",
    "FieldErrorResponse",
    "HealthResponse",
]
