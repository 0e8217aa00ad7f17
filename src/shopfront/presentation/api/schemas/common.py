"""Response envelope shared by every endpoint."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Successful response envelope: ``{"success": true, "data": ...}``."""

    success: bool = True
    data: T


class ErrorResponse(BaseModel):
    """Error envelope: ``{"success": false, "error": ..., "code": ...}``."""

    success: bool = False
    error: str = Field(..., description="Human-readable error message")
    code: Optional[str] = Field(
        None,
        description="Error code for programmatic handling",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": False,
                "error": "Product not found",
                "code": "PRODUCT_NOT_FOUND",
            },
        },
    )


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
