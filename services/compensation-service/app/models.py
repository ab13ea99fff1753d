"""Pydantic models for response serialization."""

from typing import Optional

from pydantic import BaseModel, Field


class SalaryResponse(BaseModel):
    """Current salary of an employee."""

    name: str
    salary: int = Field(..., gt=0)


class SalaryIncreaseResponse(BaseModel):
    """Result of a salary increase: the salary before the raise."""

    name: str
    old_salary: int = Field(..., gt=0)


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str
    success: bool = True


class ErrorResponse(BaseModel):
    """Error response model."""

    detail: str
    error_code: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    version: str
    timestamp: str


class ReadinessResponse(BaseModel):
    """Readiness check response."""

    ready: bool
    checks: dict
    timestamp: str
