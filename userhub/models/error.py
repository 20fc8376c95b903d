"""
Pydantic schemas for error bodies (used for OpenAPI docs).
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class StandardError(BaseModel):
    timestamp: str
    path: str
    status: int
    error: str
    message: str


class FieldMessage(BaseModel):
    fieldName: str
    message: str


class ValidationError(StandardError):
    errors: list[FieldMessage] = Field(default_factory=list)
