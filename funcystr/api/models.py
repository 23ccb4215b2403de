"""Request/response models for the API."""

from typing import Any

from pydantic import BaseModel, Field


class ResolveRequest(BaseModel):
    text: str
    params: dict[str, Any] = Field(default_factory=dict)


class ResolveResponse(BaseModel):
    result: str


class FunctionInfo(BaseModel):
    name: str
    description: str = ""
    category: str
    is_async: bool = False
    examples: dict[str, str] | None = None


class FunctionListResponse(BaseModel):
    total_functions: int
    categories: list[str]
    functions: list[FunctionInfo]
