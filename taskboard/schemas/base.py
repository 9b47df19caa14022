"""
Base Pydantic schemas and the uniform response envelope.

Every response body has the shape
    {success, data?, error?, errors?, pagination?}
and JSON field names are camelCase.
"""

import math
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """
    Base schema with camelCase aliases.
    
    Accepts both `projectId` and `project_id` on input, and reads
    SQLAlchemy objects directly.
    """
    
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PaginationMeta(CamelModel):
    """Pagination block of list responses."""
    
    page: int
    limit: int
    total: int
    total_pages: int


class ApiResponse(CamelModel, Generic[T]):
    """Response envelope. Routers return it with `response_model_exclude_unset`."""
    
    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    errors: Optional[Dict[str, List[str]]] = None
    pagination: Optional[PaginationMeta] = None


class MessageRead(CamelModel):
    message: str


def pagination_meta(total: int, page: int, limit: int) -> PaginationMeta:
    return PaginationMeta(
        page=page,
        limit=limit,
        total=total,
        total_pages=math.ceil(total / limit),
    )


def success_response(data: Any, pagination: Optional[PaginationMeta] = None) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"success": True, "data": data}
    if pagination is not None:
        payload["pagination"] = pagination
    return payload


def error_response(error: str, errors: Optional[Dict[str, List[str]]] = None) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"success": False, "error": error}
    if errors is not None:
        payload["errors"] = errors
    return payload
