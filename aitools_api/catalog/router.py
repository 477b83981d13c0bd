"""
Route definitions for the catalogue API.

Endpoints under /api:
- GET  /                : service metadata and endpoint list
- GET  /tools           : list tools with filters, sort and pagination
- GET  /tools/{slug}    : get one tool
- GET  /search          : free-text search (paginated)
- GET  /categories      : categories with tool counts
- GET  /compare         : side-by-side comparison of two or more tools
- GET  /stats           : aggregate counts
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request

from ..config import API_DESCRIPTION, API_NAME, Settings
from . import service
from .schemas import (
    ApiInfo,
    CategoryCount,
    ComparisonResult,
    ErrorBody,
    PaginatedTools,
    Stats,
    Tool,
)
from .service import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT, SortField
from .store import ToolStore

router = APIRouter(prefix="/api", tags=["catalog"])


def get_store(request: Request) -> ToolStore:
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.get("", response_model=ApiInfo)
def api_info(
    store: ToolStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> ApiInfo:
    return service.get_api_info(store, API_NAME, settings.api_version, API_DESCRIPTION)


@router.get("/tools", response_model=PaginatedTools, response_model_exclude_none=True)
def list_tools(
    page: int = Query(default=DEFAULT_PAGE, ge=1, description="Current page (1-indexed)"),
    limit: int = Query(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT, description="Page size"),
    category: Optional[str] = Query(default=None, description="Filter by category"),
    pricing: Optional[str] = Query(default=None, description="Filter by pricing model"),
    sort: Optional[SortField] = Query(default=None, description="Sort order"),
    store: ToolStore = Depends(get_store),
) -> PaginatedTools:
    return service.list_tools(
        store,
        page=page,
        limit=limit,
        category=category,
        pricing=pricing,
        sort=sort,
    )


@router.get(
    "/tools/{slug}",
    response_model=Tool,
    response_model_exclude_none=True,
    responses={404: {"model": ErrorBody}},
)
def get_tool(slug: str, store: ToolStore = Depends(get_store)) -> Tool:
    return service.get_tool(store, slug)


@router.get(
    "/search",
    response_model=PaginatedTools,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorBody}},
)
def search_tools(
    q: Optional[str] = Query(default=None, description="Search text (at least 2 characters)"),
    page: int = Query(default=DEFAULT_PAGE, ge=1),
    limit: int = Query(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    store: ToolStore = Depends(get_store),
) -> PaginatedTools:
    # a missing q gets the same 400 as a short one
    return service.search_tools(store, q, page=page, limit=limit)


@router.get("/categories", response_model=List[CategoryCount])
def list_categories(store: ToolStore = Depends(get_store)) -> List[CategoryCount]:
    return service.list_categories(store)


@router.get(
    "/compare",
    response_model=ComparisonResult,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorBody}, 404: {"model": ErrorBody}},
)
def compare_tools(
    tools: Optional[str] = Query(default=None, description="Comma-separated tool slugs"),
    tool1: Optional[str] = Query(default=None, description="First tool slug (legacy form)"),
    tool2: Optional[str] = Query(default=None, description="Second tool slug (legacy form)"),
    store: ToolStore = Depends(get_store),
) -> ComparisonResult:
    slugs = service.parse_compare_slugs(tools=tools, tool1=tool1, tool2=tool2)
    return service.compare_tools(store, slugs)


@router.get("/stats", response_model=Stats)
def stats(
    store: ToolStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> Stats:
    return service.get_stats(store, settings.last_updated, settings.api_version)
