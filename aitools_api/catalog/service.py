"""
Query functions behind the catalogue routes.

Every function takes the ``ToolStore`` plus already-extracted request
parameters and returns a plain result (or raises ``NotFound`` /
``BadRequest``). Nothing here knows about HTTP, so each operation can be
exercised directly against a fixture store.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional, Sequence

from typing_extensions import Literal

from .errors import BadRequest, NotFound
from .schemas import (
    ApiInfo,
    CategoryCount,
    Comparison,
    ComparisonResult,
    ComparisonSummary,
    FeatureList,
    PaginatedTools,
    Pagination,
    Stats,
    Tool,
)
from .store import ToolStore

logger = logging.getLogger(__name__)

SortField = Literal["name", "rating", "popularity"]

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100
MIN_QUERY_LENGTH = 2

COMPARE_USAGE = "/api/compare?tools=slug1,slug2[,slug3...]"

ENDPOINTS = {
    "/api/tools": "List all tools (paginated; filter by category, pricing; sort by name, rating, popularity)",
    "/api/tools/:slug": "Get tool by slug",
    "/api/search?q=query": "Search tools by name, description, category and tags",
    "/api/categories": "List all categories with tool counts",
    "/api/compare?tools=a,b,c": "Compare two or more tools",
    "/api/stats": "API statistics",
}


def _normalize(s: Optional[str]) -> str:
    return (s or "").strip().lower()


def _score(value: Optional[float]) -> float:
    # Missing ratings and popularity rank as 0.
    return value if value is not None else 0.0


def paginate(items: Sequence[Tool], page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> PaginatedTools:
    """Slice ``items`` to the ``(page, limit)`` window.

    ``pages`` is ``ceil(total / limit)``; a page past the end yields an
    empty ``data`` list rather than being clamped.
    """
    total = len(items)
    start = (page - 1) * limit
    end = start + limit
    return PaginatedTools(
        data=list(items[start:end]),
        pagination=Pagination(
            total=total,
            page=page,
            limit=limit,
            pages=math.ceil(total / limit),
        ),
    )


def list_tools(
    store: ToolStore,
    page: int = DEFAULT_PAGE,
    limit: int = DEFAULT_LIMIT,
    category: Optional[str] = None,
    pricing: Optional[str] = None,
    sort: Optional[SortField] = None,
) -> PaginatedTools:
    """Filter, sort, then paginate the catalogue.

    Filters are exact, case-insensitive matches and are combined with AND.
    Sorts are stable, so tools with equal keys keep their dataset order.
    """
    items: List[Tool] = list(store)

    ncat = _normalize(category)
    npricing = _normalize(pricing)
    if ncat:
        items = [t for t in items if _normalize(t.category) == ncat]
    if npricing:
        items = [t for t in items if _normalize(t.pricing.model) == npricing]

    if sort == "name":
        items.sort(key=lambda t: t.name.casefold())
    elif sort == "rating":
        items.sort(key=lambda t: _score(t.rating), reverse=True)
    elif sort == "popularity":
        items.sort(key=lambda t: _score(t.popularity_score), reverse=True)

    return paginate(items, page, limit)


def get_tool(store: ToolStore, slug: str) -> Tool:
    tool = store.get(slug)
    if tool is None:
        raise NotFound("Tool not found", slug=slug)
    return tool


def _matches(tool: Tool, query: str) -> bool:
    if query in tool.name.lower():
        return True
    if query in tool.description.lower():
        return True
    if query in tool.category.lower():
        return True
    return any(query in tag.lower() for tag in (tool.tags or []))


def search_tools(
    store: ToolStore,
    q: Optional[str],
    page: int = DEFAULT_PAGE,
    limit: int = DEFAULT_LIMIT,
) -> PaginatedTools:
    """Case-insensitive substring search over name, description, category and tags."""
    query = _normalize(q)
    if len(query) < MIN_QUERY_LENGTH:
        raise BadRequest(
            f"Query must be at least {MIN_QUERY_LENGTH} characters",
            hint="/api/search?q=writing",
        )
    return paginate([t for t in store if _matches(t, query)], page, limit)


def list_categories(store: ToolStore) -> List[CategoryCount]:
    """Count tools per category, largest first.

    ``dict`` keeps first-appearance order and ``sorted`` is stable, so
    categories with equal counts stay in the order they first occur.
    """
    counts: Dict[str, int] = {}
    for tool in store:
        counts[tool.category] = counts.get(tool.category, 0) + 1
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [CategoryCount(name=name, count=count) for name, count in ranked]


def parse_compare_slugs(
    tools: Optional[str] = None,
    tool1: Optional[str] = None,
    tool2: Optional[str] = None,
) -> List[str]:
    """Collect the slugs to compare from both accepted query forms.

    The comma-separated ``tools`` list comes first, followed by the
    legacy ``tool1``/``tool2`` pair. Blank entries and repeats are dropped.
    """
    raw: List[str] = []
    if tools:
        raw.extend(tools.split(","))
    raw.extend(s for s in (tool1, tool2) if s)

    slugs: List[str] = []
    for entry in raw:
        slug = entry.strip()
        if slug and slug not in slugs:
            slugs.append(slug)
    return slugs


def compare_tools(store: ToolStore, slugs: Sequence[str]) -> ComparisonResult:
    """Build a side-by-side comparison of two or more tools.

    Unknown slugs are skipped; at least two must resolve.
    """
    if len(slugs) < 2:
        raise BadRequest(
            "Please provide at least 2 tool slugs to compare",
            usage=COMPARE_USAGE,
        )

    found: List[Tool] = []
    not_found: List[str] = []
    for slug in slugs:
        tool = store.get(slug)
        if tool is None:
            not_found.append(slug)
        else:
            found.append(tool)

    if not_found:
        logger.debug("Compare could not resolve slugs: %s", ", ".join(not_found))
    if len(found) < 2:
        raise NotFound(
            "At least 2 valid tools are required for comparison",
            requested=list(slugs),
            found=[t.slug for t in found],
            not_found=not_found,
        )

    comparison = Comparison(
        pricing={t.slug: t.pricing for t in found},
        ratings={t.slug: t.rating for t in found},
        popularity={t.slug: t.popularity_score for t in found},
        categories={t.slug: t.category for t in found},
        features={
            t.slug: FeatureList(items=list(t.features or []), count=len(t.features or []))
            for t in found
        },
        best_for={t.slug: list(t.best_for or []) for t in found},
        pros={t.slug: list(t.pros or []) for t in found},
        cons={t.slug: list(t.cons or []) for t in found},
    )

    priced = [t for t in found if t.pricing.starting_price is not None]
    if priced:
        cheapest = min(priced, key=lambda t: t.pricing.starting_price).name
    else:
        cheapest = "N/A"

    # max() keeps the first of equal maxima, min() the first of equal minima
    summary = ComparisonSummary(
        highest_rated=max(found, key=lambda t: _score(t.rating)).name,
        most_popular=max(found, key=lambda t: _score(t.popularity_score)).name,
        cheapest=cheapest,
        has_free_tier=[t.name for t in found if t.pricing.free_tier is True],
    )
    return ComparisonResult(tools=found, comparison=comparison, summary=summary)


def get_stats(store: ToolStore, last_updated: str, api_version: str) -> Stats:
    categories = {t.category for t in store}
    # dict.fromkeys keeps first-appearance order
    pricing_models = list(dict.fromkeys(t.pricing.model for t in store))
    return Stats(
        total_tools=len(store),
        total_categories=len(categories),
        pricing_models=pricing_models,
        last_updated=last_updated,
        api_version=api_version,
    )


def get_api_info(store: ToolStore, name: str, version: str, description: str) -> ApiInfo:
    return ApiInfo(
        name=name,
        version=version,
        description=description,
        total_tools=len(store),
        endpoints=dict(ENDPOINTS),
    )
