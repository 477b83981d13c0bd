"""
Pydantic schema definitions for the catalog module.

The ``Tool`` model captures one entry of the AI tools catalogue. Only
``slug``, ``name``, ``category`` and ``pricing`` are required.
``description`` defaults to an empty string; every other field is
optional and stays ``None`` when the dataset does not provide it, so
that callers can tell "no rating" apart from a rating of 0. The
remaining models describe the JSON envelopes returned by the routes.
"""

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# int first, so whole numbers in the dataset stay ints
Number = Union[int, float]


class Pricing(BaseModel):
    """Commercial terms of a tool.

    ``starting_price`` is ``None`` for tools that do not publish a
    price (typically enterprise "contact us" plans).
    """

    model_config = ConfigDict(frozen=True)

    model: str
    free_tier: bool = False
    starting_price: Optional[Number] = None
    currency: str = "USD"
    billing_cycle: str = "monthly"


class Tool(BaseModel):
    """A single catalogue entry.

    Unknown keys from the dataset are kept as extra fields so the record
    returned by ``/api/tools/{slug}`` is the record as loaded.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    slug: str
    name: str
    category: str
    description: str = ""
    tags: Optional[List[str]] = None
    pricing: Pricing
    rating: Optional[Number] = None
    popularity_score: Optional[Number] = None
    features: Optional[List[str]] = None
    best_for: Optional[List[str]] = None
    pros: Optional[List[str]] = None
    cons: Optional[List[str]] = None
    website: Optional[str] = None


class Pagination(BaseModel):
    total: int
    page: int
    limit: int
    pages: int


class PaginatedTools(BaseModel):
    """A wrapper for paginated results returned from list and search."""

    data: List[Tool]
    pagination: Pagination


class CategoryCount(BaseModel):
    name: str
    count: int


class FeatureList(BaseModel):
    items: List[str] = Field(default_factory=list)
    count: int = 0


class Comparison(BaseModel):
    """Per-field projections keyed by tool slug."""

    pricing: Dict[str, Pricing]
    ratings: Dict[str, Optional[Number]]
    popularity: Dict[str, Optional[Number]]
    categories: Dict[str, str]
    features: Dict[str, FeatureList]
    best_for: Dict[str, List[str]]
    pros: Dict[str, List[str]]
    cons: Dict[str, List[str]]


class ComparisonSummary(BaseModel):
    highest_rated: str
    most_popular: str
    # Name of the cheapest priced tool, or "N/A" when none has a price.
    cheapest: str
    has_free_tier: List[str] = Field(default_factory=list)


class ComparisonResult(BaseModel):
    tools: List[Tool]
    comparison: Comparison
    summary: ComparisonSummary


class Stats(BaseModel):
    total_tools: int
    total_categories: int
    pricing_models: List[str]
    last_updated: str
    api_version: str


class ApiInfo(BaseModel):
    name: str
    version: str
    description: str
    total_tools: int
    endpoints: Dict[str, str]


class ErrorBody(BaseModel):
    """Shape of 4xx bodies; extra detail keys vary per error."""

    model_config = ConfigDict(extra="allow")

    error: str
    hint: Optional[str] = None
    usage: Optional[Union[str, List[str]]] = None
