"""Shared pytest fixtures for the AI tools API tests."""

import json

import pytest
from fastapi.testclient import TestClient

from aitools_api.catalog.store import ToolStore
from aitools_api.config import Settings
from aitools_api.main import create_app

RECORDS = [
    {
        "slug": "alpha-chat",
        "name": "Alpha Chat",
        "category": "Chatbots",
        "description": "General purpose assistant.",
        "tags": ["chat", "llm"],
        "pricing": {"model": "Freemium", "free_tier": True, "starting_price": 20},
        "rating": 4.9,
        "popularity_score": 95,
        "features": ["Chat", "Voice", "Plugins"],
        "best_for": ["Everyday tasks"],
        "pros": ["Versatile"],
        "cons": ["Usage caps"],
    },
    {
        "slug": "beta-code",
        "name": "beta Code",
        "category": "Coding",
        "description": "Autocomplete for your editor.",
        "tags": ["ide", "autocomplete"],
        "pricing": {"model": "Paid", "free_tier": False, "starting_price": 10},
        "rating": 4.5,
        "popularity_score": 80,
        "features": ["Completions"],
    },
    {
        "slug": "gamma-draw",
        "name": "Gamma Draw",
        "category": "Image Generation",
        "description": "Text to image generator.",
        "pricing": {"model": "Paid", "free_tier": False, "starting_price": 10},
        "rating": 4.5,
        "popularity_score": 70,
    },
    {
        "slug": "delta-bot",
        "name": "Delta Bot",
        "category": "chatbots",
        "description": "Support chatbot for websites.",
        "tags": ["support", "Customer-Service"],
        "pricing": {"model": "Enterprise", "free_tier": False},
    },
    {
        "slug": "epsilon-write",
        "name": "Epsilon Write",
        "category": "Writing",
        "description": "Marketing copy in your brand voice.",
        "tags": ["copywriting"],
        "pricing": {"model": "freemium", "free_tier": True, "starting_price": 0},
        "rating": 4.1,
        "popularity_score": 95,
    },
]


@pytest.fixture
def records():
    return [dict(r) for r in RECORDS]


@pytest.fixture
def store(records):
    return ToolStore.from_records(records)


@pytest.fixture
def settings(tmp_path):
    data_file = tmp_path / "tools.json"
    data_file.write_text(json.dumps(RECORDS), encoding="utf-8")
    return Settings(data_file=data_file, api_version="9.9.9", last_updated="2026-02-01")


@pytest.fixture
def client(store, settings):
    """A client over an app built around the fixture store."""
    app = create_app(store=store, settings=settings)
    with TestClient(app) as c:
        yield c
