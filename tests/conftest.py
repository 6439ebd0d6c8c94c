"""
Test Suite Configuration
"""
import copy
import json
import pytest
from typing import Any, Dict, List

from fastapi.testclient import TestClient

from src.serving.api import create_api_app
from src.serving.catalog import CatalogService
from src.storage import RecordStore


RAW_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "name": "Wireless Headphones",
        "description": "Over-ear headphones with noise cancellation",
        "category": "Audio",
        "price": 100,
        "stock": 64,
        "featured": True,
        "imageUrl": "https://img.example.com/1.jpg",
        "rating": 4.5,
        "tags": ["Wireless", "bluetooth"],
        "variants": [{"id": "hp-black", "label": "Black"}],
    },
    {
        "id": 2,
        "name": "Arc Desk Lamp",
        "description": "Dimmable LED lamp",
        "category": "Lighting",
        "price": 59.0,
        "stock": 23,
        "featured": True,
        "imageUrl": "",
        "rating": 4.2,
        "tags": ["led"],
        "variants": [],
    },
    {
        "id": 3,
        "name": "Floor Lamp",
        "description": "Tall lamp for reading corners",
        "category": "Lighting",
        "price": 89.5,
        "stock": 8,
        "featured": False,
        "imageUrl": "",
        "rating": 4.0,
        "tags": [],
        "variants": [],
    },
    {
        "id": 4,
        "name": "Mechanical Keyboard",
        "description": "Keyboard with a lamp-style backlight",
        "category": "Desk",
        "price": 119.0,
        "stock": 0,
        "featured": True,
        "imageUrl": "",
        "rating": 4.8,
        "tags": ["typing"],
        "variants": [],
    },
    {
        "id": 5,
        "name": "Cable Organizer",
        "description": "Silicone clips for charging cables",
        "category": "Desk",
        "price": 12.99,
    },
]

LANDING = {"hero": {"title": "Welcome", "subtitle": "Shop the catalog"}}


@pytest.fixture
def raw_products() -> List[Dict[str, Any]]:
    """Fresh copy of the sample raw product records"""
    return copy.deepcopy(RAW_PRODUCTS)


@pytest.fixture
def seed_document(raw_products) -> Dict[str, Any]:
    """Seed document in the on-disk layout"""
    return {"landing": copy.deepcopy(LANDING), "products": raw_products}


@pytest.fixture
def seed_file(tmp_path, seed_document):
    """Seed document written to a temp JSON file"""
    path = tmp_path / "seed.json"
    path.write_text(json.dumps(seed_document), encoding="utf-8")
    return path


@pytest.fixture
def store(seed_document) -> RecordStore:
    """Loaded in-memory store"""
    return RecordStore.from_document(seed_document)


@pytest.fixture
def catalog(store) -> CatalogService:
    """Catalog service over the fixture store"""
    return CatalogService(store)


@pytest.fixture
def client(store) -> TestClient:
    """API client bound to the fixture store"""
    return TestClient(create_api_app(store=store))
