"""
BhashaBazaar Test Configuration and Fixtures

This module provides:
- Test environment setup
- Application and API client fixtures
- Deterministic random source for platform selection
- Sample marketplace catalogue
"""

import os
import random
import pytest
from typing import Generator

# Set test environment before any bhashabazaar import reads settings
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_FORMAT"] = "text"

from fastapi.testclient import TestClient

from bhashabazaar.models.voice import MarketplaceProduct


# =============================================================================
# Application Fixtures
# =============================================================================

@pytest.fixture
def app():
    """Create test application instance."""
    from bhashabazaar.main import app as fastapi_app
    return fastapi_app


@pytest.fixture
def client(app) -> Generator:
    """Create synchronous test client."""
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so platform draws are reproducible."""
    return random.Random(20240615)


@pytest.fixture
def voice_service(rng):
    """VoiceShoppingService with the default platform table and a seeded rng."""
    from bhashabazaar.services.voice_shopping_service import VoiceShoppingService
    return VoiceShoppingService(rng=rng)


# =============================================================================
# Data Fixtures
# =============================================================================

@pytest.fixture
def sample_products():
    """Supplier catalogue in the shape the marketplace screen loads."""
    return [
        MarketplaceProduct(
            id="PROD-001",
            product_name="Fresh Potato",
            product_name_hi="आलू",
            product_name_bn="আলু",
            price_per_unit=30.0,
            online_store_url="https://www.bigbasket.com/pd/10000181/fresho-potato-500-g/",
            supplier_name="BigBasket Fresh",
        ),
        MarketplaceProduct(
            id="PROD-002",
            product_name="Red Onion",
            product_name_hi="प्याज",
            price_per_unit=40.0,
            supplier_name="Zepto Fresh",
        ),
        MarketplaceProduct(
            id="PROD-003",
            product_name="Turmeric Powder",
            product_name_hi="हल्दी पाउडर",
            category="spices",
            unit="packet",
            price_per_unit=55.0,
            supplier_name="JioMart Grocery",
        ),
    ]
