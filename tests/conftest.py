"""Shared fixtures for recordrules tests."""

from __future__ import annotations

import pytest
import structlog

from recordrules.config import get_settings
from recordrules.models.requests import (
    AddressRequest,
    DatabaseContext,
    Product,
    ProductVariant,
    RegisterUserRequest,
)
from recordrules.validators import ValidationEngine


@pytest.fixture
def engine() -> ValidationEngine:
    """Fresh engine loaded with the catalog schemas."""
    return ValidationEngine()


@pytest.fixture
def empty_engine() -> ValidationEngine:
    return ValidationEngine(schemas={})


@pytest.fixture
def open_context() -> DatabaseContext:
    """Store with room left."""
    return DatabaseContext(total=100, max_data=1000)


@pytest.fixture
def full_context() -> DatabaseContext:
    """Store at capacity."""
    return DatabaseContext(total=100, max_data=100)


@pytest.fixture
def address() -> AddressRequest:
    return AddressRequest(street="jalan", city="kota", country="negara japantaro")


@pytest.fixture
def register_request(address: AddressRequest) -> RegisterUserRequest:
    return RegisterUserRequest(
        username="ekoatro",
        password="passwortaro",
        confirm_password="passwortaro",
        name="ekotaro",
        address=address,
    )


@pytest.fixture
def product() -> Product:
    return Product(
        id="product-1",
        name="product-1",
        variants=[
            ProductVariant(name="variant-1", price=1000),
            ProductVariant(name="variant-2", price=2000),
        ],
    )


@pytest.fixture(autouse=True)
def _fresh_settings_and_logging():
    """Settings are cached and structlog is global; reset both around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
