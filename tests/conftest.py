"""Shared fixtures for queryable-extensions tests."""

from __future__ import annotations

import logging
from typing import Iterator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from tests.models import Base, Category, CategoryRow, Product, ProductRow


@pytest.fixture
def categories() -> list[Category]:
    """Two categories, deliberately listed out of name order."""
    return [Category(id=2, name="Category B"), Category(id=1, name="Category A")]


@pytest.fixture
def products() -> list[Product]:
    """Five products with ties on category name (A: D, C / B: E, A, B)."""
    category_a = Category(id=1, name="Category A")
    category_b = Category(id=2, name="Category B")
    return [
        Product(id=5, name="Product E", category=category_b, price=10.0),
        Product(id=1, name="Product A", category=category_b, price=30.0),
        Product(id=4, name="Product D", category=category_a, price=10.0),
        Product(id=2, name="Product B", category=category_b, price=20.0),
        Product(id=3, name="Product C", category=category_a, price=20.0),
    ]


@pytest.fixture
def session() -> Iterator[Session]:
    """In-memory SQLite session seeded with the same products as the `products` fixture."""
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    with Session(engine) as s:
        category_a = CategoryRow(id=1, name="Category A")
        category_b = CategoryRow(id=2, name="Category B")
        s.add_all([
            ProductRow(id=5, name="Product E", category=category_b),
            ProductRow(id=1, name="Product A", category=category_b),
            ProductRow(id=4, name="Product D", category=category_a),
            ProductRow(id=2, name="Product B", category=category_b),
            ProductRow(id=3, name="Product C", category=category_a),
        ])
        s.commit()
        yield s
    engine.dispose()


@pytest.fixture
def clean_library_logger() -> Iterator[logging.Logger]:
    """Library logger with handlers/level restored after the test."""
    logger = logging.getLogger("queryable.ext")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for h in list(logger.handlers):
        logger.removeHandler(h)
    for h in handlers:
        logger.addHandler(h)
    logger.setLevel(level)
